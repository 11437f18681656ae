"""Authenticated PAN-OS XML API session."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from lxml import etree

from napalm_panfw.client.errors import (
    CODE_OBJECT_NOT_FOUND,
    PanosApiError,
    PanosAuthError,
    PanosObjectNotFoundError,
    PanosParseError,
    PanosResponseError,
)
from napalm_panfw.client.http import PanosHTTP
from napalm_panfw.model.device import DeviceInfo
from napalm_panfw.model.version import PanosVersion
from napalm_panfw.parser.device import parse_device_info
from napalm_panfw.parser.xml import parse_xml, to_string
from napalm_panfw.vendor.panos.endpoints import (
    ACTION_DELETE,
    ACTION_EDIT,
    ACTION_GET,
    ACTION_SET,
    ACTION_SHOW,
    CMD_SHOW_SYSTEM_INFO,
    TYPE_CONFIG,
    TYPE_KEYGEN,
    TYPE_OP,
)
from napalm_panfw.vendor.panos.xpaths import as_member_xpath, join_xpath, vsys_import_xpath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanosCredentials:
    """Immutable credential pair for a PAN-OS firewall.

    Args:
        username: Administrator username.
        password: Administrator password.
    """

    username: str
    password: str


class PanosSession:
    """Manages an authenticated XML API session to a PAN-OS firewall.

    Wraps :class:`.PanosHTTP` and adds:
    - API key generation via ``type=keygen`` (skipped when a key is given).
    - ``type=config`` actions (show/get/set/edit/delete) and ``type=op``
      commands, with the response envelope parsed and checked.
    - The device version, fetched once from ``show system info``.
    - Vsys interface import/unimport.

    Args:
        base_url: Firewall base URL, e.g. ``https://192.168.1.1``.
        credentials: Username/password pair used for key generation.
        api_key: Pre-generated API key; when set, no login request is made.
        timeout_s: Request timeout in seconds (default 30).
        verify_tls: Whether to verify TLS certificates (default True).
    """

    def __init__(
        self,
        base_url: str,
        credentials: PanosCredentials | None = None,
        api_key: str | None = None,
        timeout_s: float = 30.0,
        verify_tls: bool = True,
    ) -> None:
        if credentials is None and api_key is None:
            raise ValueError("Either credentials or api_key is required")
        self._http: PanosHTTP = PanosHTTP(
            base_url=base_url,
            timeout_s=timeout_s,
            verify_tls=verify_tls,
        )
        self._credentials: PanosCredentials | None = credentials
        self._api_key: str | None = api_key
        self._system_info: DeviceInfo | None = None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def login(self) -> None:
        """Generate an API key from the configured credentials.

        Raises:
            PanosAuthError: If the firewall rejects the credentials.
        """
        if self._credentials is None:
            raise PanosAuthError("No credentials configured for key generation")
        try:
            result = self._request(
                {
                    "type": TYPE_KEYGEN,
                    "user": self._credentials.username,
                    "password": self._credentials.password,
                },
                action=TYPE_KEYGEN,
                authenticated=False,
            )
        except (PanosApiError, PanosResponseError) as exc:
            raise PanosAuthError(f"Key generation rejected by firewall: {exc}") from exc

        key = result.findtext("key")
        if not key:
            raise PanosAuthError("Key generation response carried no key")
        self._api_key = key
        logger.debug("Generated API key for %s", self._http.base_url)

    def ensure_session(self) -> None:
        """Generate an API key if none is held yet."""
        if self._api_key is None:
            self.login()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._http.close()
        logger.debug("Closed session to %s", self._http.base_url)

    # ------------------------------------------------------------------
    # Configuration API
    # ------------------------------------------------------------------

    def show(self, xpath: str) -> etree._Element:
        """Read *xpath* from the running configuration.

        Returns:
            The ``<result>`` element.

        Raises:
            PanosObjectNotFoundError: If nothing exists at *xpath*.
        """
        return self._config_read(ACTION_SHOW, xpath)

    def get(self, xpath: str) -> etree._Element:
        """Read *xpath* from the candidate configuration.

        Returns:
            The ``<result>`` element.

        Raises:
            PanosObjectNotFoundError: If nothing exists at *xpath*.
        """
        return self._config_read(ACTION_GET, xpath)

    def set(self, xpath: str, element: etree._Element | str) -> etree._Element:
        """Merge *element* into the candidate configuration at *xpath*."""
        return self._config_write(ACTION_SET, xpath, element)

    def edit(self, xpath: str, element: etree._Element | str) -> etree._Element:
        """Replace the candidate configuration at *xpath* with *element*."""
        return self._config_write(ACTION_EDIT, xpath, element)

    def delete(self, xpath: str) -> etree._Element:
        """Delete *xpath* from the candidate configuration."""
        return self._config_write(ACTION_DELETE, xpath, None)

    def op(self, cmd: str) -> etree._Element:
        """Run an operational command given as XML, e.g. ``<show>...</show>``."""
        return self._request({"type": TYPE_OP, "cmd": cmd}, action=TYPE_OP)

    def entry_list_using(
        self,
        fn: Callable[[str], etree._Element],
        xpath: str,
    ) -> list[str]:
        """Return the entry names found at the collection *xpath*.

        Args:
            fn: The read method to use, :meth:`show` or :meth:`get`.
            xpath: Path of the collection element (no entry selector).

        Returns:
            Names in device order; empty if the collection does not exist.
        """
        try:
            result = fn(xpath)
        except PanosObjectNotFoundError:
            return []
        return [e.get("name", "") for e in result.iterfind("*/entry")]

    # ------------------------------------------------------------------
    # Device information
    # ------------------------------------------------------------------

    def system_info(self) -> DeviceInfo:
        """Return ``show system info``, fetched once per session."""
        if self._system_info is None:
            self._system_info = parse_device_info(self.op(CMD_SHOW_SYSTEM_INFO))
            logger.debug(
                "%s runs PAN-OS %s",
                self._http.base_url,
                self._system_info.sw_version,
            )
        return self._system_info

    def versioning(self) -> PanosVersion:
        """Return the PAN-OS version of the firewall."""
        return self.system_info().sw_version

    def reset_system_info(self) -> None:
        """Forget the cached system info, e.g. after a software upgrade."""
        self._system_info = None

    # ------------------------------------------------------------------
    # Vsys interface import
    # ------------------------------------------------------------------

    def import_interfaces(self, vsys: str, names: list[str]) -> None:
        """Import *names* into *vsys*; a no-op for an empty vsys."""
        if not vsys or not names:
            return
        members = []
        for name in names:
            member = etree.Element("member")
            member.text = name
            members.append(to_string(member))
        self.log_action("(import) interfaces into %s: %s", vsys, names)
        self.set(join_xpath(vsys_import_xpath(vsys)), "".join(members))

    def unimport_interfaces(self, vsys: str, names: list[str]) -> None:
        """Remove *names* from the import list of *vsys*; a no-op for an empty vsys."""
        if not vsys or not names:
            return
        self.log_action("(unimport) interfaces from %s: %s", vsys, names)
        self.delete(join_xpath(vsys_import_xpath(vsys) + [as_member_xpath(names)]))

    # ------------------------------------------------------------------
    # Logging hooks
    # ------------------------------------------------------------------

    def log_query(self, msg: str, *args: object) -> None:
        """Log a read request."""
        logger.debug(msg, *args)

    def log_action(self, msg: str, *args: object) -> None:
        """Log a configuration change."""
        logger.info(msg, *args)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def logged_in(self) -> bool:
        """True if the session holds an API key."""
        return self._api_key is not None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _config_read(self, action: str, xpath: str) -> etree._Element:
        result = self._request(
            {"type": TYPE_CONFIG, "action": action, "xpath": xpath},
            action=action,
            xpath=xpath,
        )
        if len(result) == 0:
            raise PanosObjectNotFoundError(
                code=CODE_OBJECT_NOT_FOUND,
                message="Object doesn't exist",
                action=action,
                xpath=xpath,
            )
        return result

    def _config_write(
        self,
        action: str,
        xpath: str,
        element: etree._Element | str | None,
    ) -> etree._Element:
        data = {"type": TYPE_CONFIG, "action": action, "xpath": xpath}
        if element is not None:
            data["element"] = element if isinstance(element, str) else to_string(element)
        return self._request(data, action=action, xpath=xpath)

    def _request(
        self,
        data: dict[str, str],
        action: str,
        xpath: str | None = None,
        authenticated: bool = True,
    ) -> etree._Element:
        """Send one API request and return its ``<result>`` (or the response root)."""
        if authenticated:
            self.ensure_session()
            data = {**data, "key": str(self._api_key)}
        resp = self._http.post_api(data)
        return self._parse_response(resp.text, action, xpath)

    @staticmethod
    def _parse_response(text: str, action: str, xpath: str | None) -> etree._Element:
        """Check the ``<response>`` envelope, raising on ``status="error"``."""
        root = parse_xml(text)
        if root.tag != "response":
            raise PanosParseError(f"Unexpected root element <{root.tag}> for {action}")

        if root.get("status") != "success":
            code_text = root.get("code")
            code = int(code_text) if code_text and code_text.isdigit() else None
            message = " ".join(
                " ".join(t.strip() for t in msg.itertext() if t.strip())
                for msg in root.iter("msg")
            )
            error_cls = (
                PanosObjectNotFoundError if code == CODE_OBJECT_NOT_FOUND else PanosApiError
            )
            raise error_cls(
                code=code,
                message=message or "unknown error",
                action=action,
                xpath=xpath,
            )

        result = root.find("result")
        return result if result is not None else root

