"""PAN-OS firewall NAPALM driver: top-level NetworkDriver implementation."""

from __future__ import annotations

import logging
from typing import Any

from napalm.base.base import NetworkDriver

from napalm_panfw.client.errors import PanosError
from napalm_panfw.client.ethernet import EthernetInterfaces
from napalm_panfw.client.session import PanosCredentials, PanosSession
from napalm_panfw.model.eth import EthernetInterface
from napalm_panfw.parser.device import parse_uptime_seconds

logger = logging.getLogger(__name__)

_VENDOR: str = "Palo Alto Networks"


class PanFWDriver(NetworkDriver):  # type: ignore[misc]
    """NAPALM driver for PAN-OS firewalls over the XML API.

    Interface configuration is read and written through
    :class:`~napalm_panfw.client.ethernet.EthernetInterfaces`, available as
    :attr:`ethernet` once the connection is open.

    Args:
        hostname: IP address or hostname of the firewall, optionally
            including the URL scheme (e.g. ``https://192.168.1.1``).
        username: Administrator username.
        password: Administrator password.
        timeout: Default request timeout in seconds.
        optional_args: Optional driver configuration overrides.
            Supported keys:

            - ``port`` (int): HTTPS port (default 443).
            - ``verify_tls`` (bool): Verify TLS certificates (default ``False``).
            - ``api_key`` (str): Use this API key instead of generating one.
    """

    def __init__(
        self,
        hostname: str,
        username: str,
        password: str,
        timeout: int = 60,
        optional_args: dict[str, Any] | None = None,
    ) -> None:
        self.hostname = hostname
        self.username = username
        self.password = password
        self.timeout = timeout
        self.optional_args: dict[str, Any] = optional_args or {}

        self._verify_tls: bool = bool(self.optional_args.get("verify_tls", False))
        self._port: int = int(self.optional_args.get("port", 443))
        self._api_key: str | None = self.optional_args.get("api_key")
        self._session: PanosSession | None = None

        logger.debug(
            "PanFWDriver initialised: host=%s port=%d user=%s",
            self.hostname,
            self._port,
            self.username,
        )

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Open an XML API session to the firewall.

        Generates an API key unless one was given in ``optional_args``.

        Raises:
            PanosAuthError: If key generation is rejected by the firewall.
        """
        base_url = self._build_base_url()
        logger.info("Opening connection to %s", base_url)
        self._session = PanosSession(
            base_url=base_url,
            credentials=PanosCredentials(username=self.username, password=self.password),
            api_key=self._api_key,
            timeout_s=float(self.timeout),
            verify_tls=self._verify_tls,
        )
        self._session.ensure_session()

    def close(self) -> None:
        """Close the session (best-effort; never raises)."""
        if self._session is not None:
            logger.info("Closing connection to %s", self.hostname)
            try:
                self._session.close()
            except Exception:  # noqa: BLE001
                logger.debug("Session close failed (ignored)", exc_info=True)
            finally:
                self._session = None

    def is_alive(self) -> dict[str, bool]:
        """Return liveness status of the session."""
        return {"is_alive": self._session is not None and self._session.logged_in}

    # ------------------------------------------------------------------
    # Interface configuration
    # ------------------------------------------------------------------

    @property
    def ethernet(self) -> EthernetInterfaces:
        """Ethernet interface operations bound to the open session.

        Raises:
            PanosError: If the session is not open.
        """
        return EthernetInterfaces(self._require_session())

    # ------------------------------------------------------------------
    # NAPALM getters
    # ------------------------------------------------------------------

    def get_facts(self) -> dict[str, Any]:
        """Return general device facts conforming to the NAPALM schema.

        Returns:
            A dict with keys: ``hostname``, ``fqdn``, ``vendor``, ``model``,
            ``serial_number``, ``os_version``, ``uptime``, ``interface_list``.

        Raises:
            PanosError: If the session is not open.
            PanosParseError: If ``show system info`` cannot be parsed.
        """
        session = self._require_session()
        info = session.system_info()
        hostname = info.hostname or self.hostname

        return {
            "hostname": hostname,
            "fqdn": hostname,
            "vendor": _VENDOR,
            "model": info.model or "unknown",
            "serial_number": info.serial_number or "",
            "os_version": str(info.sw_version),
            "uptime": parse_uptime_seconds(info.uptime),
            "interface_list": self.ethernet.show_list(),
        }

    def get_interfaces(self) -> dict[str, Any]:
        """Return configured ethernet interfaces in the NAPALM schema.

        Values come from the running configuration, so ``is_up`` mirrors the
        configured link state rather than the operational one.

        Returns:
            Dict keyed by interface name.

        Raises:
            PanosError: If the session is not open.
        """
        eth = self.ethernet
        result: dict[str, Any] = {}
        for name in eth.show_list():
            result[name] = _napalm_interface(eth.show(name))
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _build_base_url(self) -> str:
        """Construct the firewall base URL from hostname / port settings."""
        if "://" in self.hostname:
            return self.hostname.rstrip("/")
        if self._port == 443:
            return f"https://{self.hostname}"
        return f"https://{self.hostname}:{self._port}"

    def _require_session(self) -> PanosSession:
        """Return the active session or raise :exc:`.PanosError`."""
        if self._session is None:
            raise PanosError("Session not open, call open() first.")
        return self._session


def _napalm_interface(e: EthernetInterface) -> dict[str, Any]:
    enabled = e.link_state != "down"
    speed = float(e.link_speed) if e.link_speed.isdigit() else 0.0
    return {
        "is_up": enabled,
        "is_enabled": enabled,
        "description": e.comment,
        "last_flapped": -1.0,
        "speed": speed,
        "mtu": e.mtu,
        "mac_address": "",
    }
