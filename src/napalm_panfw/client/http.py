"""HTTP transport for the PAN-OS XML API endpoint."""

from __future__ import annotations

import importlib.metadata
import logging

import requests

from napalm_panfw.client.errors import PanosRequestError, PanosResponseError
from napalm_panfw.vendor.panos.endpoints import API

logger = logging.getLogger(__name__)

try:
    _VERSION: str = importlib.metadata.version("napalm-panfw")
except importlib.metadata.PackageNotFoundError:
    _VERSION = "0.0.0"

_USER_AGENT: str = f"napalm-panfw/{_VERSION}"

# Form fields whose values never reach the log.
_SECRET_FIELDS: frozenset[str] = frozenset({"key", "password"})


def _normalise_base_url(url: str) -> str:
    """Ensure the URL has a scheme (https by default) and no trailing slash."""
    url = url.rstrip("/")
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


def _loggable(fields: dict[str, str]) -> dict[str, str]:
    return {k: ("***" if k in _SECRET_FIELDS else v) for k, v in fields.items()}


class PanosHTTP:
    """Sends XML API calls to one firewall over a :class:`requests.Session`.

    Every call is a form-encoded POST to ``/api/``: the API key and large
    ``element`` payloads travel in the body rather than the query string,
    which every PAN-OS release accepts.

    Args:
        base_url: Firewall base URL, e.g. ``https://192.168.1.1``.
        timeout_s: Request timeout in seconds.
        verify_tls: Verify the firewall's TLS certificate.
    """

    def __init__(
        self,
        base_url: str,
        timeout_s: float = 30.0,
        verify_tls: bool = True,
    ) -> None:
        self.base_url: str = _normalise_base_url(base_url)
        self.api_url: str = self.base_url + API
        self.timeout_s: float = timeout_s
        self.verify_tls: bool = verify_tls
        self._session: requests.Session = requests.Session()
        self._session.headers["User-Agent"] = _USER_AGENT

    def post_api(self, fields: dict[str, str]) -> requests.Response:
        """POST one API call and return the raw HTTP response.

        Args:
            fields: Form fields, ``type`` first plus whatever the call needs
                (``action``, ``xpath``, ``element``, ``cmd``, ``key``).

        Raises:
            PanosRequestError: The request never got an HTTP answer.
            PanosResponseError: The firewall answered with a non-2xx status.
        """
        logger.debug("POST %s %s", self.api_url, _loggable(fields))
        try:
            resp = self._session.post(
                self.api_url,
                data=fields,
                timeout=self.timeout_s,
                verify=self.verify_tls,
            )
        except requests.exceptions.RequestException as exc:
            raise PanosRequestError(self.api_url, exc) from exc
        if not resp.ok:
            raise PanosResponseError(resp.status_code, resp.url)
        return resp

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> PanosHTTP:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
