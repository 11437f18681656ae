"""Custom exceptions for the napalm-panfw XML API client."""

from __future__ import annotations

from dataclasses import dataclass

# XML API error code for an xpath that matches nothing.
CODE_OBJECT_NOT_FOUND: int = 7


class PanosError(Exception):
    """Base exception for all napalm-panfw errors."""


class PanosAuthError(PanosError):
    """Raised when API key generation is rejected by the firewall."""


class PanosRequestError(PanosError):
    """Raised when a network-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url!r} failed: {cause}")

    def __reduce__(self) -> tuple[type[PanosRequestError], tuple[str, Exception]]:
        return type(self), (self.url, self.cause)


class PanosResponseError(PanosError):
    """Raised when the firewall returns a non-2xx HTTP status code."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP {status_code} for {url!r}")

    def __reduce__(self) -> tuple[type[PanosResponseError], tuple[int, str]]:
        return type(self), (self.status_code, self.url)


class PanosParseError(PanosError):
    """Raised when an XML response or fragment cannot be decoded."""


@dataclass(eq=False)
class PanosApiError(PanosError):
    """Raised when the firewall answers with ``status="error"``.

    Attributes:
        code: API error code, or ``None`` when the response carried none.
        message: Joined ``<msg>`` text reported by the firewall.
        action: The API action that failed (``set``, ``get``, ``op``, ...).
        xpath: Target xpath of the request, if any.
    """

    code: int | None
    message: str
    action: str
    xpath: str | None = None

    def __post_init__(self) -> None:
        target = f" at {self.xpath!r}" if self.xpath else ""
        super().__init__(
            f"API error code={self.code} for {self.action}{target}: {self.message}"
        )

    def __reduce__(self) -> tuple[type[PanosApiError], tuple[int | None, str, str, str | None]]:
        return type(self), (self.code, self.message, self.action, self.xpath)


@dataclass(eq=False)
class PanosObjectNotFoundError(PanosApiError):
    """Raised when the requested configuration object does not exist."""
