"""PAN-OS software version numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from napalm_panfw.client.errors import PanosParseError

# "8.1.3", "10.1.6-h6", "7.1.0-c12"
_VERSION_RE: re.Pattern[str] = re.compile(r"^(\d+)\.(\d+)\.(\d+)(?:-(\S+))?$")


@dataclass(frozen=True, order=True)
class PanosVersion:
    """A PAN-OS version, ordered by ``(major, minor, patch)``.

    The hotfix/build suffix is kept for display only and never takes part in
    comparisons.
    """

    major: int
    minor: int
    patch: int
    suffix: str = field(default="", compare=False)

    @classmethod
    def parse(cls, text: str) -> PanosVersion:
        """Parse a ``sw-version`` string such as ``"8.1.3-h4"``.

        Raises:
            PanosParseError: If *text* is not a PAN-OS version string.
        """
        match = _VERSION_RE.match(text.strip())
        if match is None:
            raise PanosParseError(f"Invalid PAN-OS version: {text!r}")
        major, minor, patch, suffix = match.groups()
        return cls(int(major), int(minor), int(patch), suffix or "")

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        return f"{base}-{self.suffix}" if self.suffix else base
