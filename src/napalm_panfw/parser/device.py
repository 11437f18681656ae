"""Parser for the ``show system info`` operational command."""

from __future__ import annotations

import re

from lxml import etree

from napalm_panfw.client.errors import PanosParseError
from napalm_panfw.model.device import DeviceInfo
from napalm_panfw.model.version import PanosVersion
from napalm_panfw.parser.xml import child_text

# Uptime: "N days, H:MM:SS" or "H:MM:SS"
_UPTIME_RE: re.Pattern[str] = re.compile(
    r"(?:(\d+)\s*days?\s*[,]?\s*)?(\d+):(\d+):(\d+)"
)


def parse_device_info(result: etree._Element) -> DeviceInfo:
    """Parse the ``<result>`` of ``show system info`` into a :class:`.DeviceInfo`.

    Args:
        result: The ``<result>`` element holding ``<system>``.

    Returns:
        Populated :class:`.DeviceInfo` instance.

    Raises:
        PanosParseError: If ``<system>`` or ``<sw-version>`` is missing or
            the version cannot be parsed.
    """
    system = result.find("system")
    if system is None:
        raise PanosParseError("No <system> element in system info result")

    sw_version = child_text(system, "sw-version")
    if not sw_version:
        raise PanosParseError("No <sw-version> in system info result")

    return DeviceInfo(
        hostname=child_text(system, "hostname"),
        sw_version=PanosVersion.parse(sw_version),
        model=child_text(system, "model") or None,
        serial_number=child_text(system, "serial") or None,
        ip_address=child_text(system, "ip-address") or None,
        uptime=child_text(system, "uptime") or None,
    )


def parse_uptime_seconds(uptime: str | None) -> float:
    """Convert an uptime string to seconds.

    Returns ``-1.0`` when *uptime* is missing or unrecognised, as NAPALM
    expects for unknown values.
    """
    if not uptime:
        return -1.0
    match = _UPTIME_RE.search(uptime)
    if match is None:
        return -1.0
    days, hours, minutes, seconds = match.groups()
    total = int(days or 0) * 86400 + int(hours) * 3600 + int(minutes) * 60 + int(seconds)
    return float(total)
