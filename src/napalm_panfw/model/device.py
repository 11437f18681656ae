"""Typed model for device information returned by ``show system info``."""

from __future__ import annotations

from dataclasses import dataclass

from napalm_panfw.model.version import PanosVersion


@dataclass
class DeviceInfo:
    """General firewall information.

    Attributes:
        hostname: Configured hostname.
        sw_version: Running PAN-OS version.
        model: Hardware or VM model, e.g. ``"PA-VM"``.
        serial_number: Device serial number, if present.
        ip_address: Management IP address, if present.
        uptime: Raw uptime string as returned by the firewall
                (e.g. ``"7 days, 3:42:11"``).
    """

    hostname: str
    sw_version: PanosVersion
    model: str | None = None
    serial_number: str | None = None
    ip_address: str | None = None
    uptime: str | None = None
