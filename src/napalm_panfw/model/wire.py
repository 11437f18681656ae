"""Wire-level models of the PAN-OS ``<entry>`` for an ethernet interface.

Two schema revisions exist.  They share everything except the encoding of
TCP MSS adjustment inside ``<layer3>``:

- v1 (PAN-OS < 7.1): ``<adjust-tcp-mss>yes</adjust-tcp-mss>``
- v2 (PAN-OS 7.1+)::

      <adjust-tcp-mss>
        <enable>yes</enable>
        <ipv4-mss-adjustment>40</ipv4-mss-adjustment>
        <ipv6-mss-adjustment>60</ipv6-mss-adjustment>
      </adjust-tcp-mss>

Boolean leaves keep their ``"yes"``/``"no"`` wire strings here; conversion
to ``bool`` happens in :mod:`napalm_panfw.utils.normalize`.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RawXml:
    """Opaque inner XML of an element that is carried through untouched."""

    text: str


@dataclass
class EmptyMode:
    """Marker for modes without settings (tap, ha, decrypt-mirror, ...)."""


@dataclass
class DhcpClient:
    """``<dhcp-client>`` settings."""

    enable: str = ""
    create_default_route: str = ""
    default_route_metric: int = 0


@dataclass
class Ipv6Settings:
    """``<ipv6>`` settings; addresses are kept raw."""

    enabled: str = ""
    address: RawXml | None = None


@dataclass
class OtherMode:
    """``<layer2>`` or ``<virtual-wire>`` settings."""

    lldp_enabled: str = ""
    lldp_profile: str = ""
    netflow_profile: str = ""
    units: RawXml | None = None


@dataclass
class Layer3ModeV1:
    """``<layer3>`` settings, PAN-OS < 7.1."""

    ipv6: Ipv6Settings = field(default_factory=Ipv6Settings)
    management_profile: str = ""
    mtu: int = 0
    netflow_profile: str = ""
    adjust_tcp_mss: str = ""
    static_ips: list[str] | None = None
    dhcp_client: DhcpClient | None = None
    arp: RawXml | None = None
    units: RawXml | None = None


@dataclass
class Layer3ModeV2(Layer3ModeV1):
    """``<layer3>`` settings, PAN-OS 7.1+."""

    ipv4_mss_adjust: int = 0
    ipv6_mss_adjust: int = 0


@dataclass
class EntryV1:
    """An ethernet ``<entry>``, PAN-OS < 7.1.

    At most one mode attribute is expected to be set in device output.
    """

    name: str
    layer3: Layer3ModeV1 | None = None
    layer2: OtherMode | None = None
    virtual_wire: OtherMode | None = None
    tap: EmptyMode | None = None
    ha: EmptyMode | None = None
    decrypt_mirror: EmptyMode | None = None
    aggregate_group: EmptyMode | None = None
    link_speed: str = ""
    link_duplex: str = ""
    link_state: str = ""
    comment: str = ""


@dataclass
class EntryV2(EntryV1):
    """An ethernet ``<entry>``, PAN-OS 7.1+."""

    layer3: Layer3ModeV2 | None = None  # type: ignore[assignment]


def mode_attr(mode: str) -> str:
    """Return the :class:`EntryV1` attribute holding *mode*, e.g. ``virtual_wire``."""
    return mode.replace("-", "_")
