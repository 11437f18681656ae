"""Typed, version independent model of an ethernet interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Mode = Literal[
    "layer3",
    "layer2",
    "virtual-wire",
    "tap",
    "ha",
    "decrypt-mirror",
    "aggregate-group",
]

# Read priority: the first mode present on the wire wins.
MODES: tuple[str, ...] = (
    "layer3",
    "layer2",
    "virtual-wire",
    "tap",
    "ha",
    "decrypt-mirror",
    "aggregate-group",
)

# Modes whose wire form is an empty marker element.
MARKER_MODES: tuple[str, ...] = ("tap", "ha", "decrypt-mirror", "aggregate-group")

# Keys of sub-trees kept as raw XML text in EthernetInterface.raw.
FRAGMENT_ARP: str = "arp"
FRAGMENT_L3_SUBINTERFACE: str = "l3subinterface"
FRAGMENT_L2_SUBINTERFACE: str = "l2subinterface"
FRAGMENT_IPV6: str = "ipv6"
FRAGMENT_KEYS: tuple[str, ...] = (
    FRAGMENT_ARP,
    FRAGMENT_L3_SUBINTERFACE,
    FRAGMENT_L2_SUBINTERFACE,
    FRAGMENT_IPV6,
)


@dataclass
class EthernetInterface:
    """A normalized ethernet interface, independent of the PAN-OS version.

    Only the field group belonging to :attr:`mode` is meaningful; the others
    stay at their zero value and are ignored when the record is written.

    Attributes:
        name: Interface name, e.g. ``"ethernet1/1"``.
        mode: One of :data:`MODES`, or ``""`` when the device reported no
            mode this model understands.
        static_ips: Layer3: addresses or address object names, in order.
        enable_dhcp: Layer3: run a DHCP client on the interface.
        create_dhcp_default_route: Layer3: install the DHCP default route.
        dhcp_default_route_metric: Layer3: metric of the DHCP default route.
        ipv6_enabled: Layer3: IPv6 enabled.
        management_profile: Layer3: interface management profile name.
        mtu: Layer3: MTU, ``0`` for the device default.
        adjust_tcp_mss: Layer3: TCP MSS adjustment enabled.
        ipv4_mss_adjust: Layer3, PAN-OS 7.1+: IPv4 MSS adjustment.
        ipv6_mss_adjust: Layer3, PAN-OS 7.1+: IPv6 MSS adjustment.
        netflow_profile: Layer3/layer2/virtual-wire: netflow profile name.
        lldp_enabled: Layer2/virtual-wire: LLDP enabled.
        lldp_profile: Layer2/virtual-wire: LLDP profile name.
        link_speed: Link speed, e.g. ``"auto"`` or ``"1000"``.
        link_duplex: Link duplex, e.g. ``"auto"`` or ``"full"``.
        link_state: Link state, e.g. ``"auto"``, ``"up"`` or ``"down"``.
        comment: Free text comment.
        raw: Sub-trees not modelled above, as cleaned inner XML text keyed
            by one of :data:`FRAGMENT_KEYS`.
    """

    name: str
    mode: Mode | Literal[""] = ""
    static_ips: list[str] = field(default_factory=list)
    enable_dhcp: bool = False
    create_dhcp_default_route: bool = False
    dhcp_default_route_metric: int = 0
    ipv6_enabled: bool = False
    management_profile: str = ""
    mtu: int = 0
    adjust_tcp_mss: bool = False
    ipv4_mss_adjust: int = 0
    ipv6_mss_adjust: int = 0
    netflow_profile: str = ""
    lldp_enabled: bool = False
    lldp_profile: str = ""
    link_speed: str = ""
    link_duplex: str = ""
    link_state: str = ""
    comment: str = ""
    raw: dict[str, str] = field(default_factory=dict, repr=False)
