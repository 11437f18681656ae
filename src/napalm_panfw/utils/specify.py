"""Conversion of :class:`EthernetInterface` records into wire-level entries.

The inverse of :mod:`napalm_panfw.utils.normalize`, driven by
:attr:`EthernetInterface.mode`.  Fields of other modes are ignored.  A mode
outside :data:`~napalm_panfw.model.eth.MODES` produces an entry with link
settings only.

A record whose ``raw`` holds a key outside
:data:`~napalm_panfw.model.eth.FRAGMENT_KEYS` raises :exc:`ValueError`.
"""

from __future__ import annotations

from napalm_panfw.model.eth import (
    FRAGMENT_ARP,
    FRAGMENT_IPV6,
    FRAGMENT_L2_SUBINTERFACE,
    FRAGMENT_KEYS,
    FRAGMENT_L3_SUBINTERFACE,
    MARKER_MODES,
    EthernetInterface,
)
from napalm_panfw.model.wire import (
    DhcpClient,
    EmptyMode,
    EntryV1,
    EntryV2,
    Layer3ModeV1,
    Layer3ModeV2,
    OtherMode,
    RawXml,
    mode_attr,
)
from napalm_panfw.parser.xml import yes_no


def specify_v1(e: EthernetInterface) -> EntryV1:
    """Return the PAN-OS < 7.1 entry for *e*."""
    _check_fragments(e)
    ans = EntryV1(name=e.name, **_link_fields(e))
    if e.mode == "layer3":
        ans.layer3 = _fill_layer3(Layer3ModeV1(), e)
    else:
        _specify_other_modes(ans, e)
    return ans


def specify_v2(e: EthernetInterface) -> EntryV2:
    """Return the PAN-OS 7.1+ entry for *e*, including MSS adjustments."""
    _check_fragments(e)
    ans = EntryV2(name=e.name, **_link_fields(e))
    if e.mode == "layer3":
        l3 = Layer3ModeV2(
            ipv4_mss_adjust=e.ipv4_mss_adjust,
            ipv6_mss_adjust=e.ipv6_mss_adjust,
        )
        ans.layer3 = _fill_layer3(l3, e)
    else:
        _specify_other_modes(ans, e)
    return ans


def _check_fragments(e: EthernetInterface) -> None:
    unknown = sorted(set(e.raw) - set(FRAGMENT_KEYS))
    if unknown:
        raise ValueError(f"{e.name}: unknown raw fragment key(s) {unknown}")


def _link_fields(e: EthernetInterface) -> dict[str, str]:
    return {
        "link_speed": e.link_speed,
        "link_duplex": e.link_duplex,
        "link_state": e.link_state,
        "comment": e.comment,
    }


def _fill_layer3(l3: Layer3ModeV1, e: EthernetInterface) -> Layer3ModeV1:
    l3.static_ips = list(e.static_ips) or None
    l3.management_profile = e.management_profile
    l3.mtu = e.mtu
    l3.netflow_profile = e.netflow_profile
    l3.adjust_tcp_mss = yes_no(e.adjust_tcp_mss)
    l3.ipv6.enabled = yes_no(e.ipv6_enabled)
    # Without any DHCP setting the element is left out so the device default applies.
    if e.enable_dhcp or e.create_dhcp_default_route or e.dhcp_default_route_metric != 0:
        l3.dhcp_client = DhcpClient(
            enable=yes_no(e.enable_dhcp),
            create_default_route=yes_no(e.create_dhcp_default_route),
            default_route_metric=e.dhcp_default_route_metric,
        )
    if FRAGMENT_ARP in e.raw:
        l3.arp = RawXml(e.raw[FRAGMENT_ARP])
    if FRAGMENT_L3_SUBINTERFACE in e.raw:
        l3.units = RawXml(e.raw[FRAGMENT_L3_SUBINTERFACE])
    if FRAGMENT_IPV6 in e.raw:
        l3.ipv6.address = RawXml(e.raw[FRAGMENT_IPV6])
    return l3


def _specify_other_modes(ans: EntryV1, e: EthernetInterface) -> None:
    if e.mode == "layer2":
        ans.layer2 = _lldp_mode(e)
        if FRAGMENT_L2_SUBINTERFACE in e.raw:
            ans.layer2.units = RawXml(e.raw[FRAGMENT_L2_SUBINTERFACE])
    elif e.mode == "virtual-wire":
        ans.virtual_wire = _lldp_mode(e)
    elif e.mode in MARKER_MODES:
        setattr(ans, mode_attr(e.mode), EmptyMode())


def _lldp_mode(e: EthernetInterface) -> OtherMode:
    return OtherMode(
        lldp_enabled=yes_no(e.lldp_enabled),
        lldp_profile=e.lldp_profile,
        netflow_profile=e.netflow_profile,
    )
