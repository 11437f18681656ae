"""Normalization of wire-level ethernet entries into :class:`EthernetInterface`.

Normalization collapses the mutually exclusive mode elements of an
``<entry>`` into a flat record tagged by :attr:`EthernetInterface.mode`.
The first mode present in :data:`~napalm_panfw.model.eth.MODES` order wins;
an entry with no known mode yields ``mode == ""`` and no mode fields.
"""

from __future__ import annotations

from napalm_panfw.model.eth import (
    FRAGMENT_ARP,
    FRAGMENT_IPV6,
    FRAGMENT_L2_SUBINTERFACE,
    FRAGMENT_L3_SUBINTERFACE,
    MODES,
    EthernetInterface,
)
from napalm_panfw.model.wire import EntryV1, EntryV2, Layer3ModeV1, OtherMode, mode_attr
from napalm_panfw.parser.xml import as_bool, clean_raw_xml


def normalize_v1(entry: EntryV1) -> EthernetInterface:
    """Return the normalized record for a PAN-OS < 7.1 entry."""
    ans = _normalize_link(entry)
    if entry.layer3 is not None:
        _normalize_layer3(ans, entry.layer3)
    else:
        _normalize_other_modes(ans, entry)
    return ans


def normalize_v2(entry: EntryV2) -> EthernetInterface:
    """Return the normalized record for a PAN-OS 7.1+ entry.

    Same as :func:`normalize_v1`, plus the IPv4/IPv6 MSS adjustments.
    """
    ans = _normalize_link(entry)
    if entry.layer3 is not None:
        _normalize_layer3(ans, entry.layer3)
        ans.ipv4_mss_adjust = entry.layer3.ipv4_mss_adjust
        ans.ipv6_mss_adjust = entry.layer3.ipv6_mss_adjust
    else:
        _normalize_other_modes(ans, entry)
    return ans


def _normalize_link(entry: EntryV1) -> EthernetInterface:
    return EthernetInterface(
        name=entry.name,
        link_speed=entry.link_speed,
        link_duplex=entry.link_duplex,
        link_state=entry.link_state,
        comment=entry.comment,
    )


def _normalize_layer3(ans: EthernetInterface, l3: Layer3ModeV1) -> None:
    ans.mode = "layer3"
    ans.ipv6_enabled = as_bool(l3.ipv6.enabled)
    ans.management_profile = l3.management_profile
    ans.mtu = l3.mtu
    ans.netflow_profile = l3.netflow_profile
    ans.adjust_tcp_mss = as_bool(l3.adjust_tcp_mss)
    ans.static_ips = list(l3.static_ips or [])
    if l3.dhcp_client is not None:
        ans.enable_dhcp = as_bool(l3.dhcp_client.enable)
        ans.create_dhcp_default_route = as_bool(l3.dhcp_client.create_default_route)
        ans.dhcp_default_route_metric = l3.dhcp_client.default_route_metric
    if l3.arp is not None:
        ans.raw[FRAGMENT_ARP] = clean_raw_xml(l3.arp.text)
    if l3.units is not None:
        ans.raw[FRAGMENT_L3_SUBINTERFACE] = clean_raw_xml(l3.units.text)
    if l3.ipv6.address is not None:
        ans.raw[FRAGMENT_IPV6] = clean_raw_xml(l3.ipv6.address.text)


def _normalize_other_modes(ans: EthernetInterface, entry: EntryV1) -> None:
    ans.mode = present_mode(entry)
    if ans.mode in ("layer2", "virtual-wire"):
        mode: OtherMode = getattr(entry, mode_attr(ans.mode))
        _normalize_lldp(ans, mode)
        if ans.mode == "layer2" and mode.units is not None:
            ans.raw[FRAGMENT_L2_SUBINTERFACE] = clean_raw_xml(mode.units.text)


def present_mode(entry: EntryV1) -> str:
    """Return the first mode of :data:`MODES` set on *entry*, or ``""``."""
    for mode in MODES:
        if getattr(entry, mode_attr(mode)) is not None:
            return mode
    return ""


def _normalize_lldp(ans: EthernetInterface, mode: OtherMode) -> None:
    ans.lldp_enabled = as_bool(mode.lldp_enabled)
    ans.lldp_profile = mode.lldp_profile
    ans.netflow_profile = mode.netflow_profile
