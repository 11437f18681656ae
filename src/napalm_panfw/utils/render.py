"""Rendering of wire-level ethernet entries as XML elements.

Element order follows the schema; optional leaves are left out when empty,
while ``<comment>``, ``<ipv6><enabled>`` and the LLDP leaves are always
written.
"""

from __future__ import annotations

from collections.abc import Iterable

from lxml import etree

from napalm_panfw.model.wire import (
    DhcpClient,
    EntryV1,
    EntryV2,
    Layer3ModeV1,
    Layer3ModeV2,
    OtherMode,
    RawXml,
)
from napalm_panfw.parser.xml import wrap_raw_xml


def render_entry_v1(entry: EntryV1) -> etree._Element:
    """Render a PAN-OS < 7.1 ``<entry>``."""
    elem = _entry_element(entry)
    if entry.layer3 is not None:
        l3 = _layer3_element(elem, entry.layer3)
        _sub(l3, "adjust-tcp-mss", entry.layer3.adjust_tcp_mss)
        _layer3_tail(l3, entry.layer3)
    _render_other_modes(elem, entry)
    _render_link(elem, entry)
    return elem


def render_entry_v2(entry: EntryV2) -> etree._Element:
    """Render a PAN-OS 7.1+ ``<entry>`` with nested ``<adjust-tcp-mss>``."""
    elem = _entry_element(entry)
    if entry.layer3 is not None:
        l3 = _layer3_element(elem, entry.layer3)
        _adjust_tcp_mss_v2(l3, entry.layer3)
        _layer3_tail(l3, entry.layer3)
    _render_other_modes(elem, entry)
    _render_link(elem, entry)
    return elem


def render_bulk(tag: str, elements: Iterable[etree._Element]) -> etree._Element:
    """Return a ``<tag>`` element holding all *elements* in order."""
    container = etree.Element(tag)
    container.extend(elements)
    return container


def _entry_element(entry: EntryV1) -> etree._Element:
    return etree.Element("entry", name=entry.name)


def _layer3_element(parent: etree._Element, l3: Layer3ModeV1) -> etree._Element:
    """Write ``<layer3>`` up to, but not including, ``<adjust-tcp-mss>``."""
    elem = etree.SubElement(parent, "layer3")
    ipv6 = etree.SubElement(elem, "ipv6")
    _sub(ipv6, "enabled", l3.ipv6.enabled)
    _raw(ipv6, "address", l3.ipv6.address)
    _sub_optional(elem, "interface-management-profile", l3.management_profile)
    _sub_optional(elem, "mtu", _int_text(l3.mtu))
    _sub_optional(elem, "netflow-profile", l3.netflow_profile)
    return elem


def _adjust_tcp_mss_v2(parent: etree._Element, l3: Layer3ModeV2) -> None:
    mss = etree.SubElement(parent, "adjust-tcp-mss")
    _sub(mss, "enable", l3.adjust_tcp_mss)
    _sub_optional(mss, "ipv4-mss-adjustment", _int_text(l3.ipv4_mss_adjust))
    _sub_optional(mss, "ipv6-mss-adjustment", _int_text(l3.ipv6_mss_adjust))


def _layer3_tail(elem: etree._Element, l3: Layer3ModeV1) -> None:
    """Write the ``<layer3>`` children that follow ``<adjust-tcp-mss>``."""
    if l3.static_ips is not None:
        ip = etree.SubElement(elem, "ip")
        for address in l3.static_ips:
            etree.SubElement(ip, "entry", name=address)
    if l3.dhcp_client is not None:
        _dhcp_element(elem, l3.dhcp_client)
    _raw(elem, "arp", l3.arp)
    _raw(elem, "units", l3.units)


def _dhcp_element(parent: etree._Element, dhcp: DhcpClient) -> None:
    elem = etree.SubElement(parent, "dhcp-client")
    _sub(elem, "enable", dhcp.enable)
    _sub(elem, "create-default-route", dhcp.create_default_route)
    _sub_optional(elem, "default-route-metric", _int_text(dhcp.default_route_metric))


def _render_other_modes(parent: etree._Element, entry: EntryV1) -> None:
    if entry.layer2 is not None:
        _other_mode_element(parent, "layer2", entry.layer2)
    if entry.virtual_wire is not None:
        _other_mode_element(parent, "virtual-wire", entry.virtual_wire)
    for tag, marker in (
        ("tap", entry.tap),
        ("ha", entry.ha),
        ("decrypt-mirror", entry.decrypt_mirror),
        ("aggregate-group", entry.aggregate_group),
    ):
        if marker is not None:
            etree.SubElement(parent, tag)


def _other_mode_element(parent: etree._Element, tag: str, mode: OtherMode) -> None:
    elem = etree.SubElement(parent, tag)
    lldp = etree.SubElement(elem, "lldp")
    _sub(lldp, "enable", mode.lldp_enabled)
    _sub(lldp, "profile", mode.lldp_profile)
    _sub_optional(elem, "netflow-profile", mode.netflow_profile)
    _raw(elem, "units", mode.units)


def _render_link(parent: etree._Element, entry: EntryV1) -> None:
    _sub_optional(parent, "link-speed", entry.link_speed)
    _sub_optional(parent, "link-duplex", entry.link_duplex)
    _sub_optional(parent, "link-state", entry.link_state)
    _sub(parent, "comment", entry.comment)


def _sub(parent: etree._Element, tag: str, text: str) -> etree._Element:
    elem = etree.SubElement(parent, tag)
    elem.text = text
    return elem


def _sub_optional(parent: etree._Element, tag: str, text: str) -> None:
    if text:
        _sub(parent, tag, text)


def _raw(parent: etree._Element, tag: str, raw: RawXml | None) -> None:
    if raw is not None:
        parent.append(wrap_raw_xml(tag, raw.text))


def _int_text(value: int) -> str:
    return str(value) if value else ""
