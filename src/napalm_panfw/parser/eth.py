"""Parser for ethernet interface ``<entry>`` elements."""

from __future__ import annotations

from lxml import etree

from napalm_panfw.client.errors import PanosParseError
from napalm_panfw.model.wire import (
    DhcpClient,
    EmptyMode,
    EntryV1,
    EntryV2,
    Ipv6Settings,
    Layer3ModeV1,
    Layer3ModeV2,
    OtherMode,
    RawXml,
)
from napalm_panfw.parser.xml import child_int, child_text, entry_names, raw_inner_xml


def find_entry(result: etree._Element) -> etree._Element:
    """Return the ``<entry>`` element inside a config ``<result>``.

    Raises:
        PanosParseError: If the result holds no entry.
    """
    entry = result if result.tag == "entry" else result.find("entry")
    if entry is None:
        raise PanosParseError("No <entry> element in configuration result")
    return entry


def parse_entry_v1(elem: etree._Element) -> EntryV1:
    """Decode an ethernet ``<entry>`` using the PAN-OS < 7.1 schema.

    Args:
        elem: The ``<entry name="...">`` element.

    Returns:
        The decoded :class:`~napalm_panfw.model.wire.EntryV1`.

    Raises:
        PanosParseError: If a numeric leaf holds a non-integer.
    """
    l3 = elem.find("layer3")
    return EntryV1(
        layer3=_parse_layer3_v1(l3) if l3 is not None else None,
        **_parse_common(elem),
    )


def parse_entry_v2(elem: etree._Element) -> EntryV2:
    """Decode an ethernet ``<entry>`` using the PAN-OS 7.1+ schema.

    Identical to :func:`parse_entry_v1` except for the nested
    ``<adjust-tcp-mss>`` element in ``<layer3>``.
    """
    l3 = elem.find("layer3")
    return EntryV2(
        layer3=_parse_layer3_v2(l3) if l3 is not None else None,
        **_parse_common(elem),
    )


def _parse_common(elem: etree._Element) -> dict[str, object]:
    """Fields shared by both schema revisions, as constructor kwargs."""
    return {
        "name": elem.get("name", ""),
        "layer2": _parse_other_mode(elem.find("layer2")),
        "virtual_wire": _parse_other_mode(elem.find("virtual-wire")),
        "tap": _parse_empty_mode(elem.find("tap")),
        "ha": _parse_empty_mode(elem.find("ha")),
        "decrypt_mirror": _parse_empty_mode(elem.find("decrypt-mirror")),
        "aggregate_group": _parse_empty_mode(elem.find("aggregate-group")),
        "link_speed": child_text(elem, "link-speed"),
        "link_duplex": child_text(elem, "link-duplex"),
        "link_state": child_text(elem, "link-state"),
        "comment": child_text(elem, "comment"),
    }


def _parse_layer3_v1(elem: etree._Element) -> Layer3ModeV1:
    return Layer3ModeV1(
        adjust_tcp_mss=child_text(elem, "adjust-tcp-mss"),
        **_parse_layer3_common(elem),
    )


def _parse_layer3_v2(elem: etree._Element) -> Layer3ModeV2:
    return Layer3ModeV2(
        adjust_tcp_mss=child_text(elem, "adjust-tcp-mss/enable"),
        ipv4_mss_adjust=child_int(elem, "adjust-tcp-mss/ipv4-mss-adjustment"),
        ipv6_mss_adjust=child_int(elem, "adjust-tcp-mss/ipv6-mss-adjustment"),
        **_parse_layer3_common(elem),
    )


def _parse_layer3_common(elem: etree._Element) -> dict[str, object]:
    dhcp = elem.find("dhcp-client")
    return {
        "ipv6": Ipv6Settings(
            enabled=child_text(elem, "ipv6/enabled"),
            address=_parse_raw(elem.find("ipv6/address")),
        ),
        "management_profile": child_text(elem, "interface-management-profile"),
        "mtu": child_int(elem, "mtu"),
        "netflow_profile": child_text(elem, "netflow-profile"),
        "static_ips": entry_names(elem.find("ip")),
        "dhcp_client": _parse_dhcp(dhcp) if dhcp is not None else None,
        "arp": _parse_raw(elem.find("arp")),
        "units": _parse_raw(elem.find("units")),
    }


def _parse_dhcp(elem: etree._Element) -> DhcpClient:
    return DhcpClient(
        enable=child_text(elem, "enable"),
        create_default_route=child_text(elem, "create-default-route"),
        default_route_metric=child_int(elem, "default-route-metric"),
    )


def _parse_other_mode(elem: etree._Element | None) -> OtherMode | None:
    if elem is None:
        return None
    return OtherMode(
        lldp_enabled=child_text(elem, "lldp/enable"),
        lldp_profile=child_text(elem, "lldp/profile"),
        netflow_profile=child_text(elem, "netflow-profile"),
        units=_parse_raw(elem.find("units")),
    )


def _parse_empty_mode(elem: etree._Element | None) -> EmptyMode | None:
    return EmptyMode() if elem is not None else None


def _parse_raw(elem: etree._Element | None) -> RawXml | None:
    if elem is None:
        return None
    return RawXml(raw_inner_xml(elem))
