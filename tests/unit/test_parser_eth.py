"""Unit tests for napalm_panfw.parser.eth."""

from __future__ import annotations

import pytest

from napalm_panfw.client.errors import PanosParseError
from napalm_panfw.model.wire import DhcpClient, EmptyMode, RawXml
from napalm_panfw.parser.eth import find_entry, parse_entry_v1, parse_entry_v2
from napalm_panfw.parser.xml import parse_xml

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

_L3_V1 = """
<entry name="ethernet1/1">
  <layer3>
    <ipv6><enabled>yes</enabled></ipv6>
    <interface-management-profile>allow-ping</interface-management-profile>
    <mtu>1400</mtu>
    <adjust-tcp-mss>yes</adjust-tcp-mss>
    <ip><entry name="10.0.0.1/24"/><entry name="10.0.1.1/24"/></ip>
    <dhcp-client>
      <enable>yes</enable>
      <create-default-route>no</create-default-route>
      <default-route-metric>15</default-route-metric>
    </dhcp-client>
    <arp><entry name="10.0.0.5"><hw-address>00:11:22:33:44:55</hw-address></entry></arp>
  </layer3>
  <link-speed>1000</link-speed>
  <link-duplex>full</link-duplex>
  <link-state>up</link-state>
  <comment>uplink</comment>
</entry>
"""

_L3_V2 = """
<entry name="ethernet1/2">
  <layer3>
    <adjust-tcp-mss>
      <enable>yes</enable>
      <ipv4-mss-adjustment>40</ipv4-mss-adjustment>
      <ipv6-mss-adjustment>60</ipv6-mss-adjustment>
    </adjust-tcp-mss>
  </layer3>
</entry>
"""

_L2 = """
<entry name="ethernet1/3">
  <layer2>
    <lldp><enable>yes</enable><profile>lldp-default</profile></lldp>
    <netflow-profile>nf1</netflow-profile>
    <units><entry name="ethernet1/3.10"><tag>10</tag></entry></units>
  </layer2>
</entry>
"""


# ---------------------------------------------------------------------------
# find_entry
# ---------------------------------------------------------------------------


def test_find_entry_in_result() -> None:
    result = parse_xml('<result total-count="1" count="1"><entry name="ethernet1/1"/></result>')
    assert find_entry(result).get("name") == "ethernet1/1"


def test_find_entry_accepts_entry_itself() -> None:
    entry = parse_xml('<entry name="ethernet1/1"/>')
    assert find_entry(entry) is entry


def test_find_entry_raises_without_entry() -> None:
    with pytest.raises(PanosParseError):
        find_entry(parse_xml("<result/>"))


# ---------------------------------------------------------------------------
# parse_entry_v1
# ---------------------------------------------------------------------------


def test_parse_v1_layer3_fields() -> None:
    entry = parse_entry_v1(parse_xml(_L3_V1))
    assert entry.name == "ethernet1/1"
    assert entry.layer2 is None
    assert entry.layer3 is not None
    l3 = entry.layer3
    assert l3.ipv6.enabled == "yes"
    assert l3.ipv6.address is None
    assert l3.management_profile == "allow-ping"
    assert l3.mtu == 1400
    assert l3.adjust_tcp_mss == "yes"
    assert l3.static_ips == ["10.0.0.1/24", "10.0.1.1/24"]
    assert l3.dhcp_client == DhcpClient(enable="yes", create_default_route="no", default_route_metric=15)
    assert l3.arp == RawXml('<entry name="10.0.0.5"><hw-address>00:11:22:33:44:55</hw-address></entry>')
    assert l3.units is None


def test_parse_v1_link_fields() -> None:
    entry = parse_entry_v1(parse_xml(_L3_V1))
    assert entry.link_speed == "1000"
    assert entry.link_duplex == "full"
    assert entry.link_state == "up"
    assert entry.comment == "uplink"


def test_parse_v1_ignores_nested_mss_values() -> None:
    entry = parse_entry_v1(parse_xml(_L3_V2))
    assert entry.layer3 is not None
    assert not hasattr(entry.layer3, "ipv4_mss_adjust")


def test_parse_v1_missing_ip_is_none() -> None:
    entry = parse_entry_v1(parse_xml('<entry name="e"><layer3/></entry>'))
    assert entry.layer3 is not None
    assert entry.layer3.static_ips is None
    assert entry.layer3.dhcp_client is None


# ---------------------------------------------------------------------------
# parse_entry_v2
# ---------------------------------------------------------------------------


def test_parse_v2_mss_adjustment() -> None:
    entry = parse_entry_v2(parse_xml(_L3_V2))
    assert entry.layer3 is not None
    assert entry.layer3.adjust_tcp_mss == "yes"
    assert entry.layer3.ipv4_mss_adjust == 40
    assert entry.layer3.ipv6_mss_adjust == 60


def test_parse_v2_missing_mss_values_are_zero() -> None:
    xml = '<entry name="e"><layer3><adjust-tcp-mss><enable>no</enable></adjust-tcp-mss></layer3></entry>'
    entry = parse_entry_v2(parse_xml(xml))
    assert entry.layer3 is not None
    assert entry.layer3.adjust_tcp_mss == "no"
    assert entry.layer3.ipv4_mss_adjust == 0
    assert entry.layer3.ipv6_mss_adjust == 0


# ---------------------------------------------------------------------------
# other modes
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("parse", [parse_entry_v1, parse_entry_v2])
def test_parse_layer2(parse) -> None:
    entry = parse(parse_xml(_L2))
    assert entry.layer3 is None
    assert entry.layer2 is not None
    assert entry.layer2.lldp_enabled == "yes"
    assert entry.layer2.lldp_profile == "lldp-default"
    assert entry.layer2.netflow_profile == "nf1"
    assert entry.layer2.units == RawXml('<entry name="ethernet1/3.10"><tag>10</tag></entry>')


@pytest.mark.parametrize(
    ("tag", "attr"),
    [
        ("tap", "tap"),
        ("ha", "ha"),
        ("decrypt-mirror", "decrypt_mirror"),
        ("aggregate-group", "aggregate_group"),
    ],
)
def test_parse_marker_modes(tag: str, attr: str) -> None:
    entry = parse_entry_v2(parse_xml(f'<entry name="e"><{tag}/></entry>'))
    assert getattr(entry, attr) == EmptyMode()
    assert entry.layer3 is None


def test_parse_keeps_several_modes() -> None:
    entry = parse_entry_v1(parse_xml('<entry name="e"><tap/><ha/></entry>'))
    assert entry.tap == EmptyMode()
    assert entry.ha == EmptyMode()


def test_parse_invalid_mtu_raises() -> None:
    with pytest.raises(PanosParseError):
        parse_entry_v1(parse_xml('<entry name="e"><layer3><mtu>x</mtu></layer3></entry>'))
