"""Unit tests for napalm_panfw.utils.render and full read/write round trips."""

from __future__ import annotations

import pytest

from napalm_panfw.model.eth import EthernetInterface
from napalm_panfw.model.wire import EntryV1, EntryV2, Layer3ModeV1, Layer3ModeV2, OtherMode
from napalm_panfw.parser.xml import parse_xml, to_string
from napalm_panfw.utils.render import render_bulk, render_entry_v1, render_entry_v2
from napalm_panfw.utils.versioning import V1, V2, EthVariant

# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


def test_render_v1_layer3_layout() -> None:
    entry = EntryV1(
        name="ethernet1/1",
        layer3=Layer3ModeV1(adjust_tcp_mss="no", static_ips=["10.0.0.1/24"]),
    )
    entry.layer3.ipv6.enabled = "no"  # type: ignore[union-attr]
    assert to_string(render_entry_v1(entry)) == (
        '<entry name="ethernet1/1"><layer3>'
        "<ipv6><enabled>no</enabled></ipv6>"
        "<adjust-tcp-mss>no</adjust-tcp-mss>"
        '<ip><entry name="10.0.0.1/24"/></ip>'
        "</layer3><comment></comment></entry>"
    )


def test_render_v2_nests_mss_adjustment() -> None:
    entry = EntryV2(
        name="ethernet1/2",
        layer3=Layer3ModeV2(adjust_tcp_mss="yes", ipv4_mss_adjust=40, ipv6_mss_adjust=60, mtu=1400),
    )
    elem = render_entry_v2(entry)
    mss = elem.find("layer3/adjust-tcp-mss")
    assert mss is not None
    assert mss.findtext("enable") == "yes"
    assert mss.findtext("ipv4-mss-adjustment") == "40"
    assert mss.findtext("ipv6-mss-adjustment") == "60"
    assert elem.findtext("layer3/mtu") == "1400"


def test_render_v2_omits_zero_mss_values() -> None:
    entry = EntryV2(name="ethernet1/2", layer3=Layer3ModeV2(adjust_tcp_mss="no"))
    mss = render_entry_v2(entry).find("layer3/adjust-tcp-mss")
    assert mss is not None
    assert [child.tag for child in mss] == ["enable"]


def test_render_omits_empty_optional_leaves() -> None:
    elem = render_entry_v1(EntryV1(name="ethernet1/1", layer3=Layer3ModeV1()))
    for path in (
        "layer3/mtu",
        "layer3/interface-management-profile",
        "layer3/netflow-profile",
        "layer3/ip",
        "layer3/dhcp-client",
        "layer3/arp",
        "layer3/units",
        "link-speed",
        "link-duplex",
        "link-state",
    ):
        assert elem.find(path) is None, path
    assert elem.find("comment") is not None


def test_render_layer2_writes_lldp() -> None:
    entry = EntryV1(name="ethernet1/3", layer2=OtherMode(lldp_enabled="no"))
    elem = render_entry_v1(entry)
    assert elem.findtext("layer2/lldp/enable") == "no"
    assert elem.find("layer2/lldp/profile") is not None
    assert elem.find("layer2/netflow-profile") is None


def test_render_bulk() -> None:
    bulk = render_bulk("ethernet", [render_entry_v1(EntryV1(name=n)) for n in ("a", "b")])
    assert bulk.tag == "ethernet"
    assert [e.get("name") for e in bulk] == ["a", "b"]


# ---------------------------------------------------------------------------
# round trips through XML
# ---------------------------------------------------------------------------

_FRAGMENT_ARP = (
    '\n      <entry name="10.0.0.5">\n        <hw-address>00:11:22:33:44:55</hw-address>\n'
    "      </entry>\n    "
)
_FRAGMENT_UNITS = '<entry name="ethernet1/1.5"><tag>5</tag><comment>a &amp; b</comment></entry>'
_FRAGMENT_IPV6 = '<entry name="2001:db8::1/64"><enable-on-interface>yes</enable-on-interface></entry>'

_LAYER3_V1 = f"""
<entry name="ethernet1/1">
  <layer3>
    <ipv6><enabled>yes</enabled><address>{_FRAGMENT_IPV6}</address></ipv6>
    <interface-management-profile>allow-ping</interface-management-profile>
    <mtu>1400</mtu>
    <netflow-profile>nf1</netflow-profile>
    <adjust-tcp-mss>yes</adjust-tcp-mss>
    <ip><entry name="10.0.0.1/24"/><entry name="10.0.1.1/24"/></ip>
    <dhcp-client>
      <enable>yes</enable>
      <create-default-route>yes</create-default-route>
      <default-route-metric>10</default-route-metric>
    </dhcp-client>
    <arp>{_FRAGMENT_ARP}</arp>
    <units>{_FRAGMENT_UNITS}</units>
  </layer3>
  <link-speed>1000</link-speed>
  <link-duplex>full</link-duplex>
  <link-state>up</link-state>
  <comment>uplink</comment>
</entry>
"""

_LAYER3_V2 = f"""
<entry name="ethernet1/2">
  <layer3>
    <ipv6><enabled>no</enabled></ipv6>
    <adjust-tcp-mss>
      <enable>yes</enable>
      <ipv4-mss-adjustment>40</ipv4-mss-adjustment>
      <ipv6-mss-adjustment>60</ipv6-mss-adjustment>
    </adjust-tcp-mss>
    <ip><entry name="192.0.2.1/24"/></ip>
    <arp>{_FRAGMENT_ARP}</arp>
  </layer3>
  <comment/>
</entry>
"""

_LAYER2 = f"""
<entry name="ethernet1/3">
  <layer2>
    <lldp><enable>yes</enable><profile>lp</profile></lldp>
    <netflow-profile>nf2</netflow-profile>
    <units>{_FRAGMENT_UNITS}</units>
  </layer2>
  <comment>access</comment>
</entry>
"""

_VIRTUAL_WIRE = """
<entry name="ethernet1/4">
  <virtual-wire><lldp><enable>no</enable><profile></profile></lldp></virtual-wire>
  <link-state>down</link-state>
  <comment/>
</entry>
"""


def _marker(tag: str) -> str:
    return f'<entry name="ethernet1/6"><{tag}/><comment>m</comment></entry>'


_WELL_FORMED = [
    pytest.param(_LAYER3_V1, V1, id="layer3-v1"),
    pytest.param(_LAYER3_V2, V2, id="layer3-v2"),
    pytest.param(_LAYER2, V1, id="layer2-v1"),
    pytest.param(_LAYER2, V2, id="layer2-v2"),
    pytest.param(_VIRTUAL_WIRE, V1, id="virtual-wire-v1"),
    pytest.param(_VIRTUAL_WIRE, V2, id="virtual-wire-v2"),
    *[
        pytest.param(_marker(tag), variant, id=f"{tag}-{variant.name}")
        for tag in ("tap", "ha", "decrypt-mirror", "aggregate-group")
        for variant in (V1, V2)
    ],
]


@pytest.mark.parametrize(("xml", "variant"), _WELL_FORMED)
def test_wire_round_trip(xml: str, variant: EthVariant) -> None:
    wire = variant.parse(parse_xml(xml))
    assert variant.specify(variant.normalize(wire)) == wire


@pytest.mark.parametrize(("xml", "variant"), _WELL_FORMED)
def test_record_round_trip_through_xml(xml: str, variant: EthVariant) -> None:
    record = variant.to_record(parse_xml(xml))
    rendered = to_string(variant.to_element(record))
    assert variant.to_record(parse_xml(rendered)) == record


def test_fragments_survive_byte_for_byte() -> None:
    record = V1.to_record(parse_xml(_LAYER3_V1))
    assert record.raw == {
        "arp": _FRAGMENT_ARP,
        "l3subinterface": _FRAGMENT_UNITS,
        "ipv6": _FRAGMENT_IPV6,
    }
    again = V1.to_record(V1.to_element(record))
    assert again.raw == record.raw


def test_round_trip_keeps_layer3_values() -> None:
    record = V2.to_record(parse_xml(_LAYER3_V2))
    assert record == EthernetInterface(
        name="ethernet1/2",
        mode="layer3",
        static_ips=["192.0.2.1/24"],
        adjust_tcp_mss=True,
        ipv4_mss_adjust=40,
        ipv6_mss_adjust=60,
        raw={"arp": _FRAGMENT_ARP},
    )
