"""Schema revision selection for ethernet interfaces.

Each :class:`EthVariant` bundles the functions that read and write one
schema revision, so version checks happen in exactly one place.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lxml import etree

from napalm_panfw.model.eth import EthernetInterface
from napalm_panfw.model.version import PanosVersion
from napalm_panfw.parser.eth import parse_entry_v1, parse_entry_v2
from napalm_panfw.utils.normalize import normalize_v1, normalize_v2
from napalm_panfw.utils.render import render_entry_v1, render_entry_v2
from napalm_panfw.utils.specify import specify_v1, specify_v2

# First release with the nested <adjust-tcp-mss> element.
MSS_ADJUST_VERSION: PanosVersion = PanosVersion(7, 1, 0)


@dataclass(frozen=True)
class EthVariant:
    """Read/write functions for one ethernet schema revision.

    Attributes:
        name: Short label, ``"v1"`` or ``"v2"``.
        parse: ``<entry>`` element to wire object.
        normalize: Wire object to :class:`EthernetInterface`.
        specify: :class:`EthernetInterface` to wire object.
        render: Wire object to ``<entry>`` element.
    """

    name: str
    parse: Callable[[etree._Element], Any]
    normalize: Callable[[Any], EthernetInterface]
    specify: Callable[[EthernetInterface], Any]
    render: Callable[[Any], etree._Element]

    def to_record(self, elem: etree._Element) -> EthernetInterface:
        """Decode and normalize an ``<entry>`` element."""
        return self.normalize(self.parse(elem))

    def to_element(self, record: EthernetInterface) -> etree._Element:
        """Specify and render *record* as an ``<entry>`` element."""
        return self.render(self.specify(record))


V1: EthVariant = EthVariant(
    name="v1",
    parse=parse_entry_v1,
    normalize=normalize_v1,
    specify=specify_v1,
    render=render_entry_v1,
)

V2: EthVariant = EthVariant(
    name="v2",
    parse=parse_entry_v2,
    normalize=normalize_v2,
    specify=specify_v2,
    render=render_entry_v2,
)


def select_variant(version: PanosVersion) -> EthVariant:
    """Return :data:`V2` for PAN-OS 7.1.0 and later, :data:`V1` otherwise."""
    if version >= MSS_ADJUST_VERSION:
        return V2
    return V1
