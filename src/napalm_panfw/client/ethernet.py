"""Ethernet interface configuration operations.

:class:`EthernetInterfaces` reads and writes ``network/interface/ethernet``
entries as :class:`~napalm_panfw.model.eth.EthernetInterface` records.  The
schema revision is chosen from the device version on every call via
:func:`~napalm_panfw.utils.versioning.select_variant`.

Writes are two-step pipelines without rollback:

    SET / EDIT: write the entries, then import them into the vsys.
    DELETE:     unimport from the vsys, then delete the entries.

If the first step fails the second is skipped; if the second step fails
its error is raised although the first step already took effect.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from lxml import etree

from napalm_panfw.client.session import PanosSession
from napalm_panfw.model.eth import EthernetInterface
from napalm_panfw.parser.eth import find_entry
from napalm_panfw.utils.render import render_bulk
from napalm_panfw.utils.versioning import EthVariant, select_variant
from napalm_panfw.vendor.panos.xpaths import ethernet_xpath, join_xpath

logger = logging.getLogger(__name__)


class EthernetInterfaces:
    """CRUD operations on the firewall's ethernet interfaces.

    Args:
        session: Transport used for every request.  Anything providing the
            :class:`~napalm_panfw.client.session.PanosSession` methods works.
    """

    def __init__(self, session: PanosSession) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def show_list(self) -> list[str]:
        """Return the names of ethernet interfaces in the running config."""
        self._session.log_query("(show) list of ethernet interfaces")
        path = ethernet_xpath(None)
        return self._session.entry_list_using(self._session.show, join_xpath(path[:-1]))

    def get_list(self) -> list[str]:
        """Return the names of ethernet interfaces in the candidate config."""
        self._session.log_query("(get) list of ethernet interfaces")
        path = ethernet_xpath(None)
        return self._session.entry_list_using(self._session.get, join_xpath(path[:-1]))

    def get(self, name: str) -> EthernetInterface:
        """Return the candidate configuration of interface *name*.

        Raises:
            PanosObjectNotFoundError: If the interface is not configured.
        """
        self._session.log_query("(get) ethernet interface %r", name)
        return self._details(self._session.get, name)

    def show(self, name: str) -> EthernetInterface:
        """Return the running configuration of interface *name*.

        Raises:
            PanosObjectNotFoundError: If the interface is not configured.
        """
        self._session.log_query("(show) ethernet interface %r", name)
        return self._details(self._session.show, name)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set(self, vsys: str, *interfaces: EthernetInterface) -> None:
        """Create or merge one or more interfaces in a single request.

        Args:
            vsys: Vsys to import the interfaces into afterwards; ``""`` skips
                the import.
            *interfaces: Records to write.  Nothing is sent when empty.
        """
        if not interfaces:
            return

        variant = self._variant()
        names = [e.name for e in interfaces]
        bulk = render_bulk("ethernet", (variant.to_element(e) for e in interfaces))
        self._session.log_action("(set) ethernet interfaces: %s", names)

        # One entry goes into the ethernet collection, several replace the
        # <ethernet> bulk element inside <interface>.
        path = ethernet_xpath(names)
        if len(interfaces) == 1:
            element: etree._Element = bulk[0]
            path = path[:-1]
        else:
            element = bulk
            path = path[:-2]

        self._session.set(join_xpath(path), element)
        self._session.import_interfaces(vsys, names)

    def edit(self, vsys: str, interface: EthernetInterface) -> None:
        """Replace the configuration of one interface.

        Args:
            vsys: Vsys to import the interface into afterwards; ``""`` skips
                the import.
            interface: The full desired configuration.
        """
        variant = self._variant()
        self._session.log_action("(edit) ethernet interface: %s", interface.name)

        path = ethernet_xpath([interface.name])
        self._session.edit(join_xpath(path), variant.to_element(interface))
        self._session.import_interfaces(vsys, [interface.name])

    def delete(self, vsys: str, *interfaces: str | EthernetInterface) -> None:
        """Remove interfaces from the firewall.

        Args:
            vsys: Vsys to unimport the interfaces from first; ``""`` skips
                the unimport.
            *interfaces: Interface names or records.  Nothing is sent when
                empty.

        Raises:
            TypeError: If an item is neither a ``str`` nor an
                :class:`EthernetInterface`.  Raised before any request.
        """
        if not interfaces:
            return

        names: list[str] = []
        for item in interfaces:
            if isinstance(item, str):
                names.append(item)
            elif isinstance(item, EthernetInterface):
                names.append(item.name)
            else:
                raise TypeError(f"Unknown type sent to delete: {item!r}")
        self._session.log_action("(delete) ethernet interface(s): %s", names)

        self._session.unimport_interfaces(vsys, names)
        self._session.delete(join_xpath(ethernet_xpath(names)))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _variant(self) -> EthVariant:
        variant = select_variant(self._session.versioning())
        logger.debug("Using ethernet schema %s", variant.name)
        return variant

    def _details(
        self,
        fn: Callable[[str], etree._Element],
        name: str,
    ) -> EthernetInterface:
        variant = self._variant()
        result = fn(join_xpath(ethernet_xpath([name])))
        return variant.to_record(find_entry(result))
