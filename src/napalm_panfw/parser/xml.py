"""Base XML utilities shared across all parsers and renderers."""

from __future__ import annotations

import re

from lxml import etree

from napalm_panfw.client.errors import PanosParseError

# Bookkeeping attributes the firewall adds to candidate configuration reads.
_DIRTY_ATTRS_RE: re.Pattern[str] = re.compile(
    r' admin="\S+" dirtyId="\d+" time="\S+( \S+)?"'
)


def parse_xml(text: str | bytes) -> etree._Element:
    """Parse an XML document and return its root element.

    Args:
        text: Raw XML from an API response or a stored fragment.

    Returns:
        Root element of the document.

    Raises:
        PanosParseError: If *text* is not well-formed XML.
    """
    if isinstance(text, str):
        text = text.encode("utf-8")
    try:
        return etree.fromstring(text)
    except etree.XMLSyntaxError as exc:
        raise PanosParseError(f"Malformed XML: {text[:200]!r}") from exc


def to_string(elem: etree._Element) -> str:
    """Serialize *elem* (without its tail) to a unicode string."""
    return etree.tostring(elem, encoding="unicode", with_tail=False)


def child_text(elem: etree._Element, path: str) -> str:
    """Return the stripped text at *path* below *elem*, or ``""``."""
    found = elem.find(path)
    if found is None or found.text is None:
        return ""
    return found.text.strip()


def child_int(elem: etree._Element, path: str) -> int:
    """Return the integer at *path* below *elem*, or ``0`` when absent.

    Raises:
        PanosParseError: If the element holds something other than an integer.
    """
    text = child_text(elem, path)
    if not text:
        return 0
    try:
        return int(text)
    except ValueError as exc:
        raise PanosParseError(f"Expected an integer at {path!r}, got {text!r}") from exc


def as_bool(value: str) -> bool:
    """Convert a ``"yes"``/``"no"`` wire value to ``bool``."""
    return value == "yes"


def yes_no(value: bool) -> str:
    """Convert a ``bool`` to its ``"yes"``/``"no"`` wire value."""
    return "yes" if value else "no"


def entry_names(elem: etree._Element | None) -> list[str] | None:
    """Return the ``name`` attribute of each ``<entry>`` child of *elem*.

    ``None`` is returned when *elem* itself is absent.
    """
    if elem is None:
        return None
    return [e.get("name", "") for e in elem.findall("entry")]


def raw_inner_xml(elem: etree._Element) -> str:
    """Return the exact inner XML of *elem*: leading text plus serialized children.

    The enclosing tag of *elem* is not part of the result.
    """
    parts = [elem.text or ""]
    for child in elem:
        parts.append(etree.tostring(child, encoding="unicode", with_tail=True))
    return "".join(parts)


def clean_raw_xml(text: str) -> str:
    """Remove the firewall's ``admin``/``dirtyId``/``time`` attributes from *text*."""
    return _DIRTY_ATTRS_RE.sub("", text)


def wrap_raw_xml(tag: str, text: str) -> etree._Element:
    """Rebuild an element named *tag* whose inner XML is *text*.

    Raises:
        PanosParseError: If *text* is not a well-formed XML fragment.
    """
    return parse_xml(f"<{tag}>{text}</{tag}>")
