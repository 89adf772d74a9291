"""Shared helpers for the feed serializers."""

import re
import uuid
import xml.etree.ElementTree as ET
from datetime import datetime

from html2feed.exceptions import SerializationError
from html2feed.models import FeedItem

# Characters outside the XML 1.0 Char production
_ILLEGAL_XML_CHARS = re.compile('[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]')


def sub_element(parent: ET.Element, tag: str, text: str | None = None, **attrib: str) -> ET.Element:
    """Append a child element, rejecting values that XML cannot carry.

    Raises:
        SerializationError: If ``text`` or an attribute contains characters illegal in XML 1.0

    """
    for value in (text, *attrib.values()):
        match = _ILLEGAL_XML_CHARS.search(value) if value else None
        if match:
            raise SerializationError(f'<{tag}> contains illegal XML character {match.group()!r}')
    element = ET.SubElement(parent, tag, attrib)
    if text is not None:
        element.text = text
    return element


def entry_id(item: FeedItem, feed_link: str) -> str:
    """Item identity, or a deterministic urn:uuid when none was resolved."""
    if item.identity:
        return item.identity
    seed = f'{item.link or feed_link}#{item.title}'
    return uuid.uuid5(uuid.NAMESPACE_URL, seed).urn


def to_xml(root: ET.Element) -> str:
    """Serialize an element tree with an XML declaration."""
    try:
        return ET.tostring(root, encoding='utf-8', xml_declaration=True).decode('utf-8')
    except (TypeError, ValueError) as e:
        raise SerializationError(f'failed to convert to feed ({e})') from e


def rfc3339(value: datetime) -> str:
    """Format a timestamp for Atom."""
    return value.isoformat()
