"""Atom 1.0 serializer."""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone

from html2feed.models import FeedRecord
from html2feed.outputs.utils import entry_id, rfc3339, sub_element, to_xml

ATOM_NAMESPACE = 'http://www.w3.org/2005/Atom'
ATOM_MEDIA_TYPE = 'application/atom+xml'


def render_atom(record: FeedRecord, now: datetime | None = None) -> str:
    """Render a feed record as an Atom document.

    Atom requires an ``updated`` element on the feed and on every entry. The feed
    falls back to ``now`` when no item carried a date, and entries fall back to
    the feed's value.

    Args:
        record: Assembled feed record
        now: Fallback timestamp. Defaults to the current UTC time.

    Returns:
        The Atom XML document.

    Raises:
        SerializationError: If a value cannot be represented in XML

    """
    feed_updated = record.updated or now or datetime.now(timezone.utc)

    feed = ET.Element('feed', {'xmlns': ATOM_NAMESPACE})
    sub_element(feed, 'title', record.title)
    sub_element(feed, 'link', href=record.link)
    sub_element(feed, 'id', record.link)
    sub_element(feed, 'updated', rfc3339(feed_updated))

    for item in record.items:
        entry = sub_element(feed, 'entry')
        sub_element(entry, 'title', item.title)
        if item.link:
            sub_element(entry, 'link', href=item.link, rel='alternate')
        sub_element(entry, 'id', entry_id(item, record.link))
        sub_element(entry, 'updated', rfc3339(item.updated or feed_updated))

    return to_xml(feed)
