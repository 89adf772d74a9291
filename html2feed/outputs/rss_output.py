"""RSS 2.0 serializer."""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime

from html2feed.models import FeedRecord
from html2feed.outputs.utils import entry_id, sub_element, to_xml

RSS_MEDIA_TYPE = 'application/rss+xml'


def render_rss(record: FeedRecord, now: datetime | None = None) -> str:
    """Render a feed record as an RSS 2.0 document.

    Args:
        record: Assembled feed record
        now: Build time for ``lastBuildDate``. Defaults to the current UTC time.

    Returns:
        The RSS XML document.

    Raises:
        SerializationError: If a value cannot be represented in XML

    """
    rss = ET.Element('rss', {'version': '2.0'})
    channel = sub_element(rss, 'channel')
    sub_element(channel, 'title', record.title)
    sub_element(channel, 'link', record.link)
    sub_element(channel, 'description', record.title)
    sub_element(channel, 'lastBuildDate', format_datetime(now or datetime.now(timezone.utc)))
    if record.updated:
        sub_element(channel, 'pubDate', format_datetime(record.updated))

    for item in record.items:
        element = sub_element(channel, 'item')
        sub_element(element, 'title', item.title)
        if item.link:
            sub_element(element, 'link', item.link)
        guid = entry_id(item, record.link)
        sub_element(element, 'guid', guid, isPermaLink='true' if guid == item.link else 'false')
        if item.updated:
            sub_element(element, 'pubDate', format_datetime(item.updated))

    return to_xml(rss)
