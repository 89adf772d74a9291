"""Folds extracted items and document metadata into a FeedRecord."""

from collections.abc import Sequence
from typing import Literal
from urllib.parse import urlparse

from html2feed.models import FeedItem, FeedRecord

LinkMode = Literal['origin', 'full']
LINK_MODES: tuple[str, ...] = ('origin', 'full')


def canonical_link(url: str, link_mode: LinkMode = 'origin') -> str:
    """Return the feed's canonical link for a request URL.

    Args:
        url: Requested document URL
        link_mode: 'origin' for ``scheme://host``, 'full' for the URL unchanged

    Returns:
        The canonical link.

    """
    if link_mode == 'full':
        return url
    parsed = urlparse(url)
    return f'{parsed.scheme}://{parsed.netloc}'


def assemble_feed(
    title: str,
    url: str,
    items: Sequence[FeedItem],
    link_mode: LinkMode = 'origin',
) -> FeedRecord:
    """Build the feed record.

    Args:
        title: Resolved document title
        url: Requested document URL
        items: Extracted items in match order
        link_mode: How to derive the canonical link from ``url``

    Returns:
        FeedRecord whose update time is the latest item update, or None if no
        item carried one.

    """
    timestamps = [item.updated for item in items if item.updated is not None]
    return FeedRecord(
        title=title,
        link=canonical_link(url, link_mode),
        updated=max(timestamps) if timestamps else None,
        items=list(items),
    )
