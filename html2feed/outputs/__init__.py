"""Feed serializers."""

from datetime import datetime

from html2feed.models import FeedRecord, OutputFormat
from html2feed.outputs.atom_output import ATOM_MEDIA_TYPE, render_atom
from html2feed.outputs.rss_output import RSS_MEDIA_TYPE, render_rss


def render_feed(record: FeedRecord, output_format: OutputFormat = 'atom', now: datetime | None = None) -> str:
    """Render a feed record in the requested wire format.

    Args:
        record: Assembled feed record
        output_format: 'atom' or 'rss'. Defaults to 'atom'.
        now: Fallback/build timestamp. Defaults to the current UTC time.

    Returns:
        The XML document.

    """
    if output_format == 'rss':
        return render_rss(record, now)
    return render_atom(record, now)


def media_type(output_format: OutputFormat) -> str:
    """Content type for a wire format."""
    return RSS_MEDIA_TYPE if output_format == 'rss' else ATOM_MEDIA_TYPE


__all__ = ['ATOM_MEDIA_TYPE', 'RSS_MEDIA_TYPE', 'media_type', 'render_atom', 'render_feed', 'render_rss']
