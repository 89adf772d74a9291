"""Models for extraction directives, feed records and results."""

from html2feed.models.feed import FeedItem, FeedRecord
from html2feed.models.results import ExtractionRequest, FetchResult, OutputFormat, RenderedFeed
from html2feed.models.selectors import AttrSpec, ItemSpec, SelectorSpec, UnionSelector

__all__ = [
    'AttrSpec',
    'ItemSpec',
    'SelectorSpec',
    'UnionSelector',
    'FeedItem',
    'FeedRecord',
    'ExtractionRequest',
    'FetchResult',
    'OutputFormat',
    'RenderedFeed',
]
