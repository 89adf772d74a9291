"""
html2feed - Feeds for sites that don't publish one
==================================================

html2feed turns an HTML page into an Atom or RSS feed from a handful of CSS
selectors: which elements are items, and where each item's title, link and
date live.

Main Components:
    - parse_extraction_request: Validate query parameters into extraction directives
    - ExtractionPipeline: Run directives against a parsed document
    - FeedService: Fetch, extract and serialize in one call
    - render_feed: Serialize a FeedRecord as Atom or RSS

Example:
    >>> from html2feed import FeedService
    >>> service = FeedService()
    >>> feed = service.build({'url': url, 'select': 'div.post', 'title': 'h2', 'link': 'a/href'})
"""

__version__ = '0.1.0'

from html2feed.config import Settings
from html2feed.core.assembler import assemble_feed, canonical_link
from html2feed.core.document import parse_document
from html2feed.core.extraction import ItemExtractor
from html2feed.core.fetcher import HTMLFetcher, SimpleFetcher, create_fetcher
from html2feed.core.pipeline import ExtractionPipeline
from html2feed.core.spec_parser import parse_extraction_request
from html2feed.exceptions import (
    DateParseError,
    DocumentParseError,
    ExtractionError,
    FetchError,
    Html2FeedError,
    MissingTitleError,
    SerializationError,
    SpecificationError,
    UpstreamError,
)
from html2feed.models import (
    AttrSpec,
    ExtractionRequest,
    FeedItem,
    FeedRecord,
    FetchResult,
    ItemSpec,
    RenderedFeed,
    SelectorSpec,
    UnionSelector,
)
from html2feed.outputs import render_feed
from html2feed.service import FeedService

__all__ = [
    # Core components
    'ExtractionPipeline',
    'FeedService',
    'ItemExtractor',
    'assemble_feed',
    'canonical_link',
    'parse_document',
    'parse_extraction_request',
    'render_feed',
    'Settings',
    # Fetchers
    'HTMLFetcher',
    'SimpleFetcher',
    'create_fetcher',
    # Models
    'AttrSpec',
    'ExtractionRequest',
    'FeedItem',
    'FeedRecord',
    'FetchResult',
    'ItemSpec',
    'RenderedFeed',
    'SelectorSpec',
    'UnionSelector',
    # Errors
    'DateParseError',
    'DocumentParseError',
    'ExtractionError',
    'FetchError',
    'Html2FeedError',
    'MissingTitleError',
    'SerializationError',
    'SpecificationError',
    'UpstreamError',
]
