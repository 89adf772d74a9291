"""Extraction pipeline: document + directives -> FeedRecord."""

import logging

import logfire
from bs4 import BeautifulSoup, Tag

from html2feed.core.assembler import LinkMode, assemble_feed
from html2feed.core.extraction import ItemExtractor
from html2feed.core.selection import first_text
from html2feed.models import FeedItem, FeedRecord, ItemSpec, SelectorSpec, UnionSelector

TITLE_SELECTOR = SelectorSpec.compile('title')


def document_title(document: BeautifulSoup) -> str | None:
    """Return the text of the document's first ``title`` element, if any."""
    node = TITLE_SELECTOR.first(document)
    return first_text(node) if node is not None else None


class ExtractionPipeline:
    """Runs one request's directives against a parsed document.

    Candidates are resolved with the item selector, any candidate whose subtree
    matches the exclusion selector is dropped whole, and every survivor must
    yield an item. The first extraction failure aborts the run.

    Attributes:
        items: Union selector for item-root candidates
        item_spec: Per-item directives
        exclude: Union selector for excluded candidates, or None
        link_mode: How the canonical link is derived from the request URL
        extractor: ItemExtractor built from ``item_spec``
        logger: Logger instance

    """

    def __init__(
        self,
        items: UnionSelector,
        item_spec: ItemSpec,
        exclude: UnionSelector | None = None,
        link_mode: LinkMode = 'origin',
    ):
        """Initialize the pipeline.

        Args:
            items: Union selector for item-root candidates
            item_spec: Per-item directives
            exclude: Union selector for excluded candidates. Defaults to None.
            link_mode: 'origin' or 'full'. Defaults to 'origin'.

        """
        self.items = items
        self.item_spec = item_spec
        self.exclude = exclude
        self.link_mode = link_mode
        self.extractor = ItemExtractor(item_spec)
        self.logger = logging.getLogger(__name__)

    def is_excluded(self, candidate: Tag) -> bool:
        """True if the candidate's subtree, candidate included, has any exclusion match."""
        return self.exclude is not None and bool(self.exclude.query_all(candidate))

    def extract_items(self, candidates: list[Tag]) -> list[FeedItem]:
        """Extract an item from every candidate.

        Raises:
            ExtractionError: On the first candidate missing a title or carrying
                an unparsable date

        """
        return [self.extractor.extract(candidate, position) for position, candidate in enumerate(candidates, start=1)]

    def run(self, document: BeautifulSoup, url: str) -> FeedRecord:
        """Build the feed record for a document.

        Args:
            document: Parsed document
            url: Requested URL, used for the canonical link and as the fallback title

        Returns:
            The assembled FeedRecord.

        Raises:
            ExtractionError: If any surviving candidate fails extraction

        """
        with logfire.span('extract_feed', url=url, select=self.items.selector):
            title = document_title(document)
            if title is None:
                self.logger.info(f'No <title> in {url}, using the URL as feed title')
                title = url

            matched = self.items.query_all(document)
            candidates = [node for node in matched if not self.is_excluded(node)]
            items = self.extract_items(candidates)
            record = assemble_feed(title, url, items, self.link_mode)

            logfire.info(
                'Extracted feed items',
                url=url,
                candidates=len(matched),
                excluded=len(matched) - len(candidates),
                items=len(items),
            )
            self.logger.debug(f'Extracted {len(items)}/{len(matched)} items from {url}')
            return record
