"""Extracts one feed item from one candidate element."""

import logging
from datetime import datetime, timezone

from bs4 import Tag

from html2feed.core.selection import first_text
from html2feed.exceptions import DateParseError, MissingTitleError
from html2feed.models import FeedItem, ItemSpec


def parse_date(text: str, date_format: str) -> datetime:
    """Parse date text with a strptime format.

    Naive results are taken to be UTC so timestamps from different items
    always compare.

    Raises:
        ValueError: If the text does not match the format

    """
    parsed = datetime.strptime(text, date_format)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ItemExtractor:
    """Builds FeedItems from candidate elements using an ItemSpec.

    Attributes:
        spec: Title/link/date directives
        logger: Logger instance

    """

    def __init__(self, spec: ItemSpec):
        """Initialize the extractor.

        Args:
            spec: Validated item directives

        """
        self.spec = spec
        self.logger = logging.getLogger(__name__)

    def _nested_title_selector(self, title_node: Tag) -> str | None:
        """Suggest a title selector for text that sits in a descendant, e.g. `h2 a`."""
        nested = next((tag for tag in title_node.find_all(True) if first_text(tag) is not None), None)
        if nested is None:
            return None
        selector = self.spec.title.selector
        scope = f':is({selector})' if ',' in selector else selector
        return f'{scope} {nested.name}'

    def extract(self, candidate: Tag, position: int | None = None) -> FeedItem:
        """Extract a single item.

        Args:
            candidate: Root element of the item
            position: 1-based candidate position, used in error messages

        Returns:
            The extracted FeedItem. Its identity is '' when neither the link nor
            the date resolved for this candidate.

        Raises:
            MissingTitleError: If the title selector finds no text
            DateParseError: If the date text does not match the date format

        """
        title_node = self.spec.title.first(candidate)
        title = first_text(title_node) if title_node is not None else None
        if title is None:
            suggestion = self._nested_title_selector(title_node) if title_node is not None else None
            raise MissingTitleError(self.spec.title.selector, position, suggestion)

        link = None
        identity = ''
        if self.spec.link is not None:
            link = self.spec.link.extract(candidate)
            if link is not None:
                identity = link

        updated = None
        if self.spec.date is not None and self.spec.date_format:
            date_node = self.spec.date.first(candidate)
            date_text = first_text(date_node) if date_node is not None else None
            if date_text is not None:
                try:
                    updated = parse_date(date_text, self.spec.date_format)
                except ValueError as e:
                    raise DateParseError(self.spec.date.selector, date_text, self.spec.date_format, position) from e
                if not identity:
                    identity = updated.isoformat()

        if not identity:
            self.logger.debug(f'Item {title!r} has no resolvable identity')

        return FeedItem(title=title, link=link, identity=identity, updated=updated)
