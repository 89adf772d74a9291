"""Compiled extraction directives built from request parameters."""

from dataclasses import dataclass, field

from bs4 import Tag
from soupsieve import SoupSieve

from html2feed.core.selection import (
    SelectorCompileError,
    compile_selector,
    first_text,
    get_attribute,
    match_all,
    match_first,
    split_top_level,
)
from html2feed.exceptions import SpecificationError


@dataclass(frozen=True)
class SelectorSpec:
    """A compiled CSS selector plus its source text.

    Attributes:
        selector: Original selector string, kept for error messages
        matcher: Compiled soupsieve matcher

    """

    selector: str
    matcher: SoupSieve = field(repr=False, compare=False)

    @classmethod
    def compile(cls, selector: str, parameter: str = 'selector') -> 'SelectorSpec':
        """Compile a selector string.

        Args:
            selector: CSS selector text
            parameter: Query parameter the selector came from (for error reporting)

        Returns:
            The compiled SelectorSpec.

        Raises:
            SpecificationError: If the selector is empty or cannot be compiled

        """
        selector = selector.strip()
        try:
            matcher = compile_selector(selector)
        except SelectorCompileError as e:
            raise SpecificationError(parameter, f"failed to parse selector '{selector}' ({e})", selector) from e
        return cls(selector=selector, matcher=matcher)

    def first(self, root: Tag) -> Tag | None:
        """First match in document order, root included."""
        return match_first(root, self.matcher)

    def all(self, root: Tag) -> list[Tag]:
        """All matches in document order, root included."""
        return match_all(root, self.matcher)


@dataclass(frozen=True)
class AttrSpec:
    """A selector plus an optional attribute name.

    ``attribute=None`` extracts the matched node's text. Any string, including
    ``''`` from a trailing separator (``"a/"``), looks up that attribute.

    Attributes:
        selector: Compiled selector locating the node
        attribute: Attribute to read, or None for text content

    """

    selector: SelectorSpec
    attribute: str | None = None

    @classmethod
    def parse(cls, value: str, parameter: str = 'link') -> 'AttrSpec':
        """Parse ``<selector>`` or ``<selector>/<attributeName>``.

        The separator is the first ``/`` outside brackets, parentheses and quotes,
        so ``a[href^="/posts"]/href`` keeps its attribute selector intact.
        """
        parts = split_top_level(value, '/', maxsplit=1)
        selector = SelectorSpec.compile(parts[0], parameter)
        attribute = parts[1].strip() if len(parts) == 2 else None
        return cls(selector=selector, attribute=attribute)

    def extract(self, root: Tag) -> str | None:
        """Resolve a single string value from the first match under ``root``.

        Returns:
            The attribute value or text, or None if the selector does not match,
            the attribute is missing, or the node has no text.

        """
        node = self.selector.first(root)
        if node is None:
            return None
        if self.attribute is not None:
            return get_attribute(node, self.attribute)
        return first_text(node)


@dataclass(frozen=True)
class UnionSelector:
    """An ordered union of independently compiled selectors.

    Attributes:
        members: Selectors in declaration order

    """

    members: tuple[SelectorSpec, ...]

    @classmethod
    def parse(cls, value: str, parameter: str = 'select') -> 'UnionSelector':
        """Compile each comma-separated token of ``value``.

        Raises:
            SpecificationError: If the value is empty or any token fails to compile

        """
        if not value.strip():
            raise SpecificationError(parameter, 'missing selector')
        return cls(members=tuple(SelectorSpec.compile(token, parameter) for token in split_top_level(value, ',')))

    @property
    def selector(self) -> str:
        """Source text of the union, for diagnostics."""
        return ', '.join(member.selector for member in self.members)

    def query_all(self, root: Tag) -> list[Tag]:
        """Concatenate every member's matches in declaration order.

        A node matched by several members appears once per member.
        """
        nodes: list[Tag] = []
        for member in self.members:
            nodes.extend(member.all(root))
        return nodes


@dataclass(frozen=True)
class ItemSpec:
    """How to turn one candidate element into a feed item.

    Attributes:
        title: Selector for the item's title text (required)
        link: Selector/attribute for the item's link
        date: Selector for the item's date text
        date_format: strptime format for the date text, required with ``date``

    """

    title: SelectorSpec
    link: AttrSpec | None = None
    date: SelectorSpec | None = None
    date_format: str | None = None

    def __post_init__(self) -> None:
        """Reject specs that cannot yield an item identity."""
        if self.link is None and self.date is None:
            raise SpecificationError('link', 'either link or date must be given to identify items')
        if self.date is not None and not self.date_format:
            raise SpecificationError('dateFormat', 'missing date format for date selector', self.date.selector)
