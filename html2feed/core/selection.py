"""Thin adapter over soupsieve, the CSS selector engine behind BeautifulSoup's ``select``.

Everything that compiles or evaluates a selector goes through this module so the
rest of the package never depends on soupsieve directly.
"""

from functools import lru_cache

import soupsieve
from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString
from soupsieve import SoupSieve

_OPENERS = {'[': ']', '(': ')'}
_QUOTES = {'"', "'"}


class SelectorCompileError(ValueError):
    """Raised when a selector string cannot be compiled."""

    pass


@lru_cache(maxsize=512)
def compile_selector(selector: str) -> SoupSieve:
    """Compile a CSS selector.

    Compiled matchers are immutable, so the memo cache is safe to share across
    requests.

    Args:
        selector: CSS selector text

    Returns:
        The compiled matcher.

    Raises:
        SelectorCompileError: If the selector is empty or has invalid syntax

    """
    if not selector.strip():
        raise SelectorCompileError('empty selector')
    try:
        return soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise SelectorCompileError(str(e).splitlines()[0]) from e


def match_first(root: Tag, matcher: SoupSieve) -> Tag | None:
    """Return the first node matching ``matcher`` in document order, ``root`` included."""
    if _is_element(root) and matcher.match(root):
        return root
    return matcher.select_one(root)


def match_all(root: Tag, matcher: SoupSieve) -> list[Tag]:
    """Return every node matching ``matcher`` in document order, ``root`` included."""
    matches = matcher.select(root)
    if _is_element(root) and matcher.match(root):
        matches.insert(0, root)
    return matches


def first_text(node: Tag) -> str | None:
    """Return the node's first direct text child, stripped.

    Comments, doctypes and whitespace-only strings are skipped. Returns None for
    empty or self-closing elements instead of failing.
    """
    for child in node.children:
        if isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            text = child.strip()
            if text:
                return text
    return None


def get_attribute(node: Tag, name: str) -> str | None:
    """Return an attribute value, joining multi-valued attributes like ``class``."""
    value = node.attrs.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return ' '.join(value)
    return value


def split_top_level(text: str, separator: str, maxsplit: int = -1) -> list[str]:
    """Split on ``separator`` only where it appears outside brackets, parentheses and quotes.

    Args:
        text: String to split
        separator: Single separator character
        maxsplit: Maximum number of splits, -1 for no limit

    Returns:
        The split parts, unstripped.

    """
    parts: list[str] = []
    closers: list[str] = []
    quote: str | None = None
    start = 0
    i = 0

    while i < len(text):
        char = text[i]
        if quote:
            if char == '\\':
                i += 1
            elif char == quote:
                quote = None
        elif char == '\\':
            i += 1
        elif char in _QUOTES:
            quote = char
        elif char in _OPENERS:
            closers.append(_OPENERS[char])
        elif closers and char == closers[-1]:
            closers.pop()
        elif char == separator and not closers and (maxsplit < 0 or len(parts) < maxsplit):
            parts.append(text[start:i])
            start = i + 1
        i += 1

    parts.append(text[start:])
    return parts


def _is_element(node: Tag) -> bool:
    # The BeautifulSoup object is the document itself and never matches a selector
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)
