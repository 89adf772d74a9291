"""Parses fetched bytes into a navigable document tree."""

from bs4 import BeautifulSoup, ParserRejectedMarkup

from html2feed.exceptions import DocumentParseError


def parse_document(content: bytes | str, url: str = '', encoding: str | None = None) -> BeautifulSoup:
    """Parse HTML with the lxml tree builder.

    Args:
        content: Raw response body (or already decoded text)
        url: Source URL, for error reporting
        encoding: Charset declared by the server, if any

    Returns:
        The parsed document.

    Raises:
        DocumentParseError: If the body is empty or the parser rejects it

    """
    if not content or not content.strip():
        raise DocumentParseError(url, 'failed to parse html (empty document)')

    try:
        if isinstance(content, bytes):
            return BeautifulSoup(content, 'lxml', from_encoding=encoding)
        return BeautifulSoup(content, 'lxml')
    except ParserRejectedMarkup as e:
        raise DocumentParseError(url, f'failed to parse html ({e})') from e
