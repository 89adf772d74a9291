"""Turns raw request parameters into validated extraction directives."""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import cast
from urllib.parse import urlparse

from html2feed.exceptions import SpecificationError
from html2feed.models import AttrSpec, ExtractionRequest, ItemSpec, OutputFormat, SelectorSpec, UnionSelector

OUTPUT_FORMATS: tuple[str, ...] = ('atom', 'rss')

# Aware, so %z and %Z render something strptime can read back
_REFERENCE_DATE = datetime(2000, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _param(params: Mapping[str, str], name: str) -> str:
    return (params.get(name) or '').strip()


def parse_url(value: str) -> str:
    """Validate the target document URL.

    Args:
        value: Raw ``url`` parameter

    Returns:
        The URL unchanged.

    Raises:
        SpecificationError: If the URL is missing or not an absolute http(s) URL

    """
    if not value:
        raise SpecificationError('url', 'missing url in query')
    parsed = urlparse(value)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise SpecificationError('url', f'failed to parse url {value}')
    return value


def check_date_format(date_format: str, selector: str | None = None) -> str:
    """Reject a ``dateFormat`` the date parser cannot read back.

    A reference date is rendered with the pattern and parsed again; any
    directive strptime does not understand fails that round trip.

    Raises:
        SpecificationError: If the pattern is not a usable strptime format

    """
    try:
        datetime.strptime(_REFERENCE_DATE.strftime(date_format), date_format)
    except ValueError as e:
        raise SpecificationError('dateFormat', f"invalid date format '{date_format}' ({e})", selector) from e
    return date_format


def parse_item_spec(params: Mapping[str, str]) -> ItemSpec:
    """Build the per-item directives from ``title``, ``link``, ``date`` and ``dateFormat``.

    Raises:
        SpecificationError: On a missing title, an unparsable selector, a date
            without a usable format, or when neither link nor date is given

    """
    title_query = _param(params, 'title')
    if not title_query:
        raise SpecificationError('title', 'missing title selector')
    title = SelectorSpec.compile(title_query, 'title')

    link_query = _param(params, 'link')
    link = AttrSpec.parse(link_query, 'link') if link_query else None

    date_query = _param(params, 'date')
    date = None
    date_format = None
    if date_query:
        date = SelectorSpec.compile(date_query, 'date')
        # Whitespace is significant in a strptime format, so it is kept as given
        date_format = params.get('dateFormat') or None
        if date_format is not None:
            check_date_format(date_format, date.selector)

    return ItemSpec(title=title, link=link, date=date, date_format=date_format)


def parse_extraction_request(params: Mapping[str, str]) -> ExtractionRequest:
    """Parse and validate every extraction parameter of a request.

    No document is touched here; every specification problem surfaces before
    fetching.

    Args:
        params: Query parameters (``url``, ``select``, ``exclude``, ``title``,
            ``link``, ``date``, ``dateFormat``, ``format``)

    Returns:
        The validated ExtractionRequest.

    Raises:
        SpecificationError: Naming the offending parameter

    """
    url = parse_url(_param(params, 'url'))

    select_query = _param(params, 'select')
    if not select_query:
        raise SpecificationError('select', 'missing selector')
    items = UnionSelector.parse(select_query, 'select')

    item_spec = parse_item_spec(params)

    exclude_query = _param(params, 'exclude')
    exclude = UnionSelector.parse(exclude_query, 'exclude') if exclude_query else None

    output_format = _param(params, 'format').lower() or 'atom'
    if output_format not in OUTPUT_FORMATS:
        raise SpecificationError('format', f"unknown feed format '{output_format}', choose from {list(OUTPUT_FORMATS)}")

    return ExtractionRequest(
        url=url,
        items=items,
        item_spec=item_spec,
        exclude=exclude,
        output_format=cast(OutputFormat, output_format),
    )
