"""Result containers passed between the service layers."""

from dataclasses import dataclass, field
from typing import Literal

from html2feed.models.feed import FeedRecord
from html2feed.models.selectors import ItemSpec, UnionSelector

OutputFormat = Literal['atom', 'rss']


@dataclass
class FetchResult:
    """Result of an HTML fetch operation.

    Attributes:
        url: URL that was requested
        content: Raw response body
        status_code: HTTP status code of the final response
        encoding: Charset declared by the server, if any
        final_url: URL after redirects
        fetch_time: Total time for the fetch in seconds

    """

    url: str
    content: bytes | None = None
    status_code: int | None = None
    encoding: str | None = None
    final_url: str | None = None
    fetch_time: float = 0.0

    @property
    def success(self) -> bool:
        """Whether a 2xx response with a body was received."""
        return self.content is not None and self.status_code is not None and 200 <= self.status_code < 300


@dataclass(frozen=True)
class ExtractionRequest:
    """Everything parsed out of one request's query parameters.

    Attributes:
        url: Target document URL
        items: Union selector for item-root candidates
        item_spec: Title/link/date directives
        exclude: Union selector dropping candidates, if given
        output_format: Feed wire format

    """

    url: str
    items: UnionSelector
    item_spec: ItemSpec
    exclude: UnionSelector | None = None
    output_format: OutputFormat = 'atom'


@dataclass
class RenderedFeed:
    """A serialized feed ready to be written as a response body."""

    body: str
    media_type: str
    record: FeedRecord = field(repr=False)
