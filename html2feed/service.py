"""Request-level orchestration: parameters in, serialized feed out."""

import logging
from collections.abc import Mapping

import logfire

from html2feed.config import Settings
from html2feed.core.document import parse_document
from html2feed.core.fetcher import HTMLFetcher, create_fetcher
from html2feed.core.pipeline import ExtractionPipeline
from html2feed.core.spec_parser import parse_extraction_request
from html2feed.models import ExtractionRequest, FeedRecord, RenderedFeed
from html2feed.outputs import media_type, render_feed


class FeedService:
    """Builds one feed per request.

    Specification problems surface before anything is fetched. Each call builds
    its own selectors, document and record; the only state kept between calls is
    the fetcher's connection pool.

    Attributes:
        settings: Service settings
        fetcher: Document fetcher
        logger: Logger instance

    """

    def __init__(self, settings: Settings | None = None, fetcher: HTMLFetcher | None = None):
        """Initialize the service.

        Args:
            settings: Service settings. Defaults to Settings().
            fetcher: Document fetcher. Defaults to a SimpleFetcher built from settings.

        """
        self.settings = settings or Settings()
        self.fetcher = fetcher or create_fetcher(
            'simple',
            timeout=self.settings.timeout,
            max_attempts=self.settings.fetch_retries,
            user_agent=self.settings.user_agent,
        )
        self.logger = logging.getLogger(__name__)

    def extract(self, request: ExtractionRequest) -> FeedRecord:
        """Fetch, parse and extract the feed record for a parsed request.

        Raises:
            UpstreamError: If the document cannot be fetched or parsed
            ExtractionError: If any candidate fails extraction

        """
        result = self.fetcher.fetch(request.url)
        document = parse_document(result.content or b'', request.url, result.encoding)
        pipeline = ExtractionPipeline(
            items=request.items,
            item_spec=request.item_spec,
            exclude=request.exclude,
            link_mode=self.settings.canonical_link,
        )
        return pipeline.run(document, request.url)

    def build(self, params: Mapping[str, str]) -> RenderedFeed:
        """Build the serialized feed for a request's query parameters.

        Args:
            params: Query parameters

        Returns:
            RenderedFeed with the XML body and its media type.

        Raises:
            SpecificationError: If the parameters are invalid
            UpstreamError: If the document cannot be fetched or parsed
            ExtractionError: If any candidate fails extraction
            SerializationError: If the feed cannot be rendered

        """
        request = parse_extraction_request(params)
        with logfire.span('build_feed', url=request.url, output_format=request.output_format):
            record = self.extract(request)
            body = render_feed(record, request.output_format)
            self.logger.info(f'Built {request.output_format} feed with {len(record.items)} items for {request.url}')
            return RenderedFeed(body=body, media_type=media_type(request.output_format), record=record)

    def close(self) -> None:
        """Release the fetcher."""
        self.fetcher.close()
