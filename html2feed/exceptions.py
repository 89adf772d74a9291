"""Custom exceptions for html2feed."""


class Html2FeedError(Exception):
    """Base class for all html2feed exceptions."""

    pass


class SpecificationError(Html2FeedError):
    """Raised when the request's extraction parameters are missing or invalid."""

    def __init__(self, parameter: str, message: str, selector: str | None = None):
        """Initialize specification error.

        Args:
            parameter: Name of the offending query parameter
            message: Human readable description of the problem
            selector: Selector text that failed to compile, if any

        """
        self.parameter = parameter
        self.selector = selector
        super().__init__(f'{parameter}: {message}')


class ExtractionError(Html2FeedError):
    """Raised when a candidate element cannot be turned into a feed item."""

    pass


class MissingTitleError(ExtractionError):
    """Raised when the title selector resolves to nothing inside a candidate."""

    def __init__(self, selector: str, position: int | None = None, suggestion: str | None = None):
        """Initialize missing title error.

        Args:
            selector: The title selector that found no text
            position: 1-based position of the candidate among surviving candidates
            suggestion: A selector reaching the text nested under the matched element, if any

        """
        self.selector = selector
        self.position = position
        self.suggestion = suggestion
        where = f' in candidate #{position}' if position is not None else ''
        if suggestion is None:
            message = f"title selector '{selector}' matched no text{where}"
        else:
            message = (
                f"title selector '{selector}' matched an element whose text is in a child element{where}; "
                f"try '{suggestion}'"
            )
        super().__init__(message)


class DateParseError(ExtractionError):
    """Raised when date text does not match the configured date format."""

    def __init__(self, selector: str, text: str, date_format: str, position: int | None = None):
        """Initialize date parse error.

        Args:
            selector: The date selector whose text failed to parse
            text: The text that was parsed
            date_format: The strptime format it was parsed with
            position: 1-based position of the candidate among surviving candidates

        """
        self.selector = selector
        self.text = text
        self.date_format = date_format
        self.position = position
        where = f' in candidate #{position}' if position is not None else ''
        super().__init__(
            f"date selector '{selector}' text {text!r} does not match format {date_format!r}{where}"
        )


class UpstreamError(Html2FeedError):
    """Raised when the remote document cannot be fetched or parsed."""

    def __init__(self, url: str, message: str):
        """Initialize upstream error.

        Args:
            url: URL of the remote document
            message: Description of the failure

        """
        self.url = url
        super().__init__(f'{url}: {message}')


class FetchError(UpstreamError):
    """Raised when fetching the remote document fails."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        """Initialize fetch error.

        Args:
            url: URL that was fetched
            message: Description of the failure
            status_code: HTTP status code received, if a response arrived

        """
        self.status_code = status_code
        super().__init__(url, message)


class DocumentParseError(UpstreamError):
    """Raised when the fetched bytes cannot be parsed into a document tree."""

    pass


class SerializationError(Html2FeedError):
    """Raised when a feed record cannot be rendered to XML."""

    pass
