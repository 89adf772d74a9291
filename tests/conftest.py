import logfire
import pytest

from html2feed.core.document import parse_document
from html2feed.models import AttrSpec, FetchResult, ItemSpec, SelectorSpec


@pytest.fixture
def posts_html():
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Test Blog</title>
    </head>
    <body>
        <div class="post">
            <h2>First post</h2>
            <a href="https://example.com/posts/1">Read more</a>
            <time>2024-03-01</time>
        </div>
        <div class="post">
            <h2>Second post</h2>
            <a href="https://example.com/posts/2">Read more</a>
            <time>2024-03-05</time>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def articles_html():
    return """
    <html>
    <head><title>News</title></head>
    <body>
        <article>
            <h2>Sponsored</h2>
            <a href="/sponsored">Buy</a>
            <div class="wrapper"><span class="ad">Ad</span></div>
        </article>
        <article>
            <h2>Real story</h2>
            <a href="/story">Story</a>
        </article>
    </body>
    </html>
    """


@pytest.fixture
def posts_document(posts_html):
    return parse_document(posts_html)


@pytest.fixture
def link_item_spec():
    return ItemSpec(title=SelectorSpec.compile('h2'), link=AttrSpec.parse('a/href'))


@pytest.fixture
def dated_item_spec():
    return ItemSpec(
        title=SelectorSpec.compile('h2'),
        link=AttrSpec.parse('a/href'),
        date=SelectorSpec.compile('time'),
        date_format='%Y-%m-%d',
    )


@pytest.fixture
def fake_fetcher(mocker, posts_html):
    fetcher = mocker.Mock()
    fetcher.fetch.return_value = FetchResult(
        url='https://example.com/blog',
        content=posts_html.encode('utf-8'),
        status_code=200,
        encoding='utf-8',
    )
    return fetcher


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')
    logfire.configure(send_to_logfire=False, console=False)


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""
    for item in items:
        if hasattr(item, 'fspath'):
            file_path = str(item.fspath)

            if '/tests/integration/' in file_path:
                item.add_marker(pytest.mark.integration)
            elif '/tests/unit/' in file_path:
                item.add_marker(pytest.mark.unit)
