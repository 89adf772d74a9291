from datetime import datetime, timezone

import pytest

from html2feed.core.document import parse_document
from html2feed.core.pipeline import ExtractionPipeline, document_title
from html2feed.exceptions import DateParseError, MissingTitleError
from html2feed.models import AttrSpec, ItemSpec, SelectorSpec, UnionSelector

URL = 'https://example.com/blog?page=1'


def test_one_item_per_candidate(posts_document, link_item_spec):
    record = ExtractionPipeline(UnionSelector.parse('div.post'), link_item_spec).run(posts_document, URL)

    assert record.title == 'Test Blog'
    assert record.link == 'https://example.com'
    assert [item.title for item in record.items] == ['First post', 'Second post']
    assert [item.link for item in record.items] == ['https://example.com/posts/1', 'https://example.com/posts/2']
    assert [item.identity for item in record.items] == [item.link for item in record.items]


def test_feed_updated_is_latest_item(posts_document, dated_item_spec):
    record = ExtractionPipeline(UnionSelector.parse('div.post'), dated_item_spec).run(posts_document, URL)

    assert [item.updated.day for item in record.items] == [1, 5]
    assert record.updated == datetime(2024, 3, 5, tzinfo=timezone.utc)


def test_no_dates_leaves_feed_updated_unknown(posts_document, link_item_spec):
    record = ExtractionPipeline(UnionSelector.parse('div.post'), link_item_spec).run(posts_document, URL)
    assert record.updated is None


def test_no_candidates_yields_empty_feed(posts_document, link_item_spec):
    record = ExtractionPipeline(UnionSelector.parse('section'), link_item_spec).run(posts_document, URL)
    assert record.items == []


def test_excluded_candidates_are_dropped_whole(articles_html):
    spec = ItemSpec(title=SelectorSpec.compile('h2'), link=AttrSpec.parse('a/href'))
    pipeline = ExtractionPipeline(UnionSelector.parse('article'), spec, exclude=UnionSelector.parse('.ad'))
    record = pipeline.run(parse_document(articles_html), URL)

    assert [item.title for item in record.items] == ['Real story']
    assert record.items[0].link == '/story'


def test_exclusion_applies_to_candidate_itself(link_item_spec):
    document = parse_document(
        """
        <div class="post promo"><h2>Promo</h2><a href="/p">p</a></div>
        <div class="post"><h2>Kept</h2><a href="/k">k</a></div>
        """
    )
    pipeline = ExtractionPipeline(UnionSelector.parse('div.post'), link_item_spec, exclude=UnionSelector.parse('.promo'))
    assert [item.title for item in pipeline.run(document, URL).items] == ['Kept']


def test_multiple_exclusion_matches_still_drop_once(link_item_spec):
    document = parse_document(
        """
        <div class="post"><h2>A</h2><a href="/a">a</a><i class="ad"></i><i class="ad"></i></div>
        <div class="post"><h2>B</h2><a href="/b">b</a></div>
        <div class="post"><h2>C</h2><a href="/c">c</a><b class="sponsor"></b></div>
        """
    )
    pipeline = ExtractionPipeline(
        UnionSelector.parse('div.post'), link_item_spec, exclude=UnionSelector.parse('.ad, .sponsor')
    )
    assert [item.title for item in pipeline.run(document, URL).items] == ['B']


def test_missing_title_aborts_the_run(link_item_spec):
    document = parse_document(
        """
        <div class="post"><h2>Fine</h2><a href="/1">1</a></div>
        <div class="post"><h3>Broken</h3><a href="/2">2</a></div>
        """
    )
    with pytest.raises(MissingTitleError) as exc_info:
        ExtractionPipeline(UnionSelector.parse('div.post'), link_item_spec).run(document, URL)

    assert exc_info.value.selector == 'h2'
    assert exc_info.value.position == 2


def test_excluded_candidate_never_reaches_extraction(link_item_spec):
    document = parse_document(
        """
        <div class="post ad"><h3>No title here</h3></div>
        <div class="post"><h2>Fine</h2><a href="/1">1</a></div>
        """
    )
    pipeline = ExtractionPipeline(UnionSelector.parse('div.post'), link_item_spec, exclude=UnionSelector.parse('.ad'))
    assert [item.title for item in pipeline.run(document, URL).items] == ['Fine']


def test_bad_date_aborts_the_run():
    spec = ItemSpec(title=SelectorSpec.compile('h2'), date=SelectorSpec.compile('time'), date_format='%Y-%m-%d')
    document = parse_document(
        """
        <div class="post"><h2>One</h2><time>2024-03-01</time></div>
        <div class="post"><h2>Two</h2><time>March 2nd</time></div>
        """
    )
    with pytest.raises(DateParseError):
        ExtractionPipeline(UnionSelector.parse('div.post'), spec).run(document, URL)


def test_union_order_and_duplicates_are_preserved():
    # the link resolves against the candidate itself, so each item names its own element
    spec = ItemSpec(title=SelectorSpec.compile('a'), link=AttrSpec.parse('[data-id]/data-id'))
    document = parse_document(
        '<html><body><span data-id="span"><a data-id="a" href="/nested">Nested</a></span></body></html>'
    )

    record = ExtractionPipeline(UnionSelector.parse('a,span,a'), spec).run(document, URL)

    # union order, not document order (the span comes first in the page)
    assert [item.link for item in record.items] == ['a', 'span', 'a']
    assert [item.title for item in record.items] == ['Nested', 'Nested', 'Nested']


def test_missing_document_title_falls_back_to_url(link_item_spec):
    document = parse_document('<html><body><div class="post"><h2>x</h2><a href="/1">1</a></div></body></html>')
    record = ExtractionPipeline(UnionSelector.parse('div.post'), link_item_spec).run(document, URL)

    assert document_title(document) is None
    assert record.title == URL


def test_full_link_mode_keeps_request_url(posts_document, link_item_spec):
    pipeline = ExtractionPipeline(UnionSelector.parse('div.post'), link_item_spec, link_mode='full')
    assert pipeline.run(posts_document, URL).link == URL
