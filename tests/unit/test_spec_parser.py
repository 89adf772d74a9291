import pytest

from html2feed.core.spec_parser import parse_extraction_request
from html2feed.exceptions import SpecificationError


@pytest.fixture
def params():
    return {
        'url': 'https://example.com/blog',
        'select': 'div.post',
        'title': 'h2',
        'link': 'a/href',
    }


def test_parses_minimal_request(params):
    request = parse_extraction_request(params)

    assert request.url == 'https://example.com/blog'
    assert request.items.selector == 'div.post'
    assert request.exclude is None
    assert request.item_spec.title.selector == 'h2'
    assert request.item_spec.link.attribute == 'href'
    assert request.item_spec.date is None
    assert request.output_format == 'atom'


def test_parses_full_request(params):
    params.update(
        {
            'select': 'article, li.entry',
            'exclude': '.ad, .promo',
            'link': 'a',
            'date': 'time',
            'dateFormat': '%d %B %Y',
            'format': 'RSS',
        }
    )
    request = parse_extraction_request(params)

    assert [member.selector for member in request.items.members] == ['article', 'li.entry']
    assert [member.selector for member in request.exclude.members] == ['.ad', '.promo']
    assert request.item_spec.link.attribute is None
    assert request.item_spec.date.selector == 'time'
    assert request.item_spec.date_format == '%d %B %Y'
    assert request.output_format == 'rss'


def test_date_format_ignored_without_date(params):
    params['dateFormat'] = '%Y'
    assert parse_extraction_request(params).item_spec.date_format is None


def test_date_only_request_is_valid(params):
    del params['link']
    params.update({'date': 'time', 'dateFormat': '%Y-%m-%d'})
    assert parse_extraction_request(params).item_spec.link is None


@pytest.mark.parametrize(
    ('overrides', 'parameter'),
    [
        ({'url': ''}, 'url'),
        ({'url': 'example.com/blog'}, 'url'),
        ({'url': 'ftp://example.com/file'}, 'url'),
        ({'select': ''}, 'select'),
        ({'select': 'div['}, 'select'),
        ({'exclude': 'div['}, 'exclude'),
        ({'title': ''}, 'title'),
        ({'title': 'h2:bogus'}, 'title'),
        ({'link': 'a[/href'}, 'link'),
        ({'date': 'time['}, 'date'),
        ({'date': 'time'}, 'dateFormat'),
        ({'date': 'time', 'dateFormat': ''}, 'dateFormat'),
        ({'date': 'time', 'dateFormat': '%Q'}, 'dateFormat'),
        ({'date': 'time', 'dateFormat': '%G-%V'}, 'dateFormat'),
        ({'format': 'json'}, 'format'),
    ],
)
def test_rejects_invalid_parameters(params, overrides, parameter):
    params.update(overrides)
    with pytest.raises(SpecificationError) as exc_info:
        parse_extraction_request(params)
    assert exc_info.value.parameter == parameter


def test_missing_select_message(params):
    del params['select']
    with pytest.raises(SpecificationError, match='missing selector'):
        parse_extraction_request(params)


def test_missing_title_message(params):
    del params['title']
    with pytest.raises(SpecificationError, match='missing title selector'):
        parse_extraction_request(params)


def test_neither_link_nor_date_is_rejected(params):
    del params['link']
    with pytest.raises(SpecificationError) as exc_info:
        parse_extraction_request(params)
    assert exc_info.value.parameter == 'link'
    assert 'either link or date' in str(exc_info.value)


@pytest.mark.parametrize('date_format', ['%Y-%m-%d', '%d %B %Y', '%a, %d %b %Y %H:%M:%S %z', '%Y-%m-%dT%H:%M:%S%Z'])
def test_accepts_usable_date_formats(params, date_format):
    params.update({'date': 'time', 'dateFormat': date_format})
    assert parse_extraction_request(params).item_spec.date_format == date_format


def test_invalid_date_format_message(params):
    params.update({'date': 'time', 'dateFormat': '%Q'})
    with pytest.raises(SpecificationError, match="invalid date format '%Q'") as exc_info:
        parse_extraction_request(params)
    assert exc_info.value.selector == 'time'
