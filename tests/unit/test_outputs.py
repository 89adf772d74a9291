import xml.etree.ElementTree as ET
from datetime import datetime, timezone

import pytest

from html2feed.exceptions import SerializationError
from html2feed.models import FeedItem, FeedRecord
from html2feed.outputs import ATOM_MEDIA_TYPE, RSS_MEDIA_TYPE, media_type, render_feed

ATOM = '{http://www.w3.org/2005/Atom}'
NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def record():
    return FeedRecord(
        title='Test Blog',
        link='https://example.com',
        updated=datetime(2024, 3, 5, tzinfo=timezone.utc),
        items=[
            FeedItem(
                title='First & best',
                link='https://example.com/posts/1',
                identity='https://example.com/posts/1',
                updated=datetime(2024, 3, 1, tzinfo=timezone.utc),
            ),
            FeedItem(title='Undated', identity='2024-03-05T00:00:00+00:00'),
            FeedItem(title='Anonymous'),
        ],
    )


def test_atom_document(record):
    feed = ET.fromstring(render_feed(record, 'atom', now=NOW))

    assert feed.tag == f'{ATOM}feed'
    assert feed.find(f'{ATOM}title').text == 'Test Blog'
    assert feed.find(f'{ATOM}link').get('href') == 'https://example.com'
    assert feed.find(f'{ATOM}updated').text == '2024-03-05T00:00:00+00:00'

    entries = feed.findall(f'{ATOM}entry')
    assert [entry.find(f'{ATOM}title').text for entry in entries] == ['First & best', 'Undated', 'Anonymous']
    assert entries[0].find(f'{ATOM}link').get('href') == 'https://example.com/posts/1'
    assert entries[0].find(f'{ATOM}id').text == 'https://example.com/posts/1'
    assert entries[1].find(f'{ATOM}link') is None
    assert entries[1].find(f'{ATOM}updated').text == '2024-03-05T00:00:00+00:00'
    assert entries[2].find(f'{ATOM}id').text.startswith('urn:uuid:')


def test_atom_generated_ids_are_deterministic(record):
    first = ET.fromstring(render_feed(record, 'atom', now=NOW))
    second = ET.fromstring(render_feed(record, 'atom', now=NOW))
    assert first.findall(f'{ATOM}entry')[2].find(f'{ATOM}id').text == (
        second.findall(f'{ATOM}entry')[2].find(f'{ATOM}id').text
    )


def test_atom_falls_back_to_now_without_dates():
    record = FeedRecord(title='t', link='https://example.com', items=[FeedItem(title='a', identity='a')])
    feed = ET.fromstring(render_feed(record, 'atom', now=NOW))
    assert feed.find(f'{ATOM}updated').text == '2024-06-01T00:00:00+00:00'


def test_rss_document(record):
    rss = ET.fromstring(render_feed(record, 'rss', now=NOW))
    channel = rss.find('channel')

    assert rss.get('version') == '2.0'
    assert channel.find('title').text == 'Test Blog'
    assert channel.find('link').text == 'https://example.com'
    assert channel.find('lastBuildDate').text == 'Sat, 01 Jun 2024 00:00:00 +0000'

    items = channel.findall('item')
    assert items[0].find('guid').get('isPermaLink') == 'true'
    assert items[0].find('pubDate').text == 'Fri, 01 Mar 2024 00:00:00 +0000'
    assert items[1].find('guid').get('isPermaLink') == 'false'
    assert items[1].find('pubDate') is None
    assert items[1].find('link') is None


def test_illegal_characters_raise_serialization_error():
    record = FeedRecord(title='bad \x01 title', link='https://example.com')
    with pytest.raises(SerializationError):
        render_feed(record, 'atom')


def test_media_types():
    assert media_type('atom') == ATOM_MEDIA_TYPE
    assert media_type('rss') == RSS_MEDIA_TYPE
