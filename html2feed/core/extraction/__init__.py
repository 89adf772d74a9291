"""Item extraction."""

from html2feed.core.extraction.extractor import ItemExtractor, parse_date

__all__ = ['ItemExtractor', 'parse_date']
