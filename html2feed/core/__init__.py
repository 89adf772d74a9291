"""Extraction engine: selectors, item extraction, pipeline and feed assembly."""
