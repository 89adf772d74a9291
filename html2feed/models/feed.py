"""Pydantic models for extracted feed items and the assembled feed."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FeedItem(BaseModel):
    """A single item extracted from one candidate element.

    Attributes:
        title: Text of the item's title node
        link: Link resolved from the link selector, if any
        identity: Stable item id derived from the link or the date ('' if neither resolved)
        updated: Parsed publication time, or None when unknown

    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description='Item title')
    link: str | None = Field(default=None, description='Item link')
    identity: str = Field(default='', description='Item identity derived from link or date')
    updated: datetime | None = Field(default=None, description='Publication/update time')


class FeedRecord(BaseModel):
    """Feed-level record handed to the serializer.

    Attributes:
        title: Document title, or the request URL when the page has none
        link: Canonical link of the feed
        updated: Most recent item update time, or None if no item carried one
        items: Items in match order

    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description='Feed title')
    link: str = Field(description='Canonical feed link')
    updated: datetime | None = Field(default=None, description='Most recent item update')
    items: list[FeedItem] = Field(default_factory=list, description='Extracted items')
