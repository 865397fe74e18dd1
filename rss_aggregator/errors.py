"""Exceptions raised while aggregating feeds."""

from __future__ import annotations


class AggregatorError(Exception):
    """Base class for aggregation failures."""


class FetchError(AggregatorError):
    """A document could not be read from its URL or path."""

    def __init__(self, location: str, reason: str):
        super().__init__(f"Failed to fetch {location}: {reason}")
        self.location = location
        self.reason = reason


class MalformedFeedError(AggregatorError):
    """The fetched document is not a usable RSS 2.0 feed."""


class MalformedItemError(AggregatorError):
    """An item element lacks text where a value is expected."""
