"""Shared data models for rss_aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class FeedDescriptor:
    """A single feed entry listed in the index document."""

    url: str
    output_file: str
    display_name: str


@dataclass
class IndexDocument:
    """Parsed index document."""

    title: str
    feeds: List[FeedDescriptor] = field(default_factory=list)


@dataclass
class ItemRow:
    """Display values for one rendered table row."""

    date: str
    source: str
    news: str


@dataclass
class FeedOutcome:
    """Result of processing one feed."""

    descriptor: FeedDescriptor
    generated: bool
    item_count: int = 0
    reason: Optional[str] = None
