"""High-level orchestration for the rss_aggregator application."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, TextIO

from .config import load_index_document
from .documents import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, load_document
from .errors import FetchError, MalformedFeedError
from .feeds import render_feed
from .models import FeedDescriptor, FeedOutcome
from .renderers import build_index_html

logger = logging.getLogger(__name__)


@dataclass
class RunConfig:
    """Runtime options for executing the application."""

    index: str
    output_dir: str = "."
    index_file: str = "index.html"
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class RunResult:
    """Returned data after executing the app."""

    index_path: Path
    outcomes: List[FeedOutcome] = field(default_factory=list)

    @property
    def generated(self) -> List[FeedOutcome]:
        return [outcome for outcome in self.outcomes if outcome.generated]

    @property
    def skipped(self) -> List[FeedOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.generated]


def _write_page(path: Path, content: str) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def process_feed(
    feed: FeedDescriptor, config: RunConfig, status: Optional[TextIO] = None
) -> FeedOutcome:
    """Fetch one feed and write its HTML page; failures only skip this feed."""
    status = status or sys.stdout
    target = Path(config.output_dir) / feed.output_file

    try:
        root = load_document(
            feed.url, timeout=config.timeout, user_agent=config.user_agent
        )
        html, item_count = render_feed(root)
        _write_page(target, html)
    except (FetchError, MalformedFeedError) as exc:
        logger.warning("Skipping feed %s: %s", feed.url, exc)
        outcome = FeedOutcome(descriptor=feed, generated=False, reason=str(exc))
    except Exception as exc:
        logger.exception("Failed to process feed %s", feed.url)
        outcome = FeedOutcome(descriptor=feed, generated=False, reason=str(exc))
    else:
        logger.info("Wrote %d items from %s to %s", item_count, feed.url, target)
        outcome = FeedOutcome(descriptor=feed, generated=True, item_count=item_count)

    if outcome.generated:
        print(f"Successfully generated {feed.output_file}", file=status)
    else:
        print(f"Skipped {feed.output_file}: {outcome.reason}", file=status)
    return outcome


def execute(config: RunConfig, status: Optional[TextIO] = None) -> RunResult:
    """Run the application logic and return the per-feed outcomes."""
    if config.timeout <= 0:
        raise ValueError("--timeout must be positive.")

    index = load_index_document(
        config.index, timeout=config.timeout, user_agent=config.user_agent
    )
    if not index.feeds:
        logger.warning("No feeds found in index %s", config.index)

    outcomes = [process_feed(feed, config, status=status) for feed in index.feeds]

    index_path = Path(config.output_dir) / config.index_file
    _write_page(index_path, build_index_html(index.title, index.feeds))
    logger.info(
        "Generated %d of %d feeds; index written to %s",
        sum(1 for outcome in outcomes if outcome.generated),
        len(outcomes),
        index_path,
    )
    return RunResult(index_path=index_path, outcomes=outcomes)
