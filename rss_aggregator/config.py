"""Configuration loading for the aggregator and its feed index."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from xml.etree import ElementTree as ET

from .documents import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, is_remote, load_document
from .models import FeedDescriptor, IndexDocument

logger = logging.getLogger(__name__)


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: Optional[str] = None


@dataclass
class AppConfig:
    index: Optional[str] = None
    output_dir: str = "."
    index_file: str = "index.html"
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def parse_index_root(root: ET.Element) -> IndexDocument:
    """Build the feed list from a parsed index document."""
    title = root.get("title", "")
    feeds: List[FeedDescriptor] = []

    for position, entry in enumerate(root):
        if entry.tag != "feed":
            continue
        url = entry.get("url")
        output_file = entry.get("file")
        if not url or not output_file:
            logger.warning(
                "Skipping feed entry %d without url or file attribute", position
            )
            continue
        feeds.append(
            FeedDescriptor(
                url=url,
                output_file=output_file,
                display_name=entry.get("name") or output_file,
            )
        )
        logger.debug("Registered feed '%s' -> %s", url, output_file)

    logger.info("Loaded %d feeds from index '%s'", len(feeds), title)
    return IndexDocument(title=title, feeds=feeds)


def load_index_document(
    location: str,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> IndexDocument:
    """Fetch the index document at ``location`` and return its feeds."""
    logger.info("Loading feed index from %s", location)
    root = load_document(location, timeout=timeout, user_agent=user_agent)
    return parse_index_root(root)


def _resolve_path(base_path: Path, target_path: str) -> str:
    """Resolve a path relative to the base config file if it's not absolute."""
    target = Path(target_path)
    if target.is_absolute():
        return str(target)
    return str((base_path.parent / target).resolve())


def _parse_timeout(value: str) -> float:
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"Invalid timeout value: {value!r}")
    if timeout <= 0:
        raise ValueError("Timeout must be positive.")
    return timeout


def parse_app_config(path: str) -> AppConfig:
    """Parse the application configuration XML."""
    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    logger.info("Loading application configuration from %s", config_path)
    tree = ET.parse(config_path)
    root = tree.getroot()

    config = AppConfig()

    index = (root.findtext("index") or "").strip()
    if index:
        # URLs are kept as they are; paths are relative to the config file.
        if is_remote(index):
            config.index = index
        else:
            config.index = _resolve_path(config_path, index)

    output_dir = (root.findtext("output-dir") or "").strip()
    if output_dir:
        config.output_dir = _resolve_path(config_path, output_dir)

    config.index_file = (root.findtext("index-file") or "").strip() or config.index_file

    timeout = root.findtext("timeout")
    if timeout and timeout.strip():
        config.timeout = _parse_timeout(timeout.strip())

    config.user_agent = (root.findtext("user-agent") or "").strip() or config.user_agent

    log_node = root.find("logging")
    if log_node is not None:
        config.logging.level = (
            log_node.findtext("level") or ""
        ).strip() or config.logging.level
        log_file = log_node.findtext("file")
        if log_file:
            config.logging.file = _resolve_path(config_path, log_file.strip())

    return config
