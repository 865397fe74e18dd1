"""RSS 2.0 validation and item value resolution."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional, Sequence, Tuple
from xml.etree import ElementTree as ET

from .documents import get_child_element, text_of
from .errors import MalformedFeedError, MalformedItemError
from .models import ItemRow
from .renderers import build_footer_html, build_header_html, build_row_html

logger = logging.getLogger(__name__)

NO_DATE = "No date available"
NO_SOURCE = "No source available"
NO_SOURCE_TEXT = "No child source tag provided"
NO_TITLE = "No title available"


def validate_feed(root: ET.Element) -> ET.Element:
    """Check that ``root`` is an RSS 2.0 document and return its channel."""
    if root.tag != "rss":
        raise MalformedFeedError(f"root element is <{root.tag}>, expected <rss>")
    version = root.get("version")
    if version is None:
        raise MalformedFeedError("<rss> element has no version attribute")
    if version != "2.0":
        raise MalformedFeedError(f"unsupported RSS version {version!r}")
    if len(root) == 0:
        raise MalformedFeedError("<rss> element has no channel")
    return root[0]


def is_valid_feed(root: ET.Element) -> bool:
    try:
        validate_feed(root)
    except MalformedFeedError:
        return False
    return True


def anchor(href: str, label: str) -> str:
    """Anchor markup used inside item rows."""
    return f'<a href ="{href}">{label}</a>'


def resolve_date(item: ET.Element) -> str:
    index = get_child_element(item, "pubDate")
    if index == -1:
        return NO_DATE
    text = text_of(item[index])
    if text is None:
        raise MalformedItemError("<pubDate> element has no text")
    return text


def resolve_source(item: ET.Element) -> str:
    index = get_child_element(item, "source")
    if index == -1:
        return NO_SOURCE
    source = item[index]
    return anchor(source.get("url", ""), text_of(source) or NO_SOURCE_TEXT)


class _NewsContext:
    """Child lookups shared by the news rules of a single item."""

    def __init__(self, item: ET.Element):
        self.item = item
        self.link_index = get_child_element(item, "link")
        self.link = (
            text_of(item[self.link_index]) if self.link_index != -1 else None
        )

    def text(self, tag: str) -> Optional[str]:
        index = get_child_element(self.item, tag)
        return text_of(self.item[index]) if index != -1 else None

    def wrap(self, label: str) -> str:
        if self.link is None:
            return label
        return anchor(self.link, label)


NewsRule = Callable[[_NewsContext], Optional[str]]


def _link_placeholder(context: _NewsContext) -> Optional[str]:
    if context.link_index == -1:
        return None
    return context.wrap(NO_TITLE)


def _description(context: _NewsContext) -> Optional[str]:
    text = context.text("description")
    return context.wrap(text) if text is not None else None


def _title(context: _NewsContext) -> Optional[str]:
    text = context.text("title")
    return context.wrap(text) if text is not None else None


# Evaluated in order; the last rule that yields a value wins.
NEWS_RULES: Sequence[NewsRule] = (_link_placeholder, _description, _title)


def resolve_news(item: ET.Element, rules: Sequence[NewsRule] = NEWS_RULES) -> str:
    context = _NewsContext(item)
    value = ""
    for rule in rules:
        candidate = rule(context)
        if candidate is not None:
            value = candidate
    return value


def resolve_item(item: ET.Element) -> ItemRow:
    """Derive the date, source and news cells for one <item>."""
    try:
        date = resolve_date(item)
    except MalformedItemError as exc:
        logger.warning("Substituting placeholder date: %s", exc)
        date = NO_DATE
    return ItemRow(date=date, source=resolve_source(item), news=resolve_news(item))


def iter_items(channel: ET.Element) -> Iterator[ET.Element]:
    for child in channel:
        if child.tag == "item":
            yield child


def render_feed(root: ET.Element) -> Tuple[str, int]:
    """Validate a parsed feed and return its HTML page and item count."""
    channel = validate_feed(root)
    parts: List[str] = [build_header_html(channel)]
    count = 0
    for item in iter_items(channel):
        parts.append(build_row_html(resolve_item(item)))
        count += 1
    parts.append(build_footer_html())
    logger.debug("Rendered %d items", count)
    return "".join(parts), count
