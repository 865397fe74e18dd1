"""Rendering helpers for feed and index pages."""

from __future__ import annotations

from typing import Optional, Sequence
from xml.etree import ElementTree as ET

from .documents import child_text
from .models import FeedDescriptor, ItemRow
from .templating import get_environment

EMPTY_TITLE = "Empty Title"
EMPTY_TITLE_NO_LINK = "Empty Title, no Link"
NO_DESCRIPTION = "No description"


def build_heading(title: Optional[str], link: Optional[str]) -> str:
    """Return the <h1> content for a channel title and link."""
    if title is not None:
        if link is not None:
            return f'<a href="{link}">{title}</a>'
        return title
    if link is not None:
        return f'<a href="{link}">{EMPTY_TITLE}</a>'
    return EMPTY_TITLE_NO_LINK


def build_header_html(channel: ET.Element) -> str:
    """Render the page opening for a <channel> through the table header row."""
    title = child_text(channel, "title")
    link = child_text(channel, "link")
    description = child_text(channel, "description")

    template = get_environment().get_template("header.html.j2")
    return template.render(
        page_title=title if title is not None else EMPTY_TITLE,
        heading=build_heading(title, link),
        description=description if description is not None else NO_DESCRIPTION,
    )


def build_row_html(row: ItemRow) -> str:
    template = get_environment().get_template("row.html.j2")
    return template.render(row=row)


def build_footer_html() -> str:
    template = get_environment().get_template("footer.html.j2")
    return template.render()


def build_index_html(title: str, feeds: Sequence[FeedDescriptor]) -> str:
    """Render the index page with one list entry per feed."""
    template = get_environment().get_template("index.html.j2")
    return template.render(title=title, feeds=feeds)
