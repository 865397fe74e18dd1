"""Loading XML documents and looking up their child elements."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from xml.etree import ElementTree as ET

import requests

from .errors import FetchError, MalformedFeedError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "rss-aggregator/0.1"


def is_remote(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def load_document(
    location: str,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> ET.Element:
    """Fetch an XML document from a URL or local path and return its root."""
    if is_remote(location):
        logger.info("Fetching document %s", location)
        try:
            response = requests.get(
                location, timeout=timeout, headers={"User-Agent": user_agent}
            )
            response.raise_for_status()
            content = response.content
        except requests.RequestException as exc:
            raise FetchError(location, str(exc)) from exc

        try:
            return ET.fromstring(content)
        except ET.ParseError as exc:
            raise MalformedFeedError(f"{location} is not well-formed XML: {exc}") from exc

    logger.info("Reading document %s", location)
    path = Path(location)
    try:
        return ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise MalformedFeedError(f"{location} is not well-formed XML: {exc}") from exc
    except OSError as exc:
        raise FetchError(location, str(exc)) from exc


def get_child_element(element: ET.Element, tag: str) -> int:
    """Return the index of the first child labelled ``tag``, or -1 if absent."""
    for index, child in enumerate(element):
        if child.tag == tag:
            return index
    return -1


def text_of(element: ET.Element) -> Optional[str]:
    """Return the stripped text child of ``element``; None when it is blank."""
    text = (element.text or "").strip()
    return text or None


def child_text(element: ET.Element, tag: str) -> Optional[str]:
    """Return the text of the first child labelled ``tag``, if it has any."""
    index = get_child_element(element, tag)
    if index == -1:
        return None
    return text_of(element[index])
