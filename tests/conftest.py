import logging
import textwrap
from xml.etree import ElementTree as ET

import pytest


@pytest.fixture
def parse_xml():
    """Parse an indented XML snippet into its root element."""

    def _parse(source: str) -> ET.Element:
        return ET.fromstring(textwrap.dedent(source).strip())

    return _parse


@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, content: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).strip(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_logger():
    """Detach handlers added by a test and reinstate the original ones."""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    for handler in original_handlers:
        root_logger.removeHandler(handler)

    yield root_logger

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)
