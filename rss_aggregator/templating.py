"""Jinja2 environment for rss_aggregator templates."""

from __future__ import annotations

from importlib import resources

from jinja2 import Environment, FileSystemLoader

_ENV: Environment | None = None


def get_environment() -> Environment:
    """Return a cached Jinja environment configured for package templates."""
    global _ENV
    if _ENV is None:
        template_dir = resources.files(__package__) / "templates"
        loader = FileSystemLoader(str(template_dir))
        # Feed values are already markup and are emitted verbatim.
        _ENV = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
    return _ENV
