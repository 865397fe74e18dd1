"""Render RSS 2.0 feeds listed in an XML index as HTML pages."""
