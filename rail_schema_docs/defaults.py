"""
Default configuration for the rail-schema-docs library.

Single source of truth for every documentation setting the library consumes.
Projects override these through the ``RAIL_SCHEMA_DOCS`` Django setting, or
per schema through ``RAIL_SCHEMA_DOCS_SCHEMAS[schema_name]``.
"""

from __future__ import annotations

from typing import Any

LIBRARY_NAME = "rail-schema-docs"

LIBRARY_DEFAULTS: dict[str, Any] = {
    # Title of every section produced by the HTML schema plugin
    "title": "Schema",
    # Maximum line width of wrapped description comments
    "description_width": 50,
    # Prefix of the URLs produced by the default anchor resolver
    "url_prefix": "#",
    # Emit the whole-schema section at the top of generated pages
    "include_schema_section": True,
    # <title> of generated HTML pages
    "page_title": "GraphQL Schema",
    # Custom CSS replacing the built-in page stylesheet
    "custom_css": None,
}
