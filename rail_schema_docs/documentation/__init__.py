"""
Documentation rendering package.

This package renders GraphQL schemas and their named types as annotated,
cross-linked SDL sections, and assembles those sections into HTML pages.
"""

from .config import DocumentationConfig
from .generator import DocumentationGenerator
from .loader import load_schema
from .plugin import HTMLDocumentSchemaPlugin
from .types import DocumentPlugin, DocumentSection, ResolveURL
from .urls import anchor_url

__all__ = [
    "DocumentationConfig",
    "DocumentationGenerator",
    "DocumentPlugin",
    "DocumentSection",
    "HTMLDocumentSchemaPlugin",
    "ResolveURL",
    "anchor_url",
    "load_schema",
]
