"""
Rail schema documentation.

Renders GraphQL schemas (graphql-core / graphene) as cross-linked,
syntax-annotated SDL documentation sections and pages.
"""

from .documentation import (
    DocumentationConfig,
    DocumentationGenerator,
    DocumentSection,
    HTMLDocumentSchemaPlugin,
)
from .exceptions import (
    DefaultValueSerializationError,
    SchemaDocumentationError,
    SchemaLoadError,
)

__version__ = "0.1.0"

__all__ = [
    "DocumentationConfig",
    "DocumentationGenerator",
    "DocumentSection",
    "HTMLDocumentSchemaPlugin",
    "SchemaDocumentationError",
    "DefaultValueSerializationError",
    "SchemaLoadError",
]
