"""
Custom exceptions for schema documentation rendering.
"""

from typing import Any, Optional


class SchemaDocumentationError(Exception):
    """Base exception for schema documentation errors."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        self.type_name = type_name
        super().__init__(message)


class DefaultValueSerializationError(SchemaDocumentationError, ValueError):
    """Raised when a value cannot be printed as a literal of its input type."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        self.value = value
        super().__init__(message, type_name)


class SchemaLoadError(SchemaDocumentationError):
    """Raised when no GraphQL schema can be resolved for documentation."""

    def __init__(self, message: str, source: Optional[Any] = None):
        self.source = source
        super().__init__(message)
