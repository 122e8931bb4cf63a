"""
Resolution of the GraphQL schema to document.
"""

import logging
from typing import Any

from django.utils.module_loading import import_string
from graphql import GraphQLSchema

from ..exceptions import SchemaLoadError

logger = logging.getLogger(__name__)


def load_schema(schema: Any = None) -> GraphQLSchema:
    """
    Resolve ``schema`` to a graphql-core schema.

    Accepts a GraphQLSchema, a graphene Schema, a dotted import path to
    either, or None to use ``GRAPHENE["SCHEMA"]`` from graphene-django.
    """
    source = schema
    if schema is None:
        from graphene_django.settings import graphene_settings

        schema = graphene_settings.SCHEMA
        if not schema:
            raise SchemaLoadError("GRAPHENE.SCHEMA is not configured or could not be loaded.")

    if isinstance(schema, str):
        try:
            schema = import_string(schema)
        except ImportError as error:
            raise SchemaLoadError(f"Could not import schema '{source}': {error}", source) from error

    # graphene.Schema wraps the graphql-core schema
    schema = getattr(schema, "graphql_schema", schema)
    if not isinstance(schema, GraphQLSchema):
        raise SchemaLoadError(
            f"Expected a GraphQL schema, got {type(schema).__name__}", source
        )

    logger.debug("Loaded schema from %r", source if source is not None else "GRAPHENE.SCHEMA")
    return schema
