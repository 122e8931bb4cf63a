"""
Rendering of a whole schema: root operations, directives and user types.
"""

import logging
from typing import Callable

from graphql import GraphQLDirective, GraphQLSchema

from .filters import is_user_directive, is_user_type, sort_type_names
from .markup import keyword, property_

logger = logging.getLogger(__name__)

ROOT_OPERATIONS = ("query", "mutation", "subscription")


class SchemaRendererMixin:
    """
    Mixin rendering a full schema document.

    Relies on ``render_type``, ``_render_arguments`` and
    ``_render_type_reference`` from TypeRendererMixin.
    """

    def render_schema(self, schema: GraphQLSchema) -> str:
        """Render the schema block, user directives and user types."""
        return self._render_filtered_schema(schema, is_user_directive, is_user_type)

    def _render_filtered_schema(
        self,
        schema: GraphQLSchema,
        directive_filter: Callable[[str], bool],
        type_filter: Callable[[str], bool],
    ) -> str:
        directives = []
        for directive in schema.directives:
            if directive_filter(directive.name):
                directives.append(directive)
            else:
                logger.debug("Skipping directive @%s", directive.name)

        type_names = sort_type_names(
            name for name in schema.type_map if type_filter(name)
        )

        blocks = [self._render_schema_definition(schema)]
        blocks.extend(self._render_directive(directive) for directive in directives)
        for name in type_names:
            rendered = self.render_type(schema.type_map[name])
            if rendered is not None:
                blocks.append(rendered)

        return "\n\n".join(blocks) + "\n"

    def _render_schema_definition(self, schema: GraphQLSchema) -> str:
        operation_types = []
        for operation in ROOT_OPERATIONS:
            root_type = getattr(schema, f"{operation}_type")
            if root_type is not None:
                operation_types.append(
                    "  " + property_(operation) + ": " + self._render_type_reference(root_type)
                )
        return keyword("schema") + " {\n" + "\n".join(operation_types) + "\n}"

    def _render_directive(self, directive: GraphQLDirective) -> str:
        locations = " | ".join(keyword(location.name) for location in directive.locations)
        return (
            keyword("directive") + " " + keyword("@" + directive.name)
            + self._render_arguments(f"@{directive.name}", directive.args)
            + " on " + locations
        )
