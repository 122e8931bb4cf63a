"""
Rendering of single named types as annotated SDL blocks.
"""

import logging
from typing import Any, Optional, Union

from graphql import (
    DEFAULT_DEPRECATION_REASON,
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLString,
    GraphQLUnionType,
)

from ..exceptions import DefaultValueSerializationError
from .literals import is_absent, print_value
from .markup import comment, identifier, keyword, parameter, property_, string_value, type_link
from .text import break_text

logger = logging.getLogger(__name__)

InputValue = Union[GraphQLArgument, GraphQLInputField]


class TypeRendererMixin:
    """
    Mixin rendering one named type per call.

    Expects ``self.url`` (a ResolveURL callable) and ``self.config`` (a
    DocumentationConfig) on the host class.
    """

    def render_type(self, type_: Any) -> Optional[str]:
        """Render the definition block of a named type, or None if unsupported."""
        if isinstance(type_, GraphQLScalarType):
            return self._render_scalar(type_)
        if isinstance(type_, GraphQLObjectType):
            return self._render_object(type_)
        if isinstance(type_, GraphQLInterfaceType):
            return self._render_interface(type_)
        if isinstance(type_, GraphQLUnionType):
            return self._render_union(type_)
        if isinstance(type_, GraphQLEnumType):
            return self._render_enum(type_)
        if isinstance(type_, GraphQLInputObjectType):
            return self._render_input_object(type_)

        logger.debug("No definition rendered for unsupported type %r", type_)
        return None

    def _render_scalar(self, type_: GraphQLScalarType) -> str:
        return keyword("scalar") + " " + identifier(type_.name)

    def _render_object(self, type_: GraphQLObjectType) -> str:
        implements = ""
        if type_.interfaces:
            implements = (
                " " + keyword("implements") + " "
                + ", ".join(self._render_type_reference(i) for i in type_.interfaces)
            )
        return (
            keyword("type") + " " + identifier(type_.name) + implements + " {\n"
            + self._render_fields(type_.name, type_.fields) + "\n}"
        )

    def _render_interface(self, type_: GraphQLInterfaceType) -> str:
        return (
            keyword("interface") + " " + identifier(type_.name) + " {\n"
            + self._render_fields(type_.name, type_.fields) + "\n}"
        )

    def _render_union(self, type_: GraphQLUnionType) -> str:
        members = " | ".join(self._render_type_reference(member) for member in type_.types)
        return keyword("union") + " " + identifier(type_.name) + " = " + members

    def _render_enum(self, type_: GraphQLEnumType) -> str:
        values = "\n".join(
            "\n" + self._render_description(value.description)
            + "  " + property_(name) + self._render_deprecation(value.deprecation_reason)
            for name, value in type_.values.items()
        )
        return keyword("enum") + " " + identifier(type_.name) + " {\n" + values + "\n}"

    def _render_input_object(self, type_: GraphQLInputObjectType) -> str:
        fields = "\n".join(
            "  " + self._render_input_value(f"{type_.name}.{name}", name, input_field)
            for name, input_field in type_.fields.items()
        )
        return keyword("input") + " " + identifier(type_.name) + " {\n" + fields + "\n}"

    def _render_fields(self, type_name: str, fields: dict[str, GraphQLField]) -> str:
        return "\n".join(
            self._render_field(f"{type_name}.{name}", name, field)
            for name, field in fields.items()
        )

    def _render_field(self, path: str, name: str, field: GraphQLField) -> str:
        return (
            "\n" + self._render_description(field.description)
            + "  " + property_(name) + self._render_arguments(path, field.args)
            + ": " + self._render_type_reference(field.type)
            + self._render_deprecation(field.deprecation_reason)
        )

    def _render_arguments(self, path: str, args: dict[str, GraphQLArgument]) -> str:
        if not args:
            return ""
        return "(" + ", ".join(
            self._render_input_value(f"{path}({name}:)", name, arg)
            for name, arg in args.items()
        ) + ")"

    def _render_input_value(self, path: str, name: str, input_value: InputValue) -> str:
        rendered = parameter(name) + ": " + self._render_type_reference(input_value.type)
        if is_absent(input_value.default_value):
            return rendered

        try:
            literal = print_value(input_value.default_value, input_value.type)
        except DefaultValueSerializationError:
            logger.error("Invalid default value for %s of type %s", path, input_value.type)
            raise
        return rendered + " = " + string_value(literal)

    def _render_description(self, description: Optional[str]) -> str:
        if not description:
            return ""
        return "".join(
            "  " + comment(line) + "\n"
            for line in break_text(description, self.config.description_width)
        )

    def _render_deprecation(self, reason: Optional[str]) -> str:
        if reason is None:
            return ""
        if reason in ("", DEFAULT_DEPRECATION_REASON):
            return " " + keyword("@deprecated")
        return (
            " " + keyword("@deprecated")
            + "(" + parameter("reason") + ": "
            + string_value(print_value(reason, GraphQLString)) + ")"
        )

    def _render_type_reference(self, type_: Any) -> str:
        """
        Link a possibly wrapped type reference to its named type.

        Only the innermost List/NonNull wrapper contributes a marker: each
        peeled wrapper overwrites the marker of the previous one, so
        ``[Item!]!`` renders as ``Item!`` and ``[Item]!`` as ``Item[]``.
        """
        marker = ""
        named = type_
        while isinstance(named, (GraphQLList, GraphQLNonNull)):
            marker = "[]" if isinstance(named, GraphQLList) else "!"
            named = named.of_type

        return type_link(
            named.name,
            self.url(named),
            named.description or named.name,
            marker,
        )
