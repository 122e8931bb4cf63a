"""
GraphQL literal printing for default values and deprecation reasons.
"""

from typing import Any

from graphql import GraphQLError, GraphQLInputType, Undefined, ast_from_value, print_ast

from ..exceptions import DefaultValueSerializationError


def is_absent(value: Any) -> bool:
    """True when an argument or input field declares no default value."""
    return value is None or value is Undefined


def print_value(value: Any, type_: GraphQLInputType) -> str:
    """
    Print ``value`` as the GraphQL literal that parses back to it as ``type_``.

    Raises:
        DefaultValueSerializationError: ``value`` is not valid for ``type_``.
    """
    try:
        value_ast = ast_from_value(value, type_)
    except (GraphQLError, TypeError) as error:
        raise DefaultValueSerializationError(
            f"Cannot print {value!r} as a {type_} literal: {error}",
            type_name=str(type_),
            value=value,
        ) from error

    if value_ast is None:
        raise DefaultValueSerializationError(
            f"Cannot print {value!r} as a {type_} literal",
            type_name=str(type_),
            value=value,
        )

    return print_ast(value_ast)
