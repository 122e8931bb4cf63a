"""
Default cross-reference URL resolvers.
"""

from graphql import GraphQLNamedType

from .types import ResolveURL


def type_anchor(name: str) -> str:
    """Anchor id used for a type's section on a generated page."""
    # GraphQL names are valid, case-sensitive HTML ids
    return name


def anchor_url(prefix: str = "#") -> ResolveURL:
    """Build a resolver pointing every named type to ``prefix`` + its anchor."""

    def resolve(type_: GraphQLNamedType) -> str:
        return prefix + type_anchor(type_.name)

    return resolve
