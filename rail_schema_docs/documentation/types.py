"""
Data types shared by documentation plugins.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union

from graphql import GraphQLNamedType, GraphQLSchema

# Maps a named type to the URL of its documentation
ResolveURL = Callable[[GraphQLNamedType], str]


@dataclass(frozen=True)
class DocumentSection:
    """A titled block of markup produced for a type or a whole schema."""
    title: str
    description: str


class DocumentPlugin(Protocol):
    """Anything able to contribute a section for a type or a schema."""

    def get_sections(
        self, type_or_schema: Union[GraphQLNamedType, GraphQLSchema]
    ) -> Optional[DocumentSection]:
        ...
