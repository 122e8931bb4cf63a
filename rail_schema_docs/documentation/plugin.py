"""
HTML schema documentation plugin.
"""

import logging
from typing import Any, Optional

from graphql import GraphQLSchema

from .config import DocumentationConfig
from .schema_renderer import SchemaRendererMixin
from .type_renderer import TypeRendererMixin
from .types import DocumentSection, ResolveURL
from .urls import anchor_url

logger = logging.getLogger(__name__)


class HTMLDocumentSchemaPlugin(SchemaRendererMixin, TypeRendererMixin):
    """
    Renders a type, or a whole schema, as an annotated SDL code section.

    The title and URL resolver are fixed at construction; every call is a
    pure function of its input, so one instance can be shared freely.
    """

    def __init__(
        self,
        title: Optional[str] = None,
        url: Optional[ResolveURL] = None,
        config: Optional[DocumentationConfig] = None,
    ):
        self.config = config or DocumentationConfig.from_settings()
        self.title = title if title is not None else self.config.title
        self.url = url or anchor_url(self.config.url_prefix)
        self.logger = logging.getLogger(__name__)

    def get_sections(self, type_or_schema: Any) -> Optional[DocumentSection]:
        """Return the definition section for a named type or a schema."""
        if isinstance(type_or_schema, GraphQLSchema):
            self.logger.info("Rendering schema definition section '%s'", self.title)
            definition = self.render_schema(type_or_schema)
        else:
            definition = self.render_type(type_or_schema)

        if definition is None:
            return None

        return DocumentSection(
            title=self.title,
            description='<pre class="code">' + definition + "</pre>",
        )
