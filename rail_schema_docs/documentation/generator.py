"""
DocumentationGenerator implementation.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from graphql import GraphQLSchema

from .config import DocumentationConfig
from .filters import is_user_type, sort_type_names
from .html import HTMLGeneratorMixin
from .plugin import HTMLDocumentSchemaPlugin
from .types import DocumentPlugin
from .urls import type_anchor

logger = logging.getLogger(__name__)

# Reserved GraphQL prefix, so no user type can share the anchor
SCHEMA_ANCHOR = "__schema"


class DocumentationGenerator(HTMLGeneratorMixin):
    """
    Assembles plugin sections for a schema and its user types into a page.
    """

    def __init__(self, plugins: Optional[Sequence[DocumentPlugin]] = None,
                 config: Optional[DocumentationConfig] = None):
        self.config = config or DocumentationConfig.from_settings()
        self.plugins = list(plugins) if plugins is not None else [HTMLDocumentSchemaPlugin(config=self.config)]
        self.logger = logging.getLogger(__name__)

    def generate_sections(self, schema: GraphQLSchema) -> list:
        """Collect ``(anchor, heading, sections)`` for the schema and each user type."""
        entries = []
        if self.config.include_schema_section:
            sections = self._collect(schema)
            if sections:
                entries.append((SCHEMA_ANCHOR, "Schema", sections))

        for name in sort_type_names(n for n in schema.type_map if is_user_type(n)):
            sections = self._collect(schema.type_map[name])
            if sections:
                entries.append((type_anchor(name), name, sections))
            else:
                self.logger.debug(f"No sections produced for type '{name}'")
        return entries

    def generate_html_documentation(self, schema: GraphQLSchema,
                                    output_path: Optional[str] = None) -> str:
        """Generate a standalone HTML documentation page."""
        self.logger.info(f"Generating HTML documentation for schema '{self.config.page_title}'")
        html_content = self._sections_to_html(self.generate_sections(schema))
        if output_path:
            Path(output_path).write_text(html_content, encoding='utf-8')
            self.logger.info(f"HTML documentation written to {output_path}")
        return html_content

    def _collect(self, type_or_schema) -> list:
        sections = []
        for plugin in self.plugins:
            section = plugin.get_sections(type_or_schema)
            if section is not None:
                sections.append(section)
        return sections
