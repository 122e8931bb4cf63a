"""
Configuration for documentation rendering.
"""

from dataclasses import dataclass, fields
from typing import Any, Optional

from ..config_proxy import get_settings_proxy


@dataclass
class DocumentationConfig:
    """Configuration for documentation rendering."""
    title: str = "Schema"
    description_width: int = 50
    url_prefix: str = "#"
    include_schema_section: bool = True
    page_title: str = "GraphQL Schema"
    custom_css: Optional[str] = None

    def __post_init__(self):
        if self.description_width < 1:
            raise ValueError(
                f"description_width must be at least 1, got {self.description_width}"
            )

    @classmethod
    def from_settings(cls, schema_name: Optional[str] = None, **overrides: Any) -> "DocumentationConfig":
        """Build a config from Django settings, letting explicit overrides win."""
        proxy = get_settings_proxy(schema_name)
        values = {}
        for config_field in fields(cls):
            override = overrides.get(config_field.name)
            if override is not None:
                values[config_field.name] = override
            else:
                values[config_field.name] = proxy.get(config_field.name, config_field.default)
        return cls(**values)
