"""
Configuration management for rail-schema-docs.

This module provides a settings proxy that resolves documentation settings
from schema-specific, Django global, and library default settings.
"""

from typing import Any, Optional

from django.conf import settings

from .defaults import LIBRARY_DEFAULTS


class SettingsProxy:
    """
    Proxy for accessing documentation settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Schema-specific settings (RAIL_SCHEMA_DOCS_SCHEMAS[schema_name])
    2. Global Django settings (RAIL_SCHEMA_DOCS)
    3. Library defaults (LIBRARY_DEFAULTS)

    Values are looked up on every call so ``override_settings`` applies
    immediately.
    """

    def __init__(self, schema_name: Optional[str] = None):
        """
        Initialize the settings proxy.

        Args:
            schema_name: Name of the schema for schema-specific settings
        """
        self.schema_name = schema_name

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value with hierarchical resolution.

        Args:
            key: Setting key to retrieve (dot notation for nested keys)
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        schema_value = self._get_schema_setting(key)
        if schema_value is not None:
            return schema_value

        django_value = self._get_django_setting(key)
        if django_value is not None:
            return django_value

        library_value = self._get_nested_value(LIBRARY_DEFAULTS, key)
        if library_value is not None:
            return library_value

        return default

    def _get_schema_setting(self, key: str) -> Any:
        if not self.schema_name or not settings.configured:
            return None
        schema_settings = getattr(settings, "RAIL_SCHEMA_DOCS_SCHEMAS", {})
        return self._get_nested_value(schema_settings.get(self.schema_name, {}), key)

    def _get_django_setting(self, key: str) -> Any:
        # Plain library use without a Django project falls back to defaults
        if not settings.configured:
            return None
        return self._get_nested_value(getattr(settings, "RAIL_SCHEMA_DOCS", {}), key)

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve (supports dot notation for nested access)

        Returns:
            The value or None if not found
        """
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current

    def validate(self) -> dict[str, Any]:
        """
        Validate the current documentation settings.

        Returns:
            Dictionary with validation results
        """
        validation_results = {"valid": True, "errors": [], "warnings": []}

        if settings.configured:
            configured = getattr(settings, "RAIL_SCHEMA_DOCS", {})
            if not isinstance(configured, dict):
                validation_results["errors"].append(
                    "RAIL_SCHEMA_DOCS must be a dict"
                )
                validation_results["valid"] = False
                return validation_results
            for key in configured:
                if key not in LIBRARY_DEFAULTS:
                    validation_results["warnings"].append(
                        f"Unknown RAIL_SCHEMA_DOCS setting '{key}' is ignored"
                    )

        width = self.get("description_width")
        if not isinstance(width, int) or isinstance(width, bool) or width < 1:
            validation_results["errors"].append(
                f"Setting 'description_width' must be a positive integer, got {width!r}"
            )
            validation_results["valid"] = False

        return validation_results


# Global settings proxy instance (no schema-specific settings)
settings_proxy = SettingsProxy()


def get_settings_proxy(schema_name: Optional[str] = None) -> SettingsProxy:
    """Get a settings proxy instance for the specified schema."""
    if schema_name is None:
        return settings_proxy
    return SettingsProxy(schema_name)


def get_setting(key: str, default: Any = None, schema_name: Optional[str] = None) -> Any:
    """Shortcut for ``get_settings_proxy(schema_name).get(key, default)``."""
    return get_settings_proxy(schema_name).get(key, default)
