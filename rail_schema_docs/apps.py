"""
Django app configuration for rail-schema-docs.
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for the schema documentation renderer."""

    name = "rail_schema_docs"
    verbose_name = "Rail Schema Documentation"
    label = "rail_schema_docs"

    def ready(self):
        """Validate documentation settings once Django has loaded."""
        from .config_proxy import settings_proxy

        results = settings_proxy.validate()
        for warning in results["warnings"]:
            logger.warning(warning)
        for error in results["errors"]:
            logger.error(error)
