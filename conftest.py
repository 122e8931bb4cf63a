import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "rail_schema_docs.conf.test_settings")
django.setup()


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without database access")
