import yaml

from django.conf import settings as django_settings

from clubdata.conf.serversettings import ServerSettings
from clubdata.tests.server_settings import yaml_config


def pytest_configure(config):
    # same test configuration as clubdata/tests/runner.py
    if not django_settings.configured:
        django_settings.configure(ServerSettings(yaml.safe_load(yaml_config)))
