import logging
from collections import OrderedDict
from importlib import import_module

import yaml
from django.conf import settings as django_settings
from django.core.exceptions import ImproperlyConfigured

from . import default_settings

logger = logging.getLogger(__name__)


def configure(filename='settings.yml'):
    """Helper function to configure django from ServerSettings."""

    yaml_config = None
    try:
        with open(filename, 'r') as f:
            yaml_config = yaml.safe_load(f)
    except FileNotFoundError:
        logger.info('Starting project without configuration file')

    # ref: https://docs.djangoproject.com/en/stable/topics/settings/#custom-default-settings
    django_settings.configure(ServerSettings(yaml_config))


class ServerSettings(object):

    """Class managing the club data server configuration."""

    def __init__(self, config):

        """Build a Django Setting object from a dict."""

        if django_settings.configured:
            raise ImproperlyConfigured('Settings have been configured already')

        self._config = config or {}
        self._settings = self.build_settings()

    def build_settings(self, extend=('INSTALLED_APPS', 'MIDDLEWARE')):
        """
        Look for the parameters in multiple places.
        Each step overrides the value of the previous key found, except for the "extend" lists: values found for
        those are appended.

        Resolution order of the configuration:
          1. Core default settings
          2. Code from a local settings.py file
          3. YAML config file
        """

        # helper loop
        def update_with(config):
            for k, v in config.items():

                if k in extend:
                    settings[k].extend(v)

                elif not k.startswith('_'):
                    settings.update({k: v})

        # start from default core settings, lists copied so the module ones are never extended
        settings = {k: v for k, v in default_settings.__dict__.items() if k.isupper()}
        for k in extend:
            settings[k] = list(settings.get(k, []))
        logger.debug('Building settings from core defaults')

        # look in settings.py file in directory
        try:
            mod = import_module('settings')
            update_with({k: v for k, v in mod.__dict__.items() if k.isupper()})
            logger.debug('Updating settings from local settings.py file')
        except ModuleNotFoundError:
            pass

        # look in YAML config file 'server' section
        conf = self._config.get('server') or {}
        update_with(conf)
        logger.debug('Updating settings with project config')

        return settings

    @property
    def INSTALLED_APPS(self):

        """Return the installed apps, without the duplicates the layering may introduce."""

        return list(OrderedDict.fromkeys(self._settings['INSTALLED_APPS']))

    @property
    def MIDDLEWARE(self):
        return list(OrderedDict.fromkeys(self._settings['MIDDLEWARE']))

    def __getattr__(self, param):
        """Return the requested parameter from cached settings."""
        if param.startswith('_') or param.islower():
            # raise the django exception for inexistent parameter
            raise AttributeError(f'"{param}" is not compliant to django settings format')
        try:
            return self._settings[param]
        except KeyError:
            # raise the django exception for inexistent parameter
            raise AttributeError(f'no "{param}" parameter found in settings')
