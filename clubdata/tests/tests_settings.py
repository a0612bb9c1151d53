from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase

from clubdata.conf.serversettings import ServerSettings


class TestSettings(SimpleTestCase):

    def test_inexistent_returns_default(self):
        """Assert a inexistent key returns the provided default value."""
        assert getattr(settings, 'INEXISTENT', 'something') == 'something'

    def test_only_in_core_config(self):
        """Asserts values defined only in the package defaults."""
        assert settings.CLUBDATA_OPTION_NAME == 'vdm_clubdata'
        assert settings.LANGUAGE_CODE == 'de'

    def test_overrided_core_by_user_config(self):
        """Asserts values overrided from user configuration."""
        assert settings.ROOT_URLCONF == 'clubdata.tests.urls'
        assert settings.USE_TZ == False

    def test_installed_apps_resolution(self):
        """Asserts apps from the YAML file are added to the default installed apps, without duplicates."""
        assert 'clubdata' in settings.INSTALLED_APPS
        assert 'guardian' in settings.INSTALLED_APPS
        assert 'rest_framework' in settings.INSTALLED_APPS
        assert settings.INSTALLED_APPS.count('clubdata') == 1

    def test_reference_middleware(self):
        """Asserts middlewares from the YAML file are added to the default ones."""
        assert 'django.middleware.gzip.GZipMiddleware' in settings.MIDDLEWARE
        assert 'django.contrib.sessions.middleware.SessionMiddleware' in settings.MIDDLEWARE

    def test_configured_only_once(self):
        with self.assertRaises(ImproperlyConfigured):
            ServerSettings({})
