from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ClubdataConfig(AppConfig):
    name = 'clubdata'
    verbose_name = _('Vereinsdaten')
    default_auto_field = 'django.db.models.BigAutoField'
