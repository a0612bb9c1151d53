from django.db import models
from django.utils.translation import gettext_lazy as _


class Option(models.Model):
    '''A named settings record, stored as a JSON mapping'''
    name = models.CharField(max_length=191, unique=True)
    value = models.JSONField(default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = _('Option')
        verbose_name_plural = _('Optionen')

    def __str__(self):
        return self.name


class ClubData(Option):
    '''
    Admin entry point for the club data record. It has no storage of its own: the record is the Option named by
    the CLUBDATA_OPTION_NAME setting, see ClubDataAdmin.
    '''

    class Meta:
        proxy = True
        verbose_name = _('Vereinsdaten')
        verbose_name_plural = _('Vereinsdaten')
