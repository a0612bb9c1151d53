from django.contrib import admin, messages
from django.core.exceptions import PermissionDenied
from django.http import HttpResponseRedirect
from django.template.response import TemplateResponse
from django.urls import path
from django.utils.translation import gettext_lazy as _
from guardian.admin import GuardedModelAdmin

from clubdata.config import ClubDataConfig
from clubdata.models import ClubData, Option
from clubdata.record import editable_fields, load, save


@admin.register(Option)
class OptionAdmin(GuardedModelAdmin):
    '''
    Raw access to the named options. Inherits from GuardedModelAdmin to provide Django-Guardian object-level
    permissions
    '''
    list_display = ['name', 'updated_at']
    search_fields = ['name']
    readonly_fields = ['updated_at']


@admin.register(ClubData)
class ClubDataAdmin(admin.ModelAdmin):
    '''
    The "Vereinsdaten" admin page. There is a single club data record, so the changelist is replaced by the settings
    form of that record and no other admin view is exposed.
    '''
    settings_template = 'admin/clubdata/clubdata/settings_form.html'

    class Media:
        css = {'all': ('clubdata/admin-style.css',)}

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def get_urls(self):
        info = self.model._meta.app_label, self.model._meta.model_name
        return [
            path('', self.admin_site.admin_view(self.changelist_view), name='%s_%s_changelist' % info),
        ]

    def changelist_view(self, request, extra_context=None):
        if not self.has_view_or_change_permission(request):
            raise PermissionDenied

        config = ClubDataConfig.from_settings()

        if request.method == 'POST':
            if not self.has_change_permission(request):
                raise PermissionDenied

            save(config, request.POST)
            self.message_user(request, _('Vereinsdaten gespeichert.'), messages.SUCCESS)
            return HttpResponseRedirect(request.get_full_path())

        context = {
            **self.admin_site.each_context(request),
            'title': self.model._meta.verbose_name,
            'opts': self.model._meta,
            'fields': editable_fields(load(config)),
            'media': self.media,
            'has_change_permission': self.has_change_permission(request),
            'submit_label': _('Vereinsdaten speichern'),
            **(extra_context or {}),
        }

        request.current_app = self.admin_site.name
        return TemplateResponse(request, self.settings_template, context)
