from django.contrib.auth import get_user_model
from django.contrib.auth.models import Permission
from django.test import TestCase

from clubdata.config import ClubDataConfig
from clubdata.models import Option
from clubdata.record import ClubSettings, load, save

SETTINGS_URL = '/admin/clubdata/clubdata/'


class TestClubDataAdmin(TestCase):

    def setUp(self):
        self.config = ClubDataConfig.from_settings()
        self.admin = get_user_model().objects.create_superuser('admin', 'admin@example.org', 'admin')

    def create_staff(self, *codenames):
        user = get_user_model().objects.create_user('staff', 'staff@example.org', 'staff', is_staff=True)
        for codename in codenames:
            user.user_permissions.add(Permission.objects.get(codename=codename))
        return user

    def test_form_page(self):
        save(self.config, {'phone': '+49 "30"', 'address': 'Meier & Sohn\nHauptstr. 1', 'email': 'info@club.de'})
        self.client.force_login(self.admin)

        response = self.client.get(SETTINGS_URL)

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'id="vdm_phone"')
        self.assertContains(response, 'value="+49 &quot;30&quot;"')
        self.assertContains(response, 'Meier &amp; Sohn\nHauptstr. 1</textarea>')
        self.assertContains(response, 'value="info@club.de"')
        self.assertContains(response, 'Vereinsdaten speichern')

    def test_form_page_without_record(self):
        self.client.force_login(self.admin)
        response = self.client.get(SETTINGS_URL)
        self.assertContains(response, 'name="phone" value=""')

    def test_stylesheet_only_on_the_settings_page(self):
        self.client.force_login(self.admin)
        self.assertContains(self.client.get(SETTINGS_URL), 'clubdata/admin-style.css')
        self.assertNotContains(self.client.get('/admin/'), 'clubdata/admin-style.css')

    def test_menu_entry(self):
        self.client.force_login(self.admin)
        response = self.client.get('/admin/')
        self.assertContains(response, SETTINGS_URL)
        self.assertNotContains(response, SETTINGS_URL + 'add/')

    def test_submit(self):
        self.client.force_login(self.admin)

        response = self.client.post(SETTINGS_URL, {'phone': ' +49 30\n123 ', 'address': '<b>Hauptstr.</b> 1',
                                                   '_save': 'Vereinsdaten speichern'})

        self.assertRedirects(response, SETTINGS_URL)
        self.assertEqual(load(self.config), ClubSettings(phone='+49 30 123', address='Hauptstr. 1', email=''))
        self.assertEqual(Option.objects.get(name='vdm_clubdata').value,
                         {'phone': '+49 30 123', 'address': 'Hauptstr. 1', 'email': ''})

    def test_submit_message(self):
        self.client.force_login(self.admin)
        response = self.client.post(SETTINGS_URL, {'phone': '123'}, follow=True)
        self.assertContains(response, 'Vereinsdaten gespeichert.')

    def test_anonymous_is_sent_to_login(self):
        response = self.client.get(SETTINGS_URL)
        self.assertEqual(response.status_code, 302)
        self.assertIn('/admin/login/', response['Location'])

    def test_staff_without_permission(self):
        self.client.force_login(self.create_staff())
        self.assertEqual(self.client.get(SETTINGS_URL).status_code, 403)
        self.assertEqual(self.client.post(SETTINGS_URL, {'phone': '123'}).status_code, 403)
        self.assertEqual(load(self.config), ClubSettings())

    def test_staff_with_view_permission(self):
        save(self.config, {'phone': '123'})
        self.client.force_login(self.create_staff('view_clubdata'))

        response = self.client.get(SETTINGS_URL)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'readonly')
        self.assertNotContains(response, 'Vereinsdaten speichern')

        self.assertEqual(self.client.post(SETTINGS_URL, {'phone': '456'}).status_code, 403)
        self.assertEqual(load(self.config).phone, '123')

    def test_staff_with_change_permission(self):
        self.client.force_login(self.create_staff('change_clubdata'))
        response = self.client.post(SETTINGS_URL, {'email': 'info@club.de'})
        self.assertEqual(response.status_code, 302)
        self.assertEqual(load(self.config).email, 'info@club.de')


class TestOptionAdmin(TestCase):

    def setUp(self):
        self.admin = get_user_model().objects.create_superuser('admin', 'admin@example.org', 'admin')
        self.client.force_login(self.admin)

    def test_changelist(self):
        Option.objects.create(name='vdm_clubdata', value={'phone': '123'})
        response = self.client.get('/admin/clubdata/option/')
        self.assertContains(response, 'vdm_clubdata')

    def test_object_permissions_page(self):
        option = Option.objects.create(name='vdm_clubdata', value={})
        response = self.client.get(f'/admin/clubdata/option/{option.pk}/permissions/')
        self.assertEqual(response.status_code, 200)
