from django import template

from clubdata import record
from clubdata.config import ClubDataConfig

register = template.Library()


@register.simple_tag
def clubdata():
    '''{% clubdata %} renders the address, email and phone blocks of the stored club data'''
    return record.render_public_fragment(record.load(ClubDataConfig.from_settings()))


@register.simple_tag
def clubdata_field(field):
    value = record.get_clubdata(ClubDataConfig.from_settings(), field)
    return value if isinstance(value, str) else ''


@register.filter
def tel_link(value):
    return record.tel_link(value)


@register.filter
def mail_link(value):
    return record.mail_link(value)
