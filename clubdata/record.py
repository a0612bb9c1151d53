"""
The club data record: phone, email and address of the club, kept as one option.

Values are stored as sanitized plain text (SanitizedText) and escaped each time they are rendered (to_html), so the
same stored value is safe in every output it ends up in.
"""
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from django.utils.html import format_html, linebreaks
from django.utils.safestring import SafeString, mark_safe
from django.utils.translation import gettext_lazy as _

from clubdata.sanitizers import SanitizedText, sanitize_email, sanitize_text_field, sanitize_textarea_field, to_html

logger = logging.getLogger('clubdata')

# key order of the stored mapping
STORED_FIELDS = ('phone', 'address', 'email')

TEXT = 'text'
TEXTAREA = 'textarea'

# order of the admin form
FORM_FIELDS = (
    ('phone', _('Telefonnummer'), TEXT),
    ('email', _('E-Mail'), TEXT),
    ('address', _('Adresse'), TEXTAREA),
)

PHONE_LABEL = _('Tel.:')

NOT_DIALABLE = re.compile(r'[^0-9+]')


@dataclass(frozen=True)
class ClubSettings:
    phone: SanitizedText = SanitizedText('')
    email: SanitizedText = SanitizedText('')
    address: SanitizedText = SanitizedText('')

    @classmethod
    def from_mapping(cls, data):
        '''builds a record from stored values, which went through sanitize() when they were saved'''
        data = data or {}
        return cls(**{name: SanitizedText(data.get(name) or '') for name in STORED_FIELDS})

    def as_dict(self):
        return {name: str(getattr(self, name)) for name in STORED_FIELDS}


@dataclass(frozen=True)
class ClubDataSubmission:
    '''
    Raw, untrusted values of a settings form submission. A field left to None was not submitted: since a submission
    replaces the whole record, it clears the stored value.
    '''
    phone: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_mapping(cls, data):
        if not isinstance(data, Mapping):
            if data is not None:
                logger.warning(f'Ignoring club data submission of type {type(data).__name__}')
            data = {}

        def raw(name):
            value = data.get(name)
            return None if value is None else str(value)

        return cls(**{name: raw(name) for name in STORED_FIELDS})


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    label: str
    kind: str
    value: SafeString

    @property
    def html_id(self):
        return f'vdm_{self.name}'


def sanitize(raw) -> ClubSettings:
    '''
    Sanitizes a submission (a ClubDataSubmission or any mapping) into a complete record. Missing fields become empty
    strings. Nothing is validated or rejected, and nothing is stored: persisting is the option store's job.
    '''
    if not isinstance(raw, ClubDataSubmission):
        raw = ClubDataSubmission.from_mapping(raw)

    return ClubSettings(
        phone=sanitize_text_field(raw.phone or ''),
        address=sanitize_textarea_field(raw.address or ''),
        email=sanitize_textarea_field(raw.email or ''),
    )


def sanitize_options(raw):
    '''sanitizer handed to the option store, returns the mapping to store'''
    return sanitize(raw).as_dict()


def load(config) -> ClubSettings:
    logger.debug(f'Loading club data from option {config.option_name}')
    return ClubSettings.from_mapping(config.store.get(config.option_name))


def save(config, raw) -> ClubSettings:
    '''replaces the stored record with the sanitized submission'''
    return ClubSettings.from_mapping(config.store.update(config.option_name, raw, sanitizer=sanitize_options))


def get_clubdata(config, field=''):
    '''
    Returns the escaped value of a single stored field, or every stored field escaped when no field (or a field which
    is not stored) is asked for. Without a stored record this is an empty dict.
    '''
    options = config.store.get(config.option_name)

    if field and options and field in options:
        return to_html(options[field])

    return {name: to_html(value) for name, value in options.items()} if options else {}


def editable_fields(current):
    '''descriptors of the admin form inputs, values escaped for use in attributes and textareas'''
    return [FieldDescriptor(name, label, kind, to_html(getattr(current, name))) for name, label, kind in FORM_FIELDS]


def paragraphs(value) -> SafeString:
    '''escapes value and wraps blank-line separated blocks in <p>, single newlines becoming <br>'''
    return mark_safe(linebreaks(to_html(value)))


def dialable(phone):
    return NOT_DIALABLE.sub('', phone or '')


def render_public_fragment(current) -> SafeString:
    blocks = []

    if current.address:
        blocks.append(format_html('<div class="address">{}</div>', paragraphs(current.address)))

    # the email is displayed as text, it is not linked
    if current.email:
        blocks.append(format_html('<div class="email">{}</div>', paragraphs(current.email)))

    if current.phone:
        blocks.append(format_html('<p class="phone"><strong>{}</strong> <a href="tel:{}">{}</a></p>',
                                  PHONE_LABEL, dialable(current.phone), to_html(current.phone)))

    return format_html('<div class="clubdata">{}</div>', mark_safe(''.join(blocks)))


def tel_link(phone):
    digits = dialable(phone)
    return f'tel:{digits}' if digits else ''


def mail_link(email):
    return f'mailto:{sanitize_email(email)}' if email else ''
