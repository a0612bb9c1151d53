import re

from django.utils.html import escape, strip_tags
from django.utils.safestring import SafeString

CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
SCRIPT_STYLE = re.compile(r'<(script|style)[^>]*?>.*?</\1\s*>', re.IGNORECASE | re.DOTALL)
LINE_BREAKS_AND_BLANKS = re.compile(r'[\r\n\t ]+')
SPACES = re.compile(r' +')
PERCENT_OCTET = re.compile(r'%[a-f0-9]{2}', re.IGNORECASE)

EMAIL_LOCAL_INVALID = re.compile(r"[^a-zA-Z0-9!#$%&'*+/=?^_`{|}~.-]")
EMAIL_LABEL_INVALID = re.compile(r'[^a-z0-9-]+', re.IGNORECASE)
PERIOD_RUNS = re.compile(r'\.{2,}')


class SanitizedText(str):
    '''
    Plain text which went through one of the sanitizers of this module. It is what gets stored, and it is NOT safe
    to embed in markup: every render path converts it with to_html() first.
    '''


def to_html(value) -> SafeString:
    '''Converts stored plain text into HTML-safe text. This is the only place stored values get escaped.'''
    return escape('' if value is None else value)


def _strip_once(value, keep_newlines):
    value = CONTROL_CHARS.sub('', value)

    if '<' in value:
        value = SCRIPT_STYLE.sub('', value)
        value = strip_tags(value)

    if keep_newlines:
        value = value.replace('\r\n', '\n').replace('\r', '\n')
    else:
        value = LINE_BREAKS_AND_BLANKS.sub(' ', value)

    value = value.strip()

    value, found = PERCENT_OCTET.subn('', value)
    if found:
        value = SPACES.sub(' ', value).strip()

    return value


def _sanitize(value, keep_newlines):
    value = '' if value is None else str(value)

    # a pass can expose new tags or octets (e.g. "<%41b>"), so run until nothing changes
    previous = None
    while value != previous:
        previous = value
        value = _strip_once(value, keep_newlines)

    return SanitizedText(value)


def sanitize_text_field(value) -> SanitizedText:
    '''
    Sanitizes single-line user input: control characters, tags, script and style blocks and percent-encoded octets
    are removed, whitespace runs collapse into one space and the result is trimmed. The format is never validated.
    '''
    return _sanitize(value, keep_newlines=False)


def sanitize_textarea_field(value) -> SanitizedText:
    '''Like sanitize_text_field(), but line breaks are kept (and normalized to "\\n").'''
    return _sanitize(value, keep_newlines=True)


def sanitize_email(value) -> SanitizedText:
    '''
    Strips an email address down to the characters allowed in it. Returns an empty string when what is left cannot
    be an address: too short, no "@" after the first character, an empty local part or less than two domain labels.
    '''
    value = '' if value is None else str(value)

    if len(value) < 6 or value.find('@', 1) == -1:
        return SanitizedText('')

    local, domain = value.split('@', 1)

    local = EMAIL_LOCAL_INVALID.sub('', local)
    if not local:
        return SanitizedText('')

    domain = PERIOD_RUNS.sub('', domain)
    domain = domain.strip(' \t\n\r\0\x0b.')
    if not domain:
        return SanitizedText('')

    labels = domain.split('.')
    if len(labels) < 2:
        return SanitizedText('')

    labels = [EMAIL_LABEL_INVALID.sub('', label.strip(' \t\n\r\0\x0b-')) for label in labels]
    labels = [label for label in labels if label]
    if len(labels) < 2:
        return SanitizedText('')

    return SanitizedText('{}@{}'.format(local, '.'.join(labels)))
