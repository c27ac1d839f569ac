import re
import json
import unicodedata


_UPPER_RE = re.compile(r'(?<!^)[A-Z]')

_BRACES_RE = re.compile(r'[{}]')

_TAGS_RE = re.compile(r'<!--.*?-->|<[^>]*>', re.S)

# letters, digits, whitespace and a few punctuation marks survive
_SPECIAL_CHARS_RE = re.compile(r'[^\w\s\-():.!?,;]|_')

_FILE_NAME_RE = re.compile(r'^[/\w\-. ]+$', re.ASCII)

GERMAN_ACCENTS = {
    'ä': 'ae',
    'ö': 'oe',
    'ü': 'ue',
    'Ä': 'Ae',
    'Ö': 'Oe',
    'Ü': 'Ue',
    'ß': 'ss',
}


def is_json(value):
    if not isinstance(value, (str, bytes, bytearray)):
        return False
    try:
        json.loads(value)
    except (ValueError, RecursionError):
        return False
    return True


def camel_case_to_snake_case(value):
    return _UPPER_RE.sub(r'_\g<0>', value).lower()


def remove_escape_backslash(value):
    return value.replace('\\', '')


def remove_braces(value):
    """Removes curly braces from a string or from every string of a list.

    Anything else is converted to an empty string.
    """
    if isinstance(value, (list, tuple)):
        return [_BRACES_RE.sub('', item) for item in value]
    if isinstance(value, str):
        return _BRACES_RE.sub('', value)
    return ''


def remove_special_chars(value):
    value = _TAGS_RE.sub('', value)
    value = value.replace('\n', ' ')
    value = value.replace(' ', '-')
    value = _SPECIAL_CHARS_RE.sub('', value)
    return value.replace('-', ' ')


def slice_string(value, length):
    if length < 1:
        raise ValueError('Slice length must be positive, {!r} given'
                         .format(length))
    return [value[i:i + length] for i in range(0, len(value), length)]


def is_valid_file_name(value):
    if not isinstance(value, str):
        return False
    return _FILE_NAME_RE.match(value) is not None


def _transliterate(char):
    if char in GERMAN_ACCENTS:
        return GERMAN_ACCENTS[char]
    if ord(char) < 128:
        return char
    decomposed = unicodedata.normalize('NFKD', char)
    stripped = ''.join(c for c in decomposed if not unicodedata.combining(c))
    if stripped and all(ord(c) < 128 for c in stripped):
        return stripped
    return '?'


def replace_accents_chars(value):
    """Transliterates text into ASCII.

    German umlauts are expanded (``ä`` becomes ``ae``), other accented
    letters lose their accent and characters without an ASCII equivalent
    are replaced by ``?``.
    """
    return ''.join(_transliterate(c) for c in value)
