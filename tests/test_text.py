import pytest

from apphelpers.text import is_json, camel_case_to_snake_case, remove_braces
from apphelpers.text import remove_escape_backslash, remove_special_chars
from apphelpers.text import slice_string, is_valid_file_name
from apphelpers.text import replace_accents_chars


def test_is_json():
    assert is_json('{"a": [1, 2, null]}')
    assert is_json('"string"')
    assert is_json('1')
    assert not is_json('')
    assert not is_json('{a: 1}')
    assert not is_json(None)
    assert not is_json('[' * 100000)


def test_camel_case_to_snake_case():
    assert camel_case_to_snake_case('camelCaseString') == 'camel_case_string'
    assert camel_case_to_snake_case('CamelCase') == 'camel_case'
    assert camel_case_to_snake_case('lower') == 'lower'


def test_remove_escape_backslash():
    assert remove_escape_backslash('a\\b\\\\c') == 'abc'
    assert remove_escape_backslash('<p\\>') == '<p>'


def test_remove_braces():
    assert remove_braces('{name}') == 'name'
    assert remove_braces(['{a}', 'b}', 'c']) == ['a', 'b', 'c']
    assert remove_braces(42) == ''


def test_remove_special_chars():
    assert remove_special_chars('<b>Hello</b> world! #1 @home_x') == \
        'Hello world! 1 homex'
    assert remove_special_chars('Über-Straße (2): ok?') == \
        'Über Straße (2): ok?'
    assert remove_special_chars('line\nbreak') == 'line break'
    assert remove_special_chars('a  b\tc') == 'a  b\tc'
    assert remove_special_chars('fish &amp; chips') == 'fish amp; chips'
    assert remove_special_chars('<!-- <b> -->x<br/>y') == 'xy'


def test_slice_string():
    assert slice_string('abcdefg', 3) == ['abc', 'def', 'g']
    assert slice_string('abc', 3) == ['abc']
    assert slice_string('', 3) == []
    with pytest.raises(ValueError):
        slice_string('abc', 0)


def test_is_valid_file_name():
    assert is_valid_file_name('dir/file-1.txt')
    assert is_valid_file_name('file name.pdf')
    assert not is_valid_file_name('a;b.txt')
    assert not is_valid_file_name('')
    assert not is_valid_file_name('ä.txt')
    assert not is_valid_file_name(None)


def test_replace_accents_chars():
    assert replace_accents_chars('Müller Straße café') == \
        'Mueller Strasse cafe'
    assert replace_accents_chars('ÄÖÜ') == 'AeOeUe'
    assert replace_accents_chars('naïve') == 'naive'
    assert replace_accents_chars('日本') == '??'
