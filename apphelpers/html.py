"""Checks HTML content against a whitelist of allowed tags.

Content is parsed with lxml in recovery mode, so malformed markup never
raises, and the distinct element names of the resulting tree are compared
with the whitelist. Tag names are compared as the parser emits them, which
is lowercase for HTML elements, so whitelists must be lowercase too.

Nothing is sanitized here, callers only get a pass/fail answer.
"""
import re
import logging

from lxml import etree
from lxml.html import HTMLParser

from .text import remove_escape_backslash
from .config import get_default
from .errors import Errors, Location, HtmlValidationError


log = logging.getLogger(__name__)

# elements which the parser creates around content on its own
IMPLIED_TAGS = ('html', 'head', 'body', 'p')

_START_TAG_RE = re.compile(r'<\s*({})\b'.format('|'.join(IMPLIED_TAGS)),
                           re.I)


def _parser():
    # new parser for every call, so its error log does not leak
    return HTMLParser(recover=True, encoding='utf-8', no_network=True,
                      remove_comments=True, remove_pis=True)


def _copy_diagnostics(error_log, errors):
    for entry in error_log:
        location = Location(entry.line, entry.column)
        if entry.level <= etree.ErrorLevels.WARNING:
            errors.warn(location, entry.message)
        else:
            errors.error(location, entry.message)


def collect_tags(html, errors=None):
    """Returns the set of distinct tag names found in ``html``.

    Recoverable parser diagnostics are copied into ``errors`` when it is
    given. Elements from ``IMPLIED_TAGS`` are reported only when ``html``
    contains their start tag, so plain text or a fragment without
    ``<html>``/``<body>`` does not report the wrappers added by the parser.
    """
    errors = Errors() if errors is None else errors
    content = remove_escape_backslash(html)
    if not content.strip():
        return set()

    parser = _parser()
    try:
        root = etree.fromstring(content.encode('utf-8'), parser)
    finally:
        _copy_diagnostics(parser.error_log, errors)
    if root is None:
        return set()

    tags = {el.tag for el in root.iter(etree.Element)}
    literal = {m.lower() for m in _START_TAG_RE.findall(content)}
    tags.difference_update(set(IMPLIED_TAGS) - literal)
    return tags


def find_disallowed_tags(html, whitelist=None):
    """Returns tags from ``html`` which are absent in the ``whitelist``.

    When ``whitelist`` is ``None``, the configured default is used.
    """
    if whitelist is None:
        whitelist = get_default().allowed_tags
    try:
        tags = collect_tags(html)
    except Exception as e:
        raise HtmlValidationError('Failed to parse HTML: {}'.format(e))
    return {tag for tag in tags if tag not in whitelist}


def validate_html(html, whitelist=None):
    """Returns ``True`` when every tag in ``html`` is whitelisted.

    Never raises: any failure while parsing results in ``False``.
    """
    try:
        if whitelist is None:
            whitelist = get_default().allowed_tags
        for tag in collect_tags(html):
            if tag not in whitelist:
                return False
        return True
    except Exception:
        log.debug('Failed to validate HTML', exc_info=True)
        return False
