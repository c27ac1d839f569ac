import os
import errno
import codecs
import logging

import yaml

from .errors import UserError


log = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'APPHELPERS_CONFIG'

DEFAULT_ALLOWED_TAGS = frozenset([
    'div', 'b', 'strong', 'i', 'em', 'u', 'a', 'ul', 'ol', 'li', 'p', 'br',
    'span', 'img',
])


class ConfigNotFound(LookupError):
    pass


class ConfigError(UserError):
    pass


class Config(object):

    def __init__(self, allowed_tags=DEFAULT_ALLOWED_TAGS):
        self.allowed_tags = frozenset(allowed_tags)

    def __repr__(self):
        return '<Config allowed_tags={!r}>'.format(sorted(self.allowed_tags))


def parse_allowed_tags(value):
    """Accepts a list of tag names or an HTMLPurifier-style string.

    ``"p,b,a[href|title]"`` means tags ``p``, ``b`` and ``a``, attribute
    specs are ignored.
    """
    if isinstance(value, str):
        value = value.split(',')
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ConfigError('Allowed tags should be a list or a string, '
                          '{!r} given'.format(value))
    tags = set()
    for item in value:
        if not isinstance(item, str):
            raise ConfigError('Invalid tag name: {!r}'.format(item))
        name = item.partition('[')[0].strip()
        if name:
            tags.add(name)
    return frozenset(tags)


def _from_mapping(mapping):
    if mapping is None:
        return Config()
    if not isinstance(mapping, dict):
        raise ConfigError('Configuration should be a mapping')
    html = mapping.get('html') or {}
    if not isinstance(html, dict):
        raise ConfigError('"html" section should be a mapping')
    if 'allowed_tags' not in html:
        return Config()
    return Config(parse_allowed_tags(html['allowed_tags']))


class LoaderBase(object):

    def load(self):
        raise NotImplementedError


class DictLoader(LoaderBase):

    def __init__(self, mapping):
        self._mapping = mapping

    def load(self):
        return _from_mapping(self._mapping)


class FileSystemLoader(LoaderBase):
    _encoding = 'utf-8'

    def __init__(self, path):
        self._path = path

    def load(self):
        try:
            with codecs.open(self._path, encoding=self._encoding) as f:
                content = f.read()
        except IOError as e:
            if e.errno not in (errno.ENOENT, errno.EISDIR, errno.EINVAL):
                raise
            raise ConfigNotFound(self._path)
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError('Failed to parse {}: {}'.format(self._path, e))
        log.debug('Loaded configuration from %s', self._path)
        return _from_mapping(data)


_default = None


def get_default():
    global _default
    if _default is None:
        path = os.environ.get(CONFIG_ENV_VAR)
        if path:
            _default = FileSystemLoader(path).load()
        else:
            _default = Config()
    return _default


def set_default(config):
    global _default
    _default = config
