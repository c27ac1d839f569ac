import unittest
from contextlib import contextmanager, ExitStack
from unittest.mock import patch, Mock as _Mock

from apphelpers import config
from apphelpers.config import Config

Mock = _Mock


@contextmanager
def _nested(*managers):
    with ExitStack() as stack:
        for manager in managers:
            stack.enter_context(manager)
        yield


def default_config(allowed_tags):
    return patch.object(config, '_default', Config(allowed_tags))


class TestCase(unittest.TestCase):
    ctx = tuple()

    def run(self, result=None):
        with _nested(*self.ctx):
            return super(TestCase, self).run(result)
