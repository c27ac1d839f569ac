from collections import namedtuple


Location = namedtuple('Location', ['line', 'column'])

Error = namedtuple('Error', ['location', 'message', 'severity'])

WARNING = 1
ERROR = 2


class UserError(Exception):
    pass


class HtmlValidationError(UserError):
    pass


class Errors(object):

    def __init__(self):
        self.list = []

    def __len__(self):
        return len(self.list)

    def warn(self, location, message):
        self.list.append(Error(location, message, WARNING))

    def error(self, location, message):
        self.list.append(Error(location, message, ERROR))

    def has_errors(self):
        return any(e.severity == ERROR for e in self.list)
