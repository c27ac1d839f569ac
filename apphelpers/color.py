from random import randint

from funcparserlib.lexer import make_tokenizer, LexerError
from funcparserlib.parser import some, skip, finished, NoParseError

from .errors import UserError


CHANNELS = ('r', 'g', 'b')

MAX_CHANNEL = 255


class InvalidColor(UserError):
    pass


class Rgba(object):
    __slots__ = ('red', 'green', 'blue', 'alpha')

    def __init__(self, red, green, blue, alpha=1.0):
        for name, value in (('red', red), ('green', green), ('blue', blue)):
            if isinstance(value, bool) or not isinstance(value, int) \
                    or not 0 <= value <= MAX_CHANNEL:
                raise InvalidColor('Invalid {} channel value: {!r}'
                                   .format(name, value))
        if isinstance(alpha, bool) or not isinstance(alpha, (int, float)) \
                or not 0 <= alpha <= 1:
            raise InvalidColor('Invalid alpha value: {!r}'.format(alpha))
        self.red = red
        self.green = green
        self.blue = blue
        self.alpha = float(alpha)

    @classmethod
    def from_string(cls, value):
        try:
            return parser().parse(list(tokenize(value)))
        except (LexerError, NoParseError) as e:
            raise InvalidColor('Invalid color {!r}: {}'.format(value, e))

    def to_hex(self):
        return '#{:02x}{:02x}{:02x}'.format(self.red, self.green, self.blue)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return (self.red, self.green, self.blue, self.alpha) == \
            (other.red, other.green, other.blue, other.alpha)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash((self.red, self.green, self.blue, self.alpha))

    def __str__(self):
        return 'rgba({},{},{},{:g})'.format(self.red, self.green, self.blue,
                                            self.alpha)

    def __repr__(self):
        return '<Rgba {}>'.format(self)


_tokenizer = make_tokenizer([
    ('space', (r'\s+',)),
    ('name', (r'[A-Za-z]+',)),
    ('number', (r'\d+(?:\.\d*)?|\.\d+',)),
    ('op', (r'[(),]',)),
])


def tokenize(value):
    return (t for t in _tokenizer(value) if t.type != 'space')


def _tok(type_, value=None):
    def pred(t):
        if t.type != type_:
            return False
        return value is None or t.value.lower() == value
    return some(pred).named('(a "{}")'.format(value or type_))


def _number(token):
    value = token.value
    if value.isdigit():
        return int(value)
    return float(value)


def parser():

    def apl(f):
        return lambda x: f(*x)

    def op(value):
        return skip(_tok('op', value))

    number = _tok('number') >> _number

    rgba = (
        (skip(_tok('name', 'rgba')) + op('(') +
         number + op(',') + number + op(',') + number + op(',') + number +
         op(')')) >>
        apl(Rgba)
    )

    rgb = (
        (skip(_tok('name', 'rgb')) + op('(') +
         number + op(',') + number + op(',') + number +
         op(')')) >>
        apl(Rgba)
    )

    return (rgba | rgb) + skip(finished)


def random_rgba(alpha=1.0, channel=None):
    """Generates a random color.

    When ``channel`` is one of ``'r'``, ``'g'`` or ``'b'``, only this
    channel gets a random value and the others are zero.
    """
    if channel in CHANNELS:
        values = [0, 0, 0]
        values[CHANNELS.index(channel)] = randint(0, MAX_CHANNEL)
    else:
        values = [randint(0, MAX_CHANNEL) for _ in CHANNELS]
    return Rgba(values[0], values[1], values[2], alpha)
