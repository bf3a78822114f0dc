"""
    formsmith.utils.validation
    ~~~~~~~~~~~~~~~~~~~~~~~~~~

    A small rule engine.  Rules are strings of comma separated clauses,
    every clause is the name of a checker with an optional parameter:

    >>> build_validation_rules(True, build_min_rule(3), build_max_rule(10))
    'required,min=3,max=10'
    >>> validate_value('ab', 'required,min=3,max=10')
    [<Error 'min': 'Ensure this value has at least 3 characters'>]
    >>> validate_value('abc', 'required,min=3,max=10')
    []

    The clauses are checked in order, the first one that fails ends the
    validation.  Choices are single quoted and may contain commas and
    spaces:

    >>> build_choices_rule('red', 'dark blue', 'a,b')
    "oneof='red' 'dark blue' 'a,b'"
    >>> validate_value('a,b', build_choices_rule('red', 'dark blue', 'a,b'))
    []

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import re
import logging
from threading import Lock
from urllib.parse import urlparse

from formsmith import settings
from formsmith.errors import Error, MESSAGES, BOOLEAN_ERROR_CODE, \
     EMAIL_ERROR_CODE, CHOICE_ERROR_CODE, MIN_LENGTH_ERROR_CODE, \
     MAX_LENGTH_ERROR_CODE, REQUIRED_ERROR_CODE, URL_ERROR_CODE
from formsmith.i18n import translate, load_translations


log = logging.getLogger('formsmith.validation')

_validator = None
_validator_lock = Lock()

_choice_re = re.compile(r"'((?:[^'\\]|\\.)*)'|(\S+)")
_choice_escape_re = re.compile(r"\\(.)")
_email_re = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$")

TRUE_VALUES = frozenset(['1', 't', 'T', 'true', 'TRUE', 'True',
                         'on', 'ON', 'On'])
FALSE_VALUES = frozenset(['0', 'f', 'F', 'false', 'FALSE', 'False',
                          'off', 'OFF', 'Off'])


def parse_bool(value):
    """Parses a boolean.  Raises a :exc:`ValueError` if the value is not
    one of the accepted spellings:

    >>> parse_bool('on'), parse_bool('False')
    (True, False)
    """
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError('invalid boolean value %r' % value)


class Violation(Exception):
    """A failed rule.  The message is looked up in the catalogs by the
    code, `param` is the parameter of the rule, for example the minimum
    length.
    """

    def __init__(self, code, param=''):
        Exception.__init__(self, code, param)
        self.code = code
        self.param = param

    def translate(self, locale):
        return get_validator().translate(self, locale)

    def __str__(self):
        return self.translate('en')

    def __eq__(self, other):
        if not isinstance(other, Violation):
            return NotImplemented
        return (self.code, self.param) == (other.code, other.param)

    def __ne__(self, other):
        rv = self.__eq__(other)
        if rv is NotImplemented:
            return rv
        return not rv

    def __hash__(self):
        return hash((self.code, self.param))


#: the error of required multi value fields without any value
REQUIRED_ERROR = Error(Violation(REQUIRED_ERROR_CODE))


def split_rules(rules):
    """Splits a rule string at the commas that are not inside a quoted
    choice:

    >>> split_rules("required,oneof='a,b' 'c'")
    ['required', "oneof='a,b' 'c'"]
    """
    rv = []
    buf = []
    quoted = False
    escaped = False
    for char in rules:
        if escaped:
            escaped = False
        elif char == '\\':
            escaped = True
        elif char == "'":
            quoted = not quoted
        elif char == ',' and not quoted:
            rv.append(''.join(buf))
            del buf[:]
            continue
        buf.append(char)
    rv.append(''.join(buf))
    return [x for x in rv if x]


def parse_choices(param):
    r"""Parses the choices of a ``oneof`` rule.  Quotes and backslashes
    inside quoted choices are escaped with a backslash:

    >>> parse_choices(r"'red' 'it\'s' blue")
    ['red', "it's", 'blue']
    """
    return [_choice_escape_re.sub(r'\1', quoted) if quoted else bare
            for quoted, bare in _choice_re.findall(param)]


def check_required(value, param):
    return value != ''


def check_min(value, param):
    return len(value) >= int(param)


def check_max(value, param):
    return len(value) <= int(param)


def check_email(value, param):
    return _email_re.match(value) is not None


def check_url(value, param):
    try:
        url = urlparse(value)
    except ValueError:
        return False
    return bool(url.scheme and url.netloc)


def check_boolean(value, param):
    try:
        parse_bool(value)
    except ValueError:
        return False
    return True


def check_oneof(value, param):
    return value in parse_choices(param)


class Validator(object):
    """The registry of rule checkers.  Use :func:`get_validator` to get
    the shared instance.
    """

    def __init__(self):
        self.checkers = {}

    def register(self, code, checker):
        """Registers a checker for a rule.  `checker` is called with the
        value and the rule parameter and returns `True` if the value
        passes.
        """
        self.checkers[code] = checker

    def validate(self, value, rules):
        """Validates the value and returns the first :class:`Violation`
        or `None`.
        """
        for rule in split_rules(rules):
            code, _, param = rule.partition('=')
            checker = self.checkers.get(code)
            if checker is None:
                raise ValueError('unknown validation rule %r' % code)
            if not checker(value, param):
                return Violation(code, param)

    def translate(self, violation, locale):
        message = MESSAGES.get(violation.code)
        if message is None:
            return violation.code
        return translate(message, locale, violation.param)


def _create_validator():
    log.debug('creating the validator')
    rv = Validator()
    rv.register(REQUIRED_ERROR_CODE, check_required)
    rv.register(MIN_LENGTH_ERROR_CODE, check_min)
    rv.register(MAX_LENGTH_ERROR_CODE, check_max)
    rv.register(EMAIL_ERROR_CODE, check_email)
    rv.register(URL_ERROR_CODE, check_url)
    rv.register(BOOLEAN_ERROR_CODE, check_boolean)
    rv.register(CHOICE_ERROR_CODE, check_oneof)
    for language in settings.LANGUAGES:
        load_translations(language)
    return rv


def get_validator():
    """Returns the validator.  It's created on first use."""
    global _validator
    if _validator is None:
        with _validator_lock:
            if _validator is None:
                _validator = _create_validator()
    return _validator


def validate_value(value, rules):
    """Validates a value against the rules.  Returns a list with the
    error of the first failing rule or an empty list.
    """
    violation = get_validator().validate(value, rules)
    if violation is None:
        return []
    return [Error(violation)]


def build_validation_rules(required, *rules):
    parts = []
    if required:
        parts.append(REQUIRED_ERROR_CODE)
    parts.extend(rules)
    return ','.join(parts)


def _quote_choice(choice):
    return "'%s'" % choice.replace('\\', '\\\\').replace("'", "\\'")


def build_choices_rule(*choices):
    return CHOICE_ERROR_CODE + '=' + ' '.join(map(_quote_choice, choices))


def build_min_rule(min_length):
    return '%s=%d' % (MIN_LENGTH_ERROR_CODE, min_length)


def build_max_rule(max_length):
    return '%s=%d' % (MAX_LENGTH_ERROR_CODE, max_length)
