"""
    formsmith.errors
    ~~~~~~~~~~~~~~~~

    The error model.  Every validation error a field produces is an
    :class:`Error`: a thin wrapper around a cause that carries an optional
    error code and knows how to translate itself.

    Codes, not message texts, identify errors.  That is what
    :meth:`formsmith.fields.Field.customize_error` matches on to replace the
    built-in messages.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from formsmith.i18n import N_


BOOLEAN_ERROR_CODE = 'boolean'
EMAIL_ERROR_CODE = 'email'
CHOICE_ERROR_CODE = 'oneof'
MIN_LENGTH_ERROR_CODE = 'min'
MAX_LENGTH_ERROR_CODE = 'max'
REQUIRED_ERROR_CODE = 'required'
URL_ERROR_CODE = 'url'

#: the codes of the built-in errors.  Only these can be customized.
CUSTOMIZABLE_ERRORS = (BOOLEAN_ERROR_CODE, EMAIL_ERROR_CODE, CHOICE_ERROR_CODE,
                       MIN_LENGTH_ERROR_CODE, MAX_LENGTH_ERROR_CODE,
                       REQUIRED_ERROR_CODE, URL_ERROR_CODE)

#: the english messages of the built-in errors.  They are the message ids
#: of the translation catalogs.
MESSAGES = {
    BOOLEAN_ERROR_CODE:     N_('Enter a valid boolean'),
    EMAIL_ERROR_CODE:       N_('Enter a valid email address'),
    CHOICE_ERROR_CODE:      N_('Invalid choice'),
    MIN_LENGTH_ERROR_CODE:  N_('Ensure this value has at least {0} characters'),
    MAX_LENGTH_ERROR_CODE:  N_('Ensure this value has at most {0} characters'),
    REQUIRED_ERROR_CODE:    N_('This field is required'),
    URL_ERROR_CODE:         N_('Enter a valid URL')
}


class FormStateError(RuntimeError):
    """Raised if a form operation is not possible in the current state
    of the form, for example adding errors to a form that was not
    validated yet.
    """


def _iter_causes(err):
    seen = set()
    # plain string causes have neither a code nor a translation
    while err is not None and not isinstance(err, str) and \
          id(err) not in seen:
        seen.add(id(err))
        yield err
        err = getattr(err, 'cause', None) or getattr(err, '__cause__', None)


class Error(Exception):
    """A validation error.  `cause` is the wrapped error, usually an
    exception.  If `code` is not given the code of the cause is used:

    >>> from formsmith.utils.validation import Violation
    >>> Error(Violation('min', '3')).code
    'min'
    >>> Error(ValueError('Too short'), 'min').code
    'min'
    >>> Error(ValueError('Too short')).code
    ''

    Errors compare equal if their code and cause are equal.
    """

    def __init__(self, cause=None, code=None):
        Exception.__init__(self, cause, code)
        self.cause = cause
        self._code = code

    @property
    def code(self):
        """The explicit code, else the code of the cause, else an empty
        string.
        """
        if self._code:
            return self._code
        for cause in _iter_causes(self.cause):
            code = getattr(cause, 'code', None)
            if isinstance(code, str):
                return code
        return ''

    def translate(self, locale):
        """Translates the error.  If the cause can't translate itself the
        plain message is returned.
        """
        for cause in _iter_causes(self.cause):
            translate = getattr(cause, 'translate', None)
            if callable(translate):
                return translate(str(locale))
        return str(self)

    def unwrap(self):
        """Returns the wrapped cause."""
        return self.cause

    def __str__(self):
        if self.cause is None:
            return ''
        return str(self.cause)

    def __eq__(self, other):
        if not isinstance(other, Error):
            return NotImplemented
        return self._code == other._code and self.cause == other.cause

    def __ne__(self, other):
        rv = self.__eq__(other)
        if rv is NotImplemented:
            return rv
        return not rv

    def __hash__(self):
        return hash((self._code, str(self)))

    def __repr__(self):
        return '<%s %r: %r>' % (self.__class__.__name__, self.code, str(self))


def error_wrap(err):
    """Wraps `err` into an :class:`Error`."""
    return Error(err)


def error_wrap_with_code(err, code):
    """Wraps `err` into an :class:`Error` with an explicit code.  Use this
    to customize a built-in error with a cause that has no code:

    >>> error_wrap_with_code(ValueError('Please tell us your name'),
    ...                      REQUIRED_ERROR_CODE).code
    'required'
    """
    return Error(err, code)


def error_wrap_if_not_error(err):
    """Returns `err` if it already is an :class:`Error`, otherwise it's
    wrapped.
    """
    if isinstance(err, Error):
        return err
    return Error(err)


def customize_errors(errors, customized):
    """Replaces every error whose code is in the `customized` mapping
    with the customized error.
    """
    if not errors or not customized:
        return errors
    return [customized.get(e.code, e) for e in errors]
