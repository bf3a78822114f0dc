"""
    formsmith.forms
    ~~~~~~~~~~~~~~~

    Forms group fields.  Data is bound once, validation runs the first
    time the result is asked for and is cached afterwards:

    >>> from formsmith.fields import CharField, EmailField
    >>> form = Form(CharField('Your name'), EmailField('Email'))
    >>> form.bind_data({'your_name': 'John', 'email': 'not an email'})
    >>> form.is_valid()
    False
    >>> form.cleaned_data
    {'your_name': ['John']}
    >>> str(form.errors.get('email'))
    'Enter a valid email address'

    A clean function can check the fields against each other.  It's
    called once after the fields are validated and may add errors with
    :meth:`Form.add_error`.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import logging

from formsmith import settings
from formsmith.errors import Error, FormStateError, error_wrap_if_not_error
from formsmith.i18n import parse_locale, select_language
from formsmith.templating import render_macro
from formsmith.utils.autoid import DISABLED_AUTO_ID, normalized_name, \
     valid_auto_id


log = logging.getLogger('formsmith.forms')


class CleanedData(dict):
    """The cleaned values of a form, a list of values per field name."""

    def get(self, name):
        """The first value of the field or an empty string."""
        values = dict.get(self, name)
        if not values:
            return ''
        return values[0]

    def getlist(self, name):
        return list(dict.get(self, name, ()))

    def has(self, name):
        return name in self


class FormErrors(dict):
    """The errors of a form, a list of errors per field name."""

    def get(self, name):
        """The first error of the field or an empty :class:`Error`."""
        errors = dict.get(self, name)
        if not errors:
            return Error()
        return errors[0]

    def has(self, name):
        return name in self


def _to_lists(data):
    """Converts the bound data into a dict of lists.  Werkzeug multi
    dicts keep all values of a key.
    """
    if data is None:
        return {}
    if hasattr(data, 'to_dict'):
        data = data.to_dict(flat=False)
    rv = {}
    for key, value in data.items():
        if isinstance(value, str):
            value = [value]
        rv[key] = list(value)
    return rv


class Form(object):
    """A form.  Fields are passed as positional arguments, the keyword
    arguments configure the form and become the defaults of the fields
    that were not configured individually.
    """

    def __init__(self, *fields, **options):
        self.fields = []
        self.field_names = []
        self.auto_id = settings.DEFAULT_AUTO_ID
        self.label_suffix = ''
        self.required_css_class = ''
        self.error_css_class = ''
        self.locales = []
        self.clean_func = None
        self.is_bound = False
        self.is_validated = False
        self.bound_data = {}
        self._cleaned_data = CleanedData()
        self._errors = FormErrors()
        for key, value in options.items():
            self._apply_option(key, value)
        for field in fields:
            self.add_field(field)

    def _apply_option(self, key, value):
        if key == 'auto_id':
            valid_auto_id(value)
            self.auto_id = value
        elif key == 'disable_auto_id':
            if value:
                self.auto_id = DISABLED_AUTO_ID
        elif key == 'label_suffix':
            self.label_suffix = value
        elif key == 'required_css_class':
            self.required_css_class = value
        elif key == 'error_css_class':
            self.error_css_class = value
        elif key == 'locales':
            self.locales = [parse_locale(x) for x in value]
        elif key == 'clean_func':
            self.set_clean_func(value)
        else:
            raise TypeError('Form got an unexpected option %r' % key)

    def add_field(self, field):
        """Adds a field.  The defaults of the form are copied into the
        field unless it was configured otherwise.
        """
        self.fields.append(field)
        self.field_names.append(field.html_name)
        if not field.label_suffix:
            field.set_label_suffix(self.label_suffix)
        if self.required_css_class and not field.required_css_class:
            field.set_required_css_class(self.required_css_class)
        if self.error_css_class and not field.error_css_class:
            field.set_error_css_class(self.error_css_class)
        default_locale = parse_locale(settings.DEFAULT_LANGUAGE)
        if self.locales and field.locale == default_locale:
            field.set_locale(self.locales[0])
        if self.auto_id != settings.DEFAULT_AUTO_ID and \
           field.auto_id == settings.DEFAULT_AUTO_ID:
            field.set_auto_id(self.auto_id)

    def set_clean_func(self, clean_func):
        """Sets the function called with the form after the fields are
        validated.
        """
        self.clean_func = clean_func

    def field_by_name(self, name):
        """Looks up a field by its HTML name or its name.  Raises a
        :exc:`LookupError` if there is no such field.
        """
        html_name = normalized_name(name)
        for field in self.fields:
            if field.html_name in (name, html_name):
                return field
        raise LookupError('no field with this name %s' % name)

    def bind_data(self, data, *langs):
        """Binds the data to the form.  Only the first call has an
        effect.  `data` is a dict of lists of strings or a Werkzeug
        multi dict, `langs` are ``Accept-Language`` values used to select
        the language of the error messages.
        """
        if self.is_bound:
            return
        self.is_bound = True
        data = _to_lists(data)
        self.bound_data = dict((name, data[name]) for name in self.field_names
                               if name in data)
        locale = select_language(self.locales, *langs)
        log.debug('binding %d values, error messages in %s',
                  len(self.bound_data), locale)
        for field in self.fields:
            field.set_locale(locale)

    def bind_request(self, request):
        """Binds the posted form data of a Werkzeug request.  The language
        is selected from the ``Accept-Language`` header.
        """
        self.bind_data(request.form,
                       request.headers.get('Accept-Language', ''))

    def _clean_field(self, field, values):
        if field.multiple_values:
            return field.clean(values)
        value = values[0] if values else ''
        rv, errors = field.clean(value)
        if errors:
            return [], errors
        return [rv], errors

    def _validate_if_needed(self):
        if self.is_validated:
            return
        self.is_validated = True
        cleaned_data = CleanedData()
        errors = FormErrors()
        for field, name in zip(self.fields, self.field_names):
            values, field_errors = self._clean_field(
                field, self.bound_data.get(name, []))
            if field_errors:
                errors[name] = list(field_errors)
            else:
                cleaned_data[name] = values
        self._cleaned_data = cleaned_data
        self._errors = errors
        log.debug('validated form, %d fields with errors', len(errors))
        if self.clean_func is not None:
            self.clean_func(self)

    def is_valid(self):
        """Validates the form if needed.  Unbound forms are not valid."""
        if not self.is_bound:
            return False
        self._validate_if_needed()
        return not self._errors

    @property
    def cleaned_data(self):
        if not self.is_bound:
            return CleanedData()
        self._validate_if_needed()
        return CleanedData((name, list(values))
                           for name, values in self._cleaned_data.items())

    @property
    def errors(self):
        if not self.is_bound:
            return FormErrors()
        self._validate_if_needed()
        return FormErrors((name, list(errors))
                          for name, errors in self._errors.items())

    def add_error(self, name, err):
        """Adds an error to a field after the form was validated.  The
        cleaned value of the field is removed.
        """
        if not self.is_validated:
            raise FormStateError("you can't add an error to a form not "
                                 "already validated. A form is validated "
                                 "when one of the following method is "
                                 "called: cleaned_data, is_valid() or "
                                 "errors")
        field = self.field_by_name(name)
        err = error_wrap_if_not_error(err)
        field.add_error(err)
        self._errors.setdefault(field.html_name, []).append(err)
        self._cleaned_data.pop(field.html_name, None)

    def as_div(self):
        """Renders all the fields in ``<div>`` tags."""
        return render_macro('form_as_div', self)

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self.field_names)
