"""
    formsmith.fields
    ~~~~~~~~~~~~~~~~

    The fields.  A field holds the values bound to it, cleans them and
    renders itself as HTML.  Cleaning is a pipeline: the bound value is
    sanitized, optional fields without a value stop there, everything else
    is validated and the errors are replaced by the customized ones:

    >>> field = CharField('Your name', min_length=3)
    >>> field.clean(' <b>Jo</b> ')
    ('Jo', [<Error 'min': 'Ensure this value has at least 3 characters'>])
    >>> field.clean('John')
    ('John', [])

    Fields are configured with keyword arguments when they are created or
    with the setters afterwards.  The keyword arguments are applied in the
    order they are given:

    >>> field = CharField('Your name', label='Name', not_required=True,
    ...                   help_text='As written on your passport')
    >>> print(field.as_div())
    <div><label for="id_your_name">Name</label><input type="text" name="your_name" id="id_your_name" maxlength="256" aria-describedby="helptext_id_your_name">
    <span class="helptext" id="helptext_id_your_name">As written on your passport</span></div>

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from markupsafe import Markup

from formsmith import settings
from formsmith.choices import OptionGroup
from formsmith.errors import CUSTOMIZABLE_ERRORS, BOOLEAN_ERROR_CODE, \
     EMAIL_ERROR_CODE, URL_ERROR_CODE, customize_errors, \
     error_wrap_if_not_error
from formsmith.i18n import parse_locale
from formsmith.templating import render_macro
from formsmith.utils.attrs import merge_attributes
from formsmith.utils.autoid import build_id, error_id, help_text_id, \
     normalized_name, valid_auto_id
from formsmith.utils.validation import REQUIRED_ERROR, build_choices_rule, \
     build_max_rule, build_min_rule, build_validation_rules, validate_value
from formsmith.widgets import CheckboxInput, EmailInput, Select, \
     SelectMultiple, TextInput, URLInput, default_sanitize_func, \
     make_widget, value_to_bool


BOOLEAN_FIELD = 'BooleanField'
CHAR_FIELD = 'CharField'
EMAIL_FIELD = 'EmailField'
URL_FIELD = 'URLField'
CHOICE_FIELD = 'ChoiceField'
MULTIPLE_CHOICE_FIELD = 'MultipleChoiceField'


def bool_to_value(value):
    if value:
        return 'on'
    return 'off'


def label_with_suffix(label, suffix):
    """Appends the suffix unless the label ends with a punctuation
    mark:

    >>> label_with_suffix('Your name', ':'), label_with_suffix('Why?', ':')
    ('Your name:', 'Why?')
    """
    if not suffix or not label or label[-1] in ('.', '!', '?', ':'):
        return label
    return label + suffix


class Field(object):
    """Baseclass for all fields.  Don't use it directly, use one of the
    subclasses instead.
    """

    #: the type of the field, one of the ``*_FIELD`` constants
    type = None

    #: the widget used unless another one is set
    default_widget = TextInput

    #: true if the field is bound to a list of values
    multiple_values = False

    def __init__(self, name, initial_values):
        self.name = name
        self.bound_values = list(initial_values)
        self.errors = []
        self.option_groups = []
        self.widget = self.default_widget
        self.auto_id = settings.DEFAULT_AUTO_ID
        self.required_css_class = ''
        self.error_css_class = ''
        self.attributes = {}
        self.label = name
        self.label_suffix = ''
        self.is_safe = False
        self.help_text = ''
        self.min_length = 0
        self.max_length = 0
        self.not_required = False
        self.disabled = False
        self.sanitize_func = None
        self.validate_func = self.validate
        self.custom_errors = {}
        self.locale = parse_locale(settings.DEFAULT_LANGUAGE)

    def configure(self, **options):
        """Applies the keyword options in the order they are given."""
        for key, value in options.items():
            self._apply_option(key, value)

    def _apply_option(self, key, value):
        if key == 'label':
            self.set_label(value)
        elif key == 'is_safe':
            if value:
                self.mark_safe()
        elif key == 'help_text':
            self.set_help_text(value)
        elif key == 'not_required':
            if value:
                self.set_not_required()
        elif key == 'disabled':
            if value:
                self.set_disabled()
        elif key == 'choices':
            self.add_choice_options('', value)
        elif key == 'grouped_choices':
            for label, options in value:
                self.add_choice_options(label, options)
        elif key == 'attributes':
            self.set_attributes(value)
        elif key == 'widget':
            self.set_widget(value)
        elif key == 'auto_id':
            self.set_auto_id(value)
        elif key == 'label_suffix':
            self.set_label_suffix(value)
        elif key == 'required_css_class':
            self.set_required_css_class(value)
        elif key == 'error_css_class':
            self.set_error_css_class(value)
        elif key == 'locale':
            self.set_locale(value)
        else:
            raise TypeError('%s got an unexpected option %r'
                            % (self.__class__.__name__, key))

    # -- setters

    def set_label(self, label):
        self.label = label

    def mark_safe(self):
        """Label and label suffix are no longer escaped."""
        self.is_safe = True

    def set_help_text(self, help_text):
        """Sets the help text.  It's never escaped."""
        self.help_text = help_text

    def set_not_required(self):
        self.not_required = True

    def set_disabled(self):
        self.disabled = True

    def add_choice_options(self, label, options):
        """Adds a group of options.  If the label is empty the options are
        not grouped.
        """
        self.option_groups.append(OptionGroup(label, options))

    def set_label_suffix(self, label_suffix):
        self.label_suffix = label_suffix

    def customize_error(self, err):
        """Replaces the built-in error with the same code.  Raises a
        :exc:`ValueError` if the error has none of the built-in codes.
        """
        err = error_wrap_if_not_error(err)
        if err.code not in CUSTOMIZABLE_ERRORS:
            raise ValueError('customize_error called on %s field with a '
                             'nonexisting Error code: %s'
                             % (self.name, err.code))
        self.custom_errors[err.code] = err

    def set_auto_id(self, auto_id):
        valid_auto_id(auto_id)
        self.auto_id = auto_id

    def set_required_css_class(self, css_class):
        self.required_css_class = css_class

    def set_error_css_class(self, css_class):
        self.error_css_class = css_class

    def set_attributes(self, attrs):
        """Adds custom attributes to the widget.  They override the ones
        formsmith sets except for the class which is appended to the
        error class.
        """
        self.attributes.update(merge_attributes(attrs))

    def set_widget(self, widget):
        self.widget = widget

    def set_locale(self, locale):
        """Sets the locale error messages are translated to."""
        self.locale = parse_locale(locale)

    def set_sanitize_func(self, update):
        """Calls `update` with the current sanitize function.  The
        function it returns replaces the current one.
        """
        self.sanitize_func = update(self.current_sanitize_func())

    def set_validate_func(self, update):
        """Calls `update` with the current validate function.  The
        function it returns replaces the current one.  Validate functions
        are called with the sanitized value and the required flag and
        return a list of errors.
        """
        self.validate_func = update(self.validate_func)

    # -- readers

    @property
    def html_name(self):
        return normalized_name(self.name)

    @property
    def html_id(self):
        return build_id(self.auto_id, self.name)

    @property
    def required(self):
        return not self.not_required

    @property
    def has_help_text(self):
        return bool(self.help_text)

    @property
    def has_errors(self):
        return bool(self.errors)

    @property
    def use_fieldset(self):
        return getattr(self.widget, 'fieldset', False)

    @property
    def css_classes(self):
        classes = []
        if self.required and self.required_css_class:
            classes.append(self.required_css_class)
        if self.has_errors and self.error_css_class:
            classes.append(self.error_css_class)
        return ' '.join(classes)

    @property
    def initial_value(self):
        return self._initial

    @property
    def empty_value(self):
        return self._empty

    # -- cleaning

    def current_sanitize_func(self):
        if self.sanitize_func is not None:
            return self.sanitize_func
        return default_sanitize_func(self.widget)

    def sanitize(self, value):
        return self.current_sanitize_func()(value)

    def validate(self, value, required):
        """The default validation of the field."""
        return validate_value(value, build_validation_rules(required))

    def _validate_and_customize(self, value, required):
        errors = [error_wrap_if_not_error(x) for x in
                  self.validate_func(value, required) or ()]
        return customize_errors(errors, self.custom_errors)

    def clean(self, value):
        """Binds, sanitizes and validates the value.  Returns the
        sanitized value and the list of errors.
        """
        self.bound_values = [value]
        sanitized = self.sanitize(value)
        if self.not_required and not sanitized:
            self.errors = []
            return self.empty_value, []
        self.errors = self._validate_and_customize(sanitized, self.required)
        return sanitized, self.errors

    def add_error(self, err):
        self.errors.append(err)

    def choice_values(self):
        """The values of all options in all groups."""
        rv = []
        for group in self.option_groups:
            rv.extend(group.values())
        return rv

    # -- rendering

    def as_div(self):
        """Renders the field in a ``<div>``."""
        return render_macro('field_as_div', self)

    def label_tag(self):
        return self._label_or_legend_tag('label')

    def legend_tag(self):
        """Like :meth:`label_tag` but a ``<legend>``.  It's used for
        widgets rendered in a fieldset.
        """
        return self._label_or_legend_tag('legend')

    def _label_or_legend_tag(self, tag):
        field_id = self.html_id
        attrs = {}
        if field_id:
            attrs['for'] = field_id
        if self.required and self.required_css_class:
            attrs['class'] = self.required_css_class
        text = label_with_suffix(self.label, self.label_suffix)
        if self.is_safe:
            text = Markup(text)
        return render_macro('label', {
            'use_tag':  bool(field_id),
            'attrs':    attrs,
            'text':     text
        }, tag)

    def widget_html(self):
        return make_widget(self).render()

    def errors_html(self):
        """Renders the errors translated to the locale of the field."""
        if not self.errors:
            return Markup()
        field_id = self.html_id
        items = []
        for idx, error in enumerate(self.errors):
            attrs = {}
            if field_id:
                attrs['id'] = error_id(field_id, idx)
            items.append({'text': error.translate(self.locale),
                          'attrs': attrs})
        return render_macro('errors', {
            'list':     items,
            'attrs':    {'class': settings.ERROR_LIST_CSS_CLASS}
        })

    def help_text_html(self):
        if not self.help_text:
            return Markup()
        attrs = {'class': settings.HELP_TEXT_CSS_CLASS}
        if self.html_id:
            attrs['id'] = help_text_id(self.html_id)
        return render_macro('help_text', {
            'attrs':    attrs,
            'text':     self.help_text
        })

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self.name)


class BooleanField(Field):
    """A field bound to ``on`` or ``off``.

    >>> field = BooleanField('Remember me', not_required=True)
    >>> field.must_boolean('on'), field.must_boolean('')
    (True, False)
    """
    type = BOOLEAN_FIELD
    default_widget = CheckboxInput

    def __init__(self, name, initial=False, **options):
        Field.__init__(self, name, [bool_to_value(initial)])
        self._initial = bool_to_value(initial)
        self._empty = bool_to_value(False)
        self.configure(**options)

    def validate(self, value, required):
        return validate_value(value, build_validation_rules(
            required, BOOLEAN_ERROR_CODE))

    def must_boolean(self, value):
        """Cleans the value and returns it as boolean.  Raises a
        :exc:`ValueError` if the value is invalid.
        """
        rv, errors = self.clean(value)
        if errors:
            raise ValueError('must_boolean called on %s field with an '
                             'invalid boolean value: %s' % (self.name, rv))
        return value_to_bool(rv)


class CharField(Field):
    """A field holding a line of text.  The maximum length defaults to
    the ``CHAR_FIELD_MAX_LENGTH`` setting, ``0`` means unlimited.
    """
    type = CHAR_FIELD
    default_max_length_setting = 'CHAR_FIELD_MAX_LENGTH'

    def __init__(self, name, initial='', empty='', min_length=0,
                 max_length=None, **options):
        Field.__init__(self, name, [initial])
        self._initial = initial
        self._empty = empty
        if max_length is None:
            max_length = getattr(settings, self.default_max_length_setting)
        self.min_length = min_length
        self.max_length = max_length
        self.configure(**options)

    def length_rules(self):
        rv = []
        if self.min_length > 0:
            rv.append(build_min_rule(self.min_length))
        if self.max_length > 0:
            rv.append(build_max_rule(self.max_length))
        return rv

    def validate(self, value, required):
        return validate_value(value, build_validation_rules(
            required, *self.length_rules()))


class EmailField(CharField):
    """A field holding an email address.

    >>> EmailField('Email').must_email('john@example.com')
    'john@example.com'
    """
    type = EMAIL_FIELD
    default_widget = EmailInput
    default_max_length_setting = 'EMAIL_FIELD_MAX_LENGTH'

    def validate(self, value, required):
        return validate_value(value, build_validation_rules(
            required, *self.length_rules() + [EMAIL_ERROR_CODE]))

    def must_email(self, value):
        """Cleans the value and returns it.  Raises a :exc:`ValueError` if
        it's not a valid email address.
        """
        rv, errors = self.clean(value)
        if errors:
            raise ValueError('must_email called on %s field with an '
                             'invalid email value: %s' % (self.name, rv))
        return rv


class URLField(CharField):
    """A field holding an absolute URL."""
    type = URL_FIELD
    default_widget = URLInput
    default_max_length_setting = 'URL_FIELD_MAX_LENGTH'

    def validate(self, value, required):
        return validate_value(value, build_validation_rules(
            required, *self.length_rules() + [URL_ERROR_CODE]))


class ChoiceField(Field):
    """A field bound to one of its options.

    >>> field = ChoiceField('Color', choices=[('red', 'Red'),
    ...                                       ('green', 'Green')])
    >>> field.clean('green')
    ('green', [])
    >>> field.clean('blue')
    ('blue', [<Error 'oneof': 'Invalid choice'>])
    """
    type = CHOICE_FIELD
    default_widget = Select

    def __init__(self, name, initial='', **options):
        Field.__init__(self, name, [initial])
        self._initial = initial
        self._empty = ''
        self.configure(**options)

    def validate(self, value, required):
        if not required and not value:
            return []
        return validate_value(value, build_validation_rules(
            required, build_choices_rule(*self.choice_values())))


class MultipleChoiceField(Field):
    """A field bound to any number of its options.  Every value is
    validated and all the errors are reported:

    >>> field = MultipleChoiceField('Colors', choices=['x', 'y'])
    >>> field.clean(['x', 'not_an_option', 'y'])
    (['x', 'not_an_option', 'y'], [<Error 'oneof': 'Invalid choice'>])
    """
    type = MULTIPLE_CHOICE_FIELD
    default_widget = SelectMultiple
    multiple_values = True

    def __init__(self, name, initials=None, **options):
        if initials is None:
            initials = []
        Field.__init__(self, name, initials)
        self._initial = list(initials)
        self.configure(**options)

    @property
    def empty_value(self):
        return []

    def validate(self, value, required):
        if not value:
            return []
        return validate_value(value, build_validation_rules(
            False, build_choices_rule(*self.choice_values())))

    def clean(self, values):
        """Binds, sanitizes and validates the values.  Returns the
        sanitized values and the list of errors.
        """
        self.bound_values = list(values)
        sanitized = [self.sanitize(x) for x in values]
        has_value = any(sanitized)
        if not has_value and self.not_required:
            self.errors = []
            return self.empty_value, []
        if not has_value:
            self.errors = customize_errors([REQUIRED_ERROR],
                                           self.custom_errors)
            return sanitized, self.errors
        errors = []
        for value in sanitized:
            errors.extend(self._validate_and_customize(value, False))
        self.errors = errors
        return sanitized, self.errors
