"""
    formsmith.widgets
    ~~~~~~~~~~~~~~~~~

    Widgets render fields as HTML.  Every field has a default widget that
    can be replaced with :meth:`~formsmith.fields.Field.set_widget`:

    >>> from formsmith.fields import CharField
    >>> field = CharField('Message', widget=TextArea)
    >>> print(field.widget_html())
    <textarea name="message" id="id_message" maxlength="256" required>
    </textarea>

    Widgets are created for a single rendering and hold no state of their
    own, everything is read from the field.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from markupsafe import Markup

from formsmith.choices import render_groups
from formsmith.templating import render_macro
from formsmith.utils.attrs import render_attribute
from formsmith.utils.autoid import error_ids, help_text_id
from formsmith.utils.sanitize import sanitize_to_plain_text, \
     sanitize_to_one_line_plain_text
from formsmith.utils.validation import TRUE_VALUES


def value_to_bool(value):
    """Is the value one of the spellings of true?"""
    return value in TRUE_VALUES


class Widget(object):
    """Baseclass for all widgets.  Subclasses define the HTML type and
    the macro they are rendered with.
    """

    #: the name of the macro in the widgets template
    template = None

    #: the type of the widget.  For inputs the value of the type attribute
    html_type = None

    #: the attribute set on selected options or checked checkboxes
    selected_attr = None

    #: true for widgets that render options
    choice = False

    #: true for widgets that allow more than one selected option
    multiple = False

    #: true if the options are grouped in a fieldset
    fieldset = False

    #: true if the widget keeps newlines of the bound value
    multiline = False

    def __init__(self, field):
        self.field = field
        self.attrs = self.get_attributes()

    @property
    def name(self):
        return self.field.html_name

    @property
    def id(self):
        return Markup(self.attrs.get('id', ''))

    @property
    def name_attribute(self):
        return Markup(render_attribute('name', self.name))

    @property
    def class_attribute(self):
        if 'class' in self.attrs:
            return Markup(render_attribute('class', self.attrs['class']))
        return Markup()

    def get_attributes(self):
        """The attributes of the widget.  The ones set by formsmith come
        first, then the custom attributes of the field.  The error class
        is prepended to the custom class.
        """
        field = self.field
        field_id = field.html_id
        attrs = {}
        if self.multiple:
            attrs['multiple'] = ''
        if field_id:
            attrs['id'] = field_id
        if field.required:
            attrs['required'] = ''
        if field.disabled:
            attrs['disabled'] = ''
        if field.has_errors:
            attrs['aria-invalid'] = 'true'
        if field_id:
            described_by = []
            if field.has_help_text:
                described_by.append(help_text_id(field_id))
            described_by.extend(error_ids(field_id, len(field.errors)))
            if described_by:
                attrs['aria-describedby'] = ' '.join(described_by)
        if field.min_length > 0:
            attrs['minlength'] = str(field.min_length)
        if field.max_length > 0:
            attrs['maxlength'] = str(field.max_length)
        attrs.update(field.attributes)
        if field.has_errors and field.error_css_class:
            classes = [field.error_css_class]
            if 'class' in attrs:
                classes.append(attrs['class'])
            attrs['class'] = ' '.join(classes)
        return attrs

    def render(self):
        return render_macro(self.template, self)


class Input(Widget):
    """A widget that is a HTML input field."""
    template = 'input'

    #: true if the bound value is never rendered
    no_value = False

    def __init__(self, field):
        Widget.__init__(self, field)
        if self.selected_attr and value_to_bool(self.bound_value):
            self.attrs[self.selected_attr] = ''

    @property
    def bound_value(self):
        if self.field.bound_values:
            return self.field.bound_values[0]
        return ''

    @property
    def value(self):
        if self.no_value:
            return ''
        return self.bound_value


class TextInput(Input):
    """A widget that holds text."""
    html_type = 'text'


class EmailInput(Input):
    html_type = 'email'


class URLInput(Input):
    html_type = 'url'


class PasswordInput(Input):
    html_type = 'password'


class HiddenInput(Input):
    html_type = 'hidden'


class TextArea(Input):
    """A widget for multiline text."""
    template = 'textarea'
    html_type = 'textarea'
    multiline = True


class CheckboxInput(Input):
    """A single checkbox.  It's checked if the bound value is true."""
    html_type = 'checkbox'
    selected_attr = 'checked'
    no_value = True


class ChoiceWidget(Widget):
    """Baseclass for widgets that render the options of the field."""
    choice = True

    #: the widget the options are rendered with.  Defaults to the widget
    #: itself.
    option_widget = None

    @property
    def selected(self):
        if self.multiple:
            return self.field.bound_values
        return self.field.bound_values[:1]

    @property
    def groups(self):
        option_widget = self.option_widget or self.__class__
        return render_groups(self.field.option_groups,
                             option_widget.html_type,
                             option_widget.selected_attr,
                             self.field.html_id, self.name, self.selected)


class Select(ChoiceWidget):
    """A select box."""
    template = 'select'
    html_type = 'select'
    selected_attr = 'selected'


class SelectMultiple(Select):
    """A select box that allows to select more than one option."""
    multiple = True


class RadioSelect(ChoiceWidget):
    """A group of radio buttons inside a fieldset."""
    template = 'multiple_input'
    html_type = 'radio'
    selected_attr = 'checked'
    fieldset = True


class CheckboxSelectMultiple(RadioSelect):
    """A group of checkboxes inside a fieldset."""
    html_type = 'checkbox_select'
    multiple = True
    option_widget = CheckboxInput


def is_widget(widget):
    return isinstance(widget, type) and issubclass(widget, Widget) and \
        widget.template is not None


def make_widget(field):
    """Creates the widget of the field for rendering.  Raises a
    :exc:`ValueError` if the widget of the field is not a widget.
    """
    widget = field.widget
    if not is_widget(widget):
        raise ValueError('%s: unknown widget type %r'
                         % (field.__class__.__name__, widget))
    return widget(field)


def default_sanitize_func(widget):
    """The sanitizer matching the widget."""
    if getattr(widget, 'multiline', False):
        return sanitize_to_plain_text
    return sanitize_to_one_line_plain_text
