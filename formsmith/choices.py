"""
    formsmith.choices
    ~~~~~~~~~~~~~~~~~

    Options of choice fields.  A choice field holds a list of option
    groups, a group with an empty label holds options that are not
    grouped.  When rendered every option gets an id derived from the id
    of the field and its position:

    >>> groups = [OptionGroup('', [('a', 'A'), ('b', 'B')]),
    ...           OptionGroup('Fancy', [('c', 'C'), ('d', 'D'), ('e', 'E')]),
    ...           OptionGroup('', [('f', 'F')])]
    >>> [str(option.id) for group in render_groups(groups, 'radio',
    ...                                             'checked', 'id_x', 'x', [])
    ...  for option in group.options]
    ['id_x_0', 'id_x_1', 'id_x_2_0', 'id_x_2_1', 'id_x_2_2', 'id_x_3']

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from markupsafe import Markup

from formsmith.utils.attrs import render_attribute
from formsmith.utils.autoid import group_id, sub_group_id


class ChoiceFieldOption(object):
    """One option of a choice field."""
    __slots__ = ('value', 'label')

    def __init__(self, value, label):
        self.value = value
        self.label = label

    def __eq__(self, other):
        return isinstance(other, ChoiceFieldOption) and \
            (self.value, self.label) == (other.value, other.label)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.value, self.label))

    def __repr__(self):
        return 'ChoiceFieldOption(%r, %r)' % (self.value, self.label)


def make_option(option):
    """Converts a ``(value, label)`` tuple into a
    :class:`ChoiceFieldOption`.  A plain string is used as value and
    label.
    """
    if isinstance(option, ChoiceFieldOption):
        return option
    if isinstance(option, str):
        return ChoiceFieldOption(option, option)
    value, label = option
    return ChoiceFieldOption(str(value), str(label))


class OptionGroup(object):
    """A named group of options, or the ungrouped options if the label
    is empty.
    """

    def __init__(self, label, options):
        self.label = label
        self.options = [make_option(x) for x in options]

    def values(self):
        return [option.value for option in self.options]

    @property
    def slots(self):
        """The number of indexes the group uses when ids are built."""
        if self.label:
            return 1
        return len(self.options)

    def __repr__(self):
        return '<%s %r: %r>' % (self.__class__.__name__, self.label,
                                self.options)


class RenderedOption(object):
    """An option ready to be passed to the templates."""

    def __init__(self, html_type, name, value, label, attrs):
        self.html_type = html_type
        self.name = name
        self.value = value
        self.label = label
        self.attrs = attrs

    @property
    def id(self):
        return Markup(self.attrs.get('id', ''))

    @property
    def name_attribute(self):
        return Markup(render_attribute('name', self.name))


class RenderedGroup(object):

    def __init__(self, label, options):
        self.label = label
        self.options = options


def render_groups(groups, html_type, selected_attr, base_id, html_name,
                  selected):
    """Prepares the option groups for the templates.  `html_type` and
    `selected_attr` come from the widget the options are rendered with,
    `selected` is the list of values that are selected.  Without a
    `base_id` no option ids are set.
    """
    rv = []
    index = 0
    for group in groups:
        options = []
        for sub_index, option in enumerate(group.options):
            attrs = {}
            if base_id:
                if group.label:
                    attrs['id'] = sub_group_id(base_id, index, sub_index)
                else:
                    attrs['id'] = group_id(base_id, index + sub_index)
            if selected_attr and option.value in selected:
                attrs[selected_attr] = ''
            options.append(RenderedOption(html_type, html_name,
                                          option.value, option.label, attrs))
        rv.append(RenderedGroup(group.label, options))
        index += group.slots
    return rv
