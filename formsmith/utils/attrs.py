"""
    formsmith.utils.attrs
    ~~~~~~~~~~~~~~~~~~~~~

    HTML attributes.  Custom attributes are added to fields as a list of
    :class:`Attr` and :class:`BoolAttr` objects which are merged into a
    plain dict.  When rendered the attributes are always sorted the same
    way so that the output of a widget is stable:

    >>> html_attributes({'alt': '', 'class': 'x', 'aria-b': '', 'aria-a': '',
    ...                  'data-b': '', 'data-a': ''})
    ['class="x"', 'data-a', 'data-b', 'alt', 'aria-a', 'aria-b']

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from markupsafe import Markup


#: the attributes that are ordered first, in this order.  The entries
#: ending with a dash are prefixes of attribute groups.
ATTRIBUTE_ORDER = ('class', 'id', 'name', 'data-', 'src', 'for', 'type',
                   'href', 'value', 'minlength', 'maxlength', 'title',
                   'alt', 'role', 'aria-')

_prefixes = tuple(x for x in ATTRIBUTE_ORDER if x.endswith('-'))

_forbidden_hints = {
    'type':     'To change the type, use a different Field and/or set a '
                'different Widget on an existing Field.',
    'name':     'To change the name attribute, set a different name to '
                'the Field when you create it.',
    'value':    'To change the value attribute, set an initial value when '
                'you create the field or bind values with bind_request or '
                'bind_data.'
}


class AttributeNameError(TypeError):
    """Raised if one of the attributes formsmith sets itself is passed
    as custom attribute.
    """


class _Attribute(object):
    __slots__ = ('name', 'value')

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def attribute(self):
        return {self.name: self.value}

    def __eq__(self, other):
        return type(self) is type(other) and \
            (self.name, self.value) == (other.name, other.value)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.name, self.value))

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__, self.name, self.value)


class Attr(_Attribute):
    """A name/value attribute.  The value is converted to a string:

    >>> render_attribute(*Attr('maxlength', 125).attribute().popitem())
    'maxlength="125"'
    """
    __slots__ = ()

    def __init__(self, name, value):
        _Attribute.__init__(self, str(name), str(value))


class BoolAttr(_Attribute):
    """A boolean attribute.  It's rendered as the bare name."""
    __slots__ = ()

    def __init__(self, name):
        _Attribute.__init__(self, str(name), '')

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.name)


def check_attribute_names(attrs):
    """Raises an :exc:`AttributeNameError` if `type`, `name` or `value`
    is in the list of attributes.
    """
    for attr in attrs:
        hint = _forbidden_hints.get(attr.name)
        if hint is not None:
            raise AttributeNameError("You can't directly set %s with "
                                     "with_attributes or set_attributes. %s"
                                     % (attr.name, hint))


def merge_attributes(attrs):
    """Merges a list of attributes into a dict.  If an attribute is in the
    list more than once, the last one wins:

    >>> merge_attributes([BoolAttr('alpha'), Attr('alpha', 'X')])
    {'alpha': 'X'}
    >>> merge_attributes([Attr('alpha', 'X'), BoolAttr('alpha')])
    {'alpha': ''}
    """
    check_attribute_names(attrs)
    rv = {}
    for attr in attrs:
        rv.update(attr.attribute())
    return rv


def render_attribute(name, value):
    """Renders one attribute.  Attributes without value are rendered as
    the bare name.  The value is not escaped.
    """
    if value:
        return '%s="%s"' % (name, value)
    return name


def html_attributes(attrs):
    """Renders the attributes of the dict in the canonical order: first
    the ones of :data:`ATTRIBUTE_ORDER` with the ``data-*`` and ``aria-*``
    groups sorted alphabetically, then all the others sorted
    alphabetically.
    """
    rv = []
    for key in ATTRIBUTE_ORDER:
        if key in _prefixes:
            rv.extend(sorted(render_attribute(name, value)
                             for name, value in attrs.items()
                             if name.startswith(key)))
        elif key in attrs:
            rv.append(render_attribute(key, attrs[key]))
    if len(rv) < len(attrs):
        rv.extend(sorted(render_attribute(name, value)
                         for name, value in attrs.items()
                         if name not in ATTRIBUTE_ORDER and
                         not name.startswith(_prefixes)))
    return rv


def attributes_to_html(attrs):
    """Renders the attributes as markup, each one prefixed with a space
    so that the result can be placed right after a tag name.
    """
    return Markup(''.join(' ' + attr for attr in html_attributes(attrs)))
