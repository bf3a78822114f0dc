"""
    formsmith.utils.autoid
    ~~~~~~~~~~~~~~~~~~~~~~

    Builds the HTML names and ids of fields.  Names are normalized field
    names: lower case, runs of whitespace replaced by an underscore.  Ids
    are built from the normalized name and the auto id pattern of the
    field:

    >>> normalized_name('Your  Name')
    'your_name'
    >>> build_id('id_%s', 'Your Name')
    'id_your_name'
    >>> build_id('', 'Your Name')
    ''

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import re


DISABLED_AUTO_ID = ''

_whitespace_re = re.compile(r'\s+')


def valid_auto_id(auto_id):
    """Raises a :exc:`ValueError` if the auto id pattern is neither empty
    nor contains exactly one ``%s``.
    """
    if auto_id == DISABLED_AUTO_ID or auto_id.count('%s') == 1:
        return
    raise ValueError('auto_id must contain one %%s verb (e.g. id_%%s). To '
                     'disable auto ID use disable_auto_id(). Given: %s'
                     % auto_id)


def is_disabled(auto_id):
    return auto_id == DISABLED_AUTO_ID


def normalized_name(name):
    return _whitespace_re.sub('_', name).lower()


def build_id(auto_id, name):
    if is_disabled(auto_id):
        return DISABLED_AUTO_ID
    return auto_id.replace('%s', normalized_name(name), 1)


def error_id(field_id, index):
    """The id of the `index`-th error of a field."""
    return 'err_%d_%s' % (index, field_id)


def error_ids(field_id, count):
    return [error_id(field_id, idx) for idx in range(count)]


def help_text_id(field_id):
    return 'helptext_' + field_id


def group_id(field_id, index):
    """The id of an option that is not in a named group."""
    return '%s_%d' % (field_id, index)


def sub_group_id(field_id, index, sub_index):
    """The id of the `sub_index`-th option of the named group at
    `index`.
    """
    return '%s_%d_%d' % (field_id, index, sub_index)
