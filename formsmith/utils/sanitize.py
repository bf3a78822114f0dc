"""
    formsmith.utils.sanitize
    ~~~~~~~~~~~~~~~~~~~~~~~~

    Sanitizers turn untrusted input into plain text.  All markup is
    removed, nothing is allowed through:

    >>> sanitize_to_one_line_plain_text(' some <strong>bold</strong> statement  ')
    'some bold statement'
    >>> sanitize_to_plain_text('first line\\n<em>second</em> line\\n')
    'first line\\nsecond line'

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import re
from html import unescape

import lxml.html


_newline_re = re.compile(r'\r?\n')
# lxml refuses strings with these
_control_chars_re = re.compile('[\x00-\x08\x0b\x0c\x0e-\x1f]')


def strip_tags(value):
    """Removes all tags from the value.  The contents of script and
    style elements are removed as well.  Entities are resolved.
    """
    value = _control_chars_re.sub('', value)
    if not value.strip():
        return value
    doc = lxml.html.document_fromstring('<html><body>%s</body></html>'
                                        % value)
    for element in doc.xpath('//script|//style'):
        element.drop_tree()
    return doc.body.text_content()


def sanitize_to_no_html(value):
    return unescape(strip_tags(unescape(value)))


def sanitize_to_plain_text(value):
    """Trims the value and removes all markup.  Newlines are kept."""
    return sanitize_to_no_html(value.strip())


def sanitize_to_one_line_plain_text(value):
    """Replaces newlines with spaces, trims the value and removes all
    markup.
    """
    return sanitize_to_no_html(_newline_re.sub(' ', value).strip())
