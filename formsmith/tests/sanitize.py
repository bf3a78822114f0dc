"""
    formsmith.tests.sanitize
    ~~~~~~~~~~~~~~~~~~~~~~~~

    Tests the sanitizers.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import unittest
import doctest

from formsmith.tests import FormsmithTestCase
from formsmith.utils import sanitize
from formsmith.utils.sanitize import sanitize_to_one_line_plain_text, \
     sanitize_to_plain_text, strip_tags


class SanitizeTestCase(FormsmithTestCase):

    def test_one_line(self):
        """One line sanitizing removes newlines and markup"""
        self.assertEqual(sanitize_to_one_line_plain_text(
            ' some <strong>bold</strong> statement  '), 'some bold statement')
        self.assertEqual(sanitize_to_one_line_plain_text('a\r\nb\nc'),
                         'a b c')

    def test_plain_text(self):
        """Plain text sanitizing keeps newlines"""
        self.assertEqual(sanitize_to_plain_text('  a\nb  '), 'a\nb')

    def test_scripts_are_dropped(self):
        """Contents of script and style tags are dropped"""
        self.assertEqual(sanitize_to_plain_text(
            'hello<script>alert(1)</script><style>p {}</style> world'),
            'hello world')

    def test_entities(self):
        """Entities are unescaped before and after stripping"""
        self.assertEqual(sanitize_to_plain_text('&lt;b&gt;bold&lt;/b&gt;'),
                         'bold')
        self.assertEqual(sanitize_to_plain_text('Tom &amp;amp; Jerry'),
                         'Tom & Jerry')

    def test_empty(self):
        """Empty values stay empty"""
        self.assertEqual(sanitize_to_plain_text(''), '')
        self.assertEqual(sanitize_to_one_line_plain_text('  \n '), '')
        self.assertEqual(strip_tags('\x00'), '')


def suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(
        SanitizeTestCase))
    suite.addTest(doctest.DocTestSuite(sanitize))
    return suite


if __name__ == '__main__':
    unittest.main(defaultTest='suite')
