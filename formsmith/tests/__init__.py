"""
    formsmith.tests
    ~~~~~~~~~~~~~~~

    This module collects all the tests for formsmith.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import unittest
import warnings

from html5lib import HTMLParser
from html5lib.treebuilders import getTreeBuilder


# ignore lxml and html5lib warnings
warnings.filterwarnings('ignore', message='lxml does not preserve')


html_parser = HTMLParser(tree=getTreeBuilder('lxml'),
                         namespaceHTMLElements=False)


def parse_fragment(markup):
    """Parses rendered markup into a list of lxml elements."""
    return html_parser.parseFragment(str(markup))


class FormsmithTestCase(unittest.TestCase):
    """Subclass of the standard test case that restores the settings
    after each test.
    """

    def setUp(self):
        from formsmith import settings
        self.__old_settings = dict(settings.__dict__)
        settings.revert_to_default()

    def tearDown(self):
        from formsmith import settings
        settings.__dict__.clear()
        settings.__dict__.update(self.__old_settings)


def suite():
    from formsmith.tests import attrs, sanitize, validation, errors, i18n, \
         settings, choices, fields, rendering, forms
    suite = unittest.TestSuite()
    suite.addTest(attrs.suite())
    suite.addTest(sanitize.suite())
    suite.addTest(validation.suite())
    suite.addTest(errors.suite())
    suite.addTest(i18n.suite())
    suite.addTest(settings.suite())
    suite.addTest(choices.suite())
    suite.addTest(fields.suite())
    suite.addTest(rendering.suite())
    suite.addTest(forms.suite())
    return suite
