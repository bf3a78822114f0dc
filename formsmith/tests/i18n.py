"""
    formsmith.tests.i18n
    ~~~~~~~~~~~~~~~~~~~~

    Tests the translations and the language selection.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import unittest
import doctest

from babel.support import Translations

from formsmith.tests import FormsmithTestCase
from formsmith import i18n, settings
from formsmith.errors import MESSAGES
from formsmith.i18n import has_catalog, list_languages, load_translations, \
     select_language, translate


class TranslationTestCase(FormsmithTestCase):

    def test_catalogs(self):
        """French is shipped, English needs no catalog"""
        self.assertTrue(has_catalog('fr'))
        self.assertFalse(has_catalog('en'))
        self.assertFalse(has_catalog('not a locale'))
        self.assertEqual(list_languages(), ['en', 'fr'])

    def test_all_messages_translated(self):
        """Every built-in message has a french translation"""
        translations = load_translations('fr')
        for message in MESSAGES.values():
            self.assertNotEqual(translations.gettext(message), message)

    def test_compile_catalog(self):
        """The .po catalog is compiled into Babel translations"""
        translations = i18n._compile_catalog(i18n.find_catalog('fr'), 'fr')
        self.assertTrue(isinstance(translations, Translations))
        self.assertEqual(translations.gettext('This field is required'),
                         'Ce champ est obligatoire')

    def test_translations_are_cached(self):
        """Catalogs are loaded once"""
        self.assertTrue(load_translations('fr') is load_translations('fr'))
        self.assertTrue(load_translations('fr_FR') is not None)

    def test_translate(self):
        """Messages with parameters"""
        self.assertEqual(translate(MESSAGES['min'], 'fr', 8),
                         'Assurez-vous que cette valeur fait au minimum 8 '
                         'caract\xe8res')
        self.assertEqual(translate(MESSAGES['url'], 'fr'),
                         'Entrez une URL valide')
        self.assertEqual(translate(MESSAGES['url'], 'de'),
                         'Enter a valid URL')
        self.assertEqual(translate(MESSAGES['url']), 'Enter a valid URL')


class SelectLanguageTestCase(FormsmithTestCase):

    def select(self, *langs):
        return str(select_language(['en', 'fr'], *langs))

    def test_default(self):
        """English is the default"""
        for value in 'en', 'EN', '', '*':
            self.assertEqual(self.select(value), 'en')
        self.assertEqual(self.select(), 'en')
        self.assertEqual(self.select('de-CH'), 'en')
        self.assertEqual(str(select_language([], 'fr')), 'en')

    def test_accept_language(self):
        """Quality values are respected"""
        self.assertEqual(self.select('fr'), 'fr')
        self.assertEqual(self.select('fr,en;q=0.9,ru;q=0.8'), 'fr')
        self.assertEqual(self.select('ru,en;q=0.9,fr;q=0.8'), 'en')
        self.assertEqual(self.select('fr-CH, fr;q=0.9, en;q=0.8'), 'fr')

    def test_first_match_wins(self):
        """The language strings are tried in order"""
        self.assertEqual(self.select('en', 'fr-CH, fr;q=0.9'), 'en')
        self.assertEqual(self.select('de-CH', 'fr'), 'fr')

    def test_unsupported_language(self):
        """Languages without catalog fall back to the default"""
        self.assertEqual(str(select_language(['en', 'de'], 'de')), 'en')
        settings.LANGUAGES = ['en']
        self.assertEqual(self.select('fr'), 'en')


def suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(
        TranslationTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(
        SelectLanguageTestCase))
    suite.addTest(doctest.DocTestSuite(i18n))
    return suite


if __name__ == '__main__':
    unittest.main(defaultTest='suite')
