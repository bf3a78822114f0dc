"""
    formsmith.tests.settings
    ~~~~~~~~~~~~~~~~~~~~~~~~

    Tests the settings module.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import os
import unittest
import tempfile

from formsmith.tests import FormsmithTestCase
from formsmith import settings
from formsmith.fields import CharField


class SettingsTestCase(FormsmithTestCase):

    def test_configure(self):
        """Only uppercase names are settings"""
        settings.configure(CHAR_FIELD_MAX_LENGTH=100)
        self.assertEqual(settings.CHAR_FIELD_MAX_LENGTH, 100)
        self.assertRaises(TypeError, settings.configure, char_field=100)
        self.assertRaises(TypeError, settings.configure, _PRIVATE=1)

    def test_settings_are_read_on_creation(self):
        """Fields read the settings when they are created"""
        field = CharField('Name')
        settings.configure(CHAR_FIELD_MAX_LENGTH=10, DEFAULT_AUTO_ID='f_%s')
        self.assertEqual(field.max_length, 256)
        self.assertEqual(field.html_id, 'id_name')
        field = CharField('Name')
        self.assertEqual(field.max_length, 10)
        self.assertEqual(field.html_id, 'f_name')

    def test_configure_from_file(self):
        """Settings files are python files"""
        fd, filename = tempfile.mkstemp(suffix='.cfg')
        try:
            with os.fdopen(fd, 'w') as f:
                f.write('EMAIL_FIELD_MAX_LENGTH = 100\n'
                        'DEFAULT_LANGUAGE = "fr"\n'
                        'lowercase = 42\n')
            settings.configure_from_file(filename)
        finally:
            os.remove(filename)
        self.assertEqual(settings.EMAIL_FIELD_MAX_LENGTH, 100)
        self.assertEqual(settings.DEFAULT_LANGUAGE, 'fr')
        self.assertFalse(hasattr(settings, 'lowercase'))

    def test_revert_to_default(self):
        settings.configure(URL_FIELD_MAX_LENGTH=1)
        settings.revert_to_default()
        self.assertEqual(settings.URL_FIELD_MAX_LENGTH, 2048)


def suite():
    return unittest.defaultTestLoader.loadTestsFromTestCase(SettingsTestCase)


if __name__ == '__main__':
    unittest.main(defaultTest='suite')
