"""
    formsmith.tests.validation
    ~~~~~~~~~~~~~~~~~~~~~~~~~~

    Tests the rule engine.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import unittest
import doctest
from threading import Thread

from formsmith.tests import FormsmithTestCase
from formsmith.utils import validation
from formsmith.utils.validation import Violation, build_choices_rule, \
     build_max_rule, build_min_rule, build_validation_rules, get_validator, \
     parse_bool, split_rules, validate_value


class RulesTestCase(FormsmithTestCase):

    def test_build_rules(self):
        """Rule strings start with required if the value is required"""
        self.assertEqual(build_validation_rules(False), '')
        self.assertEqual(build_validation_rules(True), 'required')
        self.assertEqual(build_validation_rules(True, build_min_rule(3),
                                                build_max_rule(256), 'email'),
                         'required,min=3,max=256,email')

    def test_choices_rule(self):
        """Choices are quoted and separated by spaces"""
        self.assertEqual(build_choices_rule(), 'oneof=')
        self.assertEqual(build_choices_rule('one', 'two', 'three'),
                         "oneof='one' 'two' 'three'")
        self.assertEqual(build_choices_rule('one monkey', 'two monkeys'),
                         "oneof='one monkey' 'two monkeys'")
        self.assertEqual(build_choices_rule('one', 'one'),
                         "oneof='one' 'one'")

    def test_split_rules(self):
        """Commas inside quoted choices don't split rules"""
        self.assertEqual(split_rules("required,oneof='a, b' 'c'"),
                         ['required', "oneof='a, b' 'c'"])
        self.assertEqual(split_rules(''), [])


class ValidateTestCase(FormsmithTestCase):

    def assertCodes(self, value, rules, codes):
        self.assertEqual([e.code for e in validate_value(value, rules)], codes)

    def test_required(self):
        """Required fails on the empty string only"""
        self.assertCodes('', 'required', ['required'])
        self.assertCodes(' ', 'required', [])

    def test_first_failure_wins(self):
        """Validation stops at the first failing rule"""
        self.assertCodes('', 'required,min=3,email', ['required'])
        self.assertCodes('a@', 'required,min=3,email', ['min'])
        self.assertCodes('a@b', 'required,min=3,email', [])
        self.assertCodes('abc', 'required,min=3,email', ['email'])

    def test_lengths_count_characters(self):
        """Lengths are counted in characters"""
        self.assertCodes('\xe9t\xe9', 'max=3', [])
        self.assertCodes('\xe9t\xe9s', 'max=3', ['max'])

    def test_email(self):
        """Email addresses"""
        self.assertCodes('john@example.com', 'email', [])
        self.assertCodes('john.doe+tag@mail.example.org', 'email', [])
        self.assertCodes('not an email', 'email', ['email'])
        self.assertCodes('john@', 'email', ['email'])

    def test_url(self):
        """Absolute URLs"""
        self.assertCodes('https://example.com/path?x=1', 'url', [])
        self.assertCodes('example.com', 'url', ['url'])
        self.assertCodes('http://', 'url', ['url'])

    def test_boolean(self):
        """Boolean spellings"""
        for value in '1', 't', 'T', 'true', 'TRUE', 'True', 'on', 'ON', 'On':
            self.assertEqual(parse_bool(value), True)
            self.assertCodes(value, 'boolean', [])
        for value in '0', 'f', 'F', 'false', 'FALSE', 'False', 'off', 'OFF':
            self.assertEqual(parse_bool(value), False)
            self.assertCodes(value, 'boolean', [])
        self.assertRaises(ValueError, parse_bool, 'yes')
        self.assertCodes('yes', 'boolean', ['boolean'])

    def test_oneof(self):
        """Choices may contain spaces and commas"""
        rule = build_choices_rule('red', 'dark blue', 'a,b')
        self.assertCodes('red', rule, [])
        self.assertCodes('dark blue', rule, [])
        self.assertCodes('a,b', rule, [])
        self.assertCodes('dark', rule, ['oneof'])
        self.assertCodes('red', build_choices_rule(), ['oneof'])

    def test_oneof_escapes_quotes(self):
        """Quotes and backslashes in choices are escaped"""
        rule = build_choices_rule("it's", 'a\\b', "', '")
        self.assertEqual(rule, "oneof='it\\'s' 'a\\\\b' '\\', \\''")
        self.assertEqual(split_rules('required,' + rule), ['required', rule])
        self.assertCodes("it's", rule, [])
        self.assertCodes('a\\b', rule, [])
        self.assertCodes("', '", rule, [])
        self.assertCodes('its', rule, ['oneof'])

    def test_unknown_rule(self):
        """Unknown rules are programming errors"""
        self.assertRaises(ValueError, validate_value, 'x', 'required,nope')

    def test_violation(self):
        """Violations translate themselves"""
        violation = Violation('max', '5')
        self.assertEqual(str(violation),
                         'Ensure this value has at most 5 characters')
        self.assertEqual(violation.translate('fr'),
                         'Assurez-vous que cette valeur fait au maximum 5 '
                         'caract\xe8res')
        self.assertEqual(violation, Violation('max', '5'))
        self.assertNotEqual(violation, Violation('max', '6'))

    def test_validator_is_shared(self):
        """All threads get the same validator"""
        found = []
        threads = [Thread(target=lambda: found.append(get_validator()))
                   for x in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(len(found), 8)
        for validator in found:
            self.assertTrue(validator is get_validator())


def suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(
        RulesTestCase))
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(
        ValidateTestCase))
    suite.addTest(doctest.DocTestSuite(validation))
    return suite


if __name__ == '__main__':
    unittest.main(defaultTest='suite')
