"""
Formsmith
=========

*server side forms that validate once and render the same every time*


Formsmith declares typed form fields (booleans, text, email addresses,
URLs, single and multiple choices), binds untrusted request data to them
exactly once and hands out sanitized, validated values or translated
errors.  Fields and forms render themselves as HTML with stable ids and
attribute order so that the markup can be tested byte for byte.

The widget markup lives in Jinja2 macros and error messages are
translated with Babel catalogs.
"""
from setuptools import setup


setup(
    name='Formsmith',
    version='0.1',
    license='BSD',
    author='The formsmith authors',
    description='Server side form validation and rendering',
    long_description=__doc__,
    packages=['formsmith', 'formsmith.i18n', 'formsmith.utils',
              'formsmith.tests'],
    package_data={
        'formsmith': ['default_settings.cfg', 'templates/*.html'],
        'formsmith.i18n': ['*/LC_MESSAGES/*.po']
    },
    zip_safe=False,
    platforms='any',
    python_requires='>=3.8',
    test_suite='formsmith.tests.suite',
    install_requires=[
        'Werkzeug>=2.3',
        'Jinja2>=3.0',
        'Babel>=2.9',
        'MarkupSafe>=2.0',
        'lxml'
    ],
    extras_require={
        'test': [
            'html5lib',
            'pytest'
        ]
    },
    message_extractors={
        'formsmith': [
            ('**.py', 'python', None),
            ('**/templates/**', 'jinja2', None)
        ]
    }
)
