"""
    formsmith.i18n
    ~~~~~~~~~~~~~~

    This module implements the internationalization support used to
    translate validation error messages.  It's implemented as a package so
    that the translations can be stored as package data.

    Catalogs are shipped as gettext ``.po`` files and compiled in memory the
    first time a locale is requested.  English is the language of the
    message ids and needs no catalog.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import os
import logging
from gettext import NullTranslations
from io import BytesIO
from threading import Lock

from babel import Locale, UnknownLocaleError
from babel.messages.mofile import write_mo
from babel.messages.pofile import read_po
from babel.support import Translations
from werkzeug.datastructures import LanguageAccept
from werkzeug.http import parse_accept_header

from formsmith import settings

__all__ = ['N_', 'parse_locale', 'load_translations', 'translate',
           'select_language', 'list_languages']


LOCALE_DOMAIN = 'messages'
LOCALE_PATH = os.path.dirname(__file__)


log = logging.getLogger('formsmith.i18n')

_translations = {}
_translations_lock = Lock()


def N_(message):
    """Marks a message for extraction.  The message is returned as is
    and translated later with :func:`translate`.
    """
    return message


def parse_locale(locale):
    """Returns a :class:`babel.Locale` for a locale object or a language
    tag.  Both ``fr_CH`` and ``fr-CH`` are accepted.
    """
    if isinstance(locale, Locale):
        return locale
    return Locale.parse(locale, sep='-' if '-' in locale else '_')


def find_catalog(locale):
    """Finds the catalog for the given locale on the path.  Returns the
    filename of the .po file if found, otherwise `None` is returned.
    """
    catalog = os.path.join(LOCALE_PATH, str(parse_locale(locale)),
                           'LC_MESSAGES', LOCALE_DOMAIN + '.po')
    if os.path.isfile(catalog):
        return catalog


def has_catalog(locale):
    """Is there a catalog for this locale?"""
    try:
        return find_catalog(locale) is not None
    except (ValueError, UnknownLocaleError):
        return False


def _compile_catalog(filename, locale):
    with open(filename, 'rb') as f:
        catalog = read_po(f, locale=locale, domain=LOCALE_DOMAIN)
    buf = BytesIO()
    write_mo(buf, catalog)
    buf.seek(0)
    return Translations(fp=buf, domain=LOCALE_DOMAIN)


def load_translations(locale):
    """Return the translations for the locale.  They are loaded once and
    cached for the lifetime of the process.
    """
    key = str(parse_locale(locale))
    with _translations_lock:
        rv = _translations.get(key)
        if rv is None:
            catalog = find_catalog(key)
            if catalog is None:
                rv = NullTranslations()
            else:
                log.debug('compiling message catalog %s', catalog)
                rv = _compile_catalog(catalog, key)
            _translations[key] = rv
    return rv


def translate(message, locale=None, *params):
    """Translate a message to the given locale.  Positional params are
    inserted into ``{0}`` style placeholders.

    >>> translate('This field is required', 'fr')
    'Ce champ est obligatoire'
    >>> translate('Ensure this value has at most {0} characters', 'en', 5)
    'Ensure this value has at most 5 characters'
    """
    if locale is None:
        locale = settings.DEFAULT_LANGUAGE
    rv = load_translations(locale).gettext(message)
    if params:
        rv = rv.format(*params)
    return rv


def list_languages():
    """Return a list of all languages we have translations for."""
    found = set([settings.DEFAULT_LANGUAGE])
    for name in os.listdir(LOCALE_PATH):
        if has_catalog(name):
            found.add(str(parse_locale(name)))
    return sorted(found)


def select_language(available, *langs):
    """Selects the locale for error messages.  `available` are the locales
    configured for a form, `langs` are language preference strings in
    the format of the HTTP ``Accept-Language`` header.  They are tried in
    order and the first one that matches an available locale wins.

    >>> str(select_language(['en', 'fr'], 'de-CH', 'fr'))
    'fr'
    >>> str(select_language(['en', 'fr'], 'fr-CH, fr;q=0.9, en;q=0.8'))
    'fr'
    >>> str(select_language([], 'fr'))
    'en'

    If nothing matches or the match is a language without a catalog the
    default language is returned.
    """
    default = parse_locale(settings.DEFAULT_LANGUAGE)
    available = [str(parse_locale(x)) for x in available]
    if not available:
        return default
    for value in langs:
        # a bare wildcard says nothing about the preferred language
        accept = LanguageAccept([item for item in
                                 parse_accept_header(value, LanguageAccept)
                                 if item[0] != '*'])
        match = accept.best_match(available)
        if match is not None:
            break
    else:
        return default
    if match not in settings.LANGUAGES:
        return default
    return parse_locale(match)
