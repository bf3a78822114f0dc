"""
    formsmith.settings
    ~~~~~~~~~~~~~~~~~~

    This module just stores the formsmith settings.  The defaults live in
    `default_settings.cfg` next to this file, a custom file can be loaded
    with :func:`configure_from_file` or by pointing the
    ``FORMSMITH_SETTINGS_FILE`` environment variable to it.

    Fields and forms read the settings when they are created, changing a
    setting does not affect objects that already exist.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
import os
from os.path import join, dirname


def configure(**values):
    """Configuration shortcut."""
    d = globals()
    for key, value in values.items():
        if key.startswith('_') or not key.isupper():
            raise TypeError('invalid configuration variable %r' % key)
        d[key] = value


def revert_to_default():
    """Reverts the known settings to the defaults."""
    configure_from_file(join(dirname(__file__), 'default_settings.cfg'))


def autodiscover_settings():
    """Finds settings in the environment."""
    if 'FORMSMITH_SETTINGS_FILE' in os.environ:
        configure_from_file(os.environ['FORMSMITH_SETTINGS_FILE'])


def configure_from_file(filename):
    """Configures from a file."""
    d = globals()
    ns = dict(d)
    with open(filename) as f:
        code = compile(f.read(), filename, 'exec')
    exec(code, ns)
    for key, value in ns.items():
        if not key.startswith('_') and key.isupper():
            d[key] = value


revert_to_default()
autodiscover_settings()
