"""
    formsmith
    ~~~~~~~~~

    Formsmith is a server side form toolkit.  Fields are declared with
    their type and constraints, grouped in a form and bound to untrusted
    request data exactly once.  The form then hands out the sanitized and
    validated values or translated errors, and renders itself as HTML for
    re-display.

    The fields live in :mod:`formsmith.fields`, the form in
    :mod:`formsmith.forms` and the widgets in :mod:`formsmith.widgets`.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
# note on imports: the settings module is imported by the setup script
# which must work before the dependencies are installed.  Don't import
# anything here.
