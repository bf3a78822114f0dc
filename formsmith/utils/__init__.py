"""
    formsmith.utils
    ~~~~~~~~~~~~~~~

    Various utilities used by the fields and forms.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
