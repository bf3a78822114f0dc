"""
    formsmith.templating
    ~~~~~~~~~~~~~~~~~~~~

    Very simple bridge to Jinja2.  The markup of widgets, labels, errors,
    fields and forms is defined as macros in ``templates/widgets.html``.

    :copyright: (c) 2024 by the formsmith authors, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from jinja2 import Environment, PackageLoader
from markupsafe import Markup

from formsmith.utils.attrs import attributes_to_html


WIDGETS_TEMPLATE = 'widgets.html'


def get_macro(template_name, macro_name):
    """Return a macro from a template."""
    template = jinja_env.get_template(template_name)
    return getattr(template.module, macro_name)


def render_macro(macro_name, *args):
    """Calls one of the widget macros and returns the result as
    markup.
    """
    return Markup(get_macro(WIDGETS_TEMPLATE, macro_name)(*args))


jinja_env = Environment(loader=PackageLoader('formsmith', 'templates'),
                        autoescape=True)
jinja_env.filters.update(
    attrs=attributes_to_html
)
