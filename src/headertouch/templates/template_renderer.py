"""Render the Jinja2 templates bundled with headertouch."""

import jinja2

_environment = jinja2.Environment(
    loader=jinja2.PackageLoader("headertouch", "templates"),
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, **kwargs) -> str:
    """Load a bundled template by name and render it with the given arguments.

    Raises:
        jinja2.TemplateNotFound: If no such template is bundled.
        jinja2.UndefinedError: If the template uses a variable that was not passed.
    """
    return _environment.get_template(template_name).render(**kwargs)
