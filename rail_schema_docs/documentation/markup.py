"""
Markup primitives for annotated SDL output.

Every helper wraps one token in a span (or link) carrying the CSS classes
used by code highlighting themes. Text content is HTML-escaped, quotes
included only inside attributes.
"""

import html

MARKER_CLASS = "variable language"


def _span(css_class: str, text: str) -> str:
    return f'<span class="{css_class}">{html.escape(text, quote=False)}</span>'


def keyword(text: str) -> str:
    return _span("keyword operator ts", text)


def identifier(text: str) -> str:
    return _span("identifier", text)


def parameter(text: str) -> str:
    return _span("variable parameter", text)


def comment(text: str) -> str:
    return _span("comment line", f"# {text}")


def property_(text: str) -> str:
    return _span("meta", text)


def string_value(text: str) -> str:
    return _span("string", text)


def type_link(name: str, url: str, title: str, marker: str = "") -> str:
    """
    Link to a named type, followed by its wrapper marker when there is one.

    Args:
        name: Name of the referenced type.
        url: Target of the link.
        title: Hover text.
        marker: ``[]`` or ``!`` decoration, empty for a bare named type.
    """
    link = (
        f'<a class="support type" href="{html.escape(url)}" '
        f'title="{html.escape(title)}">{html.escape(name, quote=False)}</a>'
    )
    if marker:
        link += _span(MARKER_CLASS, marker)
    return link
