"""HTML tag builders for the remote helpers.

These are the markup collaborators: every helper that emits an element or
a script block goes through them, so escaping is decided in one place.
"""

from markupsafe import Markup, escape

__all__ = [
    'escape_html',
    'render_attr',
    'spread_attrs',
    'tag',
    'content_tag',
    'javascript_cdata_section',
    'javascript_tag',
]


def escape_html(value) -> Markup:
    """Escape ``value`` with markupsafe, treating None as empty.

    Example:
        >>> escape_html("<b>bold</b>")
        Markup('&lt;b&gt;bold&lt;/b&gt;')
        >>> escape_html(None)
        Markup('')
    """
    if value is None:
        return Markup('')
    return escape(value)


def render_attr(name: str, value) -> str:
    """Render one attribute with a leading space; True is bare, False/None is dropped.

    Example:
        >>> render_attr("onclick", "go('x')")
        ' onclick="go(&#39;x&#39;)"'
    """
    if value is True:
        return f' {name}'
    if value is False or value is None:
        return ''
    return f' {name}="{escape_html(value)}"'


def spread_attrs(attrs: dict | None) -> str:
    """Spread a dictionary as HTML attributes, in insertion order.

    Example:
        >>> spread_attrs({"class": "btn", "disabled": True})
        ' class="btn" disabled'
    """
    if not attrs:
        return ''
    return ''.join(render_attr(k, v) for k, v in attrs.items())


def tag(name: str, attrs: dict | None = None) -> Markup:
    """Render a void element such as ``<input>``.

    Example:
        >>> tag("input", {"type": "button", "value": "Go"})
        Markup('<input type="button" value="Go" />')
    """
    return Markup(f'<{name}{spread_attrs(attrs)} />')


def content_tag(name: str, content, attrs: dict | None = None) -> Markup:
    """Render an element wrapping ``content``.

    Plain strings are escaped; Markup content is trusted.

    Example:
        >>> content_tag("a", "Fish & Chips", {"href": "#"})
        Markup('<a href="#">Fish &amp; Chips</a>')
    """
    return Markup(f'<{name}{spread_attrs(attrs)}>{escape_html(content)}</{name}>')


def javascript_cdata_section(code: str) -> Markup:
    return Markup(f'\n//<![CDATA[\n{code}\n//]]>\n')


def javascript_tag(code: str, attrs: dict | None = None) -> Markup:
    """Wrap JavaScript ``code`` in a script block.

    The code is emitted verbatim inside a CDATA section.

    Example:
        >>> javascript_tag("alert('hi')")
        Markup("<script type=\\"text/javascript\\">\\n//<![CDATA[\\nalert('hi')\\n//]]>\\n</script>")
    """
    script_attrs = {'type': 'text/javascript', **(attrs or {})}
    return content_tag('script', javascript_cdata_section(code), script_attrs)
