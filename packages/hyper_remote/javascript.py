"""JavaScript string helpers used when building inline scripts."""

import re
from collections.abc import Mapping

__all__ = [
    'escape_javascript',
    'quote',
    'options_for_javascript',
]

# Characters that cannot appear raw inside a single- or double-quoted JS string
_JS_ESCAPE_MAP = {
    '\\': '\\\\',
    '</': '<\\/',
    '\r\n': '\\n',
    '\n': '\\n',
    '\r': '\\n',
    '"': '\\"',
    "'": "\\'",
    '\u2028': '&#x2028;',
    '\u2029': '&#x2029;',
}

_JS_ESCAPE_PATTERN = re.compile('(\\\\|</|\r\n|\u2028|\u2029|[\n\r"\'])')


def escape_javascript(value) -> str:
    """Escape carriage returns, quotes and backslashes for a JS string literal.

    Args:
        value: The text to escape. ``None`` becomes an empty string.

    Returns:
        Text safe to place between single or double quotes in JavaScript.

    Example:
        >>> escape_javascript("Really delete 'posts'?")
        "Really delete \\\\'posts\\\\'?"
        >>> escape_javascript(None)
        ''
    """
    if value is None:
        return ''
    return _JS_ESCAPE_PATTERN.sub(lambda m: _JS_ESCAPE_MAP[m.group(1)], str(value))


def quote(value) -> str:
    """Return ``value`` as an escaped, single-quoted JavaScript string."""
    return f"'{escape_javascript(value)}'"


def options_for_javascript(options: Mapping[str, str]) -> str:
    """Render a mapping of raw JavaScript values as an object literal.

    Values are emitted verbatim and keys keep their insertion order.

    Example:
        >>> options_for_javascript({"asynchronous": "true", "method": "'get'"})
        "{asynchronous:true, method:'get'}"
        >>> options_for_javascript({})
        '{}'
    """
    if not options:
        return '{}'
    return '{' + ', '.join(f'{k}:{v}' for k, v in options.items()) + '}'
