"""Default URL resolver for request helpers."""

from collections.abc import Mapping
from typing import Any, Callable
from urllib.parse import urlencode

from hyper_remote.errors import UrlResolutionError

__all__ = ["UrlResolver", "url_for"]

UrlResolver = Callable[[Any], str]


def url_for(target: Any) -> str:
    """Resolve a target descriptor to a path or URL string.

    Args:
        target: A string (returned unchanged) or a mapping with a ``path``
            key. Remaining mapping keys become the query string, in the
            order given; ``None`` values are dropped.

    Returns:
        The resolved path or URL.

    Raises:
        UrlResolutionError: If the target is missing or has no usable path.

    Example:
        >>> url_for("/posts/3")
        '/posts/3'
        >>> url_for({"path": "/words/undo", "n": 33})
        '/words/undo?n=33'
    """
    if target is None:
        raise UrlResolutionError("No URL given for the request")

    if isinstance(target, str):
        return target

    if isinstance(target, Mapping):
        path = target.get("path")
        if not isinstance(path, str) or not path:
            raise UrlResolutionError("URL mapping needs a non-empty 'path'", target=target)

        query = [(k, v) for k, v in target.items() if k != "path" and v is not None]
        if not query:
            return path
        separator = "&" if "?" in path else "?"
        return f"{path}{separator}{urlencode(query)}"

    raise UrlResolutionError(
        f"Cannot resolve a URL from {type(target).__name__}", target=target
    )
