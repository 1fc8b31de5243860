"""Links and buttons that run JavaScript or a remote request when clicked."""

from markupsafe import Markup

from hyper_remote.config import HelperConfig
from hyper_remote.html import content_tag, tag
from hyper_remote.options import RequestOptions
from hyper_remote.remote import build_request_expression

__all__ = [
    'build_click_handler',
    'link_to_function',
    'button_to_function',
    'link_to_remote',
    'button_to_remote',
    'submit_to_remote',
]


def build_click_handler(existing_handler: str | None, function_body: str | None) -> str:
    """Join an existing onclick handler and a function body, then cancel the click.

    Example:
        >>> build_click_handler(None, "alert('Hello world!')")
        "alert('Hello world!'); return false;"
        >>> build_click_handler("track()", "go()")
        'track(); go(); return false;'
    """
    prefix = f'{existing_handler}; ' if existing_handler else ''
    return f'{prefix}{function_body or ""}; return false;'


def link_to_function(name, function: str | None = None, html_options: dict | None = None) -> Markup:
    """Return a link that runs ``function`` when clicked and returns false.

    ``href`` defaults to ``#``; an ``onclick`` in ``html_options`` runs first.

    Example:
        >>> link_to_function("Greeting", "alert('Hello world!')")
        Markup('<a href="#" onclick="alert(&#39;Hello world!&#39;); return false;">Greeting</a>')
    """
    attrs = dict(html_options or {})
    existing = attrs.pop('onclick', None)
    href = attrs.pop('href', None) or '#'
    return content_tag('a', name, {'href': href, **attrs, 'onclick': build_click_handler(existing, function)})


def button_to_function(name, function: str | None = None, html_options: dict | None = None) -> Markup:
    """Return a button input that runs ``function`` when clicked.

    Example:
        >>> button_to_function("Greeting", "alert('Hello world!')")
        Markup('<input type="button" value="Greeting" onclick="alert(&#39;Hello world!&#39;);" />')
    """
    attrs = dict(html_options or {})
    existing = attrs.pop('onclick', None)
    prefix = f'{existing}; ' if existing else ''
    onclick = f'{prefix}{function or ""};'
    return tag('input', {**attrs, 'type': 'button', 'value': name, 'onclick': onclick})


def link_to_remote(
    name,
    options=None,
    html_options: dict | None = None,
    config: HelperConfig | None = None,
) -> Markup:
    """Return a link that performs a remote request when clicked.

    ``html_options`` falls back to ``options["html"]``. Give it an ``href``
    for a link that still works without JavaScript.

    Example:
        >>> link_to_remote("Delete this post", {"url": "/posts/3", "update": "posts", "with": "null"})
        Markup('<a href="#" onclick="new Ajax.Updater(&#39;posts&#39;, &#39;/posts/3&#39;, {asynchronous:true, evalScripts:true, parameters:null}); return false;">Delete this post</a>')
    """
    options = RequestOptions.coerce(options)
    if html_options is None:
        html_options = options.html
    return link_to_function(name, build_request_expression(options, config), html_options)


def button_to_remote(
    name,
    options=None,
    html_options: dict | None = None,
    config: HelperConfig | None = None,
) -> Markup:
    """Return a button input that performs a remote request when clicked."""
    options = RequestOptions.coerce(options)
    if html_options is None:
        html_options = options.html
    return button_to_function(name, build_request_expression(options, config), html_options)


def submit_to_remote(name: str, value, options=None, config: HelperConfig | None = None) -> Markup:
    """Return a button that submits its enclosing form in the background.

    The form is serialized unless ``with`` says otherwise. ``name`` becomes
    the input's name attribute and ``value`` its label.

    Example:
        >>> submit_to_remote("create_btn", "Create", {"url": "/testing/create"})
        Markup('<input name="create_btn" type="button" value="Create" onclick="new Ajax.Request(&#39;/testing/create&#39;, {asynchronous:true, evalScripts:true, parameters:Form.serialize(this.form)});" />')
    """
    options = RequestOptions.coerce(options)
    html_options = {**(options.html or {}), 'name': name}
    if options.with_ is None:
        options = options.model_copy(update={'with_': 'Form.serialize(this.form)'})
    return button_to_remote(value, options, html_options, config)
