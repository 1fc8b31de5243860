"""Translate request options into a Prototype.js Ajax invocation.

The result is a single JavaScript expression, for example:

    new Ajax.Updater('posts', '/posts/3', {asynchronous:true, evalScripts:true,
        method:'delete', parameters:Form.serialize(this.form)})

which the other helpers embed in click handlers, observers and pollers.
Callback code is caller-supplied JavaScript and is inserted verbatim.
"""

import logging

from hyper_remote.config import HelperConfig, resolve_config
from hyper_remote.javascript import escape_javascript, options_for_javascript, quote
from hyper_remote.options import RequestOptions, UpdateTargets

__all__ = [
    'build_callbacks',
    'build_parameters',
    'options_for_ajax',
    'build_request_expression',
    'remote_function',
]

logger = logging.getLogger(__name__)


def _method_option(method: str) -> str:
    # Already a JS expression or literal
    if "'" in method:
        return method
    return f"'{method}'"


def _update_argument(update: UpdateTargets | str | None) -> str:
    if update is None:
        return ''
    if isinstance(update, UpdateTargets):
        targets = []
        if update.success is not None:
            targets.append(f'success:{quote(update.success)}')
        if update.failure is not None:
            targets.append(f'failure:{quote(update.failure)}')
        return '{' + ','.join(targets) + '}'
    return quote(update)


def build_callbacks(options: RequestOptions) -> dict[str, str]:
    """Map each callback set in ``options`` to its ``on<Name>`` handler.

    Lifecycle hooks come first in their fixed order, then status-specific
    callbacks in ascending status order.

    Example:
        >>> build_callbacks(RequestOptions.coerce({"complete": "done()", 404: "oops()"}))
        {'onComplete': 'function(request){done()}', 'on404': 'function(request){oops()}'}
    """
    callbacks = {}
    for hook, code in options.lifecycle_callbacks():
        callbacks[f'on{hook.capitalize()}'] = f'function(request){{{code}}}'
    for status in sorted(options.status_callbacks):
        callbacks[f'on{status}'] = f'function(request){{{options.status_callbacks[status]}}}'
    return callbacks


def build_parameters(options: RequestOptions, config: HelperConfig | None = None) -> str | None:
    """Return the expression sent as the request parameters, if any.

    Precedence is ``form``, then ``submit``, then ``with``, then the
    configured default. A configured forgery token is appended unless the
    whole form is serialized, since the form already carries it.
    """
    config = resolve_config(config)

    if options.form:
        parameters = 'Form.serialize(this)'
    elif options.submit:
        parameters = f'Form.serialize({quote(options.submit)})'
    elif options.with_ is not None:
        parameters = options.with_
    else:
        parameters = config.default_parameters or None

    if config.forgery_token and not options.form:
        name, value = config.forgery_token
        token = f"{escape_javascript(name)}=' + encodeURIComponent({quote(value)})"
        parameters = f"{parameters} + '&{token}" if parameters else f"'{token}"

    return parameters


def options_for_ajax(options: RequestOptions, config: HelperConfig | None = None) -> str:
    """Render the options object passed to ``Ajax.Request``/``Ajax.Updater``."""
    config = resolve_config(config)
    eval_scripts = config.eval_scripts if options.script is None else options.script

    js_options = {
        'asynchronous': 'false' if options.type == 'synchronous' else 'true',
        'evalScripts': 'true' if eval_scripts else 'false',
    }
    if options.method is not None:
        js_options['method'] = _method_option(options.method)
    if options.position is not None:
        js_options['insertion'] = quote(options.position.lower())

    parameters = build_parameters(options, config)
    if parameters is not None:
        js_options['parameters'] = parameters

    js_options.update(build_callbacks(options))
    return options_for_javascript(js_options)


def build_request_expression(options=None, config: HelperConfig | None = None) -> str:
    """Build the JavaScript expression that performs an asynchronous request.

    Args:
        options: A RequestOptions instance or a mapping of request options.
        config: Helper settings; None uses DEFAULT_CONFIG.

    Returns:
        The request expression, wrapped in any ``before``/``after`` code and
        ``condition``/``confirm`` guards. The string is not HTML-escaped.

    Raises:
        UrlResolutionError: If the configured URL resolver rejects ``url``.

    Example:
        >>> build_request_expression({"url": "/person/4", "method": "delete", "with": "null"})
        "new Ajax.Request('/person/4', {asynchronous:true, evalScripts:true, method:'delete', parameters:null})"
    """
    options = RequestOptions.coerce(options)
    config = resolve_config(config)

    url = config.url_resolver(options.url)
    update = _update_argument(options.update)

    if update:
        function = f'new Ajax.Updater({update}, '
    else:
        function = 'new Ajax.Request('
    function += f'{quote(url)}, {options_for_ajax(options, config)})'

    if options.before is not None:
        function = f'{options.before}; {function}'
    if options.after is not None:
        function = f'{function}; {options.after}'
    if options.condition is not None:
        function = f'if ({options.condition}) {{ {function}; }}'
    if options.confirm is not None:
        function = f'if (confirm({quote(options.confirm)})) {{ {function}; }}'

    logger.debug('Built request expression for %s (update=%s)', url, update or None)
    return function


remote_function = build_request_expression
