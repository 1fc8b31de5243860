"""Periodic remote calls."""

from markupsafe import Markup

from hyper_remote.config import HelperConfig, resolve_config
from hyper_remote.html import javascript_tag
from hyper_remote.options import ObserverOptions
from hyper_remote.remote import build_request_expression

__all__ = ['build_poller', 'periodically_call_remote']


def build_poller(options=None, config: HelperConfig | None = None) -> Markup:
    """Call a URL every ``frequency`` seconds, in a script block.

    ``frequency`` defaults to the configured poll frequency (10 seconds).
    The other options are those of build_request_expression.

    Example:
        >>> build_poller({"url": "/grades/averages", "update": "avg", "with": "null"})
        Markup("<script type=\\"text/javascript\\">\\n//<![CDATA[\\nnew PeriodicalExecuter(function() {new Ajax.Updater('avg', '/grades/averages', {asynchronous:true, evalScripts:true, parameters:null})}, 10)\\n//]]>\\n</script>")
    """
    options = ObserverOptions.coerce(options)
    config = resolve_config(config)

    frequency = config.poll_frequency if options.frequency is None else options.frequency
    request = build_request_expression(options, config)
    return javascript_tag(f'new PeriodicalExecuter(function() {{{request}}}, {frequency})')


periodically_call_remote = build_poller
