"""Field and form observers that call back when a value changes.

An observer is either timer-driven (it polls every ``frequency`` seconds)
or event-driven (it listens for change events):

    new Form.Element.Observer('suggest', 0.25, function(element, value) {...})
    new Form.EventObserver('signup', function(element, value) {...})
"""

import logging
import re
from typing import Literal

from markupsafe import Markup

from hyper_remote.config import HelperConfig
from hyper_remote.html import javascript_tag
from hyper_remote.javascript import quote
from hyper_remote.options import ObserverOptions
from hyper_remote.remote import build_request_expression

__all__ = [
    'OBSERVER_CLASSES',
    'is_timer_driven',
    'normalize_with',
    'build_observer',
    'observe_field',
    'observe_form',
]

logger = logging.getLogger(__name__)

ObservedKind = Literal['field', 'form']

# (kind, timer-driven) -> Prototype observer class
OBSERVER_CLASSES = {
    ('field', True): 'Form.Element.Observer',
    ('field', False): 'Form.Element.EventObserver',
    ('form', True): 'Form.Observer',
    ('form', False): 'Form.EventObserver',
}

# Any of these marks `with` as a JS expression rather than a bare key name
_EXPRESSION_CHARS = re.compile(r'[{=(.]')


def is_timer_driven(frequency) -> bool:
    """Return True if ``frequency`` is a number greater than zero."""
    if frequency is None or isinstance(frequency, bool):
        return False
    try:
        return float(frequency) > 0
    except (TypeError, ValueError):
        logger.debug('Non-numeric observer frequency %r, observing events instead', frequency)
        return False


def normalize_with(options: ObserverOptions) -> ObserverOptions:
    """Expand the ``with`` shorthand of an observer.

    A bare key name such as ``'q'`` becomes ``"'q=' + encodeURIComponent(value)"``.
    Anything that looks like an expression is kept. Without ``with`` and
    ``function`` the observed value itself is sent.
    """
    with_ = options.with_
    if with_ is not None and not _EXPRESSION_CHARS.search(with_):
        logger.debug('Expanding observer parameter key %r', with_)
        return options.model_copy(update={'with_': f"'{with_}=' + encodeURIComponent(value)"})
    if with_ is None and options.function is None:
        return options.model_copy(update={'with_': 'value'})
    return options


def build_observer(
    kind: ObservedKind,
    target_id: str,
    options=None,
    config: HelperConfig | None = None,
) -> str:
    """Build the JavaScript that registers an observer on a field or form.

    Args:
        kind: ``'field'`` for a single form element, ``'form'`` for a whole form.
        target_id: DOM id of the observed element.
        options: ObserverOptions or a mapping. ``function`` replaces the
            generated request as the callback body.
        config: Helper settings; None uses DEFAULT_CONFIG.

    Returns:
        The registration expression (not wrapped in a script block).

    Raises:
        ValueError: If ``kind`` is neither ``'field'`` nor ``'form'``.

    Example:
        >>> build_observer("field", "glass", {"frequency": 1, "function": "alert('Element changed')"})
        "new Form.Element.Observer('glass', 1, function(element, value) {alert('Element changed')})"
    """
    options = normalize_with(ObserverOptions.coerce(options))
    timer_driven = is_timer_driven(options.frequency)

    try:
        klass = OBSERVER_CLASSES[(kind, timer_driven)]
    except KeyError:
        raise ValueError(f"Unknown observer kind {kind!r}, expected 'field' or 'form'") from None

    if options.function is not None:
        callback = options.function
    else:
        callback = build_request_expression(options, config)

    javascript = f'new {klass}({quote(target_id)}, '
    if timer_driven:
        javascript += f'{options.frequency}, '
    javascript += f'function(element, value) {{{callback}}})'
    return javascript


def observe_field(field_id: str, options=None, config: HelperConfig | None = None) -> Markup:
    """Observe the form element ``field_id`` and call back when its value changes.

    By default the field's value is sent with the request. A bare key name
    in ``with`` renames the parameter; zero or missing ``frequency`` means
    the field is watched through change events.
    """
    return javascript_tag(build_observer('field', field_id, options, config))


def observe_form(form_id: str, options=None, config: HelperConfig | None = None) -> Markup:
    """Observe every field of the form ``form_id``.

    Takes the same options as observe_field; ``value`` is the serialized form.
    """
    return javascript_tag(build_observer('form', form_id, options, config))
