"""Hyper Remote - Prototype.js-style Ajax helpers for Hyper templates.

Public API exports:
- Request expressions (from hyper_remote.remote)
- Links and buttons (from hyper_remote.helpers)
- Observers and pollers (from hyper_remote.observers, hyper_remote.pollers)
- Option records and configuration
"""

# Request translation
from hyper_remote.remote import (
    build_callbacks,
    build_parameters,
    build_request_expression,
    options_for_ajax,
    remote_function,
)

# Click handlers, links and buttons
from hyper_remote.helpers import (
    build_click_handler,
    button_to_function,
    button_to_remote,
    link_to_function,
    link_to_remote,
    submit_to_remote,
)

# Observers and pollers
from hyper_remote.observers import build_observer, observe_field, observe_form
from hyper_remote.pollers import build_poller, periodically_call_remote

# Options, configuration and collaborators
from hyper_remote.options import CALLBACK_HOOKS, ObserverOptions, RequestOptions, UpdateTargets
from hyper_remote.config import DEFAULT_CONFIG, HelperConfig
from hyper_remote.urls import url_for
from hyper_remote.javascript import escape_javascript, options_for_javascript
from hyper_remote.errors import HelperError, UrlResolutionError

__all__ = [
    # Request translation
    'build_request_expression',
    'remote_function',
    'build_callbacks',
    'build_parameters',
    'options_for_ajax',
    # Links and buttons
    'build_click_handler',
    'link_to_function',
    'button_to_function',
    'link_to_remote',
    'button_to_remote',
    'submit_to_remote',
    # Observers and pollers
    'build_observer',
    'observe_field',
    'observe_form',
    'build_poller',
    'periodically_call_remote',
    # Options and configuration
    'CALLBACK_HOOKS',
    'RequestOptions',
    'ObserverOptions',
    'UpdateTargets',
    'HelperConfig',
    'DEFAULT_CONFIG',
    # Collaborators
    'url_for',
    'escape_javascript',
    'options_for_javascript',
    # Errors
    'HelperError',
    'UrlResolutionError',
]
