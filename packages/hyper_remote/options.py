"""Option records accepted by the remote helpers.

Helpers take either a model instance or a plain mapping such as:

    {
        "url": "/posts/3",
        "update": {"success": "posts", "failure": "error"},
        "method": "delete",
        "with": "'id=' + id",
        "complete": "done(request)",
        404: "alert('Not found')",
    }

Integer keys (and digit-only string keys) are gathered into
``status_callbacks``; the ``with`` key lands on the ``with_`` field.
Unknown keys are ignored. Values are typed loosely so an odd combination
produces odd output instead of a validation error.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

__all__ = [
    'CALLBACK_HOOKS',
    'UpdateTargets',
    'RequestOptions',
    'ObserverOptions',
]

# Emission order of the lifecycle callbacks
CALLBACK_HOOKS = ('create', 'uninitialized', 'loading', 'loaded', 'interactive', 'success', 'failure', 'complete')


def _status_code(key) -> int | None:
    """Return ``key`` as an HTTP status code, or None if it is not one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return None


def _as_text(value: Any) -> str | None:
    """Render an option value as the JavaScript text it stands for."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(getattr(value, 'value', value))


def _add_status_callback(callbacks: dict, key, value) -> bool:
    """Register ``value`` under ``key`` if the key is a status code."""
    code = _status_code(key)
    if code is None:
        return False
    # None still registers an empty handler
    callbacks[code] = '' if value is None else _as_text(value)
    return True


class UpdateTargets(BaseModel):
    """Element ids updated on success and on failure of a request."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    success: str | None = None
    failure: str | None = None

    @field_validator('success', 'failure', mode='before')
    @classmethod
    def _loose_target(cls, value: Any) -> Any:
        return _as_text(value)


class RequestOptions(BaseModel):
    """Options for a single asynchronous request expression."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    url: Any = None
    update: UpdateTargets | str | None = None
    method: str | None = None
    position: str | None = None
    with_: str | None = None

    # Guards wrapped around the request invocation
    condition: str | None = None
    confirm: str | None = None
    before: str | None = None
    after: str | None = None

    # Lifecycle callbacks, emitted in CALLBACK_HOOKS order
    create: str | None = None
    uninitialized: str | None = None
    loading: str | None = None
    loaded: str | None = None
    interactive: str | None = None
    success: str | None = None
    failure: str | None = None
    complete: str | None = None
    status_callbacks: dict[int, str] = {}

    # Request behaviour
    type: str | None = None
    script: bool | None = None
    form: bool = False
    submit: str | None = None

    # Attributes for the element wrapping the request (links, buttons)
    html: dict[str, Any] | None = None

    @model_validator(mode='before')
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data

        normalized = {}
        status_callbacks = {}
        explicit = data.get('status_callbacks')
        if isinstance(explicit, Mapping):
            for key, value in explicit.items():
                _add_status_callback(status_callbacks, key, value)

        for key, value in data.items():
            if key == 'status_callbacks' or _add_status_callback(status_callbacks, key, value):
                continue
            if key == 'with':
                normalized['with_'] = value
            elif isinstance(key, str):
                normalized[key] = value

        normalized['status_callbacks'] = status_callbacks
        return normalized

    @field_validator('update', mode='before')
    @classmethod
    def _loose_update(cls, value: Any) -> Any:
        if value is None or isinstance(value, (str, Mapping, UpdateTargets)):
            return value
        return _as_text(value)

    @field_validator(
        'method', 'position', 'type', 'submit', 'with_',
        'condition', 'confirm', 'before', 'after',
        *CALLBACK_HOOKS,
        mode='before',
    )
    @classmethod
    def _loose_text(cls, value: Any) -> Any:
        # Code fragments and names are inserted as text, whatever their type
        return _as_text(value)

    @field_validator('script', mode='before')
    @classmethod
    def _loose_script(cls, value: Any) -> Any:
        return None if value is None else bool(value)

    @field_validator('form', mode='before')
    @classmethod
    def _loose_form(cls, value: Any) -> Any:
        return bool(value)

    @field_validator('html', mode='before')
    @classmethod
    def _loose_html(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return None
        return {str(k): v for k, v in value.items()}

    @classmethod
    def coerce(cls, options: Any) -> 'RequestOptions':
        """Build an instance of this class from a model, a mapping or None."""
        if isinstance(options, cls):
            return options
        if isinstance(options, RequestOptions):
            return cls.model_validate(options.model_dump())
        return cls.model_validate(options or {})

    def lifecycle_callbacks(self) -> list[tuple[str, str]]:
        """Return the (hook, code) pairs that are set, in emission order."""
        return [(hook, getattr(self, hook)) for hook in CALLBACK_HOOKS if getattr(self, hook) is not None]


class ObserverOptions(RequestOptions):
    """Request options plus the settings of a field or form observer."""

    # Seconds between checks; zero or None means event-driven observation
    frequency: Any = None
    # Raw body of the observer callback, replacing the request expression
    function: str | None = None

    @field_validator('function', mode='before')
    @classmethod
    def _loose_function(cls, value: Any) -> Any:
        return _as_text(value)
