"""Configuration for the remote helpers.

Helpers take an optional ``config`` argument. Passing nothing means
``DEFAULT_CONFIG``; use ``dataclasses.replace`` to derive a variant:

    from dataclasses import replace
    from hyper_remote import DEFAULT_CONFIG, link_to_remote

    config = replace(DEFAULT_CONFIG, forgery_token=("authenticity_token", token))
    link_to_remote("Delete", {"url": "/posts/3"}, config=config)
"""

from dataclasses import dataclass

from hyper_remote.urls import UrlResolver, url_for

__all__ = ["HelperConfig", "DEFAULT_CONFIG", "resolve_config"]


@dataclass(frozen=True)
class HelperConfig:
    """Settings shared by every helper call."""

    url_resolver: UrlResolver = url_for
    # Parameters sent when a request names no `with`, `form` or `submit`
    default_parameters: str = "Form.serialize(this.form)"
    poll_frequency: int | float = 10
    eval_scripts: bool = True
    # (name, value) appended to request parameters
    forgery_token: tuple[str, str] | None = None


DEFAULT_CONFIG = HelperConfig()


def resolve_config(config: HelperConfig | None) -> HelperConfig:
    return DEFAULT_CONFIG if config is None else config
