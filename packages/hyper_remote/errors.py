"""Helper exceptions with contextual error messages."""

from typing import Any


class HelperError(Exception):
    """Base exception for all helper errors."""


class UrlResolutionError(HelperError):
    """The URL resolver could not turn a target descriptor into a path."""

    def __init__(self, message: str, target: Any = None):
        self.target = target
        super().__init__(f"{message}\n\n  Target: {target!r}" if target is not None else message)
