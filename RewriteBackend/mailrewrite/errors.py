"""Error types for the rewrite pipeline.

Only ``ValidationError`` and ``RewriteFailure`` ever reach an HTTP caller.
``ModelInvocationError`` is recovered by the fallback chain and
``PromptSourceError`` is swallowed by the prompt resolver.
"""

from __future__ import annotations

from typing import Optional


class RewriteError(Exception):
    """Base class for all rewrite pipeline errors."""


class ValidationError(RewriteError):
    def __init__(self, message: str = "text is required"):
        super().__init__(message)
        self.message = message


class PromptSourceError(RewriteError):
    def __init__(self, path: str, cause: Optional[BaseException] = None):
        super().__init__(f"Cannot read prompt source {path}: {cause}")
        self.path = path
        self.cause = cause


class ModelInvocationError(RewriteError):
    """A single model attempt failed (transport, provider, timeout or empty result)."""

    def __init__(self, model: str, message: str):
        super().__init__(message)
        self.model = model
        self.message = message


class RewriteFailure(RewriteError):
    """Every candidate model failed."""

    def __init__(self, message: Optional[str] = None, attempts: Optional[list] = None):
        super().__init__(message or "internal error")
        self.message = message or "internal error"
        self.attempts = list(attempts or [])
