"""Error taxonomy for generation calls.

Every failure surfaced by the generation layer is a subclass of
``RecruitSandboxError`` so the presentation layer can catch one type, while
tests and callers can still tell the kinds apart.
"""

from __future__ import annotations


class RecruitSandboxError(Exception):
    """Base class for all recruit-sandbox failures."""


class ConfigurationError(RecruitSandboxError):
    """Missing credential or invalid configuration value. Raised before any call."""


class TransportError(RecruitSandboxError):
    """Network failure, rate limit, timeout or provider-side fault."""


class ParseError(RecruitSandboxError):
    """Response body is not well-formed structured data."""


class EmptyAudioError(ParseError):
    """Speech response carried no audio payload."""


class SchemaValidationError(RecruitSandboxError):
    """Well-formed response that does not satisfy the declared contract."""

    def __init__(self, task: str, message: str, errors: list[dict] | None = None):
        super().__init__(f"{task}: {message}")
        self.task = task
        self.errors = errors or []


class PreconditionError(RecruitSandboxError):
    """A call was issued without its required input or prior artifact."""


class TaskInFlightError(RecruitSandboxError):
    """The same generation task is already running for this session."""
