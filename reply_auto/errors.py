"""
Error types raised while analyzing text.

Every error carries a short `user_message` meant for the result panel; the
exception text itself holds the detail that goes to the logs.
"""

from __future__ import annotations

from typing import Optional


class ReplyAnalyzerError(RuntimeError):
    """Base class for failures surfaced to the user."""

    user_message = "An error occurred"

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or self.user_message)


class ConfigurationError(ReplyAnalyzerError):
    """A required setting (the OpenAI API key) is missing or invalid."""

    user_message = "OpenAI API key not configured"


class TransportError(ReplyAnalyzerError):
    """The chat-completion request failed or returned a non-success status."""

    user_message = "API call failed"

    def __init__(self, detail: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(detail)
        self.status_code = status_code


class ParseError(ReplyAnalyzerError):
    """The classifier answer is not valid JSON or lacks the expected fields."""


class AnalysisInProgressError(ReplyAnalyzerError):
    """Another analysis is still running for this session."""

    user_message = "Analysis already in progress"
