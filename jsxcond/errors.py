"""
Exceptions raised by jsxcond.

All expected errors that should be displayed to the user as clean messages
(without stack traces) inherit from JsxCondUserError. Programming errors and
bugs propagate with full tracebacks.
"""

from __future__ import annotations

from typing import Optional


class JsxCondUserError(Exception):
    """Base class for all user-facing errors."""
    pass


class ConfigError(JsxCondUserError):
    """Invalid jsxcond.yaml or command line configuration."""
    pass


class TransformError(JsxCondUserError):
    """
    A failure of the If/Else rewrite.

    Carries the bare message plus the location it was detected at. The
    location is filled in once, by the visit step of the innermost node being
    rewritten when the error was raised.
    """

    def __init__(self, message: str, file_name: Optional[str] = None, node_text: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.file_name = file_name
        self.node_text = node_text

    @property
    def has_context(self) -> bool:
        return self.node_text is not None

    def with_context(self, file_name: str, node_text: str) -> TransformError:
        if not self.has_context:
            self.file_name = file_name
            self.node_text = node_text
        return self

    def __str__(self) -> str:
        text = self.message
        if self.file_name is not None:
            text += f"\nIn file {self.file_name}"
        if self.node_text is not None:
            text += f"\nAt node {self.node_text}"
        return text


class OrphanedElseError(TransformError):
    """<Else> without a preceding <If>, or with no markup parent at all."""


class MissingConditionError(TransformError):
    """<If> without a `condition` attribute."""


class MalformedConditionError(TransformError):
    """`condition` attribute whose value is not an expression container."""


class MalformedBodyError(TransformError):
    """Element or fragment whose children do not have the expected shape."""


class InternalConsistencyError(TransformError):
    """An <If> that cannot be found among its own parent's children."""


__all__ = [
    "JsxCondUserError",
    "ConfigError",
    "TransformError",
    "OrphanedElseError",
    "MissingConditionError",
    "MalformedConditionError",
    "MalformedBodyError",
    "InternalConsistencyError",
]
