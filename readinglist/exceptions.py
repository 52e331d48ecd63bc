"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
subclasses raised by the site generator pipeline: unreadable or unwritable
files, malformed CSV input and malformed page templates. Every error carries
the pipeline stage that failed in its ``context`` so the entry point can
report where generation stopped.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'PARSE_ERROR'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.
    transient : bool, optional
        Whether the error is temporary and may be retried.

    Attributes
    ----------
    code : str
        Stable machine-readable error code.
    message : str
        Human-readable message.
    context : dict
        Structured, non-sensitive context for logging.
    transient : bool
        True if the error is transient.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'stage': 'load'})
    >>> e.code
    'CODE'
    >>> e.stage
    'load'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    @property
    def stage(self) -> str:
        """Return the pipeline stage recorded in the context, if any."""
        return str(self.context.get("stage", "unknown"))

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class FileAccessError(AppError):
    """Raised when the input cannot be read or the output cannot be written."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("IO_ERROR", message, context=context, transient=False)


class ParseError(AppError):
    """Raised for CSV input that is malformed or holds an unparseable date."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("PARSE_ERROR", message, context=context, transient=False)


class TemplateError(AppError):
    """Raised when the bundled page template is unreadable or malformed."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("TEMPLATE_ERROR", message, context=context, transient=False)
