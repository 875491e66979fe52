# typesfinder/errors.py
"""
Error types for typesfinder.

Resolution itself never fails: a missing tag, an empty expression or an
unknown alias all degrade to a (possibly empty) result. Errors are raised
only while building inputs, for example an alias table with an empty key.

Error Hierarchy
───────────────
    TypesFinderError (base)
    ├── ContextError          - namespace / alias table construction
    │   └── InvalidAliasError - empty alias or empty target name
    └── TypeExpressionError   - type expression could not be parsed

Error Codes
───────────
Each error carries a code ``TF-XXXX``:
  - 0001-0999: context errors
  - 1000-1999: type expression errors
  - 9000-9999: internal errors
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ErrorCode:
    """A stable, documented error identifier."""
    number: int
    name: str
    description: str = ""

    @property
    def code(self) -> str:
        return f"TF-{self.number:04d}"

    def __str__(self) -> str:
        return self.code


class ErrorCodes:
    """Registry of all error codes."""
    EMPTY_ALIAS = ErrorCode(1, "empty-alias", "Alias name must not be empty")
    EMPTY_ALIAS_TARGET = ErrorCode(
        2, "empty-alias-target", "Alias must point to a non-empty name"
    )
    INVALID_USE_CLAUSE = ErrorCode(
        3, "invalid-use-clause", "Use clause is not of the form 'Name [as Alias]'"
    )
    UNPARSABLE_EXPRESSION = ErrorCode(
        1000, "unparsable-expression", "Type expression could not be parsed"
    )
    INTERNAL_ERROR = ErrorCode(9000, "internal-error", "Internal error")


class TypesFinderError(Exception):
    """Base exception for all typesfinder errors."""

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        hint: str = "",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or ErrorCodes.INTERNAL_ERROR
        self.hint = hint
        self.cause = cause

    def __str__(self) -> str:
        text = f"{self.code}: {self.message}"
        if self.hint:
            text += f" (hint: {self.hint})"
        return text


# ───────────────────────────────────────────────────────────────────
# CONTEXT ERRORS
# ───────────────────────────────────────────────────────────────────

class ContextError(TypesFinderError):
    """Namespace context could not be built."""


class InvalidAliasError(ContextError):
    """An alias table entry is malformed."""

    def __init__(
        self,
        alias: str,
        target: str,
        code: Optional[ErrorCode] = None,
        hint: str = "",
    ) -> None:
        super().__init__(
            f"invalid alias {alias!r} -> {target!r}",
            code=code or ErrorCodes.EMPTY_ALIAS,
            hint=hint,
        )
        self.alias = alias
        self.target = target


# ───────────────────────────────────────────────────────────────────
# EXPRESSION ERRORS
# ───────────────────────────────────────────────────────────────────

class TypeExpressionError(TypesFinderError):
    """A type expression could not be split into tokens."""

    def __init__(self, expression: str, cause: Optional[Exception] = None) -> None:
        super().__init__(
            f"cannot parse type expression {expression!r}",
            code=ErrorCodes.UNPARSABLE_EXPRESSION,
            cause=cause,
        )
        self.expression = expression
