"""
Module: core.errors

Purpose:
    Exception types raised while compiling field specifications.

Key Classes:
    - FormSpecError: Base class for all form compilation errors
    - MalformedSpecError: A field header matched but its body is inconsistent

Used By:
    - parsing.items: Duplicate or empty choice values
    - rendering.markup: Kinds without a renderer
    - pipeline: Converts errors into FieldResult diagnostics
"""

from __future__ import annotations

from typing import Optional


class FormSpecError(Exception):
    """Base class for form compilation errors."""
    pass


class MalformedSpecError(FormSpecError):
    """
    Raised when a field specification cannot be turned into markup.

    Attributes:
        message: Human-readable description
        field_id: Identifier of the offending field, when known
        rhs: Right-hand side of the offending specification, when known
    """

    def __init__(
        self,
        message: str,
        *,
        field_id: Optional[str] = None,
        rhs: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field_id = field_id
        self.rhs = rhs

    def with_context(self, field_id: str, rhs: str) -> MalformedSpecError:
        """Return a copy carrying field context, keeping any already set."""
        return MalformedSpecError(
            self.message,
            field_id=self.field_id or field_id,
            rhs=self.rhs if self.rhs is not None else rhs,
        )

    def __str__(self) -> str:
        if self.field_id:
            return f"{self.message} (field {self.field_id})"
        return self.message
