from __future__ import annotations

from typing import Mapping, Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class RecordValidationError(ValidationError):
    """Raised at the trust boundary when a submitted record has field problems.

    Carries the problems so the form can be re-rendered with every message,
    plus the submitted values so the user does not lose their input.
    """

    def __init__(self, problems: Sequence, values: Optional[Mapping[str, object]] = None):
        self.problems = tuple(problems)
        self.values = dict(values or {})
        super().__init__("; ".join(p.message for p in self.problems) or "Invalid record")
