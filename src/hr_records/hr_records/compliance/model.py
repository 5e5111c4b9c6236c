from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.enums import ComplianceCategory


@dataclass(frozen=True)
class ComplianceFinding:
    """Pass/fail judgment about one requirement.

    Always produced, also when satisfied, so the caller can render both states.
    ``age`` is only set on the age finding, when the age could be computed.
    """

    category: ComplianceCategory
    message: str
    satisfied: bool
    age: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "message": self.message,
            "satisfied": self.satisfied,
            "age": self.age,
        }


@dataclass(frozen=True)
class ComplianceOutcome:
    findings: Tuple[ComplianceFinding, ...]

    @property
    def all_satisfied(self) -> bool:
        return all(f.satisfied for f in self.findings)

    def finding(self, category: ComplianceCategory) -> Optional[ComplianceFinding]:
        for f in self.findings:
            if f.category == category:
                return f
        return None

    def to_dict(self) -> dict:
        return {
            "all_satisfied": self.all_satisfied,
            "findings": [f.to_dict() for f in self.findings],
        }
