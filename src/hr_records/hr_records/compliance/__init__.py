from .checks import check_age, check_compliance, check_id_document, check_minimum_wage, compute_age
from .model import ComplianceFinding, ComplianceOutcome

__all__ = [
    "ComplianceFinding",
    "ComplianceOutcome",
    "check_age",
    "check_compliance",
    "check_id_document",
    "check_minimum_wage",
    "compute_age",
]
