"""Prohibited-ingredient detection and allergy alerts."""

from allergy_guard.services.allergens.alerts import (
    AllergyAlert,
    compose_alert,
    format_match_summary,
    severity_color,
    severity_label,
    to_unified_severity,
)
from allergy_guard.services.allergens.detector import (
    AllergenMatch,
    check_for_allergens,
    contains_allergen,
    get_aliases,
    has_allergens,
    normalize,
)

__all__ = [
    "AllergenMatch",
    "AllergyAlert",
    "check_for_allergens",
    "compose_alert",
    "contains_allergen",
    "format_match_summary",
    "get_aliases",
    "has_allergens",
    "normalize",
    "severity_color",
    "severity_label",
    "to_unified_severity",
]
