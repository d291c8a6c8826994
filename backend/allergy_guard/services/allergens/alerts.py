"""Alert text and severity classification for detected allergens (unified 1-10 scale)."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from allergy_guard.config import settings
from allergy_guard.services.allergens.detector import AllergenMatch

SEVERE_TITLE = "SEVERE ALLERGY ALERT"
STANDARD_TITLE = "Allergy Alert"
HIGH_SEVERITY_WARNING = "HIGH SEVERITY - Exercise extreme caution!"

# Older profile screens stored 1 (mild) .. 3 (severe).
_LEGACY_SEVERITY_MAP = {1: 3, 2: 6, 3: 9}


@dataclass(frozen=True)
class AllergyAlert:
    title: str
    message: str
    severity_class: str
    highest_severity: int
    matches: tuple[AllergenMatch, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "matches", tuple(self.matches))

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "message": self.message,
            "severityClass": self.severity_class,
            "highestSeverity": self.highest_severity,
            "matches": [m.to_dict() for m in self.matches],
        }


def severity_class(highest_severity: int) -> str:
    if highest_severity >= settings.danger_severity_threshold:
        return "danger"
    return "warning"


def compose_alert(matches: Sequence[AllergenMatch], food_name: str) -> AllergyAlert:
    """
    Build the alert shown before a food is added or a scan is accepted.
    Reasons are taken from the matches, deduplicated in first-seen order.
    """
    if not matches:
        raise ValueError("compose_alert requires at least one match")

    highest = max(m.severity for m in matches)
    alert_class = severity_class(highest)
    names = ", ".join(m.prohibited_ingredient for m in matches)
    reasons = list(dict.fromkeys(m.reason for m in matches if m.reason))
    plural = "ingredients" if len(matches) > 1 else "ingredient"

    message = f'"{food_name}" contains prohibited {plural}: {names}'
    if reasons:
        message += f"\n\nReasons: {', '.join(reasons)}"
    if alert_class == "danger":
        message += f"\n\n{HIGH_SEVERITY_WARNING}"

    return AllergyAlert(
        title=SEVERE_TITLE if alert_class == "danger" else STANDARD_TITLE,
        message=message,
        severity_class=alert_class,
        highest_severity=highest,
        matches=tuple(matches),
    )


def severity_color(severity: int) -> str:
    if severity >= 9:
        return "#d32f2f"
    if severity >= 7:
        return "#f57c00"
    if severity >= 5:
        return "#fbc02d"
    return "#689f38"


def severity_label(severity: int) -> str:
    if severity >= 9:
        return "EMERGENCY"
    if severity >= 7:
        return "HIGH RISK"
    if severity >= 5:
        return "MODERATE"
    return "LOW RISK"


def format_match_summary(matches: Sequence[AllergenMatch]) -> str:
    """One paragraph per match: "[LABEL] name (found in: a, b)"."""
    if not matches:
        return "No allergens detected"
    return "\n\n".join(
        f"[{severity_label(m.severity)}] {m.prohibited_ingredient} (found in: {', '.join(m.found_in)})"
        for m in matches
    )


def to_unified_severity(legacy_severity: int) -> int:
    """Map the legacy 1-3 profile scale onto 1-10 (1->3, 2->6, 3->9)."""
    try:
        return _LEGACY_SEVERITY_MAP[legacy_severity]
    except KeyError:
        raise ValueError(f"legacy severity must be 1, 2 or 3, got {legacy_severity!r}") from None
