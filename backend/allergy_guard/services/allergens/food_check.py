"""
Quick check of a journal food entry against a user's prohibited ingredients.
Unlike check_for_allergens this is a plain lowercase substring search over every
text field of the entry; no aliases or patterns.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from allergy_guard.services.allergens.detector import AllergenMatch


@dataclass
class FoodCheckResult:
    has_prohibited: bool
    matches: list[Any] = field(default_factory=list)


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, dict):
        return entry.get(name)
    return getattr(entry, name, None)


def _searchable_text(entry: Any) -> str:
    parts = [
        _field(entry, "foodName") or "",
        _field(entry, "brand") or "",
        _field(entry, "notes") or "",
        " ".join(_field(entry, "ingredients") or []),
        " ".join(_field(entry, "allergens") or []),
    ]
    return " ".join(parts).lower()


def check_food_entry(entry: Any, prohibited_ingredients: Sequence[Any] | None) -> FoodCheckResult:
    if not prohibited_ingredients:
        return FoodCheckResult(has_prohibited=False)
    text = _searchable_text(entry)
    matches = []
    for prohibited in prohibited_ingredients:
        name = (_field(prohibited, "name") or "").lower().strip()
        if name and name in text:
            matches.append(prohibited)
    return FoodCheckResult(has_prohibited=bool(matches), matches=matches)


def as_allergen_matches(result: FoodCheckResult, food_name: str) -> list[AllergenMatch]:
    """Adapt food-entry matches for compose_alert; the entry itself is the source."""
    return [
        AllergenMatch(
            prohibited_ingredient=_field(p, "name"),
            found_in=[food_name],
            severity=_field(p, "severity") or 5,
            reason=_field(p, "reason") or None,
        )
        for p in result.matches
    ]
