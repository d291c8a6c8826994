"""
Prohibited-ingredient detection over free-text product ingredient lists.

Matching is layered and deliberately permissive: normalized word-level substring
checks in both directions, then whole-alias phrase checks, then a small set of
regex patterns run against the raw ingredient text.
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from allergy_guard.logging import get_logger
from allergy_guard.services.allergens.tables import ALLERGEN_ALIASES, INGREDIENT_PATTERNS

logger = get_logger(__name__)

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class AllergenMatch:
    prohibited_ingredient: str
    found_in: tuple[str, ...] = ()
    severity: int = 0
    reason: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "found_in", tuple(self.found_in))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "prohibitedIngredient": self.prohibited_ingredient,
            "foundIn": list(self.found_in),
            "severity": self.severity,
        }
        if self.reason:
            out["reason"] = self.reason
        return out


def normalize(text: str) -> str:
    """Lowercase, drop punctuation, collapse whitespace. normalize(normalize(s)) == normalize(s)."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    s = _NON_WORD.sub("", text.lower().strip())
    return _WHITESPACE.sub(" ", s).strip()


def get_aliases(normalized_name: str) -> list[str]:
    """
    Every string that should count as a match for a prohibited ingredient name.
    Known names use the alias table; anything else gets a naive singular/plural pair.
    """
    aliases = ALLERGEN_ALIASES.get(normalized_name)
    if aliases:
        return list(aliases)
    if normalized_name.endswith("s"):
        return [normalized_name, normalized_name[:-1]]
    return [normalized_name, normalized_name + "s"]


def contains_allergen(product_ingredient: str, prohibited_name: str) -> bool:
    normalized_product = normalize(product_ingredient)
    normalized_prohibited = normalize(prohibited_name)
    # An empty word is a substring of everything
    if not normalized_product or not normalized_prohibited:
        return False

    product_words = normalized_product.split()
    for alias in get_aliases(normalized_prohibited):
        for alias_word in alias.split():
            for product_word in product_words:
                if (
                    alias_word in product_word
                    or product_word in alias_word
                    or product_word == alias_word
                ):
                    return True
        if alias and alias in normalized_product:
            return True

    for pattern in INGREDIENT_PATTERNS.get(normalized_prohibited, ()):
        if pattern.search(product_ingredient):
            return True
    return False


def _prohibited_fields(prohibited: Any) -> tuple[str, int, str | None]:
    if isinstance(prohibited, Mapping):
        name = prohibited.get("name")
        severity = prohibited.get("severity")
        reason = prohibited.get("reason")
    elif hasattr(prohibited, "name") and hasattr(prohibited, "severity"):
        name = prohibited.name
        severity = prohibited.severity
        reason = getattr(prohibited, "reason", None)
    else:
        raise TypeError(f"unsupported prohibited ingredient: {prohibited!r}")
    if name is None:
        name = ""
    if not isinstance(name, str):
        raise TypeError(f"prohibited ingredient name must be str, got {type(name).__name__}")
    if isinstance(severity, bool) or not isinstance(severity, int):
        raise TypeError(f"severity must be int, got {type(severity).__name__}")
    return name, severity, reason or None


def check_for_allergens(
    product_ingredients: Sequence[str] | None,
    prohibited_ingredients: Sequence[Any] | None,
) -> list[AllergenMatch]:
    """
    Test every prohibited ingredient against every product ingredient.
    Returns one AllergenMatch per prohibited ingredient that was found, highest
    severity first; ties keep the order of prohibited_ingredients.
    """
    if isinstance(product_ingredients, str) or isinstance(prohibited_ingredients, str):
        raise TypeError("expected a sequence of ingredients, got a single str")
    if not product_ingredients or not prohibited_ingredients:
        return []
    for ingredient in product_ingredients:
        if not isinstance(ingredient, str):
            raise TypeError(f"product ingredient must be str, got {type(ingredient).__name__}")

    logger.debug(
        "allergens.check.start ingredients=%s prohibited=%s",
        len(product_ingredients),
        len(prohibited_ingredients),
    )
    matches: list[AllergenMatch] = []
    for prohibited in prohibited_ingredients:
        name, severity, reason = _prohibited_fields(prohibited)
        if not name.strip():
            continue
        found_in = [
            ingredient
            for ingredient in product_ingredients
            if contains_allergen(ingredient, name)
        ]
        if found_in:
            matches.append(
                AllergenMatch(
                    prohibited_ingredient=name,
                    found_in=found_in,
                    severity=severity,
                    reason=reason,
                )
            )

    matches.sort(key=lambda m: m.severity, reverse=True)
    if matches:
        logger.info(
            "allergens.check.found matches=%s highest_severity=%s",
            len(matches),
            matches[0].severity,
        )
    return matches


def has_allergens(
    product_ingredients: Sequence[str] | None,
    prohibited_ingredients: Sequence[Any] | None,
) -> bool:
    return len(check_for_allergens(product_ingredients, prohibited_ingredients)) > 0
