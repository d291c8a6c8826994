from typing import Any

from allergy_guard.logging import get_logger

logger = get_logger(__name__)


def _clean_tag(tag: str) -> str:
    """Open Food Facts taxonomy id to plain text: "en:soy-lecithin" -> "soy lecithin"."""
    return tag.replace("en:", "").replace("-", " ")


def split_ingredients_text(text: str) -> list[str]:
    """Split a label's ingredient line on commas, dropping empty pieces."""
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_product_ingredients(product: dict[str, Any]) -> list[str]:
    """
    Ingredient strings from an Open Food Facts product object.
    Prefers the free-text ingredients_text; falls back to the structured
    ingredients list only when the text is missing. Declared allergen tags are
    always appended so label-declared allergens are checked even when the
    ingredient text omits them.
    """
    ingredients: list[str] = []

    text = product.get("ingredients_text")
    if isinstance(text, str) and text:
        ingredients.extend(split_ingredients_text(text))

    structured = product.get("ingredients")
    if isinstance(structured, list) and not ingredients:
        for item in structured:
            if not isinstance(item, dict):
                continue
            text_value = item.get("text")
            id_value = item.get("id")
            if isinstance(text_value, str) and text_value.strip():
                ingredients.append(text_value)
            elif isinstance(id_value, str) and id_value.strip():
                ingredients.append(_clean_tag(id_value))

    tags = product.get("allergens_tags")
    if isinstance(tags, list):
        ingredients.extend(_clean_tag(tag) for tag in tags if isinstance(tag, str))

    logger.info(
        "product_parser.parsed code=%s ingredients=%s",
        product.get("code"),
        len(ingredients),
    )
    return ingredients
