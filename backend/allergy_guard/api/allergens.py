from fastapi import APIRouter, HTTPException

from allergy_guard.logging import get_logger
from allergy_guard.schemas.allergens import (
    AllergenCheckRequest,
    AllergenCheckResponse,
    FoodEntryCheckRequest,
    FoodEntryCheckResponse,
    ProductCheckRequest,
)
from allergy_guard.services.allergens import (
    check_for_allergens,
    compose_alert,
    format_match_summary,
    severity_color,
    severity_label,
)
from allergy_guard.services.allergens.food_check import as_allergen_matches, check_food_entry
from allergy_guard.services.allergens.tables import get_all_allergen_keys
from allergy_guard.services.allergens.templates import get_templates
from allergy_guard.services.parsing.product_parser import parse_product_ingredients
from allergy_guard.utils.timing import time_span

router = APIRouter(prefix="/allergens")
logger = get_logger(__name__)


def _check(ingredients: list[str], prohibited: list, food_name: str | None) -> AllergenCheckResponse:
    matches = check_for_allergens(ingredients, prohibited)
    alert = None
    if matches and food_name:
        alert = compose_alert(matches, food_name).to_dict()
    return AllergenCheckResponse(
        has_allergens=bool(matches),
        matches=[m.to_dict() for m in matches],
        summary=format_match_summary(matches),
        alert=alert,
        ingredients=ingredients,
    )


@router.get("")
def list_allergens() -> dict:
    """Names with a predefined alias set."""
    return {"allergens": get_all_allergen_keys()}


@router.get("/templates")
def list_templates() -> dict:
    return get_templates()


@router.get("/severity/{severity}")
def describe_severity(severity: int) -> dict:
    if severity < 1 or severity > 10:
        raise HTTPException(status_code=400, detail="severity must be between 1 and 10")
    return {
        "severity": severity,
        "label": severity_label(severity),
        "color": severity_color(severity),
    }


@router.post("/check", response_model=AllergenCheckResponse)
def check_ingredients(body: AllergenCheckRequest) -> AllergenCheckResponse:
    with time_span(
        "allergens.check",
        ingredients=len(body.product_ingredients),
        prohibited=len(body.prohibited_ingredients),
    ):
        return _check(body.product_ingredients, body.prohibited_ingredients, body.food_name)


@router.post("/product", response_model=AllergenCheckResponse)
def check_product(body: ProductCheckRequest) -> AllergenCheckResponse:
    """Check an already-fetched Open Food Facts product payload."""
    ingredients = parse_product_ingredients(body.product)
    if not ingredients:
        logger.info("allergens.product.no_ingredients code=%s", body.product.get("code"))
    food_name = body.product.get("product_name") or "Unknown Product"
    with time_span("allergens.product", ingredients=len(ingredients)):
        return _check(ingredients, body.prohibited_ingredients, food_name)


@router.post("/food-entry", response_model=FoodEntryCheckResponse)
def check_entry(body: FoodEntryCheckRequest) -> FoodEntryCheckResponse:
    result = check_food_entry(body.food_entry, body.prohibited_ingredients)
    alert = None
    if result.has_prohibited:
        food_name = body.food_entry.foodName or "This food"
        alert = compose_alert(as_allergen_matches(result, food_name), food_name).to_dict()
    return FoodEntryCheckResponse(
        has_prohibited=result.has_prohibited,
        matches=result.matches,
        alert=alert,
    )
