from typing import Any

from pydantic import BaseModel, Field


class ProhibitedIngredient(BaseModel):
    name: str
    severity: int = Field(ge=1, le=10)  # unified 1-10 scale; map legacy 1-3 before sending
    reason: str | None = None


class AllergenMatchOut(BaseModel):
    prohibitedIngredient: str
    foundIn: list[str]
    severity: int
    reason: str | None = None


class AllergyAlertOut(BaseModel):
    title: str
    message: str
    severityClass: str  # "warning" | "danger"
    highestSeverity: int
    matches: list[AllergenMatchOut]


class AllergenCheckRequest(BaseModel):
    product_ingredients: list[str]
    prohibited_ingredients: list[ProhibitedIngredient]
    food_name: str | None = None  # when set, an alert is composed for any matches


class ProductCheckRequest(BaseModel):
    product: dict[str, Any]  # Open Food Facts "product" object, fetched by the caller
    prohibited_ingredients: list[ProhibitedIngredient]


class AllergenCheckResponse(BaseModel):
    has_allergens: bool
    matches: list[AllergenMatchOut] = []
    summary: str
    alert: AllergyAlertOut | None = None
    ingredients: list[str] = []


class FoodEntryIn(BaseModel):
    foodName: str = ""
    brand: str = ""
    notes: str = ""
    ingredients: list[str] = []
    allergens: list[str] = []


class FoodEntryCheckRequest(BaseModel):
    food_entry: FoodEntryIn
    prohibited_ingredients: list[ProhibitedIngredient]


class FoodEntryCheckResponse(BaseModel):
    has_prohibited: bool
    matches: list[ProhibitedIngredient] = []
    alert: AllergyAlertOut | None = None
