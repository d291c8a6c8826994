"""Preset prohibited ingredients offered when a user sets up their profile."""

COMMON_ALLERGENS = (
    {"name": "Milk", "reason": "Lactose Intolerant", "severity": 6},
    {"name": "Eggs", "reason": "Egg Allergy", "severity": 7},
    {"name": "Fish", "reason": "Fish Allergy", "severity": 8},
    {"name": "Shellfish", "reason": "Shellfish Allergy", "severity": 9},
    {"name": "Tree nuts", "reason": "Tree Nut Allergy", "severity": 9},
    {"name": "Peanuts", "reason": "Peanut Allergy", "severity": 10},
    {"name": "Wheat", "reason": "Wheat Allergy", "severity": 7},
    {"name": "Soybeans", "reason": "Soy Allergy", "severity": 6},
    {"name": "Gluten", "reason": "Celiac Disease", "severity": 8},
    {"name": "Sesame", "reason": "Sesame Allergy", "severity": 7},
)

DIETARY_RESTRICTIONS = (
    {"name": "Meat", "reason": "Vegetarian", "severity": 3},
    {"name": "Pork", "reason": "Religious/Dietary", "severity": 4},
    {"name": "Beef", "reason": "Religious/Dietary", "severity": 4},
    {"name": "Alcohol", "reason": "Personal Choice", "severity": 5},
    {"name": "High sodium", "reason": "Hypertension", "severity": 6},
    {"name": "Added sugar", "reason": "Diabetes", "severity": 7},
)


def get_templates() -> dict[str, list[dict]]:
    return {
        "common_allergens": [dict(t) for t in COMMON_ALLERGENS],
        "dietary_restrictions": [dict(t) for t in DIETARY_RESTRICTIONS],
    }
