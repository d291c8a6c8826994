"""
Static allergen alias and pattern tables.
Keyed by what a user is likely to type (so "milk" and "dairy" both resolve to the
same superset), not by a canonical allergen taxonomy. Built once at import time
and exposed read-only.
"""

import re
from types import MappingProxyType

_DAIRY = (
    "milk", "dairy", "cream", "butter", "cheese", "whey", "casein", "lactose",
    "ghee", "buttermilk", "yogurt", "kefir", "curd",
)
_EGG = (
    "egg", "eggs", "albumin", "albumen", "ovalbumin", "ovoglobulin",
    "mayonnaise", "meringue",
)
_PEANUT = (
    "peanut", "peanuts", "groundnut", "groundnuts", "arachis", "beer nuts",
    "monkey nuts",
)
_ALMOND = ("almond", "almonds", "marzipan")
_WALNUT = ("walnut", "walnuts")
_CASHEW = ("cashew", "cashews")
_PISTACHIO = ("pistachio", "pistachios")
_PECAN = ("pecan", "pecans")
_HAZELNUT = ("hazelnut", "hazelnuts", "filbert")
_SOY = (
    "soy", "soya", "soybean", "soybeans", "tofu", "tempeh", "miso", "edamame",
    "shoyu", "tamari",
)
_FISH = (
    "fish", "anchovy", "anchovies", "bass", "catfish", "cod", "flounder",
    "grouper", "haddock", "hake", "halibut", "herring", "mahi mahi", "perch",
    "pike", "pollock", "salmon", "sardine", "sole", "snapper", "swordfish",
    "tilapia", "trout", "tuna",
)
_SULFITE = ("sulfite", "sulfites", "sulphite", "sulphites", "sulfur dioxide")
_CORN = ("corn", "maize", "cornmeal", "cornstarch", "polenta", "hominy", "grits")

# Aliases are stored already normalized (lowercase, no punctuation) since they are
# compared against normalized product text.
_ALIASES = {
    # Milk / dairy
    "milk": _DAIRY,
    "dairy": _DAIRY,
    # Eggs
    "egg": _EGG,
    "eggs": _EGG,
    # Peanuts
    "peanut": _PEANUT,
    "peanuts": _PEANUT,
    # Tree nuts
    "almond": _ALMOND,
    "almonds": _ALMOND,
    "walnut": _WALNUT,
    "walnuts": _WALNUT,
    "cashew": _CASHEW,
    "cashews": _CASHEW,
    "pistachio": _PISTACHIO,
    "pistachios": _PISTACHIO,
    "pecan": _PECAN,
    "pecans": _PECAN,
    "hazelnut": _HAZELNUT,
    "hazelnuts": _HAZELNUT,
    "macadamia": ("macadamia", "macadamias"),
    "brazil nut": ("brazil nut", "brazil nuts"),
    "chestnut": ("chestnut", "chestnuts"),
    # Soy
    "soy": _SOY,
    "soya": _SOY,
    "soybean": _SOY,
    # Wheat / gluten
    "wheat": (
        "wheat", "flour", "semolina", "durum", "spelt", "kamut", "farro",
        "bulgur", "couscous",
    ),
    "gluten": ("wheat", "barley", "rye", "malt", "brewers yeast", "seitan", "triticale"),
    "barley": ("barley", "malt"),
    "rye": ("rye",),
    # Fish
    "fish": _FISH,
    "salmon": ("salmon",),
    "tuna": ("tuna",),
    "cod": ("cod",),
    # Shellfish
    "shellfish": (
        "crab", "lobster", "shrimp", "prawn", "crawfish", "crayfish", "clam",
        "mussel", "oyster", "scallop", "squid", "octopus",
    ),
    "shrimp": ("shrimp", "prawn", "prawns"),
    "crab": ("crab",),
    "lobster": ("lobster",),
    "oyster": ("oyster", "oysters"),
    # Sesame, mustard, celery
    "sesame": ("sesame", "tahini", "benne", "gingelly", "til"),
    "mustard": ("mustard",),
    "celery": ("celery", "celeriac"),
    # Sulfites
    "sulfite": _SULFITE,
    "sulfites": _SULFITE,
    # Corn
    "corn": _CORN,
    "maize": _CORN,
}

ALLERGEN_ALIASES = MappingProxyType(_ALIASES)


def _compile(*patterns: str) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


# Second-pass catches for text the alias check can miss (prefix-style derivatives
# such as "ovomucoid"). Single word boundary plus at most one \w+, no nesting.
INGREDIENT_PATTERNS = MappingProxyType({
    "milk": _compile(r"\bmilk\b", r"\bdairy\b", r"\bcream\b", r"\bwhey\b", r"\bcasein\b", r"\blactose\b"),
    "egg": _compile(r"\begg\b", r"\balbumin\b", r"\bovo\w+"),
    "peanut": _compile(r"\bpeanut\b", r"\bgroundnut\b", r"\barachis\b"),
    "soy": _compile(r"\bsoy\b", r"\bsoya\b", r"\btofu\b", r"\bmiso\b"),
    "wheat": _compile(r"\bwheat\b", r"\bflour\b", r"\bgluten\b"),
    "fish": _compile(r"\bfish\b", r"\banchov\w+", r"\bsalmon\b", r"\btuna\b"),
    "shellfish": _compile(r"\bshrimp\b", r"\bcrab\b", r"\blobster\b", r"\bprawn\b"),
})


def get_all_allergen_keys() -> list[str]:
    """Return every name with a predefined alias set, for UI pickers."""
    return list(ALLERGEN_ALIASES.keys())
