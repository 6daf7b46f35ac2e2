"""Fixed keyword tables and patterns used by the heuristic extractor.

Everything here is immutable and built once at import time.
"""

import re

# Unit-of-quantity tokens. Matched as lowercase substrings, so "g" and "oz"
# hit inside longer words as well; the score only needs to rank lists.
MEASUREMENT_KEYWORDS: tuple[str, ...] = (
    "cup",
    "cups",
    "tablespoon",
    "tablespoons",
    "tbsp",
    "teaspoon",
    "teaspoons",
    "tsp",
    "pound",
    "pounds",
    "lb",
    "ounce",
    "ounces",
    "oz",
    "gram",
    "grams",
    "g",
    "kilogram",
    "kilograms",
    "kg",
    "ml",
    "milliliter",
    "milliliters",
    "liter",
    "liters",
    "pinch",
    "pinches",
    "dash",
    "to taste",
)

INSTRUCTION_KEYWORDS: tuple[str, ...] = (
    "instructions",
    "directions",
    "method",
    "steps",
    "how to make",
    "preparation",
)

# Applied to trimmed, lowercased list item text.
STEP_PATTERN = re.compile(r"^(\d+\.|\d+\)|\d+|step\s+\d+)")

SERVINGS_PATTERN = re.compile(r"serves\s+(\d+)|servings?:\s*(\d+)|yield:\s*(\d+)", re.IGNORECASE)
PREP_TIME_PATTERN = re.compile(
    r"prep(?:aration)?\s+time:?\s*(\d+)\s*(min|minutes|hour|hours|hrs?)", re.IGNORECASE
)
COOK_TIME_PATTERN = re.compile(
    r"cook(?:ing)?\s+time:?\s*(\d+)\s*(min|minutes|hour|hours|hrs?)", re.IGNORECASE
)

IMAGE_CONTAINER_SELECTOR = "article img, .recipe img, .post img"

ADVERTISEMENT_TEXT = "Advertisement"
DEFAULT_TITLE = "Untitled Recipe"
