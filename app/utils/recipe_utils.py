import json
import logging
import re
import uuid
from typing import Any, Dict, List, Optional, Tuple

from app.errors import RecipeExtractionFailure
from app.models.recipe.recipe_models import Difficulty, Ingredient, Recipe
from app.models.region.region_models import WorldRegion

RECIPE_BLOCK = re.compile(r"```recipe\s*([\s\S]*?)\s*```")
RECIPE_BLOCK_STRIP = re.compile(r"```recipe[\s\S]*?```")

# canonical record the parsed fields are merged over
RECIPE_DEFAULTS: Dict[str, Any] = {
    "name": "Recipe",
    "region": WorldRegion.EUROPEAN.value,
    "cuisine": "International",
    "description": "",
    "prepTime": "",
    "cookTime": "",
    "servings": 4,
    "difficulty": Difficulty.MEDIUM.value,
    "ingredients": [],
    "instructions": [],
    "tips": [],
    "tags": [],
}

_REGION_VALUES = {region.value for region in WorldRegion}
_DIFFICULTY_VALUES = {difficulty.value for difficulty in Difficulty}


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _servings(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _strings(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, str)]


def _tags(value: Any) -> Optional[List[str]]:
    tags = _strings(value)
    if tags is None:
        return None
    return list(dict.fromkeys(tags))


def _ingredients(value: Any) -> Optional[List[Ingredient]]:
    if not isinstance(value, list):
        return None
    ingredients = []
    for item in value:
        if not isinstance(item, dict):
            continue
        ingredients.append(Ingredient(
            name=_text(item.get("name")) or "",
            amount=_text(item.get("amount")) or "",
            unit=_text(item.get("unit")) or "",
            notes=_text(item.get("notes")),
        ))
    return ingredients


def _one_of(allowed):
    def check(value: Any) -> Optional[str]:
        return value if isinstance(value, str) and value in allowed else None
    return check


def _plain_string(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


_FIELD_READERS = {
    "name": _plain_string,
    "region": _one_of(_REGION_VALUES),
    "cuisine": _plain_string,
    "description": _plain_string,
    "prepTime": _plain_string,
    "cookTime": _plain_string,
    "servings": _servings,
    "difficulty": _one_of(_DIFFICULTY_VALUES),
    "ingredients": _ingredients,
    "instructions": _strings,
    "tips": _strings,
    "tags": _tags,
}


def build_recipe(data: Dict[str, Any]) -> Recipe:
    """
    Merge the parsed fields over RECIPE_DEFAULTS, one field at a time.
    A field that is absent or has the wrong shape keeps its default.
    The id is always freshly generated; an id in the data is ignored.
    """
    fields = {}
    for field, default in RECIPE_DEFAULTS.items():
        value = _FIELD_READERS[field](data[field]) if field in data else None
        fields[field] = default if value is None else value
    return Recipe(id=str(uuid.uuid4()), **fields)


def parse_recipe_block(block: str) -> Recipe:
    try:
        data = json.loads(block)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integer literals, runaway nesting
        raise RecipeExtractionFailure(f"Recipe block is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise RecipeExtractionFailure(f"Recipe block is a {type(data).__name__}, not an object")
    return build_recipe(data)


def strip_recipe_blocks(text: str) -> str:
    return RECIPE_BLOCK_STRIP.sub("", text).strip()


def extract_recipe(text: str) -> Tuple[str, Optional[Recipe]]:
    """
    Split a model reply into the conversational text and an optional recipe.

    Only the first ```recipe block is parsed, but every block is removed from
    the returned text, whether or not parsing succeeded.
    """
    recipe = None
    match = RECIPE_BLOCK.search(text)
    if match:
        try:
            recipe = parse_recipe_block(match.group(1))
        except RecipeExtractionFailure as e:
            logging.warning(f"Failed to parse recipe block: {e}")
    return strip_recipe_blocks(text), recipe
