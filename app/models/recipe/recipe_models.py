from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from app.models.region.region_models import WorldRegion


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Ingredient(BaseModel):
    name: str
    amount: str
    unit: str
    notes: Optional[str] = None


class Recipe(BaseModel):
    id: str
    name: str
    region: WorldRegion
    cuisine: str
    description: str
    prepTime: str
    cookTime: str
    servings: int
    difficulty: Difficulty
    ingredients: List[Ingredient]
    instructions: List[str]
    tips: List[str] = []
    tags: List[str]
