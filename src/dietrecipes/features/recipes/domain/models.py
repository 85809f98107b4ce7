from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class Ingredient(BaseModel):
    name: str
    quantity: str
    calories: float


class Recipe(BaseModel):
    title: str
    ingredients: List[Ingredient]
    steps: List[str]
    duration: str


class RecipeResult(BaseModel):
    # Optional so a result without recipes validates and can be reported as malformed.
    recipes: Optional[List[Recipe]] = None


# Gemini responseSchema (OpenAPI subset) mirroring RecipeResult.
RECIPE_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "recipes": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "title": {"type": "STRING"},
                    "ingredients": {
                        "type": "ARRAY",
                        "items": {
                            "type": "OBJECT",
                            "properties": {
                                "name": {"type": "STRING"},
                                "quantity": {"type": "STRING"},
                                "calories": {"type": "NUMBER"},
                            },
                            "required": ["name", "quantity", "calories"],
                        },
                    },
                    "steps": {"type": "ARRAY", "items": {"type": "STRING"}},
                    "duration": {"type": "STRING"},
                },
                "required": ["title", "ingredients", "steps", "duration"],
            },
        },
    },
    "required": ["recipes"],
}
