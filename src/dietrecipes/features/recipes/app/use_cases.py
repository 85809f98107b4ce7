"""
Recipe generation: builds the prompt from a normalized request, asks the
structured generator for recipes and checks the shape of what comes back.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from dietrecipes.features.recipes.api.schemas import RecipeRequest
from dietrecipes.features.recipes.domain.errors import ErrorKind, RecipeError
from dietrecipes.features.recipes.domain.models import RECIPE_RESPONSE_SCHEMA, RecipeResult
from dietrecipes.features.recipes.domain.prompts import build_recipe_prompt
from dietrecipes.shared.llm.gemini_client import StructuredGenerator

logger = logging.getLogger("recipes")


def prompt_for(req: RecipeRequest) -> str:
    return build_recipe_prompt(
        diet=req.diet,
        objective=req.objective,
        kca=req.kca,
        allergies=req.allergies,
        intolerance=req.intolerance,
        conditions=req.conditions,
    )


def parse_request(data: Any) -> RecipeRequest:
    if not isinstance(data, dict):
        raise RecipeError(ErrorKind.REQUEST_PARSE, "request body must be a JSON object")
    try:
        return RecipeRequest.model_validate(data)
    except ValidationError as e:
        raise RecipeError(ErrorKind.REQUEST_PARSE, str(e)) from e


def check_result(raw: Any) -> List[Dict[str, Any]]:
    """
    Returns the `recipes` list exactly as the model produced it,
    after validating it against RecipeResult.
    """
    if raw is None:
        raise RecipeError(ErrorKind.MALFORMED_RESULT, "empty result")
    try:
        result = RecipeResult.model_validate(raw)
    except ValidationError as e:
        raise RecipeError(ErrorKind.GENERATION, str(e)) from e
    if result.recipes is None:
        raise RecipeError(ErrorKind.MALFORMED_RESULT, "missing recipes field")
    if isinstance(raw, dict):
        return raw["recipes"]
    return [r.model_dump() for r in result.recipes]


async def generate_recipes(
    req: RecipeRequest,
    generator: StructuredGenerator,
) -> List[Dict[str, Any]]:
    prompt = prompt_for(req)
    logger.info("Prompt generated:\n%s", prompt)

    try:
        raw = await generator.generate_object(
            prompt,
            response_schema=RECIPE_RESPONSE_SCHEMA,
        )
    except Exception as e:
        raise RecipeError(ErrorKind.GENERATION, str(e)) from e

    recipes = check_result(raw)
    logger.info("API response: %d recipes", len(recipes))
    return recipes
