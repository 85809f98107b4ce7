from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from dietrecipes.shared.config.settings import settings
from dietrecipes.shared.llm.gemini_client import GeminiClient, StructuredGenerator
from dietrecipes.features.recipes.domain.errors import ErrorKind, RecipeError
from dietrecipes.features.recipes.app.use_cases import parse_request, generate_recipes

router = APIRouter(tags=["recipes"])
log = logging.getLogger("recipes")


def get_recipe_generator() -> StructuredGenerator:
    return GeminiClient.from_settings(settings)


@router.post("/generate")
async def generate(request: Request, generator: StructuredGenerator = Depends(get_recipe_generator)):
    try:
        try:
            data = await request.json()
        except ValueError as e:
            raise RecipeError(ErrorKind.REQUEST_PARSE, str(e)) from e
        log.info("Request received: %s", data)

        req = parse_request(data)
        recipes = await generate_recipes(req, generator)
    except RecipeError as e:
        log.error(
            "Recipe request failed (%s): %s",
            e.kind.value,
            e.detail,
            exc_info=e.kind is ErrorKind.GENERATION,
        )
        return JSONResponse(status_code=e.status_code, content=e.to_payload())
    except Exception as e:
        log.exception("Unexpected error while generating recipes")
        err = RecipeError(ErrorKind.GENERATION, str(e))
        return JSONResponse(status_code=err.status_code, content=err.to_payload())

    return recipes
