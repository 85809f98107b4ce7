"""Shared fixtures: a fake structured generator and a TestClient wired to it."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from dietrecipes.app import app
from dietrecipes.features.recipes.api.routes import get_recipe_generator


class FakeGenerator:
    """Records every call and answers with a canned result or exception."""

    def __init__(self, result: Any = None, exc: Optional[Exception] = None) -> None:
        self.result = result
        self.exc = exc
        self.calls: List[Dict[str, Any]] = []

    async def generate_object(self, prompt: str, *, response_schema: Dict[str, Any], temperature: Optional[float] = None) -> Any:
        self.calls.append({"prompt": prompt, "response_schema": response_schema, "temperature": temperature})
        if self.exc is not None:
            raise self.exc
        return self.result

    @property
    def last_prompt(self) -> str:
        return self.calls[-1]["prompt"]


def make_recipe(i: int) -> Dict[str, Any]:
    return {
        "title": f"Receta {i}",
        "ingredients": [
            {"name": "garbanzos", "quantity": "200 g", "calories": 328},
            {"name": "espinaca", "quantity": "100 g", "calories": 23.5},
        ],
        "steps": ["Cocer los garbanzos.", "Saltear la espinaca y mezclar."],
        "duration": "25 minutos",
    }


@pytest.fixture
def recipes() -> List[Dict[str, Any]]:
    return [make_recipe(i) for i in range(6)]


@pytest.fixture
def fake_generator(recipes) -> FakeGenerator:
    return FakeGenerator(result={"recipes": recipes})


@pytest.fixture
def client(fake_generator):
    app.dependency_overrides[get_recipe_generator] = lambda: fake_generator
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
