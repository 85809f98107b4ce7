"""Prompt construction: diet lookup, calorie target and optional constraint lines."""

import pytest

from dietrecipes.features.recipes.api.schemas import RecipeRequest
from dietrecipes.features.recipes.app.use_cases import prompt_for
from dietrecipes.features.recipes.domain.prompts import (
    DIET_CLAUSES,
    RECIPE_PROMPT_FOOTER,
    RECIPE_PROMPT_HEADER,
    build_recipe_prompt,
    caloric_line,
    diet_clause,
)


def _prompt(**payload) -> str:
    return prompt_for(RecipeRequest.model_validate(payload))


@pytest.mark.parametrize(
    "diet,expected",
    [
        ("Omnivora", "tanto alimentos de origen animal como vegetal."),
        ("Lactoveg", "con vegetales y productos lácteos, pero no huevos ni carne."),
        ("Ovoveg", "con vegetales y huevos, pero no lácteos ni carne."),
        ("Lactoovoveg", "con vegetales, lácteos y huevos, pero no carne."),
        ("Pescetariana", "con vegetales y pescado, pero no otras carnes."),
        ("vegana", "con solo alimentos de origen vegetal, sin productos animales ni derivados."),
    ],
)
def test_known_diets_map_to_clause(diet, expected):
    assert diet_clause(diet) == expected
    assert f"- Dieta: {expected}" in _prompt(diet=diet)


@pytest.mark.parametrize("diet", ["Keto", "VEGANA", "", None, 42])
def test_unknown_diet_yields_empty_clause(diet):
    assert diet_clause(diet) == ""


def test_diet_table_has_six_entries():
    assert set(DIET_CLAUSES) == {"Omnivora", "Lactoveg", "Ovoveg", "Lactoovoveg", "Pescetariana", "vegana"}


def test_scenario_vegan_losing_weight_with_allergy():
    prompt = _prompt(diet="vegana", objective="bajar", kca=2000, allergies=["nueces"])

    assert DIET_CLAUSES["vegana"] in prompt
    assert "1. El gasto calórico de esta persona es de 1500 kcal." in prompt
    assert "5. IMPORTANTE tener en cuenta Alergias: nueces" in prompt
    assert "Intolerancias" not in prompt
    assert "Condiciones médicas" not in prompt


def test_scenario_gain_with_string_kca():
    prompt = _prompt(diet="Omnivora", objective="subir", kca="1800")
    assert "es de 2300 kcal." in prompt


def test_scenario_unknown_diet_prompt_still_well_formed():
    prompt = _prompt(diet="Keto", objective="bajar", kca=2000)
    lines = prompt.splitlines()

    assert lines[0] == RECIPE_PROMPT_HEADER
    assert lines[1] == "- Dieta: "
    assert prompt.endswith(RECIPE_PROMPT_FOOTER)


def test_non_numeric_kca_drops_caloric_line():
    req = RecipeRequest.model_validate({"diet": "vegana", "kca": "abc"})
    prompt = prompt_for(req)

    assert "gasto calórico" not in prompt
    assert "kcal" not in prompt
    assert req.kca_value == 0


def test_missing_kca_drops_caloric_line():
    assert "gasto calórico" not in _prompt(diet="vegana", objective="bajar")


@pytest.mark.parametrize("empty", [[], None])
def test_empty_constraints_leave_no_labels(empty):
    prompt = _prompt(diet="Ovoveg", allergies=empty, intolerance=empty, conditions=empty)

    for label in ("Alergias", "Intolerancias", "Condiciones médicas", "IMPORTANTE"):
        assert label not in prompt
    assert "\n\n" not in prompt


def test_all_constraint_lines_are_comma_joined():
    prompt = _prompt(
        diet="Lactoveg",
        allergies=["nueces", "maní"],
        intolerance=["gluten"],
        conditions=["hipertensión", "diabetes"],
    )

    assert "5. IMPORTANTE tener en cuenta Alergias: nueces, maní" in prompt
    assert "6. IMPORTANTE tener en cuenta Intolerancias: gluten" in prompt
    assert "7. IMPORTANTE tener en cuenta Condiciones médicas: hipertensión, diabetes" in prompt


def test_body_as_list_or_string_gives_same_prompt():
    base = {"diet": "vegana", "objective": "bajar", "kca": 1900}
    assert _prompt(body=["soup"], **base) == _prompt(body="soup", **base)


def test_objective_list_uses_first_element():
    prompt = _prompt(objective=["bajar", "subir"], kca=2000)
    assert "es de 1500 kcal." in prompt


def test_budget_does_not_change_prompt():
    base = {"diet": "Omnivora", "kca": 2000}
    assert _prompt(budget="bajo", **base) == _prompt(**base)


@pytest.mark.parametrize(
    "kca,objective,expected",
    [
        (2000.0, "bajar", "1500"),
        (1800.0, "subir", "2300"),
        (1800.0, None, "2300"),
        (1999.5, "bajar", "1499.5"),
    ],
)
def test_caloric_line_target(kca, objective, expected):
    assert caloric_line(kca, objective) == f"1. El gasto calórico de esta persona es de {expected} kcal."


def test_prompt_contains_authoring_instructions():
    prompt = build_recipe_prompt(diet=None, objective=None, kca=None)

    assert "mínimo de 5 y un máximo de 7 recetas" in prompt
    assert "concisos" in prompt
    assert "sal y aceite" in prompt
    assert "dos porciones" in prompt
