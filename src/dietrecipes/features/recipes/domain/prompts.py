# features/recipes/domain/prompts.py
from __future__ import annotations

from typing import List, Optional, Sequence, Union

LOSE_WEIGHT_OBJECTIVE = "bajar"
CALORIE_ADJUSTMENT = 500

DIET_CLAUSES = {
    "Omnivora": "tanto alimentos de origen animal como vegetal.",
    "Lactoveg": "con vegetales y productos lácteos, pero no huevos ni carne.",
    "Ovoveg": "con vegetales y huevos, pero no lácteos ni carne.",
    "Lactoovoveg": "con vegetales, lácteos y huevos, pero no carne.",
    "Pescetariana": "con vegetales y pescado, pero no otras carnes.",
    "vegana": "con solo alimentos de origen vegetal, sin productos animales ni derivados.",
}

RECIPE_PROMPT_HEADER = (
    "Genera un mínimo de 5 y un máximo de 7 recetas de comida. "
    "Ten en cuenta los siguientes parámetros para estas recetas:"
)

RECIPE_PROMPT_FOOTER = """Lo más importante es que las recetas se basen en la dieta, alergias e intolerancias proporcionadas.
Instrucciones adicionales:
- Los pasos a seguir para cocinar deben ser lo más concisos posible.
- No incluyas ingredientes comunes de cocina como sal y aceite en la lista de ingredientes.
- Proporciona las cantidades necesarias en gramos o unidades dependiendo del ingrediente para cocinar dos porciones de cada receta."""

CALORIC_LINE = "1. El gasto calórico de esta persona es de {target} kcal."
ALLERGIES_LINE = "5. IMPORTANTE tener en cuenta Alergias: {items}"
INTOLERANCE_LINE = "6. IMPORTANTE tener en cuenta Intolerancias: {items}"
CONDITIONS_LINE = "7. IMPORTANTE tener en cuenta Condiciones médicas: {items}"


def diet_clause(diet: Optional[str]) -> str:
    return DIET_CLAUSES.get(diet, "") if isinstance(diet, str) else ""


def _format_kcal(value: float) -> Union[int, float]:
    return int(value) if float(value).is_integer() else value


def caloric_line(kca: Optional[float], objective: Optional[str]) -> str:
    """
    Daily target sentence: baseline minus 500 kcal to lose weight, plus 500 otherwise.
    Empty when no baseline could be parsed.
    """
    if kca is None:
        return ""
    if objective == LOSE_WEIGHT_OBJECTIVE:
        target = kca - CALORIE_ADJUSTMENT
    else:
        target = kca + CALORIE_ADJUSTMENT
    return CALORIC_LINE.format(target=_format_kcal(target))


def constraint_line(template: str, items: Sequence[str]) -> str:
    if not items:
        return ""
    return template.format(items=", ".join(items))


def build_recipe_prompt(
    *,
    diet: Optional[str],
    objective: Optional[str],
    kca: Optional[float],
    allergies: Sequence[str] = (),
    intolerance: Sequence[str] = (),
    conditions: Sequence[str] = (),
) -> str:
    lines: List[str] = [
        RECIPE_PROMPT_HEADER,
        f"- Dieta: {diet_clause(diet)}",
        caloric_line(kca, objective),
        constraint_line(ALLERGIES_LINE, allergies),
        constraint_line(INTOLERANCE_LINE, intolerance),
        constraint_line(CONDITIONS_LINE, conditions),
        RECIPE_PROMPT_FOOTER,
    ]
    return "\n".join(ln for ln in lines if ln)
