from __future__ import annotations

import math
import re
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

_RE_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def first_if_list(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def parse_kca(value: Any) -> Optional[float]:
    """
    Caloric baseline from a number or the numeric prefix of a string.
    Returns None when nothing numeric can be read.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        out = float(value)
    else:
        m = _RE_LEADING_NUMBER.match(str(value).strip())
        if not m:
            return None
        out = float(m.group(0))
    return out if math.isfinite(out) else None


class RecipeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    body: Optional[str] = None
    objective: Optional[str] = None
    diet: Optional[str] = None
    allergies: List[str] = []
    intolerance: List[str] = []
    conditions: List[str] = []
    # Accepted for client compatibility; not used when building the prompt.
    budget: Any = None
    kca: Optional[float] = None

    @field_validator("body", "objective", "diet", mode="before")
    @classmethod
    def _first_element(cls, v: Any) -> Any:
        v = first_if_list(v)
        if isinstance(v, str):
            return v
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        # Anything else falls back to "not given" so the prompt still renders.
        return None

    @field_validator("allergies", "intolerance", "conditions", mode="before")
    @classmethod
    def _as_list(cls, v: Any) -> List[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [v] if v else []
        if isinstance(v, (list, tuple)):
            return [str(x) for x in v if x is not None]
        return [str(v)]

    @field_validator("kca", mode="before")
    @classmethod
    def _parse_kca(cls, v: Any) -> Optional[float]:
        return parse_kca(v)

    @property
    def kca_value(self) -> float:
        return self.kca if self.kca is not None else 0
