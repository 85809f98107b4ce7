from __future__ import annotations

from enum import Enum

INVALID_STRUCTURE_MESSAGE = "Invalid API response structure"


class ErrorKind(str, Enum):
    REQUEST_PARSE = "request_parse"
    GENERATION = "generation"
    MALFORMED_RESULT = "malformed_result"


class RecipeError(Exception):
    """
    Any failure while handling a recipe request.

    Every kind is answered with HTTP 500; only MALFORMED_RESULT keeps its own message.
    """

    status_code = 500

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        super().__init__(detail)
        self.kind = kind
        self.detail = detail

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.MALFORMED_RESULT:
            return INVALID_STRUCTURE_MESSAGE
        return f"Failed to generate recipes: {self.detail}"

    def to_payload(self) -> dict:
        return {"error": self.message}
