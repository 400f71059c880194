from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, Field, field_serializer


class Operation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    INVALID = "invalid"

    @classmethod
    def _missing_(cls, value: object) -> "Operation":
        # Unknown selectors collapse onto the fallback member; matching stays case-sensitive.
        return cls.INVALID


class CalculationResult(BaseModel):
    result: float = Field(0.0, description="The computed value, 0 when the calculation failed.")
    error: str | None = Field(None, description="Human-readable failure message, null on success.")

    @field_serializer("result", when_used="json")
    def _serialize_result(self, value: float) -> float | str:
        """
        Strict JSON has no literal for infinities or NaN, so they travel as strings.
        """
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return value
