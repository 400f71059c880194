from __future__ import annotations

import logging
import operator
from typing import Callable

from calculator_web.models.calculator import CalculationResult, Operation

logger = logging.getLogger("calculator_web.calculator")

DIVIDE_BY_ZERO_MESSAGE = "Cannot divide by zero"
INVALID_OPERATION_MESSAGE = "Invalid operation"


class CalculatorService:
    _BINARY_OPERATORS: dict[Operation, Callable[[float, float], float]] = {
        Operation.ADD: operator.add,
        Operation.SUBTRACT: operator.sub,
        Operation.MULTIPLY: operator.mul,
        Operation.DIVIDE: operator.truediv,
    }

    def evaluate(self, num1: float, num2: float, operation: str) -> CalculationResult:
        selected = Operation(operation)
        logger.debug(
            "calculator.evaluate",
            extra={"num1": num1, "num2": num2, "operation": selected.value},
        )

        try:
            return self._dispatch(num1, num2, selected)
        except Exception as exc:
            logger.warning(
                "calculator.unexpected_fault",
                exc_info=True,
                extra={"operation": selected.value},
            )
            return CalculationResult(error=str(exc))

    def _dispatch(self, num1: float, num2: float, selected: Operation) -> CalculationResult:
        operator_fn = self._BINARY_OPERATORS.get(selected)
        if operator_fn is None:
            return CalculationResult(error=INVALID_OPERATION_MESSAGE)

        # -0.0 compares equal to 0 as well.
        if selected is Operation.DIVIDE and num2 == 0:
            return CalculationResult(error=DIVIDE_BY_ZERO_MESSAGE)

        return CalculationResult(result=operator_fn(num1, num2))
