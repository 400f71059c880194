from fastapi import APIRouter, Depends, Form

from calculator_web.models.calculator import CalculationResult
from calculator_web.services.calculator import CalculatorService

router = APIRouter(tags=["calculator"])


def get_calculator_service() -> CalculatorService:
    return CalculatorService()


@router.post("/calculate", response_model=CalculationResult)
async def calculate(
    num1: float = Form(..., description="Left-hand operand."),
    num2: float = Form(..., description="Right-hand operand."),
    operation: str = Form(..., description="One of add, subtract, multiply or divide."),
    service: CalculatorService = Depends(get_calculator_service),
) -> CalculationResult:
    return service.evaluate(num1, num2, operation)
