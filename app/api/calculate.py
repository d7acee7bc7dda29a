from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from app.core.config import AppSettings, get_app_settings
from app.core.exceptions import InvalidInputError
from app.schemas.calculation import CalculationRequest, CalculationResponse
from app.services.factorial_service import FactorialService

calculate_router = APIRouter()


async def validate_calculation_request(
    request: Request,
    settings: AppSettings = Depends(get_app_settings),
) -> CalculationRequest:
    body = await request.body()

    try:
        payload = CalculationRequest.model_validate_json(body)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidInputError(errors) from e

    if payload.a > settings.max_operand or payload.b > settings.max_operand:
        raise InvalidInputError(
            f"operand above limit {settings.max_operand}: a={payload.a}, b={payload.b}"
        )

    return payload


def get_factorial_service() -> FactorialService:
    return FactorialService()


@calculate_router.post("/calculate", response_model=CalculationResponse)
async def calculate(
    payload: CalculationRequest = Depends(validate_calculation_request),
    factorial_service: FactorialService = Depends(get_factorial_service),
):
    return await factorial_service.calculate(payload)
