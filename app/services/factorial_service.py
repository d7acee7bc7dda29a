import asyncio

from loguru import logger

from app.schemas.calculation import CalculationRequest, CalculationResponse


def factorial(n: int) -> int:
    if n < 0:
        raise ValueError(f"Factorial is not defined for negative numbers: {n}")

    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


class FactorialService:
    """Computes both factorials of a request concurrently.

    Each operand runs on its own worker thread and the two results are
    joined before the response is built. Nothing is shared between the
    two computations or between requests.
    """

    async def calculate(self, request: CalculationRequest) -> CalculationResponse:
        factorial_a, factorial_b = await asyncio.gather(
            asyncio.to_thread(factorial, request.a),
            asyncio.to_thread(factorial, request.b),
        )

        logger.debug(f"Calculated factorials for a={request.a}, b={request.b}")
        return CalculationResponse(factorial_a=factorial_a, factorial_b=factorial_b)
