from fastapi import Request, status
from fastapi.responses import JSONResponse
from loguru import logger


INCORRECT_INPUT = {"error": "Incorrect input"}


class InvalidInputError(ValueError):
    """Request body is not a JSON object with two integers in range.

    ``reason`` stays server side; clients always get the same payload.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.reason}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=INCORRECT_INPUT,
    )
