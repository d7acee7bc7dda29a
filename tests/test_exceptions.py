"""
Tests for InvalidInputError and its HTTP handler.
"""

import json
from unittest.mock import MagicMock

import pytest

from app.core.exceptions import INCORRECT_INPUT, InvalidInputError, invalid_input_handler


def test_invalid_input_error_keeps_reason() -> None:
    """Test that the internal reason is preserved on the exception."""
    exc = InvalidInputError("a: Input should be greater than or equal to 0")

    assert exc.reason == "a: Input should be greater than or equal to 0"
    assert str(exc) == exc.reason
    assert isinstance(exc, ValueError)


@pytest.mark.asyncio
async def test_handler_returns_fixed_payload() -> None:
    """
    Test the handler response.

    The reason must not leak to the client; every rejection gets the same
    400 body.
    """
    request = MagicMock()
    request.method = "POST"
    request.url.path = "/calculate"

    response = await invalid_input_handler(request, InvalidInputError("secret detail"))

    assert response.status_code == 400
    assert response.headers["content-type"] == "application/json"
    assert json.loads(response.body) == INCORRECT_INPUT
    assert b"secret detail" not in response.body
