from __future__ import annotations

import json

import pytest
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError

from coursehub.shared.exceptions import (
    ConflictException,
    NotFoundException,
    ValidationException,
    app_exception_handler,
    http_exception_handler,
    request_validation_handler,
    unhandled_exception_handler,
)


def _make_request(path: str = "/api/teacherProfiles") -> Request:
    scope = {
        "type": "http",
        "method": "POST",
        "path": path,
        "headers": [],
        "client": ("127.0.0.1", 12345),
        "scheme": "http",
        "server": ("testserver", 80),
        "query_string": b"",
    }
    return Request(scope)


def _body(response) -> dict:
    return json.loads(response.body.decode("utf-8"))


@pytest.mark.asyncio
async def test_conflict_is_reported_as_bad_request() -> None:
    response = await app_exception_handler(_make_request(), ConflictException("Already enrolled in this course"))

    assert response.status_code == 400
    assert _body(response) == {"message": "Already enrolled in this course"}


@pytest.mark.asyncio
async def test_domain_error_carries_optional_detail() -> None:
    response = await app_exception_handler(
        _make_request(),
        ValidationException("Validation error", error="experience: too large"),
    )

    assert response.status_code == 400
    assert _body(response) == {"message": "Validation error", "error": "experience: too large"}

    missing = await app_exception_handler(_make_request(), NotFoundException("Course not found"))
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_http_exception_uses_message_shape() -> None:
    response = await http_exception_handler(_make_request(), HTTPException(status_code=403, detail="Invalid token"))

    assert response.status_code == 403
    assert _body(response) == {"message": "Invalid token"}


@pytest.mark.asyncio
async def test_request_validation_lists_offending_fields() -> None:
    exc = RequestValidationError(
        [{"loc": ("body", "email"), "msg": "value is not a valid email address", "type": "value_error"}],
    )

    response = await request_validation_handler(_make_request(), exc)

    assert response.status_code == 400
    body = _body(response)
    assert body["message"] == "Validation error"
    assert "body.email" in body["error"]


@pytest.mark.asyncio
async def test_unexpected_error_is_hidden_behind_generic_message() -> None:
    response = await unhandled_exception_handler(_make_request(), RuntimeError("connection reset"))

    assert response.status_code == 500
    assert _body(response) == {"message": "Internal server error"}
