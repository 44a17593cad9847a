import pytest
from pydantic import BaseModel, Field, ValidationError

from ecard.errors import (
    CapacityExceededError,
    NotFoundError,
    RateLimitedError,
    ValidationFailedError,
    ecard_error_handler,
    format_issues,
)


class Row(BaseModel):
    name: str = Field(min_length=1)


def test_format_issues_drops_body_prefix():
    errors = [
        {"loc": ("body", 2, "email"), "msg": "value is not a valid email address"},
        {"loc": ("respondent_name",), "msg": "Field required"},
    ]

    assert format_issues(errors) == [
        {"field": "2.email", "message": "value is not a valid email address"},
        {"field": "respondent_name", "message": "Field required"},
    ]


def test_validation_error_from_pydantic():
    with pytest.raises(ValidationError) as exc_info:
        Row(name="")

    error = ValidationFailedError.from_pydantic(exc_info.value)

    assert error.status_code == 400
    assert error.to_content()["error"] == "Invalid data"
    assert [detail["field"] for detail in error.to_content()["details"]] == ["name"]


def test_errors_carry_status_and_message():
    assert NotFoundError().to_content() == {"error": "Not found"}
    assert CapacityExceededError().status_code == 403
    assert CapacityExceededError("Only 2 spots remaining.").message == "Only 2 spots remaining."


@pytest.mark.asyncio
async def test_rate_limited_response_has_retry_after():
    response = await ecard_error_handler(None, RateLimitedError(retry_after=42))

    assert response.status_code == 429
    assert response.headers["Retry-After"] == "42"
