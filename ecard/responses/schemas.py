from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from ecard.guests.schemas import blank_to_none
from ecard.responses.dtos import NewResponseDTO, ResponseDTO, ResponseStatus

MAX_HEADCOUNT = 50


class RSVPSubmission(BaseModel):
    """Public RSVP form payload. ``response_data`` holds the answers to the host's custom questions."""

    respondent_name: str = Field(..., min_length=1, max_length=200)
    respondent_email: EmailStr | None = None
    status: ResponseStatus
    headcount: int = Field(1, ge=1, le=MAX_HEADCOUNT, strict=True)
    response_data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("respondent_name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("respondent_email", mode="before")
    @classmethod
    def empty_email_as_none(cls, value: Any) -> Any:
        return blank_to_none(value)

    def to_dto(self, headcount: int | None = None) -> NewResponseDTO:
        return NewResponseDTO(
            respondent_name=self.respondent_name,
            respondent_email=str(self.respondent_email) if self.respondent_email else None,
            status=self.status,
            headcount=self.headcount if headcount is None else headcount,
            response_data=self.response_data,
        )


class ResponseOut(BaseModel):
    id: UUID
    event_id: UUID
    respondent_name: str
    respondent_email: str | None = None
    status: ResponseStatus
    headcount: int
    response_data: dict[str, Any] = {}
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, response: ResponseDTO) -> "ResponseOut":
        return cls(
            id=response.id,
            event_id=response.event_id,
            respondent_name=response.respondent_name,
            respondent_email=response.respondent_email,
            status=response.status,
            headcount=response.headcount,
            response_data=response.response_data,
            created_at=response.created_at,
        )


class RSVPSubmitResponse(BaseModel):
    success: bool = True
    response: ResponseOut
