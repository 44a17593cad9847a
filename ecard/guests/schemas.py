from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from ecard.guests.dtos import GuestDTO, NewGuestDTO

MAX_BULK_IMPORT_ROWS = 1000


def blank_to_none(value: Any) -> Any:
    """Optional text fields arrive as "" from forms and spreadsheets; store them as NULL."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class GuestCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=20)
    notes: str | None = Field(None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", "phone", "notes", mode="before")
    @classmethod
    def empty_as_none(cls, value: Any) -> Any:
        return blank_to_none(value)

    def to_dto(self) -> NewGuestDTO:
        return NewGuestDTO(
            name=self.name,
            email=str(self.email) if self.email else None,
            phone=self.phone,
            notes=self.notes,
        )


class GuestUpdate(BaseModel):
    """Partial patch. Only the fields present in the request body change."""

    name: str | None = Field(None, min_length=1, max_length=200)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=20)
    notes: str | None = Field(None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Guest name cannot be removed")
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", "phone", "notes", mode="before")
    @classmethod
    def empty_as_none(cls, value: Any) -> Any:
        return blank_to_none(value)

    def changes(self) -> dict[str, Any]:
        changes = self.model_dump(exclude_unset=True)
        if changes.get("email") is not None:
            changes["email"] = str(changes["email"])
        return changes


class GuestResponse(BaseModel):
    id: UUID
    event_id: UUID
    name: str
    email: str | None = None
    phone: str | None = None
    notes: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, guest: GuestDTO) -> "GuestResponse":
        return cls(
            id=guest.id,
            event_id=guest.event_id,
            name=guest.name,
            email=guest.email,
            phone=guest.phone,
            notes=guest.notes,
            created_at=guest.created_at,
        )


class BulkImportResponse(BaseModel):
    imported: int
