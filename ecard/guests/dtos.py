from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from ecard.guests.repository.orm_models import Guest


@dataclass(frozen=True)
class GuestDTO:
    id: UUID
    event_id: UUID
    name: str
    email: str | None = None
    phone: str | None = None
    notes: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_orm(cls, guest: "Guest") -> "GuestDTO":
        return cls(
            id=guest.uuid,
            event_id=guest.event_id,
            name=guest.name,
            email=guest.email,
            phone=guest.phone,
            notes=guest.notes,
            created_at=guest.created_at,
        )


@dataclass(frozen=True)
class NewGuestDTO:
    """Validated guest fields waiting to be written."""

    name: str
    email: str | None = None
    phone: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class BulkImportResultDTO:
    imported: int
