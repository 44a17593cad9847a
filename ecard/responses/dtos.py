from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any
from uuid import UUID

if TYPE_CHECKING:
    from ecard.responses.repository.orm_models import RSVPResponse


class ResponseStatus(str, Enum):
    ATTENDING = "attending"
    NOT_ATTENDING = "not_attending"
    MAYBE = "maybe"


@dataclass(frozen=True)
class ResponseDTO:
    id: UUID
    event_id: UUID
    respondent_name: str
    status: ResponseStatus
    headcount: int = 1
    respondent_email: str | None = None
    response_data: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None

    @classmethod
    def from_orm(cls, response: "RSVPResponse") -> "ResponseDTO":
        return cls(
            id=response.uuid,
            event_id=response.event_id,
            respondent_name=response.respondent_name,
            respondent_email=response.respondent_email,
            status=ResponseStatus(response.status),
            headcount=response.headcount,
            response_data=dict(response.response_data or {}),
            created_at=response.created_at,
        )


@dataclass(frozen=True)
class NewResponseDTO:
    respondent_name: str
    status: ResponseStatus
    headcount: int = 1
    respondent_email: str | None = None
    response_data: dict[str, Any] = field(default_factory=dict)


EXPORT_FIXED_COLUMNS = ("Name", "Email", "Status", "Headcount", "Submitted At")


@dataclass(frozen=True)
class ResponseExportDTO:
    """Tabular projection of an event's responses.

    ``data_keys`` are the answer keys flattened into their own columns, in the order they
    first appear across the responses.
    """

    event_id: UUID
    data_keys: tuple[str, ...]
    responses: tuple[ResponseDTO, ...]

    @property
    def columns(self) -> list[str]:
        return [*EXPORT_FIXED_COLUMNS, *self.data_keys]

    @property
    def filename(self) -> str:
        return f"responses-{self.event_id}.csv"
