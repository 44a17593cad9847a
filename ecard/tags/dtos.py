from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from ecard.tags.repository.orm_models import GuestTag

DEFAULT_TAG_COLOR = "#7c3aed"


@dataclass(frozen=True)
class TagDTO:
    id: UUID
    event_id: UUID
    label: str
    color: str = DEFAULT_TAG_COLOR
    created_at: datetime | None = None

    @classmethod
    def from_orm(cls, tag: "GuestTag") -> "TagDTO":
        return cls(
            id=tag.uuid,
            event_id=tag.event_id,
            label=tag.label,
            color=tag.color,
            created_at=tag.created_at,
        )
