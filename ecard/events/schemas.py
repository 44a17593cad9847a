from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from ecard.events.dtos import EventDTO, EventStatus, Tier


class EventResponse(BaseModel):
    id: UUID
    title: str
    slug: str
    status: EventStatus
    tier: Tier
    max_responses: int
    allow_plus_ones: bool
    max_guests_per_rsvp: int
    max_attendees: int | None = None
    customization: dict[str, Any] = {}
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, event: EventDTO) -> "EventResponse":
        return cls(
            id=event.id,
            title=event.title,
            slug=event.slug,
            status=event.status,
            tier=event.tier,
            max_responses=event.max_responses,
            allow_plus_ones=event.allow_plus_ones,
            max_guests_per_rsvp=event.max_guests_per_rsvp,
            max_attendees=event.max_attendees,
            customization=event.customization,
            created_at=event.created_at,
        )


class TierUpgradeRequest(BaseModel):
    """Body the payment collaborator posts once a purchase completes."""

    event_id: UUID
    tier: Tier
    payment_id: str = Field(..., min_length=1, max_length=255)
