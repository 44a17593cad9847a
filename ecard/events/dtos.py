from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any
from uuid import UUID

if TYPE_CHECKING:
    from ecard.events.repository.orm_models import Event


class EventStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"

    def toggled(self) -> "EventStatus":
        return EventStatus.DRAFT if self == EventStatus.PUBLISHED else EventStatus.PUBLISHED


class Tier(str, Enum):
    FREE = "free"
    PRO30 = "pro30"
    PASS = "pass"


# Response ceiling granted by each tier
TIERS: dict[Tier, int] = {
    Tier.FREE: 15,
    Tier.PRO30: 30,
    Tier.PASS: 1200,
}

DEFAULT_MAX_RESPONSES = TIERS[Tier.FREE]
DEFAULT_MAX_GUESTS_PER_RSVP = 10


@dataclass(frozen=True)
class EventDTO:
    id: UUID
    host_id: str
    title: str
    slug: str
    status: EventStatus
    tier: Tier
    max_responses: int
    allow_plus_ones: bool = True
    max_guests_per_rsvp: int = DEFAULT_MAX_GUESTS_PER_RSVP
    max_attendees: int | None = None
    payment_id: str | None = None
    customization: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None

    @property
    def is_published(self) -> bool:
        return self.status == EventStatus.PUBLISHED

    @classmethod
    def from_orm(cls, event: "Event") -> "EventDTO":
        return cls(
            id=event.uuid,
            host_id=event.host_id,
            title=event.title,
            slug=event.slug,
            status=EventStatus(event.status),
            tier=Tier(event.tier),
            max_responses=event.max_responses,
            allow_plus_ones=event.allow_plus_ones,
            max_guests_per_rsvp=event.max_guests_per_rsvp,
            max_attendees=event.max_attendees,
            payment_id=event.payment_id,
            customization=dict(event.customization or {}),
            created_at=event.created_at,
        )


@dataclass(frozen=True)
class TierUpgradedEvent:
    """Notification the payment collaborator sends once a tier purchase settles."""

    event_id: UUID
    tier: Tier
    payment_id: str

    @property
    def max_responses(self) -> int:
        return TIERS[self.tier]
