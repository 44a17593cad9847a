from typing import Any

from sqlalchemy import JSON, Boolean, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ecard.config.table_names import TableNames
from ecard.events.dtos import (
    DEFAULT_MAX_GUESTS_PER_RSVP,
    DEFAULT_MAX_RESPONSES,
    EventStatus,
    Tier,
)
from ecard.models.base import Base, TimeStamp


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    # Opaque id issued by the identity provider
    host_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)

    status: Mapped[str] = mapped_column(
        Enum(EventStatus, name="event_status_enum", values_callable=lambda x: [e.value for e in x]),
        default=EventStatus.DRAFT,
        nullable=False,
    )
    tier: Mapped[str] = mapped_column(
        Enum(Tier, name="event_tier_enum", values_callable=lambda x: [e.value for e in x]),
        default=Tier.FREE,
        nullable=False,
    )
    max_responses: Mapped[int] = mapped_column(
        Integer, default=DEFAULT_MAX_RESPONSES, nullable=False
    )
    payment_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    allow_plus_ones: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    max_guests_per_rsvp: Mapped[int] = mapped_column(
        Integer, default=DEFAULT_MAX_GUESTS_PER_RSVP, nullable=False
    )
    max_attendees: Mapped[int | None] = mapped_column(Integer, nullable=True)

    customization: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)

    def __repr__(self) -> str:
        return f"<Event {self.slug} ({self.status})>"
