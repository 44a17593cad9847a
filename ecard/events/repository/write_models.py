"""Write operations for events. Returns DTOs, never ORM models."""

import logging
import re
import secrets
from abc import ABC, abstractmethod
from functools import partial
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecard.config.database import async_session_manager
from ecard.errors import CapacityConflictError, NotFoundError
from ecard.events.dtos import (
    DEFAULT_MAX_GUESTS_PER_RSVP,
    TIERS,
    EventDTO,
    EventStatus,
    Tier,
)
from ecard.events.repository.orm_models import Event

logger = logging.getLogger(__name__)

SLUG_BASE_MAX_LENGTH = 40


def slugify(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug[:SLUG_BASE_MAX_LENGTH].rstrip("-") or "event"


def generate_slug(title: str) -> str:
    """Readable prefix from the title plus a random suffix, e.g. ``garden-party-3f9a1c0e``."""
    return f"{slugify(title)}-{secrets.token_hex(4)}"


class EventWriteModel(ABC):
    @abstractmethod
    async def create_event(
        self,
        host_id: str,
        title: str,
        allow_plus_ones: bool = True,
        max_guests_per_rsvp: int = DEFAULT_MAX_GUESTS_PER_RSVP,
        max_attendees: int | None = None,
        customization: dict[str, Any] | None = None,
    ) -> EventDTO:
        raise NotImplementedError

    @abstractmethod
    async def set_status(
        self, event_id: UUID, host_id: str, status: EventStatus
    ) -> EventDTO | None:
        """Move an owned event between draft and published. None when not owned."""
        raise NotImplementedError

    @abstractmethod
    async def raise_capacity(
        self,
        event_id: UUID,
        new_max: int,
        tier: Tier | None = None,
        payment_id: str | None = None,
    ) -> EventDTO:
        """Raise the response ceiling of an event.

        The ceiling only ever goes up: a smaller value raises CapacityConflictError and the
        same value is accepted without change so redelivered payment notifications are safe.
        """
        raise NotImplementedError


class SqlEventWriteModel(EventWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_event(
        self,
        host_id: str,
        title: str,
        allow_plus_ones: bool = True,
        max_guests_per_rsvp: int = DEFAULT_MAX_GUESTS_PER_RSVP,
        max_attendees: int | None = None,
        customization: dict[str, Any] | None = None,
    ) -> EventDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = Event(
                host_id=host_id,
                title=title,
                slug=generate_slug(title),
                status=EventStatus.DRAFT,
                tier=Tier.FREE,
                max_responses=TIERS[Tier.FREE],
                allow_plus_ones=allow_plus_ones,
                max_guests_per_rsvp=max_guests_per_rsvp,
                max_attendees=max_attendees,
                customization=customization or {},
            )
            session.add(event)
            await session.flush()
            await session.refresh(event)
            logger.info(f"Created event {event.uuid} ({event.slug}) for host {host_id}")
            return EventDTO.from_orm(event)

    async def set_status(
        self, event_id: UUID, host_id: str, status: EventStatus
    ) -> EventDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = select(Event).where(Event.uuid == event_id, Event.host_id == host_id)
            result = await session.execute(stmt)
            event = result.scalar_one_or_none()
            if event is None:
                return None

            event.status = status
            await session.flush()
            await session.refresh(event)
            logger.info(f"Event {event_id} is now {status.value}")
            return EventDTO.from_orm(event)

    async def raise_capacity(
        self,
        event_id: UUID,
        new_max: int,
        tier: Tier | None = None,
        payment_id: str | None = None,
    ) -> EventDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = select(Event).where(Event.uuid == event_id).with_for_update()
            result = await session.execute(stmt)
            event = result.scalar_one_or_none()
            if event is None:
                raise NotFoundError()

            if new_max < event.max_responses:
                raise CapacityConflictError(
                    f"Event already allows {event.max_responses} responses; "
                    f"the limit cannot be lowered to {new_max}"
                )

            if new_max > event.max_responses:
                logger.info(
                    f"Raising response limit of event {event_id} "
                    f"from {event.max_responses} to {new_max}"
                )
            event.max_responses = new_max
            if tier is not None:
                event.tier = tier
            if payment_id is not None:
                event.payment_id = payment_id

            await session.flush()
            await session.refresh(event)
            return EventDTO.from_orm(event)
