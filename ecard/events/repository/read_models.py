from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecard.config.database import async_session_manager
from ecard.events.dtos import EventDTO, EventStatus
from ecard.events.repository.orm_models import Event


class EventReadModel(ABC):
    @abstractmethod
    async def get_published_event_by_slug(self, slug: str) -> EventDTO | None:
        """Public lookup. Draft events are invisible here."""
        raise NotImplementedError

    @abstractmethod
    async def get_event_for_host(self, event_id: UUID, host_id: str) -> EventDTO | None:
        """Owned lookup. Returns None both when the event is missing and when another host owns it."""
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_published_event_by_slug(self, slug: str) -> EventDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = select(Event).where(
                Event.slug == slug,
                Event.status == EventStatus.PUBLISHED,
            )
            result = await session.execute(stmt)
            event = result.scalar_one_or_none()
            return EventDTO.from_orm(event) if event else None

    async def get_event_for_host(self, event_id: UUID, host_id: str) -> EventDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = select(Event).where(Event.uuid == event_id, Event.host_id == host_id)
            result = await session.execute(stmt)
            event = result.scalar_one_or_none()
            return EventDTO.from_orm(event) if event else None
