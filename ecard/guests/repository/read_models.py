from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecard.config.database import async_session_manager
from ecard.guests.dtos import GuestDTO
from ecard.guests.repository.orm_models import Guest


class GuestReadModel(ABC):
    @abstractmethod
    async def list_guests(self, event_id: UUID) -> list[GuestDTO]:
        """Guests of an event, newest first. The caller has already checked ownership."""
        raise NotImplementedError


class SqlGuestReadModel(GuestReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def list_guests(self, event_id: UUID) -> list[GuestDTO]:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = (
                select(Guest)
                .where(Guest.event_id == event_id)
                .order_by(Guest.created_at.desc(), Guest.uuid.desc())
            )
            result = await session.execute(stmt)
            return [GuestDTO.from_orm(guest) for guest in result.scalars().all()]
