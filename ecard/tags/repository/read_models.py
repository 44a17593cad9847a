from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecard.config.database import async_session_manager
from ecard.tags.dtos import TagDTO
from ecard.tags.repository.orm_models import GuestTag


class TagReadModel(ABC):
    @abstractmethod
    async def list_tags(self, event_id: UUID) -> list[TagDTO]:
        raise NotImplementedError


class SqlTagReadModel(TagReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def list_tags(self, event_id: UUID) -> list[TagDTO]:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = (
                select(GuestTag)
                .where(GuestTag.event_id == event_id)
                .order_by(GuestTag.created_at.asc())
            )
            result = await session.execute(stmt)
            return [TagDTO.from_orm(tag) for tag in result.scalars().all()]
