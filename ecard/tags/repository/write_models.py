import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from ecard.config.database import async_session_manager
from ecard.tags.dtos import DEFAULT_TAG_COLOR, TagDTO
from ecard.tags.repository.orm_models import GuestTag

logger = logging.getLogger(__name__)


class TagWriteModel(ABC):
    @abstractmethod
    async def create_tag(self, event_id: UUID, label: str, color: str = DEFAULT_TAG_COLOR) -> TagDTO:
        """Create a tag. The label is stored as given; duplicates are allowed."""
        raise NotImplementedError

    @abstractmethod
    async def delete_tag(self, event_id: UUID, tag_id: UUID) -> None:
        raise NotImplementedError


class SqlTagWriteModel(TagWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_tag(self, event_id: UUID, label: str, color: str = DEFAULT_TAG_COLOR) -> TagDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            tag = GuestTag(event_id=event_id, label=label, color=color)
            session.add(tag)
            await session.flush()
            await session.refresh(tag)
            logger.info(f"Created tag {label!r} for event {event_id}")
            return TagDTO.from_orm(tag)

    async def delete_tag(self, event_id: UUID, tag_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = delete(GuestTag).where(GuestTag.uuid == tag_id, GuestTag.event_id == event_id)
            result = await session.execute(stmt)
            if result.rowcount:
                logger.info(f"Deleted tag {tag_id} from event {event_id}")
