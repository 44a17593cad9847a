from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecard.config.database import async_session_manager
from ecard.responses.dtos import ResponseDTO, ResponseExportDTO, ResponseStatus
from ecard.responses.export import build_export
from ecard.responses.repository.orm_models import RSVPResponse


async def count_for_event(session: AsyncSession, event_id: UUID) -> int:
    stmt = select(func.count()).select_from(RSVPResponse).where(RSVPResponse.event_id == event_id)
    result = await session.execute(stmt)
    return result.scalar_one()


async def attending_headcount_for_event(session: AsyncSession, event_id: UUID) -> int:
    stmt = select(func.coalesce(func.sum(RSVPResponse.headcount), 0)).where(
        RSVPResponse.event_id == event_id,
        RSVPResponse.status == ResponseStatus.ATTENDING,
    )
    result = await session.execute(stmt)
    return int(result.scalar_one())


class ResponseReadModel(ABC):
    @abstractmethod
    async def count_responses(self, event_id: UUID) -> int:
        raise NotImplementedError

    @abstractmethod
    async def list_responses(self, event_id: UUID) -> list[ResponseDTO]:
        """Responses of an event, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def export_responses(self, event_id: UUID) -> ResponseExportDTO:
        raise NotImplementedError


class SqlResponseReadModel(ResponseReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def count_responses(self, event_id: UUID) -> int:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            return await count_for_event(session, event_id)

    async def list_responses(self, event_id: UUID) -> list[ResponseDTO]:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = (
                select(RSVPResponse)
                .where(RSVPResponse.event_id == event_id)
                .order_by(RSVPResponse.created_at.desc(), RSVPResponse.uuid.desc())
            )
            result = await session.execute(stmt)
            return [ResponseDTO.from_orm(response) for response in result.scalars().all()]

    async def export_responses(self, event_id: UUID) -> ResponseExportDTO:
        return build_export(event_id, await self.list_responses(event_id))
