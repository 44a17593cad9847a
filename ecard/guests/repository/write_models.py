"""Guest write models. Every operation is scoped by the event id it is given."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from functools import partial
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecard.config.database import async_session_manager
from ecard.guests.dtos import BulkImportResultDTO, GuestDTO, NewGuestDTO
from ecard.guests.repository.orm_models import Guest

logger = logging.getLogger(__name__)

PATCHABLE_FIELDS = ("name", "email", "phone", "notes")


class GuestWriteModel(ABC):
    @abstractmethod
    async def create_guest(self, event_id: UUID, guest: NewGuestDTO) -> GuestDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_guest(
        self, event_id: UUID, guest_id: UUID, changes: dict[str, Any]
    ) -> GuestDTO | None:
        """Apply a partial patch. None when the guest does not belong to the event."""
        raise NotImplementedError

    @abstractmethod
    async def delete_guest(self, event_id: UUID, guest_id: UUID) -> None:
        """Remove a guest. Deleting an unknown guest is not an error."""
        raise NotImplementedError

    @abstractmethod
    async def bulk_import(
        self, event_id: UUID, guests: Sequence[NewGuestDTO]
    ) -> BulkImportResultDTO:
        """Insert already validated rows in one transaction, all or nothing."""
        raise NotImplementedError


class SqlGuestWriteModel(GuestWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_guest(self, event_id: UUID, guest: NewGuestDTO) -> GuestDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            row = Guest(
                event_id=event_id,
                name=guest.name,
                email=guest.email,
                phone=guest.phone,
                notes=guest.notes,
            )
            session.add(row)
            await session.flush()
            await session.refresh(row)
            logger.info(f"Created guest {row.uuid} for event {event_id}")
            return GuestDTO.from_orm(row)

    async def update_guest(
        self, event_id: UUID, guest_id: UUID, changes: dict[str, Any]
    ) -> GuestDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = select(Guest).where(Guest.uuid == guest_id, Guest.event_id == event_id)
            result = await session.execute(stmt)
            guest = result.scalar_one_or_none()
            if guest is None:
                return None

            for field_name, value in changes.items():
                if field_name in PATCHABLE_FIELDS:
                    setattr(guest, field_name, value)

            await session.flush()
            await session.refresh(guest)
            return GuestDTO.from_orm(guest)

    async def delete_guest(self, event_id: UUID, guest_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = delete(Guest).where(Guest.uuid == guest_id, Guest.event_id == event_id)
            result = await session.execute(stmt)
            if result.rowcount:
                logger.info(f"Deleted guest {guest_id} from event {event_id}")

    async def bulk_import(
        self, event_id: UUID, guests: Sequence[NewGuestDTO]
    ) -> BulkImportResultDTO:
        if not guests:
            return BulkImportResultDTO(imported=0)

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            session.add_all(
                [
                    Guest(
                        event_id=event_id,
                        name=guest.name,
                        email=guest.email,
                        phone=guest.phone,
                        notes=guest.notes,
                    )
                    for guest in guests
                ]
            )
            await session.flush()

        logger.info(f"Imported {len(guests)} guests into event {event_id}")
        return BulkImportResultDTO(imported=len(guests))
