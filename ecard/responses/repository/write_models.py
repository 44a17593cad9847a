"""Response ledger writes.

``submit_rsvp`` checks the response ceiling before it validates the payload, so a full
event rejects every submission with the same upgrade message regardless of its content.

With ``CapacityMode.SOFT`` the ceiling check reads the count and inserts afterwards without
holding a lock; concurrent submissions right at the ceiling may all be accepted and
overshoot it. ``CapacityMode.STRICT`` locks the event row for the duration of the
count-and-insert transaction so submissions to the same event are serialized.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from typing import Any
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecard.config.database import async_session_manager
from ecard.config.settings import CapacityMode, settings
from ecard.errors import CapacityExceededError, NotFoundError, ValidationFailedError
from ecard.events.dtos import EventDTO, EventStatus
from ecard.events.repository.orm_models import Event
from ecard.responses.capacity import (
    check_attendee_limit,
    check_capacity,
    per_rsvp_limit_message,
)
from ecard.responses.dtos import NewResponseDTO, ResponseDTO, ResponseStatus
from ecard.responses.repository.orm_models import RSVPResponse
from ecard.responses.repository.read_models import (
    attending_headcount_for_event,
    count_for_event,
)
from ecard.responses.schemas import RSVPSubmission

logger = logging.getLogger(__name__)


class ResponseWriteModel(ABC):
    @abstractmethod
    async def submit_rsvp(self, slug: str, payload: dict[str, Any]) -> ResponseDTO:
        """Record a public RSVP for the published event behind ``slug``.

        Raises NotFoundError for unknown or unpublished events, CapacityExceededError when
        the event is full and ValidationFailedError for a malformed payload.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete_response(self, event_id: UUID, response_id: UUID) -> None:
        """Remove a response. Removing an unknown response is not an error."""
        raise NotImplementedError


def apply_event_rules(event: EventDTO, submission: RSVPSubmission) -> NewResponseDTO:
    """Per-event headcount rules that run once the payload itself is valid."""
    headcount = submission.headcount if event.allow_plus_ones else 1
    if headcount > event.max_guests_per_rsvp:
        raise ValidationFailedError.for_field(
            "headcount", per_rsvp_limit_message(event.max_guests_per_rsvp)
        )
    return submission.to_dto(headcount=headcount)


def validate_submission(payload: Any) -> RSVPSubmission:
    try:
        return RSVPSubmission.model_validate(payload)
    except ValidationError as e:
        raise ValidationFailedError.from_pydantic(e) from e


class SqlResponseWriteModel(ResponseWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        capacity_mode: CapacityMode | None = None,
    ) -> None:
        self.session_overwrite = session_overwrite
        self.capacity_mode = capacity_mode or settings.capacity_mode

    async def _get_published_event(self, session: AsyncSession, slug: str) -> Event | None:
        stmt = select(Event).where(Event.slug == slug, Event.status == EventStatus.PUBLISHED)
        if self.capacity_mode == CapacityMode.STRICT:
            stmt = stmt.with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def submit_rsvp(self, slug: str, payload: dict[str, Any]) -> ResponseDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            row = await self._get_published_event(session, slug)
            if row is None:
                raise NotFoundError()
            event = EventDTO.from_orm(row)

            current_count = await count_for_event(session, event.id)
            decision = check_capacity(current_count, event.max_responses)
            if not decision.allowed:
                logger.warning(
                    f"Rejected RSVP for event {event.id}: {current_count}/{event.max_responses} responses"
                )
                raise CapacityExceededError(decision.message)

            submission = validate_submission(payload)
            new_response = apply_event_rules(event, submission)

            if new_response.status == ResponseStatus.ATTENDING and event.max_attendees:
                attending = await attending_headcount_for_event(session, event.id)
                decision = check_attendee_limit(attending, new_response.headcount, event.max_attendees)
                if not decision.allowed:
                    logger.warning(
                        f"Rejected RSVP for event {event.id}: "
                        f"{attending}+{new_response.headcount} over {event.max_attendees} attendees"
                    )
                    raise CapacityExceededError(decision.message)

            response = RSVPResponse(
                event_id=event.id,
                respondent_name=new_response.respondent_name,
                respondent_email=new_response.respondent_email,
                status=new_response.status,
                headcount=new_response.headcount,
                response_data=new_response.response_data,
            )
            session.add(response)
            await session.flush()
            await session.refresh(response)
            logger.info(
                f"Accepted RSVP {response.uuid} for event {event.id} "
                f"({current_count + 1}/{event.max_responses})"
            )
            return ResponseDTO.from_orm(response)

    async def delete_response(self, event_id: UUID, response_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = delete(RSVPResponse).where(
                RSVPResponse.uuid == response_id,
                RSVPResponse.event_id == event_id,
            )
            result = await session.execute(stmt)
            if result.rowcount:
                logger.info(f"Deleted response {response_id} from event {event_id}")
