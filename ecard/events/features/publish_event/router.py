from fastapi import APIRouter, Depends

from ecard.errors import NotFoundError
from ecard.events.dependencies import get_event_write_model, get_owned_event
from ecard.events.dtos import EventDTO
from ecard.events.repository.write_models import EventWriteModel
from ecard.events.schemas import EventResponse
from ecard.events.urls import PUBLISH_EVENT_URL

router = APIRouter()


@router.post(PUBLISH_EVENT_URL, response_model=EventResponse)
async def toggle_publish(
    event: EventDTO = Depends(get_owned_event),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    """Flip an owned event between draft and published."""
    updated = await write_model.set_status(event.id, event.host_id, event.status.toggled())
    if updated is None:
        raise NotFoundError()
    return EventResponse.from_dto(updated)
