from fastapi import APIRouter, Depends

from ecard.errors import NotFoundError
from ecard.events.dependencies import get_owned_event, parse_uuid
from ecard.events.dtos import EventDTO
from ecard.guests.dependencies import get_guest_write_model
from ecard.guests.repository.write_models import GuestWriteModel
from ecard.guests.schemas import GuestResponse, GuestUpdate
from ecard.guests.urls import GUEST_URL

router = APIRouter()


@router.patch(GUEST_URL, response_model=GuestResponse)
async def update_guest(
    guest_id: str,
    body: GuestUpdate,
    event: EventDTO = Depends(get_owned_event),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> GuestResponse:
    """Partially update a guest. Fields missing from the body keep their value."""
    guest_uuid = parse_uuid(guest_id)
    if guest_uuid is None:
        raise NotFoundError()

    guest = await write_model.update_guest(event.id, guest_uuid, body.changes())
    if guest is None:
        raise NotFoundError()
    return GuestResponse.from_dto(guest)
