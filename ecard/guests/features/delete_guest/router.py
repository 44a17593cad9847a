from fastapi import APIRouter, Depends

from ecard.events.dependencies import get_owned_event, parse_uuid
from ecard.events.dtos import EventDTO
from ecard.guests.dependencies import get_guest_write_model
from ecard.guests.repository.write_models import GuestWriteModel
from ecard.guests.urls import GUEST_URL
from ecard.schemas import SuccessResponse

router = APIRouter()


@router.delete(GUEST_URL, response_model=SuccessResponse)
async def delete_guest(
    guest_id: str,
    event: EventDTO = Depends(get_owned_event),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> SuccessResponse:
    guest_uuid = parse_uuid(guest_id)
    if guest_uuid is not None:
        await write_model.delete_guest(event.id, guest_uuid)
    return SuccessResponse()
