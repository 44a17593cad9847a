from fastapi import APIRouter, Depends, status

from ecard.events.dependencies import get_owned_event
from ecard.events.dtos import EventDTO
from ecard.guests.dependencies import get_guest_write_model
from ecard.guests.repository.write_models import GuestWriteModel
from ecard.guests.schemas import GuestCreate, GuestResponse
from ecard.guests.urls import GUESTS_URL

router = APIRouter()


@router.post(GUESTS_URL, response_model=GuestResponse, status_code=status.HTTP_201_CREATED)
async def create_guest(
    body: GuestCreate,
    event: EventDTO = Depends(get_owned_event),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> GuestResponse:
    guest = await write_model.create_guest(event.id, body.to_dto())
    return GuestResponse.from_dto(guest)
