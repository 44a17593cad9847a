from fastapi import APIRouter, Depends

from ecard.events.dependencies import get_owned_event
from ecard.events.dtos import EventDTO
from ecard.guests.dependencies import get_guest_read_model
from ecard.guests.repository.read_models import GuestReadModel
from ecard.guests.schemas import GuestResponse
from ecard.guests.urls import GUESTS_URL

router = APIRouter()


@router.get(GUESTS_URL, response_model=list[GuestResponse])
async def list_guests(
    event: EventDTO = Depends(get_owned_event),
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> list[GuestResponse]:
    guests = await read_model.list_guests(event.id)
    return [GuestResponse.from_dto(guest) for guest in guests]
