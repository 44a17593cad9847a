from fastapi import APIRouter, Depends

from ecard.events.dependencies import get_owned_event, parse_uuid
from ecard.events.dtos import EventDTO
from ecard.responses.dependencies import get_response_write_model
from ecard.responses.repository.write_models import ResponseWriteModel
from ecard.responses.urls import RESPONSE_URL
from ecard.schemas import SuccessResponse

router = APIRouter()


@router.delete(RESPONSE_URL, response_model=SuccessResponse)
async def delete_response(
    response_id: str,
    event: EventDTO = Depends(get_owned_event),
    write_model: ResponseWriteModel = Depends(get_response_write_model),
) -> SuccessResponse:
    response_uuid = parse_uuid(response_id)
    if response_uuid is not None:
        await write_model.delete_response(event.id, response_uuid)
    return SuccessResponse()
