from typing import Annotated

from fastapi import APIRouter, Body, Depends, status

from ecard.events.dependencies import get_owned_event
from ecard.events.dtos import EventDTO
from ecard.guests.dependencies import get_guest_write_model
from ecard.guests.repository.write_models import GuestWriteModel
from ecard.guests.schemas import MAX_BULK_IMPORT_ROWS, BulkImportResponse, GuestCreate
from ecard.guests.urls import BULK_IMPORT_GUESTS_URL

router = APIRouter()


@router.post(
    BULK_IMPORT_GUESTS_URL,
    response_model=BulkImportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def bulk_import_guests(
    rows: Annotated[list[GuestCreate], Body(max_length=MAX_BULK_IMPORT_ROWS)],
    event: EventDTO = Depends(get_owned_event),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> BulkImportResponse:
    """Import many guests at once.

    Every row is validated before anything is written; one bad row rejects the whole
    upload and the error details list each failing row by index.
    """
    result = await write_model.bulk_import(event.id, [row.to_dto() for row in rows])
    return BulkImportResponse(imported=result.imported)
