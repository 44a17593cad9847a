
from fastapi import APIRouter, Depends, Query, Response

from ecard.events.dependencies import get_owned_event
from ecard.events.dtos import EventDTO
from ecard.responses.dependencies import get_response_read_model
from ecard.responses.export import render_csv
from ecard.responses.repository.read_models import ResponseReadModel
from ecard.responses.schemas import ResponseOut
from ecard.responses.urls import RESPONSES_URL

router = APIRouter()


@router.get(RESPONSES_URL, response_model=list[ResponseOut])
async def list_responses(
    export_format: str | None = Query(None, alias="format"),
    event: EventDTO = Depends(get_owned_event),
    read_model: ResponseReadModel = Depends(get_response_read_model),
):
    """List an event's responses newest first, or download them with ``?format=csv``."""
    if export_format == "csv":
        export = await read_model.export_responses(event.id)
        return Response(
            content=render_csv(export),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
        )

    responses = await read_model.list_responses(event.id)
    return [ResponseOut.from_dto(response) for response in responses]
