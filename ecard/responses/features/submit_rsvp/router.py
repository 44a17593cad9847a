from typing import Any

from fastapi import APIRouter, Body, Depends, status

from ecard.rate_limit import enforce_rsvp_rate_limit
from ecard.responses.dependencies import get_response_write_model
from ecard.responses.repository.write_models import ResponseWriteModel
from ecard.responses.schemas import ResponseOut, RSVPSubmitResponse
from ecard.responses.urls import RSVP_URL

router = APIRouter()


@router.post(
    RSVP_URL,
    response_model=RSVPSubmitResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(enforce_rsvp_rate_limit)],
)
async def submit_rsvp(
    slug: str,
    payload: Any = Body(...),
    write_model: ResponseWriteModel = Depends(get_response_write_model),
) -> RSVPSubmitResponse:
    """
    Public RSVP submission, no sign-in required.
    The payload is validated by the ledger after the capacity check so a full event
    answers 403 whatever was submitted.
    """
    response = await write_model.submit_rsvp(slug, payload)
    return RSVPSubmitResponse(response=ResponseOut.from_dto(response))
