from fastapi import APIRouter, Body, Depends, Query, status

from ecard.errors import ValidationFailedError
from ecard.events.dependencies import get_owned_event, parse_uuid
from ecard.events.dtos import EventDTO
from ecard.schemas import SuccessResponse
from ecard.tags.dependencies import get_tag_read_model, get_tag_write_model
from ecard.tags.repository.read_models import TagReadModel
from ecard.tags.repository.write_models import TagWriteModel
from ecard.tags.schemas import TagCreate, TagDelete, TagResponse
from ecard.tags.urls import TAGS_URL

router = APIRouter()


@router.get(TAGS_URL, response_model=list[TagResponse])
async def list_tags(
    event: EventDTO = Depends(get_owned_event),
    read_model: TagReadModel = Depends(get_tag_read_model),
) -> list[TagResponse]:
    tags = await read_model.list_tags(event.id)
    return [TagResponse.from_dto(tag) for tag in tags]


@router.post(TAGS_URL, response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    body: TagCreate,
    event: EventDTO = Depends(get_owned_event),
    write_model: TagWriteModel = Depends(get_tag_write_model),
) -> TagResponse:
    tag = await write_model.create_tag(event.id, body.label, body.color)
    return TagResponse.from_dto(tag)


@router.delete(TAGS_URL, response_model=SuccessResponse)
async def delete_tag(
    tag_id: str | None = Query(None),
    body: TagDelete | None = Body(None),
    event: EventDTO = Depends(get_owned_event),
    write_model: TagWriteModel = Depends(get_tag_write_model),
) -> SuccessResponse:
    """Delete a tag named by ``?tag_id=`` or by a ``{"tagId": ...}`` body."""
    raw_id = tag_id or (body.tag_id if body else None)
    if not raw_id:
        raise ValidationFailedError.for_field("tagId", "Tag id is required")

    tag_uuid = parse_uuid(raw_id)
    if tag_uuid is not None:
        await write_model.delete_tag(event.id, tag_uuid)
    return SuccessResponse()
