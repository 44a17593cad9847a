from uuid import UUID

from fastapi import Depends

from ecard.auth import get_current_host_id
from ecard.errors import NotFoundError
from ecard.events.dtos import EventDTO
from ecard.events.repository.read_models import EventReadModel, SqlEventReadModel
from ecard.events.repository.write_models import EventWriteModel, SqlEventWriteModel


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


def get_event_write_model() -> EventWriteModel:
    """Dependency to get event write model instance."""
    return SqlEventWriteModel()


def parse_uuid(value: str) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        return None


async def get_owned_event(
    event_id: str,
    host_id: str = Depends(get_current_host_id),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventDTO:
    """Resolve the path event for the signed-in host.

    Unknown ids, malformed ids and events owned by someone else all answer 404.
    """
    event_uuid = parse_uuid(event_id)
    if event_uuid is None:
        raise NotFoundError()
    event = await read_model.get_event_for_host(event_uuid, host_id)
    if event is None:
        raise NotFoundError()
    return event
