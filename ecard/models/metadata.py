"""Loads every ORM model so ``metadata`` describes the full schema."""

from ecard.events.repository.orm_models import Event
from ecard.guests.repository.orm_models import Guest
from ecard.models.base import BaseModel
from ecard.responses.repository.orm_models import RSVPResponse
from ecard.tags.repository.orm_models import GuestTag

metadata = BaseModel.metadata

__all__ = [
    "Event",
    "Guest",
    "GuestTag",
    "RSVPResponse",
    "metadata",
]
