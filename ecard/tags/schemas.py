import re
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ecard.tags.dtos import DEFAULT_TAG_COLOR, TagDTO

HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{3,8}$")


def normalize_color(value: Any) -> str:
    """Anything that is not a hex color falls back to the default color."""
    if isinstance(value, str) and HEX_COLOR_RE.match(value):
        return value
    return DEFAULT_TAG_COLOR


class TagCreate(BaseModel):
    label: str = Field(..., min_length=1, max_length=100)
    color: str = DEFAULT_TAG_COLOR

    @field_validator("color", mode="before")
    @classmethod
    def default_invalid_color(cls, value: Any) -> str:
        return normalize_color(value)


class TagResponse(BaseModel):
    id: UUID
    event_id: UUID
    label: str
    color: str
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, tag: TagDTO) -> "TagResponse":
        return cls(
            id=tag.id,
            event_id=tag.event_id,
            label=tag.label,
            color=tag.color,
            created_at=tag.created_at,
        )


class TagDelete(BaseModel):
    """JSON body form of a tag delete, ``{"tagId": "..."}``."""

    model_config = ConfigDict(populate_by_name=True)

    tag_id: str = Field(..., alias="tagId")
