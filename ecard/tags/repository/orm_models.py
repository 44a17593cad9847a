from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from ecard.config.table_names import TableNames
from ecard.models.base import Base, TimeStamp
from ecard.tags.dtos import DEFAULT_TAG_COLOR


class GuestTag(Base, TimeStamp):
    __tablename__ = TableNames.GUEST_TAGS.value

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Labels are not unique per event
    label: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(9), default=DEFAULT_TAG_COLOR, nullable=False)

    def __repr__(self) -> str:
        return f"<GuestTag {self.label} for event {self.event_id}>"
