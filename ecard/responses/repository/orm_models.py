from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ecard.config.table_names import TableNames
from ecard.models.base import Base, TimeStamp
from ecard.responses.dtos import ResponseStatus


class RSVPResponse(Base, TimeStamp):
    __tablename__ = TableNames.RSVP_RESPONSES.value

    # Correlated with guests by event only
    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    respondent_name: Mapped[str] = mapped_column(String(200), nullable=False)
    respondent_email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    status: Mapped[str] = mapped_column(
        Enum(
            ResponseStatus,
            name="response_status_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )
    headcount: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    response_data: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)

    def __repr__(self) -> str:
        return f"<RSVPResponse {self.respondent_name} ({self.status}) for event {self.event_id}>"
