"""initial_ecard_schema

Revision ID: 3f1c9a7b2d4e
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1c9a7b2d4e"
down_revision = None
branch_labels = None
depends_on = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "events",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("host_id", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=64), nullable=False),
        sa.Column(
            "status",
            sa.Enum("draft", "published", name="event_status_enum"),
            nullable=False,
        ),
        sa.Column(
            "tier",
            sa.Enum("free", "pro30", "pass", name="event_tier_enum"),
            nullable=False,
        ),
        sa.Column("max_responses", sa.Integer(), nullable=False),
        sa.Column("payment_id", sa.String(length=255), nullable=True),
        sa.Column("allow_plus_ones", sa.Boolean(), nullable=False),
        sa.Column("max_guests_per_rsvp", sa.Integer(), nullable=False),
        sa.Column("max_attendees", sa.Integer(), nullable=True),
        sa.Column("customization", sa.JSON(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index("ix_events_host_id", "events", ["host_id"])

    op.create_table(
        "guests",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_guests_event_id", "guests", ["event_id"])

    op.create_table(
        "guest_tags",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("label", sa.String(length=100), nullable=False),
        sa.Column("color", sa.String(length=9), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_guest_tags_event_id", "guest_tags", ["event_id"])

    op.create_table(
        "rsvp_responses",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("respondent_name", sa.String(length=200), nullable=False),
        sa.Column("respondent_email", sa.String(length=320), nullable=True),
        sa.Column(
            "status",
            sa.Enum("attending", "not_attending", "maybe", name="response_status_enum"),
            nullable=False,
        ),
        sa.Column("headcount", sa.Integer(), nullable=False),
        sa.Column("response_data", sa.JSON(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_rsvp_responses_event_id", "rsvp_responses", ["event_id"])


def downgrade() -> None:
    op.drop_index("ix_rsvp_responses_event_id", table_name="rsvp_responses")
    op.drop_table("rsvp_responses")
    op.drop_index("ix_guest_tags_event_id", table_name="guest_tags")
    op.drop_table("guest_tags")
    op.drop_index("ix_guests_event_id", table_name="guests")
    op.drop_table("guests")
    op.drop_index("ix_events_host_id", table_name="events")
    op.drop_table("events")
    op.execute("DROP TYPE response_status_enum")
    op.execute("DROP TYPE event_tier_enum")
    op.execute("DROP TYPE event_status_enum")
