"""Tests for SqlTagReadModel and SqlTagWriteModel."""

from uuid import uuid4

import pytest

from ecard.events.repository.write_models import SqlEventWriteModel
from ecard.tags.repository.read_models import SqlTagReadModel
from ecard.tags.repository.write_models import SqlTagWriteModel


@pytest.fixture
async def event(db_session):
    return await SqlEventWriteModel(session_overwrite=db_session).create_event(
        host_id="host-a", title="Garden Party"
    )


async def test_create_tag_defaults_color(db_session, event):
    write_model = SqlTagWriteModel(session_overwrite=db_session)

    tag = await write_model.create_tag(event.id, "VIP")

    assert tag.label == "VIP"
    assert tag.color == "#7c3aed"


async def test_duplicate_labels_are_allowed(db_session, event):
    write_model = SqlTagWriteModel(session_overwrite=db_session)
    read_model = SqlTagReadModel(session_overwrite=db_session)

    await write_model.create_tag(event.id, "VIP", "#ff0000")
    await write_model.create_tag(event.id, "VIP", "#00ff00")

    tags = await read_model.list_tags(event.id)
    assert [tag.label for tag in tags] == ["VIP", "VIP"]
    assert {tag.color for tag in tags} == {"#ff0000", "#00ff00"}


async def test_delete_tag_is_scoped_and_idempotent(db_session, event):
    write_model = SqlTagWriteModel(session_overwrite=db_session)
    read_model = SqlTagReadModel(session_overwrite=db_session)
    tag = await write_model.create_tag(event.id, "Family")

    await write_model.delete_tag(uuid4(), tag.id)
    assert len(await read_model.list_tags(event.id)) == 1

    await write_model.delete_tag(event.id, tag.id)
    await write_model.delete_tag(event.id, tag.id)
    assert await read_model.list_tags(event.id) == []
