from uuid import uuid4

import pytest

from ecard.events.dependencies import get_event_read_model, get_event_write_model
from ecard.events.dtos import EventStatus
from ecard.events.urls import PUBLISH_EVENT_URL
from ecard.tests.inmemory_models import OTHER_HOST_ID, InMemoryEventModel, make_event


@pytest.fixture
def draft_event():
    return make_event(status=EventStatus.DRAFT)


@pytest.fixture
def overrides(draft_event):
    model = InMemoryEventModel([draft_event])
    return {
        get_event_read_model: lambda: model,
        get_event_write_model: lambda: model,
    }


@pytest.mark.asyncio
async def test_publish_toggles_status(client_factory, overrides, draft_event, host_headers):
    url = PUBLISH_EVENT_URL.format(event_id=draft_event.id)

    async with client_factory(overrides, headers=host_headers) as client:
        published = await client.post(url)
        unpublished = await client.post(url)

    assert published.status_code == 200
    assert published.json()["status"] == "published"
    assert published.json()["slug"] == draft_event.slug
    assert unpublished.status_code == 200
    assert unpublished.json()["status"] == "draft"


@pytest.mark.asyncio
async def test_publish_without_identity_is_unauthorized(client_factory, overrides, draft_event):
    async with client_factory(overrides) as client:
        response = await client.post(PUBLISH_EVENT_URL.format(event_id=draft_event.id))

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


@pytest.mark.asyncio
@pytest.mark.parametrize("event_id", [str(uuid4()), "not-a-uuid"])
async def test_publish_unknown_event_is_not_found(client_factory, overrides, host_headers, event_id):
    async with client_factory(overrides, headers=host_headers) as client:
        response = await client.post(PUBLISH_EVENT_URL.format(event_id=event_id))

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


@pytest.mark.asyncio
async def test_publish_other_hosts_event_looks_missing(client_factory, overrides, draft_event):
    async with client_factory(overrides, headers={"X-Host-Id": OTHER_HOST_ID}) as client:
        response = await client.post(PUBLISH_EVENT_URL.format(event_id=draft_event.id))

    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}
