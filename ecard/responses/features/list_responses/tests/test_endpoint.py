import csv
import io
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from ecard.events.dependencies import get_event_read_model
from ecard.responses.dependencies import get_response_read_model
from ecard.responses.dtos import ResponseDTO, ResponseStatus
from ecard.responses.urls import RESPONSES_URL
from ecard.tests.inmemory_models import (
    OTHER_HOST_ID,
    InMemoryEventModel,
    InMemoryResponseModel,
    make_event,
)


@pytest.fixture
def event():
    return make_event()


@pytest.fixture
def overrides(event):
    event_model = InMemoryEventModel([event])
    responses = [
        ResponseDTO(
            id=uuid4(),
            event_id=event.id,
            respondent_name="Alex",
            status=ResponseStatus.ATTENDING,
            response_data={"plusOne": "yes"},
            created_at=datetime(2026, 5, 1, 12, 0, tzinfo=UTC),
        ),
        ResponseDTO(
            id=uuid4(),
            event_id=event.id,
            respondent_name="Sam",
            respondent_email="sam@example.com",
            status=ResponseStatus.MAYBE,
            headcount=3,
            response_data={"plusOne": "no", "diet": "veg"},
            created_at=datetime(2026, 5, 1, 13, 0, tzinfo=UTC),
        ),
    ]
    ledger = InMemoryResponseModel(event_model, responses)
    return {
        get_event_read_model: lambda: event_model,
        get_response_read_model: lambda: ledger,
    }


@pytest.mark.asyncio
async def test_list_responses_newest_first(client_factory, overrides, event, host_headers):
    async with client_factory(overrides, headers=host_headers) as client:
        response = await client.get(RESPONSES_URL.format(event_id=event.id))

    assert response.status_code == 200
    assert [item["respondent_name"] for item in response.json()] == ["Sam", "Alex"]


@pytest.mark.asyncio
async def test_csv_export_download(client_factory, overrides, event, host_headers):
    async with client_factory(overrides, headers=host_headers) as client:
        response = await client.get(
            RESPONSES_URL.format(event_id=event.id), params={"format": "csv"}
        )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"] == (
        f'attachment; filename="responses-{event.id}.csv"'
    )
    rows = list(csv.reader(io.StringIO(response.text)))
    assert rows[0] == ["Name", "Email", "Status", "Headcount", "Submitted At", "plusOne", "diet"]
    assert rows[1][:4] == ["Alex", "", "attending", "1"]
    assert rows[1][5:] == ["yes", ""]
    assert rows[2][:4] == ["Sam", "sam@example.com", "maybe", "3"]
    assert rows[2][5:] == ["no", "veg"]


@pytest.mark.asyncio
async def test_unknown_format_lists_json(client_factory, overrides, event, host_headers):
    async with client_factory(overrides, headers=host_headers) as client:
        response = await client.get(
            RESPONSES_URL.format(event_id=event.id), params={"format": "xml"}
        )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_csv_export_is_stable(client_factory, overrides, event, host_headers):
    async with client_factory(overrides, headers=host_headers) as client:
        first = await client.get(RESPONSES_URL.format(event_id=event.id), params={"format": "csv"})
        second = await client.get(RESPONSES_URL.format(event_id=event.id), params={"format": "csv"})

    assert first.text == second.text


@pytest.mark.asyncio
async def test_export_of_other_hosts_event_is_not_found(client_factory, overrides, event):
    async with client_factory(overrides, headers={"X-Host-Id": OTHER_HOST_ID}) as client:
        response = await client.get(
            RESPONSES_URL.format(event_id=event.id), params={"format": "csv"}
        )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_export_requires_identity(client_factory, overrides, event):
    async with client_factory(overrides) as client:
        response = await client.get(RESPONSES_URL.format(event_id=event.id))

    assert response.status_code == 401
