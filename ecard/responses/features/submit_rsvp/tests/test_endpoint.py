import time

import pytest

from ecard.events.dtos import EventStatus
from ecard.rate_limit import RateLimiter, RateLimitResult, get_rate_limiter
from ecard.responses.dependencies import get_response_write_model
from ecard.responses.urls import RSVP_URL
from ecard.tests.inmemory_models import InMemoryEventModel, InMemoryResponseModel, make_event


class DenyingRateLimiter(RateLimiter):
    def __init__(self):
        self.keys = []

    async def consume(self, key, max_requests, window_seconds):
        self.keys.append(key)
        return RateLimitResult(allowed=False, remaining=0, reset_at=time.time() + 30)


class RecordingRateLimiter(RateLimiter):
    def __init__(self):
        self.keys = []

    async def consume(self, key, max_requests, window_seconds):
        self.keys.append(key)
        return RateLimitResult(allowed=True, remaining=max_requests - 1, reset_at=time.time() + 60)


def ledger_for(*events):
    return InMemoryResponseModel(InMemoryEventModel(events))


def valid_rsvp(name="Alex", **fields):
    return {"respondent_name": name, "status": "attending", **fields}


@pytest.mark.asyncio
async def test_submit_rsvp(client_factory):
    event = make_event()
    ledger = ledger_for(event)
    overrides = {get_response_write_model: lambda: ledger}

    async with client_factory(overrides) as client:
        response = await client.post(
            RSVP_URL.format(slug=event.slug),
            json=valid_rsvp(headcount=2, response_data={"plusOne": "yes"}),
        )

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["response"]["respondent_name"] == "Alex"
    assert data["response"]["headcount"] == 2
    assert data["response"]["response_data"] == {"plusOne": "yes"}
    assert await ledger.count_responses(event.id) == 1


@pytest.mark.asyncio
async def test_third_rsvp_over_ceiling_of_two(client_factory):
    event = make_event(max_responses=2)
    ledger = ledger_for(event)
    overrides = {get_response_write_model: lambda: ledger}

    async with client_factory(overrides) as client:
        first = await client.post(RSVP_URL.format(slug=event.slug), json=valid_rsvp("One"))
        second = await client.post(RSVP_URL.format(slug=event.slug), json=valid_rsvp("Two"))
        third = await client.post(RSVP_URL.format(slug=event.slug), json=valid_rsvp("Three"))

    assert first.status_code == 201
    assert second.status_code == 201
    assert third.status_code == 403
    assert "upgrade" in third.json()["error"]
    assert await ledger.count_responses(event.id) == 2


@pytest.mark.asyncio
async def test_full_event_answers_403_even_for_invalid_payload(client_factory):
    event = make_event(max_responses=0)
    overrides = {get_response_write_model: lambda: ledger_for(event)}

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_URL.format(slug=event.slug), json={"status": "??"})

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_invalid_submission_lists_field_errors(client_factory):
    event = make_event()
    ledger = ledger_for(event)
    overrides = {get_response_write_model: lambda: ledger}

    async with client_factory(overrides) as client:
        response = await client.post(
            RSVP_URL.format(slug=event.slug),
            json={"respondent_name": "", "status": "accepted", "headcount": 0},
        )

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Invalid data"
    assert {detail["field"] for detail in data["details"]} == {
        "respondent_name",
        "status",
        "headcount",
    }
    assert await ledger.count_responses(event.id) == 0


@pytest.mark.asyncio
async def test_per_rsvp_limit(client_factory):
    event = make_event(max_guests_per_rsvp=1)
    overrides = {get_response_write_model: lambda: ledger_for(event)}

    async with client_factory(overrides) as client:
        response = await client.post(
            RSVP_URL.format(slug=event.slug), json=valid_rsvp(headcount=2)
        )

    assert response.status_code == 400
    assert response.json()["details"] == [
        {"field": "headcount", "message": "Maximum 1 guest per RSVP."}
    ]


@pytest.mark.asyncio
async def test_attendee_ceiling(client_factory):
    event = make_event(max_attendees=1)
    ledger = ledger_for(event)
    overrides = {get_response_write_model: lambda: ledger}

    async with client_factory(overrides) as client:
        first = await client.post(RSVP_URL.format(slug=event.slug), json=valid_rsvp("One"))
        second = await client.post(RSVP_URL.format(slug=event.slug), json=valid_rsvp("Two"))

    assert first.status_code == 201
    assert second.status_code == 403
    assert second.json() == {"error": "This event has reached its maximum number of attendees."}


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [EventStatus.DRAFT, EventStatus.PUBLISHED])
async def test_unpublished_or_unknown_slug_is_not_found(client_factory, status):
    event = make_event(status=status)
    overrides = {get_response_write_model: lambda: ledger_for(event)}
    slug = event.slug if status == EventStatus.DRAFT else "missing-slug"

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_URL.format(slug=slug), json=valid_rsvp())

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_rate_limited_submission(client_factory):
    event = make_event()
    ledger = ledger_for(event)
    limiter = DenyingRateLimiter()
    overrides = {
        get_response_write_model: lambda: ledger,
        get_rate_limiter: lambda: limiter,
    }

    async with client_factory(overrides) as client:
        response = await client.post(
            RSVP_URL.format(slug=event.slug),
            json=valid_rsvp(),
            headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
        )

    assert response.status_code == 429
    assert 1 <= int(response.headers["Retry-After"]) <= 30
    assert limiter.keys == ["rsvp:203.0.113.7"]
    assert await ledger.count_responses(event.id) == 0


@pytest.mark.asyncio
async def test_rate_limit_keyed_by_real_ip(client_factory):
    event = make_event()
    limiter = RecordingRateLimiter()
    overrides = {
        get_response_write_model: lambda: ledger_for(event),
        get_rate_limiter: lambda: limiter,
    }

    async with client_factory(overrides) as client:
        response = await client.post(
            RSVP_URL.format(slug=event.slug),
            json=valid_rsvp(),
            headers={"X-Real-IP": "198.51.100.4"},
        )

    assert response.status_code == 201
    assert limiter.keys == ["rsvp:198.51.100.4"]


@pytest.mark.asyncio
async def test_unexpected_failure_is_a_generic_500(client_factory):
    class BrokenLedger(InMemoryResponseModel):
        async def submit_rsvp(self, slug, payload):
            raise RuntimeError("connection reset by peer")

    event = make_event()
    overrides = {get_response_write_model: lambda: BrokenLedger(InMemoryEventModel([event]))}

    async with client_factory(overrides) as client:
        response = await client.post(RSVP_URL.format(slug=event.slug), json=valid_rsvp())

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
