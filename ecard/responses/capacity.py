"""Capacity decisions for RSVP submissions.

These functions only decide. Reading the counts and acting on the decision is the
caller's job, which is what makes the default ledger a soft limit: two submissions racing
at the ceiling can both see room and both land.
"""

from dataclasses import dataclass

RESPONSE_LIMIT_MESSAGE = (
    "This event has reached its maximum number of responses. "
    "The host may need to upgrade their plan."
)
ATTENDEE_LIMIT_MESSAGE = "This event has reached its maximum number of attendees."


def pluralize(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


@dataclass(frozen=True)
class CapacityDecision:
    allowed: bool
    message: str | None = None


ALLOWED = CapacityDecision(allowed=True)


def check_capacity(current_count: int, max_responses: int) -> CapacityDecision:
    """Accept a new response only while the event is below its response ceiling."""
    if current_count >= max_responses:
        return CapacityDecision(allowed=False, message=RESPONSE_LIMIT_MESSAGE)
    return ALLOWED


def check_attendee_limit(
    attending_headcount: int, headcount: int, max_attendees: int | None
) -> CapacityDecision:
    """Keep the sum of attending headcounts within the event's attendee ceiling, if it has one."""
    if not max_attendees:
        return ALLOWED
    if attending_headcount + headcount <= max_attendees:
        return ALLOWED

    spots_left = max(0, max_attendees - attending_headcount)
    if spots_left > 0:
        message = (
            f"Only {pluralize(spots_left, 'spot')} remaining. Please reduce your guest count."
        )
    else:
        message = ATTENDEE_LIMIT_MESSAGE
    return CapacityDecision(allowed=False, message=message)


def per_rsvp_limit_message(max_guests_per_rsvp: int) -> str:
    return f"Maximum {pluralize(max_guests_per_rsvp, 'guest')} per RSVP."
