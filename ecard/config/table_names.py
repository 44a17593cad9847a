from enum import Enum


class TableNames(str, Enum):
    EVENTS = "events"
    GUESTS = "guests"
    GUEST_TAGS = "guest_tags"
    RSVP_RESPONSES = "rsvp_responses"
