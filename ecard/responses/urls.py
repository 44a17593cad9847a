RSVP_URL = "/api/v1/rsvp/{slug}"
RESPONSES_URL = "/api/v1/events/{event_id}/responses"
RESPONSE_URL = "/api/v1/events/{event_id}/responses/{response_id}"
