GUESTS_URL = "/api/v1/events/{event_id}/guests"
GUEST_URL = "/api/v1/events/{event_id}/guests/{guest_id}"
BULK_IMPORT_GUESTS_URL = "/api/v1/events/{event_id}/guests/bulk"
