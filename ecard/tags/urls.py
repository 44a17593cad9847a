TAGS_URL = "/api/v1/events/{event_id}/tags"
