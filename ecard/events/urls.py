PUBLISH_EVENT_URL = "/api/v1/events/{event_id}/publish"
TIER_UPGRADE_WEBHOOK_URL = "/api/v1/webhooks/tier-upgrade"
