import hmac
import logging
from typing import Protocol

from fastapi import APIRouter, Depends, Request

from ecard.config.settings import settings
from ecard.errors import UnauthorizedError, ValidationFailedError
from ecard.events.dependencies import get_event_write_model
from ecard.events.dtos import Tier, TierUpgradedEvent
from ecard.events.repository.write_models import EventWriteModel
from ecard.events.schemas import EventResponse, TierUpgradeRequest
from ecard.events.urls import TIER_UPGRADE_WEBHOOK_URL
from ecard.rate_limit import client_ip

logger = logging.getLogger(__name__)

router = APIRouter()

WEBHOOK_SECRET_HEADER = "X-Webhook-Secret"
UPGRADE_TIERS = (Tier.PRO30, Tier.PASS)


class WebhookVerifier(Protocol):
    """Decides whether a webhook request really comes from the payment collaborator."""

    def __call__(self, headers: dict[str, str]) -> bool:
        ...


class SharedSecretWebhookVerifier:
    """Default verifier comparing a shared secret header in constant time."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def __call__(self, headers: dict[str, str]) -> bool:
        if not self._secret:
            logger.warning("Tier webhook secret is not configured, rejecting request")
            return False
        presented = headers.get(WEBHOOK_SECRET_HEADER.lower(), "")
        return hmac.compare_digest(presented.encode(), self._secret.encode())


def get_webhook_verifier() -> WebhookVerifier:
    """Dependency to get the webhook verifier."""
    return SharedSecretWebhookVerifier(settings.tier_webhook_secret)


async def verify_tier_webhook(
    request: Request,
    verifier: WebhookVerifier = Depends(get_webhook_verifier),
) -> None:
    """Reject unverified callers before the body is parsed."""
    headers = {key.lower(): value for key, value in request.headers.items()}
    if not verifier(headers):
        logger.warning(f"Tier webhook verification failed for {client_ip(request)}")
        raise UnauthorizedError()


@router.post(
    TIER_UPGRADE_WEBHOOK_URL,
    response_model=EventResponse,
    dependencies=[Depends(verify_tier_webhook)],
)
async def tier_upgrade_webhook(
    body: TierUpgradeRequest,
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    """Apply a settled tier purchase by raising the event's response ceiling."""
    if body.tier not in UPGRADE_TIERS:
        raise ValidationFailedError.for_field("tier", "Tier is not purchasable")

    upgrade = TierUpgradedEvent(event_id=body.event_id, tier=body.tier, payment_id=body.payment_id)
    event = await write_model.raise_capacity(
        upgrade.event_id,
        upgrade.max_responses,
        tier=upgrade.tier,
        payment_id=upgrade.payment_id,
    )
    logger.info(f"Applied {upgrade.tier.value} upgrade to event {upgrade.event_id}")
    return EventResponse.from_dto(event)
