from fastapi import APIRouter

from .features.publish_event.router import router as publish_event_router
from .features.tier_upgrade.router import router as tier_upgrade_router

router = APIRouter()

router.include_router(publish_event_router)
router.include_router(tier_upgrade_router)
