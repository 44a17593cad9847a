from fastapi import APIRouter

from .features.delete_response.router import router as delete_response_router
from .features.list_responses.router import router as list_responses_router
from .features.submit_rsvp.router import router as submit_rsvp_router

router = APIRouter()

router.include_router(submit_rsvp_router)
router.include_router(list_responses_router)
router.include_router(delete_response_router)
