from fastapi import APIRouter

from .features.bulk_import.router import router as bulk_import_router
from .features.create_guest.router import router as create_guest_router
from .features.delete_guest.router import router as delete_guest_router
from .features.list_guests.router import router as list_guests_router
from .features.update_guest.router import router as update_guest_router

router = APIRouter()

router.include_router(bulk_import_router)
router.include_router(list_guests_router)
router.include_router(create_guest_router)
router.include_router(update_guest_router)
router.include_router(delete_guest_router)
