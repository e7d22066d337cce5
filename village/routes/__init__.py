"""FastAPI API endpoints under /api.

Endpoint groups: auth (/v1/auth), villagers (CRUD + interactions),
activities (catalogs, catch attempts, catch history), museum, inventory
(listing + selling), shop, settings/health. Everything except register,
login and health requires an ``Authorization: Bearer <token>`` header.
"""

from fastapi import APIRouter

from .activities import router as activities_router
from .auth import router as auth_router
from .inventory import router as inventory_router
from .museum import router as museum_router
from .settings import router as settings_router
from .shop import router as shop_router
from .villagers import router as villagers_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(auth_router)
router.include_router(villagers_router)
router.include_router(activities_router)
router.include_router(museum_router)
router.include_router(inventory_router)
router.include_router(shop_router)
