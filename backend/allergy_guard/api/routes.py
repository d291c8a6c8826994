from fastapi import APIRouter

from allergy_guard.api.allergens import router as allergens_router
from allergy_guard.api.health import router as health_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(allergens_router)
