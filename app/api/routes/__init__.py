"""HTTP routes. Everything except login and health sits behind the bearer-token dependency."""

from fastapi import APIRouter, Depends

from app.api.deps import get_current_principal
from app.api.routes import accounts, auth, health, items

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/login", tags=["auth"])
router.include_router(
    accounts.router,
    prefix="/usuarios",
    tags=["usuarios"],
    dependencies=[Depends(get_current_principal)],
)
router.include_router(
    items.router,
    prefix="/productos",
    tags=["productos"],
    dependencies=[Depends(get_current_principal)],
)
