"""Centralized v1 API router — all module routers are included here."""

from fastapi import APIRouter

from src.modules.quote_tuning.router import router as quote_tuning_router
from src.schemas.responses import ERROR_RESPONSES

v1_router = APIRouter(prefix="/api/v1", responses=ERROR_RESPONSES)
v1_router.include_router(quote_tuning_router)
