"""Health check: no auth required."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from config.settings import settings

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    rpc_configured: bool


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report whether chain reads are available. Scoring works either way."""
    rpc_ok = bool(settings.evm_rpc_url)
    return HealthResponse(
        status="ok" if rpc_ok else "degraded",
        version="0.1.0",
        rpc_configured=rpc_ok,
    )
