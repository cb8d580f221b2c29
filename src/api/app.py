"""FastAPI application factory for the swap risk API."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.middleware.cors import CORSMiddleware

from config.settings import settings
from src.api.middleware import SecurityHeadersMiddleware
from src.chain.evm_client import EvmRpcClient
from src.risk.assessor import RiskAssessor

# Rate limiter (shared instance)
limiter = Limiter(key_func=get_remote_address)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own the chain client for the lifetime of the app."""
    chain: EvmRpcClient | None = None
    if settings.evm_rpc_url:
        chain = EvmRpcClient(settings.evm_rpc_url, timeout=settings.chain_read_timeout_sec)
    else:
        logger.warning("[API] EVM_RPC_URL not set, owner probe and gas check disabled")

    app.state.assessor = RiskAssessor(chain, read_timeout_sec=settings.chain_read_timeout_sec)
    try:
        yield
    finally:
        if chain is not None:
            await chain.close()


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    app = FastAPI(
        title="Swap Risk API",
        version="0.1.0",
        docs_url="/api/docs" if settings.api_debug else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Security headers
    app.add_middleware(SecurityHeadersMiddleware)

    # CORS for the swap frontend dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173", "http://localhost:3000"],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    from src.api.routers.health import router as health_router
    from src.api.routers.risk import router as risk_router

    app.include_router(health_router)
    app.include_router(risk_router)

    return app
