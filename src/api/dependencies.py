"""FastAPI dependency injection: risk assessor."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from src.risk.assessor import RiskAssessor


def get_assessor(request: Request) -> RiskAssessor:
    """Return the assessor created in the app lifespan."""
    assessor = getattr(request.app.state, "assessor", None)
    if assessor is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Risk assessor not initialised",
        )
    return assessor
