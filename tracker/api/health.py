"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from tracker.api.deps import get_authenticator
from tracker.core.database import check_db_connected, get_db
from tracker.schemas.health import HealthResponse
from tracker.services.authenticator import Authenticator

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=request.app.state.settings.APP_ENV,
        auth_strategy=authenticator.strategy,
        database=db_status,
    )
