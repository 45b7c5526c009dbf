"""
Liveness and readiness endpoints.
"""
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from datetime import datetime, timezone
from typing import Any, Dict

from ..db import check_db_connection

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "API is running"


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check() -> Dict[str, Any]:
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/ready")
def readiness_check(request: Request):
    """
    Readiness check with database status.

    Returns 503 if the store is unreachable.
    """
    db_connected = check_db_connection(request.app.state.engine)
    response = {
        "status": "ready" if db_connected else "not_ready",
        "database": "connected" if db_connected else "disconnected",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
    if not db_connected:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=response)
    return response
