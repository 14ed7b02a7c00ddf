"""
Health check endpoint.
"""

import time
from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health(request: Request) -> Dict[str, Any]:
    """Report liveness and the number of seconds since the app was created."""
    uptime = time.monotonic() - request.app.state.started_at
    return {"status": "ok", "uptime": uptime}
