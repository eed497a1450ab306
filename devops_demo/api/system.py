# devops_demo/api/system.py

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from devops_demo.models.system import HealthResponse, HomeResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])

WELCOME_MESSAGE = "Welcome to my CI/CD Demo!"
APP_VERSION = "1.0.0"


@router.get(
    "/",
    response_model=HomeResponse,
    name="GetHome",
    operation_id="GetHome",
)
def get_home() -> HomeResponse:
    return HomeResponse(
        message=WELCOME_MESSAGE,
        version=APP_VERSION,
        status="running",
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    name="GetHealth",
    operation_id="GetHealth",
)
def get_health() -> HealthResponse:
    """
    Liveness check. The timestamp is the current UTC time at request time.
    """
    now = datetime.now(timezone.utc)
    logger.debug("Health check at %s", now.isoformat())
    return HealthResponse(status="healthy", timestamp=now)
