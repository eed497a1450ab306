# devops_demo/api/info.py

import logging

from fastapi import APIRouter

from devops_demo.config import get_environment
from devops_demo.models.info import InfoResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["info"])

APP_NAME = "DevOps Interview Demo"

FEATURES = (
    "Automated CI/CD",
    "Docker containerization",
    "Health checks",
    "GitHub Actions integration",
    "Swagger/OpenAPI documentation",
)


@router.get(
    "/info",
    response_model=InfoResponse,
    name="GetInfo",
    operation_id="GetInfo",
)
def get_info() -> InfoResponse:
    """
    Application name, the environment it runs in, and its feature list.

    The environment is read from APP_ENVIRONMENT on every request and falls
    back to "Production".
    """
    environment = get_environment()
    logger.debug("Info requested (environment=%s)", environment)

    return InfoResponse(
        app=APP_NAME,
        environment=environment,
        features=list(FEATURES),
    )
