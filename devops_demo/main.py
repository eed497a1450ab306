# devops_demo/main.py

import logging

from fastapi import FastAPI

from devops_demo.api.info import router as info_router
from devops_demo.api.system import APP_VERSION, router as system_router
from devops_demo.config import get_environment, get_log_level, is_development

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    """
    Build the FastAPI application.

    The OpenAPI schema, Swagger UI and ReDoc are only served when the
    execution mode is Development; the decision is taken once, here.
    """
    setup_logging()

    docs_enabled = is_development()

    app = FastAPI(
        title="DevOps Interview Demo",
        version=APP_VERSION,
        openapi_url="/openapi.json" if docs_enabled else None,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
    )

    app.include_router(system_router)
    app.include_router(info_router)

    logger.info(
        "App created (environment=%s, docs %s)",
        get_environment(),
        "enabled" if docs_enabled else "disabled",
    )
    return app


app = create_app()
