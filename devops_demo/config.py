# devops_demo/config.py

import os
from typing import Tuple

# One variable drives both the execution mode and the /api/info "environment" field
ENVIRONMENT_VAR = "APP_ENVIRONMENT"
DEFAULT_ENVIRONMENT = "Production"
DEVELOPMENT = "Development"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"


def get_environment() -> str:
    # read on every call, an empty value counts as unset
    return os.getenv(ENVIRONMENT_VAR) or DEFAULT_ENVIRONMENT


def is_development() -> bool:
    return get_environment().lower() == DEVELOPMENT.lower()


def get_bind() -> Tuple[str, int]:
    """
    Host and port for the server, from HOST / PORT.

    A PORT that is not an integer raises ValueError.
    """
    host = os.getenv("HOST") or DEFAULT_HOST
    port = os.getenv("PORT")
    return host, int(port) if port else DEFAULT_PORT


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
