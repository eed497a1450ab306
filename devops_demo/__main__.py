# devops_demo/__main__.py
"""
Run the API with uvicorn:

    python -m devops_demo

Bind address comes from HOST / PORT (defaults 0.0.0.0:8000).
"""

import uvicorn

from devops_demo.config import get_bind, get_log_level


def main():
    host, port = get_bind()
    uvicorn.run(
        "devops_demo.main:app",
        host=host,
        port=port,
        log_level=get_log_level().lower(),
    )


if __name__ == "__main__":
    main()
