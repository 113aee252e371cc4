"""Run the API server: ``python -m depcycle``."""

import uvicorn

from depcycle.infrastructure.config import get_settings


def main() -> None:
    """Start Uvicorn with the configured host, port, and worker count."""
    settings = get_settings()

    uvicorn.run(
        "depcycle.infrastructure.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        workers=settings.api.workers,
        log_level=settings.observability.log_level.lower(),
    )


if __name__ == "__main__":
    main()
