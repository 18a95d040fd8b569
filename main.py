"""Entry point for running the Journey API server via ``python main.py``."""

import os

import uvicorn

from journey.config import settings


def main() -> None:
    # Hosting platforms hand the port over in PORT.
    port = int(os.environ.get("PORT", settings.port))
    uvicorn.run(
        "journey.api.app:app",
        host=settings.host,
        port=port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
