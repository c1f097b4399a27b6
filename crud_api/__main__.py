"""Run the API with uvicorn: ``python -m crud_api``."""
from __future__ import annotations

import uvicorn

from crud_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "crud_api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
