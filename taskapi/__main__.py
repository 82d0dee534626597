"""Run the API with uvicorn on the configured host/port (default 3000)."""

import uvicorn

from taskapi.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "taskapi.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
