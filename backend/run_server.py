from __future__ import annotations

import uvicorn

from skillmatch.config import settings


def uvicorn_options() -> dict:
    """Server options taken from the same settings the app reads."""
    return {
        "host": settings.host,
        "port": settings.port,
        "log_level": settings.log_level.lower(),
        "workers": 1,
    }


def main() -> None:
    uvicorn.run("skillmatch.main:app", **uvicorn_options())


if __name__ == "__main__":
    main()
