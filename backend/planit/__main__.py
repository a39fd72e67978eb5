"""Plan It Social entrypoint.

Run with:
  python -m planit
"""

import uvicorn

from planit.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("planit.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)


if __name__ == "__main__":
    main()
