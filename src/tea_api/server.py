"""Entry point: ``python -m tea_api.server`` or the ``tea-api`` console script."""
import uvicorn

from tea_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "tea_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
