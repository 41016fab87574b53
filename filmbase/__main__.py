import uvicorn

from filmbase.infrastructure.config.dependencies import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "filmbase.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
