import uvicorn

from flash_report.config.settings import Settings
from flash_report.logging.logger import Log
from flash_report.web.app import create_app


def main() -> None:
    """Entry point: load settings -> configure logging -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    Log.info(
        f"Starting Flash Report Translator on {settings.host}:{settings.port}",
        provider=settings.extraction_provider,
        env=settings.app_env,
    )
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
