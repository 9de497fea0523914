"""Main entry point for the dice throw log demo."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from dicelog.api import create_fastapi_app
from dicelog.app import Application
from dicelog.config import Settings
from dicelog.logging_config import setup_logging


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    settings = Settings.from_env()
    setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        console=settings.log_to_console,
    )

    app = create_fastapi_app(Application(settings))

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
