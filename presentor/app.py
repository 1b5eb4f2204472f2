import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from presentor import storage
from presentor.routes import router

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger(__name__)


def create_app(config_dir: Path | None = None) -> FastAPI:
    resolved = config_dir or storage.default_config_dir()

    app = FastAPI(title="Presentor")
    app.state.config_dir = resolved
    app.include_router(router, prefix="/api")
    logger.debug("settings directory: %s", resolved)
    return app


# Default app instance for uvicorn (uses PRESENTOR_CONFIG_DIR or the platform config dir)
app = create_app()
