import sys
from fastapi import FastAPI
import uvicorn
from loguru import logger

from app.core.config import AppSettings, get_app_settings
from app.core.exceptions import InvalidInputError, invalid_input_handler
from app.api import api_router

_log_sink_id = None


def setup_logging(settings: AppSettings):
    global _log_sink_id
    if _log_sink_id is not None:
        logger.remove(_log_sink_id)
    _log_sink_id = logger.add(
        settings.log_file,
        level=settings.app_log_level.value.upper(),
        rotation=settings.log_rotation,
        compression=settings.log_compression.value,
        format=settings.log_format,
    )

def create_app():
    settings = get_app_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Computes the factorials of two non-negative integers",
        version="1.0.0",
    )
    setup_logging(settings)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.include_router(api_router)

    return app

app = create_app()

if __name__ == "__main__":
    settings = get_app_settings()
    logger.info(f"Starting {settings.app_name} on {settings.app_host}:{settings.app_port}")
    try:
        uvicorn.run(
            "app.main:app",
            host=settings.app_host,
            port=settings.app_port,
            reload=settings.app_reload,
            log_level=settings.app_log_level.value,
        )
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)
