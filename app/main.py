import logging
import time
from logging.handlers import RotatingFileHandler
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core import config
from app.core.errors import register_error_handlers
from app.core.state import create_state
from app.api.routers import hotels, itinerary, restaurants, transport, users

# Configure Logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger("travel_companion_server")
if config.LOG_FILE:
    handler = RotatingFileHandler(
        config.LOG_FILE,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
    )
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def create_app() -> FastAPI:
    """Builds the API with its own, empty, set of stores."""
    app = FastAPI(
        title=config.APP_TITLE,
        version=config.APP_VERSION,
        description="API documentation for the AI Travel Companion backend",
    )
    app.state.travel = create_state()

    # Mount routers
    app.include_router(users.router)
    app.include_router(hotels.router)
    app.include_router(restaurants.router)
    app.include_router(transport.router)
    app.include_router(itinerary.router)

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f} ms"
        )
        return response

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    logger.info("Application initialized with empty stores.")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
