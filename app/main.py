import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.health.router import router as health_router
from app.api.students.router import router as students_router
from app.core.config import Settings, settings as default_settings
from app.core.error_handlers import setup_error_handlers
from app.core.exceptions import StorageError
from app.core.logging import get_logger, setup_logging
from app.db.store import StudentStore

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    store: StudentStore = app.state.student_store
    # Creates the document (with sample data if enabled) before the first request
    try:
        await asyncio.to_thread(store.load_all)
    except StorageError as e:
        logger.error(f"Students document {store.path} is unusable: {e.error}")
    logger.info(f"{app.title} is ready, data stored in {store.path}")
    yield
    logger.info(f"{app.title} is shutting down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.student_store = StudentStore(
        settings.students_file,
        seed_sample_data=settings.seed_sample_data,
    )

    setup_error_handlers(app)

    # CORS: allow the dashboard dev servers to call this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Routers
    app.include_router(students_router)
    app.include_router(health_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_config=None,
    )
