# readify/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from readify.core.config import Settings, get_settings
from readify.core.errors import register_error_handlers
from readify.database import build_engine, build_session_maker, create_tables
from readify.routes import posts
from readify.services.media import CloudinaryUploader


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings)
        app.state.session_maker = build_session_maker(engine)
        app.state.media_uploader = CloudinaryUploader.from_settings(settings)
        # create tables if they don't exist
        await create_tables(engine)
        try:
            yield
        finally:
            await app.state.media_uploader.close()
            await engine.dispose()

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)
    app.state.settings = settings
    register_error_handlers(app)
    app.include_router(posts.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "app": settings.APP_NAME}

    return app


app = create_app()
