import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.main import api_router
from app.core.config import Settings, settings as default_settings
from app.core.database import Base, create_db_engine, create_session_factory
from app.core.exceptions import register_exception_handlers
from app.core.object_storage import ObjectStorage
from app import models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(settings.DATABASE_URL)
        if settings.AUTO_CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        app.state.storage = ObjectStorage.from_settings(settings)
        app.state.http_client = httpx.AsyncClient(timeout=settings.HTTP_REQUEST_TIMEOUT)
        logger.info("%s started", settings.PROJECT_NAME)
        try:
            yield
        finally:
            await app.state.http_client.aclose()
            engine.dispose()
            logger.info("%s stopped", settings.PROJECT_NAME)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=default_settings.HOST, port=default_settings.PORT, reload=False)
