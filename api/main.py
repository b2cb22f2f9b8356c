import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import dependencies as auth_dependencies
from auth import router as auth_router
from core import db, errors, logs, settings
from history import router as history_router
from projects import router as projects_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logs.setup_logging()
    # One pool per process, handed to handlers through db.get_pool.
    app.state.pool = await db.create_pool()
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


def create_app() -> FastAPI:
    app = FastAPI(
        title="Project API for PostgreSQL",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api-docs",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=settings.CORS_METHODS,
        allow_headers=["*"],
    )
    errors.register_exception_handlers(app)

    protected = []
    if settings.require_auth():
        protected = [Depends(auth_dependencies.get_current_user)]

    app.include_router(auth_router.router, tags=["auth"])
    app.include_router(projects_router.router, tags=["projects"], dependencies=protected)
    app.include_router(history_router.router, tags=["history"], dependencies=protected)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.env_str("HOST", "0.0.0.0"), port=settings.port())


if __name__ == "__main__":
    run()
