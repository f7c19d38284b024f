# main.py — BookShelf app assembly
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from config import Settings, get_settings
from controllers.book_controller import router as books_router
from database import build_engine, build_sessionmaker, init_db

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app and wire its engine and session factory onto app.state."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(settings.log_level.upper())

    engine = build_engine(settings.database_url, echo=settings.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(title=settings.app_title, lifespan=lifespan)
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    app.include_router(books_router)

    @app.get("/", include_in_schema=False)
    async def home():
        return RedirectResponse("/books")

    @app.get("/health", tags=["health"])
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
