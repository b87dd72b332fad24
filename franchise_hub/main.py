"""
Main entry point for FastAPI application.
"""
from contextlib import asynccontextmanager
from pathlib import Path
import os

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from franchise_hub.routes import league_imports, leagues, ui, user_imports, users
from franchise_hub.utils.api_response import register_exception_handlers
from franchise_hub.utils.db_async import init_db, dispose_engine, describe_database_url, DATABASE_URL

from franchise_hub.logging_config import setup_logging
from franchise_hub.config import settings

import logging
logger = logging.getLogger(__name__)

setup_logging(level=settings.log_level, access_log=settings.access_log)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@asynccontextmanager
async def lifespan(app: FastAPI):
    should_init_db = (
        settings.is_dev
        and settings.auto_init_db
        and not os.getenv("FLY_APP_NAME")
    )

    if should_init_db:
        logger.info("Running init_db()…")
        logger.info(f"DB target: {describe_database_url(DATABASE_URL)}")
        try:
            await init_db()
            logger.info("DB ready.")
        except Exception:
            logger.exception("init_db failed")
            raise
    else:
        logger.info("Skipping init_db(); auto_init_db disabled or managed deployment detected")

    yield

    try:
        logger.info("Disposing DB engine…")
        await dispose_engine()
        logger.info("DB engine disposed.")
    except Exception:
        logger.exception("Failed to dispose DB engine")


app = FastAPI(title="Franchise Hub", lifespan=lifespan)
app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
register_exception_handlers(app)

app.include_router(league_imports.router)
app.include_router(leagues.router)
app.include_router(ui.router)
app.include_router(users.router)
# /api/{user_id}/... would shadow the /api/leagues routes if mounted earlier
app.include_router(user_imports.router)


@app.get("/health")
async def health_check():
    """Health Check Endpoint"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
