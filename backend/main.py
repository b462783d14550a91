"""
AskDB — natural-language questions over a relational database.
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import health, chat, schema
from config import settings
from core.db_connector import init_engine, dispose_engine

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("askdb")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("AskDB starting up…")
    init_engine()
    yield
    dispose_engine()
    logger.info("AskDB shutting down.")


# ── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="AskDB — Natural-language database chat",
    description="Ask questions about a database in plain language; answers are backed by generated, read-only SQL.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ──────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(health.router, prefix="/api")
app.include_router(schema.router, prefix="/api")
app.include_router(chat.router,   prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.API_HOST, port=settings.API_PORT)
