import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.core.config import settings
from backend.core.db import init_db
from backend.api.routers import (
    inventory_router,
    notifications_router,
    webhook_router,
    export_router,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown."""
    init_db()
    logger.info("Database ready")

    yield  # Application runs here


app = FastAPI(title="Bakehouse Back Office", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(inventory_router)
app.include_router(notifications_router)
app.include_router(webhook_router)
app.include_router(export_router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "version": "1.0.0"}
