# moderation_admin/main.py
import logging

from fastapi import FastAPI

from moderation_admin import models  # noqa: F401 - register tables on Base.metadata
from moderation_admin.api import admin
from moderation_admin.config import settings
from moderation_admin.database import Base, engine

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create database tables
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(title="Moderation Admin API", debug=settings.DEBUG, root_path=settings.ROOT_PATH or "")

# API routers
app.include_router(admin.router)         # /admin/*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "Moderation Admin API is running",
        "version": "0.1.0",
    }
