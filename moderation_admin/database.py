# moderation_admin/database.py - Database Configuration
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from moderation_admin.config import settings


def build_engine(url: str, *, echo: bool = False) -> Engine:
    """Engine for the admin console database.

    In-memory SQLite gets a single shared connection so every session sees
    the same tables.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, echo=echo, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=echo, **kwargs)


def build_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = build_session_factory(engine)

# Base class for models
Base = declarative_base()


# Request-scoped session for the admin routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
