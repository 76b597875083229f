from typing import Any, Dict

import structlog
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import get_settings
from app.db.base import Base

logger = structlog.get_logger()
settings = get_settings()

# SQLite needs check_same_thread=False since FastAPI runs sync routes in a threadpool
engine_args: Dict[str, Any] = {"echo": settings.database_echo}
if settings.database_url.startswith("sqlite"):
    engine_args["connect_args"] = {"check_same_thread": False}
else:
    engine_args["pool_pre_ping"] = True

engine = create_engine(settings.database_url, **engine_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create tables for every registered model."""
    from app import models  # noqa: F401 - ensure metadata is registered

    Base.metadata.create_all(bind=engine)
    logger.info("db.init", url=engine.url.render_as_string(hide_password=True))
