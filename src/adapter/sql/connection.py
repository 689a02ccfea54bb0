"""Process-wide SQLAlchemy engine and session factory.

The engine is created once (lazily from DATABASE_URL, or injected with
initialize()) and only read afterwards. Repositories receive the session
factory; they never reconfigure the engine.
"""

import os
import logging

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from adapter.sql.models import Base
from domain.model.errors import StoreError

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = 'sqlite:///./forum_accounts.db'

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def database_url() -> str:
    return os.getenv('DATABASE_URL') or DEFAULT_DATABASE_URL


def create_engine_from_url(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith('sqlite') else {}
    # Bound parameters (including password digests) stay out of exception text.
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True, hide_parameters=True)


def initialize(engine: Engine) -> None:
    """Install an already-connected engine. Call once at process startup."""
    global _engine, _session_factory
    _engine = engine
    _session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    logger.info("[SQL] Engine initialized", extra={"dialect": engine.dialect.name})


def get_engine() -> Engine:
    if _engine is None:
        initialize(create_engine_from_url(database_url()))
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    if _session_factory is None:
        get_engine()
    return _session_factory


def reset_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def init_db(engine: Engine | None = None) -> None:
    """Create all tables registered on Base.metadata.

    Raises StoreError if the database cannot be reached or the DDL fails.
    """
    try:
        Base.metadata.create_all(bind=engine or get_engine())
    except SQLAlchemyError as e:
        logger.error("[SQL] Failed to create tables", extra={"error": type(e).__name__})
        raise StoreError() from e
