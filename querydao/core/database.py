# querydao/core/database.py
"""Engine and session setup for applications that do not bring their own."""

from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from querydao.core.config import Settings, get_settings

Base = declarative_base()


def create_engine_from_settings(settings: Optional[Settings] = None) -> Engine:
    """Create an engine for the configured database URL."""
    settings = settings or get_settings()
    url = settings.database_url
    return create_engine(
        url,
        echo=settings.database_echo,
        connect_args={"check_same_thread": False} if url.startswith("sqlite") else {},
    )


def create_session_factory(engine: Optional[Engine] = None) -> sessionmaker:
    """Build a session factory; sessions do not autoflush and never autocommit."""
    return sessionmaker(autoflush=False, bind=engine or create_engine_from_settings())


# ===== SESSION GENERATORS =====


def get_db(session_factory: Optional[sessionmaker] = None) -> Iterator[Session]:
    """Yield a session and close it once the caller is done."""
    factory = session_factory or create_session_factory()
    db = factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine) -> None:
    """Create the tables registered on ``Base``."""
    Base.metadata.create_all(bind=engine)
