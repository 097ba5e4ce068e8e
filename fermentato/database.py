"""Database connection and session management."""
from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from fermentato.config import settings
from fermentato.logging_config import get_logger
from fermentato.models.base import Base
from fermentato.utils import utcnow

logger = get_logger("fermentato.database")

# Railway/Heroku use postgres:// but SQLAlchemy 1.4+ requires postgresql://
database_url = settings.database_url
if database_url.startswith("postgres://"):
    database_url = database_url.replace("postgres://", "postgresql://", 1)

is_sqlite = database_url.startswith("sqlite")
# In-memory SQLite lives on a single connection; every session must share it.
is_memory = is_sqlite and (database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url)

engine = create_engine(
    database_url,
    connect_args={"check_same_thread": False} if is_sqlite else {},
    poolclass=StaticPool if is_memory else None,
    pool_pre_ping=not is_sqlite,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables."""
    import fermentato.models  # noqa: F401  registers every mapper on Base

    Base.metadata.create_all(bind=engine)


def purge_expired_sessions() -> int:
    """Delete session rows past their expiry. Returns the number removed."""
    from fermentato.models import UserSession

    db = SessionLocal()
    try:
        result = db.execute(delete(UserSession).where(UserSession.expire < utcnow()))
        db.commit()
        return result.rowcount or 0
    finally:
        db.close()
