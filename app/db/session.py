from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from collections.abc import Generator
from app.core.config import settings


def _engine_options(url: str) -> dict[str, object]:
    # In-memory SQLite lives on a single connection shared across threads
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_pre_ping": True}


engine = create_engine(settings.DATABASE_URL, future=True, **_engine_options(settings.DATABASE_URL))
# Resolvers return entities after commit (e.g. a deleted book's snapshot)
SessionLocal = sessionmaker(
    bind=engine, autocommit=False, autoflush=False, expire_on_commit=False, future=True
)


def get_db() -> Generator[Session, None, None]:
    """
    One session per request, closed once the response is done.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
