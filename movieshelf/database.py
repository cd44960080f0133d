# movieshelf/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from movieshelf.core.config import get_settings

settings = get_settings()

DATABASE_URL = settings.database_url


def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {
            "pool_pre_ping": True,  # check connections before use
            "pool_recycle": 300,  # recycle every 5 minutes
        }
    options = {"connect_args": {"check_same_thread": False}}
    # in-memory databases live as long as their connection
    if url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    return options


engine = create_engine(DATABASE_URL, echo=settings.sql_echo, **_engine_options(DATABASE_URL))

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

Base = declarative_base()


# FastAPI dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
