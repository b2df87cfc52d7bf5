"""Database engine construction"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the SQLAlchemy engine for the given URL.

    In-memory SQLite gets a single shared connection so every session sees
    the same database.
    """
    if not database_url:
        raise ValueError(
            "DATABASE_URL environment variable is not set. "
            "Set DATABASE_URL in the environment or local .env file."
        )

    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)

    return create_engine(database_url, echo=echo, pool_pre_ping=True)
