"""Registration store - persistence and change notification for registrations"""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Any, Mapping, Optional, Union

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select, text

from training_signup.backends.change_feed import (
    ChangeEvent,
    InMemoryChangeFeed,
    RedisChangeFeed,
)
from training_signup.models.database import create_db_engine
from training_signup.models.registration import (
    REGISTRATIONS_TABLE,
    TrainingRegistration,
)
from training_signup.schemas import RegistrationSubmission

logger = logging.getLogger(__name__)

ChangeFeed = Union[InMemoryChangeFeed, RedisChangeFeed]


class StoreError(Exception):
    """Raised when the record store cannot complete a read or write."""


class RegistrationStore:
    """Create/read/subscribe access to the registrations collection"""

    def __init__(self, engine: Engine, change_feed: ChangeFeed):
        self.engine = engine
        self.change_feed = change_feed

    def create(self, submission: RegistrationSubmission) -> TrainingRegistration:
        """
        Persist a new registration and notify subscribers.

        Args:
            submission: Validated registration payload

        Returns:
            TrainingRegistration: The stored row, with id and submitted_at set

        Raises:
            StoreError: If the database rejects the insert or is unreachable
        """
        registration = TrainingRegistration(**submission.to_record_fields())

        with Session(self.engine) as db:
            try:
                db.add(registration)
                db.commit()
                db.refresh(registration)
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Error creating registration: {e}")
                raise StoreError("Failed to create registration") from e

        logger.info(
            f"Created registration {registration.id} for day {registration.attendance_day}"
        )
        self.change_feed.publish(
            ChangeEvent(
                event_type="INSERT",
                table=REGISTRATIONS_TABLE,
                record_id=str(registration.id),
            )
        )
        return registration

    def list_all(self) -> list[TrainingRegistration]:
        """All registrations, newest submission first"""
        stmt = select(TrainingRegistration).order_by(
            TrainingRegistration.submitted_at.desc()
        )
        try:
            with Session(self.engine) as db:
                return list(db.exec(stmt).all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing registrations: {e}")
            raise StoreError("Failed to list registrations") from e

    def subscribe(self) -> AbstractAsyncContextManager:
        """Scoped subscription to change events, released on exit"""
        return self.change_feed.subscribe()

    def ping(self) -> bool:
        try:
            with Session(self.engine) as db:
                return db.exec(text("SELECT 1")).first() is not None
        except SQLAlchemyError as e:
            raise StoreError(f"Database unreachable: {e}") from e

    def create_tables(self) -> None:
        SQLModel.metadata.create_all(self.engine)

    async def close(self) -> None:
        await self.change_feed.close()
        self.engine.dispose()


def build_store(settings: Mapping[str, Any]) -> RegistrationStore:
    """Construct the store and its change feed from application settings"""
    engine = create_db_engine(settings["database_url"], echo=settings.get("debug", False))

    redis_url: Optional[str] = settings.get("redis_url")
    if redis_url:
        change_feed = RedisChangeFeed.from_url(
            redis_url, channel=settings.get("changes_channel", "inscricoes-changes")
        )
    else:
        change_feed = InMemoryChangeFeed()

    return RegistrationStore(engine, change_feed)


def get_store(request: Request) -> RegistrationStore:
    """FastAPI dependency returning the store built for this application"""
    return request.app.state.store
