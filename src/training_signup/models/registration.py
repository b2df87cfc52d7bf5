"""SQLModel TrainingRegistration model"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

REGISTRATIONS_TABLE = "training_registrations"


class TrainingRegistration(SQLModel, table=True):
    """One employee's registration for the training.

    Rows are only ever inserted. ``id`` and ``submitted_at`` are assigned on
    creation and never touched again.
    """

    __tablename__ = REGISTRATIONS_TABLE

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    full_name: str = Field(max_length=100)
    corporate_email: str = Field(max_length=255)
    department: str
    automation_level: str
    needs_accessibility: bool = Field(default=False)
    accessibility_description: Optional[str] = Field(default=None)
    attendance_day: str = Field(index=True)
    notes: Optional[str] = Field(default=None, max_length=1000)
    submitted_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )
