"""Create training registrations

Revision ID: 3f9c2a7d1b40
Revises:
Create Date: 2026-10-19 09:12:44.318205

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d1b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "training_registrations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("full_name", sa.VARCHAR(length=100), nullable=False),
        sa.Column("corporate_email", sa.VARCHAR(length=255), nullable=False),
        sa.Column("department", sa.VARCHAR(), nullable=False),
        sa.Column("automation_level", sa.VARCHAR(), nullable=False),
        sa.Column(
            "needs_accessibility",
            sa.BOOLEAN(),
            nullable=False,
            server_default=sa.false(),
        ),
        sa.Column("accessibility_description", sa.VARCHAR(), nullable=True),
        sa.Column("attendance_day", sa.VARCHAR(), nullable=False),
        sa.Column("notes", sa.VARCHAR(length=1000), nullable=True),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_training_registrations_attendance_day",
        "training_registrations",
        ["attendance_day"],
    )
    op.create_index(
        "ix_training_registrations_submitted_at",
        "training_registrations",
        ["submitted_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        "ix_training_registrations_submitted_at", table_name="training_registrations"
    )
    op.drop_index(
        "ix_training_registrations_attendance_day", table_name="training_registrations"
    )
    op.drop_table("training_registrations")
