"""Create survey, response, user and feedback tables

Revision ID: 001
Revises: None
Create Date: 2025-03-01 00:00:00.000000+00:00

What:  Creates the four collections of the survey application.
How:   Document content uses JSONB; identifiers are UUIDs generated in Python.
       users.email gets a UNIQUE constraint so duplicate registrations
       cannot slip in through a check-then-insert race.

Rollback: downgrade() drops all four tables (destructive: all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the collections and their indexes. See survey_api/models for column docs."""
    op.create_table(
        "surveys",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "data",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "survey_responses",
        sa.Column("id", sa.Uuid(), nullable=False),
        # Loose reference to surveys.id (as text); deliberately no foreign key
        sa.Column("survey_id", sa.String(255), nullable=True),
        sa.Column("answers", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column(
            "submitted_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_survey_responses_survey_id",
        "survey_responses",
        ["survey_id"],
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password", sa.String(255), nullable=False, comment="bcrypt hash"),
        sa.Column("profile_img", sa.String(2048), nullable=True),
        sa.Column("god_access", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "feedbacks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("rating", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("topic", sa.Text(), nullable=False),
        sa.Column("technical_issue", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("profile_img", sa.String(2048), nullable=True),
        sa.Column(
            "submitted_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """
    Drop every collection.

    WARNING: This is destructive: all survey, response, user and feedback
    data will be permanently lost.
    """
    op.drop_table("feedbacks")
    op.drop_table("users")
    op.drop_index("idx_survey_responses_survey_id", table_name="survey_responses")
    op.drop_table("survey_responses")
    op.drop_table("surveys")
