"""create_person_table

Revision ID: a1c4e7f20b93
Revises:
Create Date: 2026-10-19 10:12:41.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1c4e7f20b93"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

person_type = sa.Enum("Employee", "Partner", name="person_type")
person_status = sa.Enum("Active", "Inactive", name="person_status")


def upgrade() -> None:
    """Create person table with self-referential manager_id."""
    op.create_table(
        "person",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("job_title", sa.String(length=255), nullable=False),
        sa.Column("department", sa.String(length=255), nullable=False),
        sa.Column("manager_id", sa.Integer(), nullable=True),
        sa.Column("photo_path", sa.String(length=512), nullable=True),
        sa.Column("type", person_type, nullable=False, server_default="Employee"),
        sa.Column("status", person_status, nullable=False, server_default="Active"),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("hire_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["manager_id"], ["person.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_person_name", "person", ["name"])
    op.create_index("ix_person_department", "person", ["department"])
    op.create_index("ix_person_manager_id", "person", ["manager_id"])
    op.create_index("ix_person_status", "person", ["status"])


def downgrade() -> None:
    """Drop person table and its enum types."""
    op.drop_index("ix_person_status", table_name="person")
    op.drop_index("ix_person_manager_id", table_name="person")
    op.drop_index("ix_person_department", table_name="person")
    op.drop_index("ix_person_name", table_name="person")
    op.drop_table("person")
    person_status.drop(op.get_bind(), checkfirst=True)
    person_type.drop(op.get_bind(), checkfirst=True)
