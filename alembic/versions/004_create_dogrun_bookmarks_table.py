"""create dogrun_bookmarks table

Revision ID: 004
Revises: 003
Create Date: 2024-11-10 20:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "dogrun_bookmarks",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("dog_owner_id", sa.Integer(), nullable=False),
        sa.Column("dogrun_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["dog_owner_id"], ["dog_owners.id"]),
        sa.ForeignKeyConstraint(["dogrun_id"], ["dogruns.id"]),
        # A dog owner bookmarks a given dogrun at most once
        sa.UniqueConstraint(
            "dog_owner_id", "dogrun_id", name="uq_dogrun_bookmarks_owner_dogrun"
        ),
    )
    op.create_index("ix_dogrun_bookmarks_id", "dogrun_bookmarks", ["id"], unique=False)
    op.create_index(
        "ix_dogrun_bookmarks_dog_owner_id", "dogrun_bookmarks", ["dog_owner_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_dogrun_bookmarks_dog_owner_id", table_name="dogrun_bookmarks")
    op.drop_index("ix_dogrun_bookmarks_id", table_name="dogrun_bookmarks")
    op.drop_table("dogrun_bookmarks")
