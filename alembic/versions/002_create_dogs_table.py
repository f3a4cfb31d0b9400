"""create dogs table

Revision ID: 002
Revises: 001
Create Date: 2024-10-02 22:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "dogs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("dog_owner_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(128), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["dog_owner_id"], ["dog_owners.id"]),
    )
    op.create_index("ix_dogs_id", "dogs", ["id"], unique=False)
    op.create_index("ix_dogs_dog_owner_id", "dogs", ["dog_owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_dogs_dog_owner_id", table_name="dogs")
    op.drop_index("ix_dogs_id", table_name="dogs")
    op.drop_table("dogs")
