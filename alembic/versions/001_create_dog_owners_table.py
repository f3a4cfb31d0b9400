"""create dog_owners table

Revision ID: 001
Revises:
Create Date: 2024-10-02 21:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "dog_owners",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_dog_owners_id", "dog_owners", ["id"], unique=False)
    op.create_index("ix_dog_owners_email", "dog_owners", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_dog_owners_email", table_name="dog_owners")
    op.drop_index("ix_dog_owners_id", table_name="dog_owners")
    op.drop_table("dog_owners")
