"""create dogruns table

Revision ID: 003
Revises: 002
Create Date: 2024-10-05 18:30:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "dogruns",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("place_id", sa.String(256), nullable=True),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("place_id", name="uq_dogruns_place_id"),
    )
    op.create_index("ix_dogruns_id", "dogruns", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_dogruns_id", table_name="dogruns")
    op.drop_table("dogruns")
