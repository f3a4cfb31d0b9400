"""create dogrun_checkins table

Revision ID: 005
Revises: 004
Create Date: 2024-11-24 19:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "005"
down_revision: Union[str, None] = "004"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "dogrun_checkins",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("dogrun_id", sa.Integer(), nullable=False),
        sa.Column("dog_id", sa.Integer(), nullable=False),
        sa.Column("checkin_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["dogrun_id"], ["dogruns.id"]),
        sa.ForeignKeyConstraint(["dog_id"], ["dogs.id"]),
        # One check-in per dog per dogrun per day; the upsert conflicts on this key
        sa.UniqueConstraint(
            "dogrun_id", "dog_id", "checkin_date", name="uq_dogrun_checkins_dogrun_dog_date"
        ),
    )
    op.create_index("ix_dogrun_checkins_id", "dogrun_checkins", ["id"], unique=False)
    op.create_index(
        "ix_dogrun_checkins_dogrun_id", "dogrun_checkins", ["dogrun_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_dogrun_checkins_dogrun_id", table_name="dogrun_checkins")
    op.drop_index("ix_dogrun_checkins_id", table_name="dogrun_checkins")
    op.drop_table("dogrun_checkins")
