"""create workouts table

Revision ID: 3e8a61f0c2d4
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3e8a61f0c2d4'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()
    if 'workouts' not in tables:
        op.create_table(
            'workouts',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('name', sa.String(255), nullable=False),
            sa.Column('reps', sa.Integer(), nullable=True),
            sa.Column('weight', sa.Integer(), nullable=True),
            sa.Column('date', sa.Date(), nullable=True),
            sa.Column('lbs', sa.Boolean(), nullable=False, server_default=sa.false()),
            sqlite_autoincrement=True,
        )


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS workouts')
