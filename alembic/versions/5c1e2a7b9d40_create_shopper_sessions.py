"""create shopper_sessions

Revision ID: 5c1e2a7b9d40
Revises:
Create Date: 2026-10-19 10:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5c1e2a7b9d40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('shopper_sessions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('session_key', sa.String(length=64), nullable=False),
        sa.Column('quiz_json', sa.JSON(), nullable=True),
        sa.Column('cart_json', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_shopper_sessions_id'), 'shopper_sessions', ['id'], unique=False)
    op.create_index(op.f('ix_shopper_sessions_session_key'), 'shopper_sessions', ['session_key'], unique=True)


def downgrade() -> None:
    op.drop_index(op.f('ix_shopper_sessions_session_key'), table_name='shopper_sessions')
    op.drop_index(op.f('ix_shopper_sessions_id'), table_name='shopper_sessions')
    op.drop_table('shopper_sessions')
