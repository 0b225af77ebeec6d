"""initial_create

Revision ID: 4b7e2d9c1a03
Revises:
Create Date: 2025-10-19 21:16:32.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e2d9c1a03'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('wandersteine',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('unique_id', sa.String(length=50), nullable=False),
        sa.Column('preview_url', sa.String(length=500), nullable=False, server_default=''),
        sa.Column('description', sa.String(length=1000), nullable=False, server_default=''),
        sa.Column('location', sa.String(length=200), nullable=False, server_default=''),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_wandersteine_id'), 'wandersteine', ['id'], unique=False)
    op.create_index(op.f('ix_wandersteine_unique_id'), 'wandersteine', ['unique_id'], unique=True)

    op.create_table('translations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('language', sa.String(length=10), nullable=False),
        sa.Column('value', sa.String(length=500), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_translations_id'), 'translations', ['id'], unique=False)
    op.create_index('ix_translations_key_language', 'translations', ['key', 'language'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_translations_key_language', table_name='translations')
    op.drop_index(op.f('ix_translations_id'), table_name='translations')
    op.drop_table('translations')

    op.drop_index(op.f('ix_wandersteine_unique_id'), table_name='wandersteine')
    op.drop_index(op.f('ix_wandersteine_id'), table_name='wandersteine')
    op.drop_table('wandersteine')
