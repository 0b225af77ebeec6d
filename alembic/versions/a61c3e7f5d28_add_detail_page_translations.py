"""add_detail_page_translations

Revision ID: a61c3e7f5d28
Revises: 9d2f6a8e3b15
Create Date: 2025-10-22 19:45:00.000000

"""
from datetime import datetime, timezone
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a61c3e7f5d28'
down_revision: Union[str, Sequence[str], None] = '9d2f6a8e3b15'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


translations_table = sa.table('translations',
    sa.column('key', sa.String),
    sa.column('language', sa.String),
    sa.column('value', sa.String),
    sa.column('created_at', sa.DateTime(timezone=True)),
    sa.column('updated_at', sa.DateTime(timezone=True)),
)

TRANSLATIONS = {
    'de': {
        'wanderstein.detail.createdAt': 'Erstellt am',
        'wanderstein.detail.id': 'ID',
        'wanderstein.detail.location': 'Standortbeschreibung',
        'wanderstein.detail.map': 'Karte',
        'wanderstein.detail.coordinates': 'Koordinaten',
        'wanderstein.detail.noCoordinates': 'Für diesen Wanderstein sind keine Koordinaten verfügbar.',
        'wanderstein.detail.error': 'Fehler beim Laden der Details',
        'wanderstein.detail.error.noId': 'Keine Wanderstein-ID angegeben',
        'common.back': 'Zurück',
    },
    'en': {
        'wanderstein.detail.createdAt': 'Created on',
        'wanderstein.detail.id': 'ID',
        'wanderstein.detail.location': 'Location Description',
        'wanderstein.detail.map': 'Map',
        'wanderstein.detail.coordinates': 'Coordinates',
        'wanderstein.detail.noCoordinates': 'No coordinates available for this hiking stone.',
        'wanderstein.detail.error': 'Error loading details',
        'wanderstein.detail.error.noId': 'No hiking stone ID provided',
        'common.back': 'Back',
    },
}


def upgrade() -> None:
    """Upgrade schema."""
    now = datetime(2025, 10, 22, 19, 45, 0, tzinfo=timezone.utc)
    op.bulk_insert(translations_table, [
        {'key': key, 'language': language, 'value': value, 'created_at': now, 'updated_at': now}
        for language, values in TRANSLATIONS.items()
        for key, value in values.items()
    ])


def downgrade() -> None:
    """Downgrade schema."""
    keys = list(TRANSLATIONS['en'])
    op.execute(translations_table.delete().where(translations_table.c.key.in_(keys)))
