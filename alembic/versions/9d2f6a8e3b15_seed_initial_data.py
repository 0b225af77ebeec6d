"""seed_initial_data

Revision ID: 9d2f6a8e3b15
Revises: 4b7e2d9c1a03
Create Date: 2025-10-20 04:02:54.000000

"""
from datetime import datetime, timedelta, timezone
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9d2f6a8e3b15'
down_revision: Union[str, Sequence[str], None] = '4b7e2d9c1a03'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


wandersteine_table = sa.table('wandersteine',
    sa.column('name', sa.String),
    sa.column('unique_id', sa.String),
    sa.column('preview_url', sa.String),
    sa.column('description', sa.String),
    sa.column('location', sa.String),
    sa.column('latitude', sa.Float),
    sa.column('longitude', sa.Float),
    sa.column('created_at', sa.DateTime(timezone=True)),
    sa.column('updated_at', sa.DateTime(timezone=True)),
)

translations_table = sa.table('translations',
    sa.column('key', sa.String),
    sa.column('language', sa.String),
    sa.column('value', sa.String),
    sa.column('created_at', sa.DateTime(timezone=True)),
    sa.column('updated_at', sa.DateTime(timezone=True)),
)

# (name, unique_id, description, location, latitude, longitude, days ago)
WANDERSTEINE = [
    # Germany - Black Forest cluster
    ('Schwarzwaldstein', 'WS-2024-001', 'Ein historischer Wanderstein im Herzen des Schwarzwaldes', 'Schwarzwald, Baden-Württemberg', 48.3019, 8.2392, 20),
    ('Feldbergblick', 'WS-2024-007', 'Wanderstein am höchsten Punkt des Schwarzwaldes', 'Feldberg, Baden-Württemberg', 47.8742, 8.0044, 19),
    ('Titisee Rundweg', 'WS-2024-008', 'Malerischer Wanderstein am Titisee', 'Titisee-Neustadt, Baden-Württemberg', 47.9034, 8.2064, 18),
    ('Triberger Wasserfall', 'WS-2024-009', 'Wanderstein bei Deutschlands höchsten Wasserfällen', 'Triberg, Baden-Württemberg', 48.1294, 8.2303, 17),
    # Germany - Rhine Valley cluster
    ('Loreley Felsen', 'WS-2024-010', 'Legendärer Wanderstein am Rhein', 'St. Goarshausen, Rheinland-Pfalz', 50.1389, 7.7311, 16),
    ('Burg Rheinfels', 'WS-2024-011', 'Wanderstein an historischer Burgruine', 'St. Goar, Rheinland-Pfalz', 50.1503, 7.7142, 15),
    ('Rheinsteig Aussicht', 'WS-2024-012', 'Panoramablick über das Rheintal', 'Boppard, Rheinland-Pfalz', 50.2319, 7.5897, 14),
    # Germany - Bavarian Alps cluster
    ('Alpenblick', 'WS-2024-004', 'Wanderstein auf dem höchsten Punkt der Route', 'Allgäu, Bayern', 47.5596, 10.7498, 13),
    ('Nebelhorn', 'WS-2024-013', 'Hochalpiner Wanderstein mit 400-Gipfel-Blick', 'Oberstdorf, Bayern', 47.4119, 10.3233, 12),
    ('Königssee Panorama', 'WS-2024-014', 'Wanderstein am smaragdgrünen Königssee', 'Schönau am Königssee, Bayern', 47.5667, 12.9833, 11),
    ('Watzmann Ostwand', 'WS-2024-015', 'Wanderstein mit Blick auf die berühmte Ostwand', 'Berchtesgaden, Bayern', 47.5550, 12.9350, 10),
    # Germany - Harz cluster
    ('Brocken Gipfel', 'WS-2024-016', 'Wanderstein auf dem höchsten Harzgipfel', 'Wernigerode, Sachsen-Anhalt', 51.7992, 10.6147, 9),
    ('Hexentanzplatz', 'WS-2024-017', 'Mystischer Wanderstein an sagenhaftem Ort', 'Thale, Sachsen-Anhalt', 51.7503, 11.0308, 8),
    ('Rappbodetalsperre', 'WS-2024-018', 'Wanderstein an der größten Talsperre im Harz', 'Oberharz am Brocken, Sachsen-Anhalt', 51.7489, 10.9044, 7),
    # International stones
    ('Rocky Mountain Summit', 'WS-2024-002', 'Wanderstein mit herrlichem Blick auf die Rocky Mountains', 'Colorado, USA', 39.7392, -104.9903, 6),
    ('Mount Fuji Trail', 'WS-2024-003', 'Markanter Stein auf dem Weg zum Mount Fuji', 'Fujinomiya, Japan', 35.3606, 138.7278, 5),
    ('Outback Stone', 'WS-2024-005', 'Ruhiger Wanderstein im australischen Outback', 'Uluru, Northern Territory, Australia', -25.3444, 131.0369, 4),
    ('Patagonia Vista', 'WS-2024-006', 'Wanderstein mit Blick auf die patagonische Landschaft', 'Torres del Paine, Chile', -51.2527, -72.9653, 3),
]

TRANSLATIONS = {
    'de': {
        'common.loading': 'Lädt...',
        'common.error': 'Fehler',
        'common.retry': 'Erneut versuchen',
        'common.noData': 'Keine Daten gefunden',
        'header.language': 'Sprache',
        'wanderstein.title': 'Neueste Wandersteine',
        'wanderstein.subtitle': 'Die 5 zuletzt hinzugefügten Wandersteine',
        'wanderstein.loading': 'Lade Wandersteine...',
        'wanderstein.error': 'Fehler beim Laden der Wandersteine',
        'wanderstein.noData': 'Keine Wandersteine gefunden.',
        'wanderstein.addedOn': 'Hinzugefügt',
        'wanderstein.map.title': 'Kartenübersicht',
        'wanderstein.recent.title': 'Neueste Wandersteine',
    },
    'en': {
        'common.loading': 'Loading...',
        'common.error': 'Error',
        'common.retry': 'Retry',
        'common.noData': 'No data found',
        'header.language': 'Language',
        'wanderstein.title': 'Latest Hiking Stones',
        'wanderstein.subtitle': 'The 5 most recently added hiking stones',
        'wanderstein.loading': 'Loading hiking stones...',
        'wanderstein.error': 'Error loading hiking stones',
        'wanderstein.noData': 'No hiking stones found.',
        'wanderstein.addedOn': 'Added on',
        'wanderstein.map.title': 'Map Overview',
        'wanderstein.recent.title': 'Recent Hiking Stones',
    },
}


def upgrade() -> None:
    """Upgrade schema."""
    now = datetime.now(timezone.utc)

    op.bulk_insert(wandersteine_table, [
        {
            'name': name,
            'unique_id': unique_id,
            'preview_url': f"https://picsum.photos/300/200?random={int(unique_id[-3:])}",
            'description': description,
            'location': location,
            'latitude': latitude,
            'longitude': longitude,
            'created_at': now - timedelta(days=days_ago),
            'updated_at': now - timedelta(days=days_ago),
        }
        for name, unique_id, description, location, latitude, longitude, days_ago in WANDERSTEINE
    ])

    op.bulk_insert(translations_table, [
        {'key': key, 'language': language, 'value': value, 'created_at': now, 'updated_at': now}
        for language, values in TRANSLATIONS.items()
        for key, value in values.items()
    ])


def downgrade() -> None:
    """Downgrade schema."""
    unique_ids = [row[1] for row in WANDERSTEINE]
    op.execute(
        wandersteine_table.delete().where(wandersteine_table.c.unique_id.in_(unique_ids))
    )
    op.execute(translations_table.delete())
