"""convert_coordinates_to_point_column

Revision ID: e3f8b1a4c6d9
Revises: a61c3e7f5d28
Create Date: 2025-10-25 07:53:22.000000

Replaces the scalar latitude/longitude columns with a single PostGIS
geography point so distance predicates can run inside the database.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from geoalchemy2 import Geography


# revision identifiers, used by Alembic.
revision: str = 'e3f8b1a4c6d9'
down_revision: Union[str, Sequence[str], None] = 'a61c3e7f5d28'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS postgis')

    op.add_column('wandersteine',
        sa.Column('location_point', Geography(geometry_type='POINT', srid=4326, spatial_index=False), nullable=True)
    )
    op.execute("""
        UPDATE wandersteine
        SET location_point = ST_SetSRID(ST_MakePoint(longitude, latitude), 4326)::geography
        WHERE latitude IS NOT NULL AND longitude IS NOT NULL
    """)
    op.create_index('idx_wandersteine_location_point', 'wandersteine', ['location_point'], unique=False, postgresql_using='gist')

    op.drop_column('wandersteine', 'latitude')
    op.drop_column('wandersteine', 'longitude')


def downgrade() -> None:
    """Downgrade schema."""
    op.add_column('wandersteine', sa.Column('latitude', sa.Float(), nullable=True))
    op.add_column('wandersteine', sa.Column('longitude', sa.Float(), nullable=True))
    op.execute("""
        UPDATE wandersteine
        SET latitude = ST_Y(location_point::geometry),
            longitude = ST_X(location_point::geometry)
        WHERE location_point IS NOT NULL
    """)

    op.drop_index('idx_wandersteine_location_point', table_name='wandersteine', postgresql_using='gist')
    op.drop_column('wandersteine', 'location_point')
