"""
Column type for a single WGS84 point.

On PostgreSQL the column is a PostGIS ``geography(POINT, 4326)`` so that
distance predicates run inside the database. Other dialects (SQLite in tests
and local development) keep the point as WKT text and the distance predicate
runs in-process.
"""

from typing import Optional

from geoalchemy2 import Geography
from geoalchemy2.elements import WKBElement
from geoalchemy2.shape import to_shape
from shapely import wkb, wkt
from shapely.geometry import Point
from sqlalchemy.types import Text, TypeDecorator

from app.schemas.geo import GeoCoordinate

WGS84_SRID = 4326


def to_ewkt(coordinate: GeoCoordinate) -> str:
    """Render a coordinate as EWKT; WKT puts longitude first."""
    return f"SRID={WGS84_SRID};{Point(coordinate.longitude, coordinate.latitude).wkt}"


class GeographyPoint(TypeDecorator):
    """Maps ``GeoCoordinate`` values to a geographic point column."""

    impl = Text
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(
                Geography(geometry_type="POINT", srid=WGS84_SRID, spatial_index=False)
            )
        return dialect.type_descriptor(Text())

    def process_bind_param(self, value: Optional[GeoCoordinate], dialect) -> Optional[str]:
        if value is None:
            return None
        if dialect.name == "postgresql":
            return to_ewkt(value)
        return Point(value.longitude, value.latitude).wkt

    def process_result_value(self, value, dialect) -> Optional[GeoCoordinate]:
        if value is None:
            return None
        if isinstance(value, WKBElement):
            point = to_shape(value)
        elif isinstance(value, (bytes, memoryview)):
            point = wkb.loads(bytes(value))
        elif dialect.name == "postgresql":
            # geography columns come back as hex encoded EWKB
            point = wkb.loads(value, hex=True)
        else:
            point = wkt.loads(value)
        return GeoCoordinate(latitude=point.y, longitude=point.x)
