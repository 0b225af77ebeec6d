from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Session

from app.models.wanderstein import Wanderstein
from app.schemas.geo import GeoCoordinate
from app.services.proximity import (
    InMemoryHaversineProximity,
    PostGISProximity,
    ProximityQuery,
    get_proximity_strategy,
)

BOCHUM = GeoCoordinate(latitude=51.4818, longitude=7.2162)
ESSEN = GeoCoordinate(latitude=51.4556, longitude=7.0116)
MUNICH = GeoCoordinate(latitude=48.1351, longitude=11.5820)


def create_test_wanderstein(
    db: Session, unique_id: str, coordinates=None, days_ago: int = 0
) -> Wanderstein:
    """Helper function to create a test Wanderstein"""
    wanderstein = Wanderstein(
        name=f"Stone {unique_id}",
        unique_id=unique_id,
        preview_url=f"https://example.com/{unique_id}.jpg",
        coordinates=coordinates,
        created_at=datetime.now(timezone.utc) - timedelta(days=days_ago),
    )
    db.add(wanderstein)
    db.commit()
    db.refresh(wanderstein)
    return wanderstein


def test_resolve_without_parameters_uses_default_center():
    """Test that no parameters resolve to Bochum with a 100 km radius"""
    query = ProximityQuery.resolve()

    assert query.center == BOCHUM
    assert query.radius_km == 100.0
    assert query.explicit_center is False


def test_resolve_with_explicit_center_uses_narrow_radius():
    """Test that an explicit center defaults to a 50 km radius"""
    query = ProximityQuery.resolve(latitude=48.1351, longitude=11.5820)

    assert query.center == MUNICH
    assert query.radius_km == 50.0
    assert query.explicit_center is True


def test_resolve_with_only_latitude_falls_back_to_default_center():
    """Test that a single axis falls back to the whole default center"""
    query = ProximityQuery.resolve(latitude=48.1351)

    assert query.center == BOCHUM
    assert query.radius_km == 100.0
    assert query.explicit_center is False


def test_resolve_with_only_longitude_falls_back_to_default_center():
    """Test that a lone longitude is ignored as well"""
    query = ProximityQuery.resolve(longitude=11.5820, radius_km=5)

    assert query.center == BOCHUM
    assert query.radius_km == 5


def test_resolve_keeps_explicit_radius():
    """Test that an explicit radius is used verbatim, even when not positive"""
    assert ProximityQuery.resolve(radius_km=10).radius_km == 10
    assert ProximityQuery.resolve(latitude=1.0, longitude=2.0, radius_km=-3).radius_km == -3
    assert ProximityQuery.resolve(radius_km=0).radius_km == 0


def test_resolve_does_not_validate_center():
    """Test that resolving keeps out-of-range input for the caller to reject"""
    query = ProximityQuery.resolve(latitude=95.0, longitude=7.2162)

    assert query.center.latitude == 95.0
    assert query.center.is_valid() is False


def test_resolve_treats_zero_as_a_real_coordinate():
    """Test that (0, 0) is an explicit center, not a missing one"""
    query = ProximityQuery.resolve(latitude=0.0, longitude=0.0)

    assert query.explicit_center is True
    assert query.center == GeoCoordinate(latitude=0.0, longitude=0.0)
    assert query.radius_km == 50.0


def test_in_memory_strategy_filters_by_distance(db: Session):
    """Test that the haversine filter keeps only stones inside the radius"""
    create_test_wanderstein(db, "WS-BOCHUM-001", BOCHUM, days_ago=0)
    create_test_wanderstein(db, "WS-ESSEN-001", ESSEN, days_ago=1)
    create_test_wanderstein(db, "WS-MUNICH-001", MUNICH, days_ago=2)

    results = InMemoryHaversineProximity().find_within(db, BOCHUM, 100.0)

    assert [w.unique_id for w in results] == ["WS-BOCHUM-001", "WS-ESSEN-001"]


def test_in_memory_strategy_radius_boundary(db: Session):
    """Test that a stone exactly as far as the radius is included"""
    create_test_wanderstein(db, "WS-ESSEN-001", ESSEN)

    assert len(InMemoryHaversineProximity().find_within(db, BOCHUM, 15.0)) == 1
    assert InMemoryHaversineProximity().find_within(db, BOCHUM, 14.0) == []


def test_in_memory_strategy_skips_stones_without_coordinates(db: Session):
    """Test that stones without coordinates are never matched"""
    create_test_wanderstein(db, "WS-NOWHERE-001", None)

    assert InMemoryHaversineProximity().find_within(db, BOCHUM, 20000.0) == []


def test_in_memory_strategy_orders_newest_first(db: Session):
    """Test that matches are ordered by creation time, newest first"""
    create_test_wanderstein(db, "WS-OLD-001", BOCHUM, days_ago=5)
    create_test_wanderstein(db, "WS-NEW-001", ESSEN, days_ago=1)
    create_test_wanderstein(db, "WS-MID-001", BOCHUM, days_ago=3)

    results = InMemoryHaversineProximity().find_within(db, BOCHUM, 50.0)

    assert [w.unique_id for w in results] == ["WS-NEW-001", "WS-MID-001", "WS-OLD-001"]


def test_postgis_strategy_pushes_predicate_into_database(db: Session):
    """Test that the PostGIS query uses ST_DWithin with the radius in meters"""
    query = PostGISProximity().build_query(db, MUNICH, 50.0)

    compiled = query.statement.compile(dialect=postgresql.dialect())
    sql = str(compiled)

    assert "ST_DWithin" in sql
    assert "ST_GeogFromText" in sql
    assert "location_point IS NOT NULL" in sql
    assert "ORDER BY wandersteine.created_at DESC, wandersteine.id DESC" in sql

    params = list(compiled.params.values())
    assert 50000.0 in params
    assert any(isinstance(p, str) and p.startswith("SRID=4326;POINT") for p in params)


def test_auto_strategy_uses_in_memory_filter_on_sqlite(db: Session):
    """Test that SQLite sessions use the in-memory filter"""
    strategy = get_proximity_strategy(db, "auto")

    assert isinstance(strategy, InMemoryHaversineProximity)


def test_auto_strategy_uses_postgis_on_postgresql():
    """Test that PostgreSQL sessions use the PostGIS predicate"""
    session = MagicMock()
    session.get_bind.return_value.dialect.name = "postgresql"

    assert isinstance(get_proximity_strategy(session, "auto"), PostGISProximity)


def test_explicit_strategy_overrides_dialect(db: Session):
    """Test that a configured strategy is used regardless of the dialect"""
    assert isinstance(get_proximity_strategy(db, "postgis"), PostGISProximity)
    assert isinstance(get_proximity_strategy(db, "IN_MEMORY"), InMemoryHaversineProximity)


def test_unknown_strategy_raises(db: Session):
    """Test that an unknown strategy name is rejected"""
    with pytest.raises(ValueError) as exc_info:
        get_proximity_strategy(db, "quadtree")

    assert "quadtree" in str(exc_info.value)
