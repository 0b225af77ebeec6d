"""
Proximity Search

Resolves the parameters of a "nearby" request and finds the Wandersteine
within a great-circle radius of the resolved center.

Two strategies implement the distance predicate:

- ``PostGISProximity`` pushes ``ST_DWithin`` on the geography column into
  PostgreSQL, so only matching rows leave the database.
- ``InMemoryHaversineProximity`` loads every row that has a coordinate and
  filters it with the haversine formula. Always correct, fine for small catalogs
  and for databases without PostGIS.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.types import to_ewkt
from app.models.wanderstein import Wanderstein
from app.schemas.geo import GeoCoordinate
from app.services.geo_distance import distance_km

logger = logging.getLogger(__name__)

STRATEGY_AUTO = "auto"
STRATEGY_POSTGIS = "postgis"
STRATEGY_IN_MEMORY = "in_memory"


@dataclass(frozen=True)
class ProximityQuery:
    """Center and radius of one nearby search."""

    center: GeoCoordinate
    radius_km: float
    explicit_center: bool

    @classmethod
    def resolve(
        cls,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        radius_km: Optional[float] = None,
    ) -> "ProximityQuery":
        """
        Build a query from optional request parameters.

        The center is only taken from the request when both latitude and
        longitude are given; a single axis falls back to the full default
        center. Without an explicit radius, an explicit center searches a
        narrower area than the default center.
        """
        explicit_center = latitude is not None and longitude is not None
        if explicit_center:
            center = GeoCoordinate(latitude=latitude, longitude=longitude)
        else:
            center = GeoCoordinate(
                latitude=settings.DEFAULT_CENTER_LATITUDE,
                longitude=settings.DEFAULT_CENTER_LONGITUDE,
            )

        if radius_km is None:
            radius_km = (
                settings.DEFAULT_RADIUS_EXPLICIT_KM
                if explicit_center
                else settings.DEFAULT_RADIUS_KM
            )

        return cls(center=center, radius_km=radius_km, explicit_center=explicit_center)


class ProximityStrategy(ABC):
    """Finds Wandersteine within a radius, most recently added first."""

    name: str

    @abstractmethod
    def find_within(
        self, db: Session, center: GeoCoordinate, radius_km: float
    ) -> List[Wanderstein]:
        """
        Return all Wandersteine whose coordinate lies within ``radius_km`` of
        ``center``. Wandersteine without a coordinate are never returned.
        """


def _ordered_with_coordinates(db: Session):
    return (
        db.query(Wanderstein)
        .filter(Wanderstein.coordinates.isnot(None))
        .order_by(Wanderstein.created_at.desc(), Wanderstein.id.desc())
    )


class InMemoryHaversineProximity(ProximityStrategy):
    name = STRATEGY_IN_MEMORY

    def find_within(
        self, db: Session, center: GeoCoordinate, radius_km: float
    ) -> List[Wanderstein]:
        candidates = _ordered_with_coordinates(db).all()
        matches = [
            wanderstein
            for wanderstein in candidates
            if distance_km(wanderstein.coordinates, center) <= radius_km
        ]
        logger.debug(
            "Haversine filter kept %d of %d candidates", len(matches), len(candidates)
        )
        return matches


class PostGISProximity(ProximityStrategy):
    name = STRATEGY_POSTGIS

    def build_query(self, db: Session, center: GeoCoordinate, radius_km: float):
        center_point = func.ST_GeogFromText(to_ewkt(center))
        return _ordered_with_coordinates(db).filter(
            func.ST_DWithin(Wanderstein.coordinates, center_point, radius_km * 1000)
        )

    def find_within(
        self, db: Session, center: GeoCoordinate, radius_km: float
    ) -> List[Wanderstein]:
        return self.build_query(db, center, radius_km).all()


_STRATEGIES = {
    STRATEGY_POSTGIS: PostGISProximity(),
    STRATEGY_IN_MEMORY: InMemoryHaversineProximity(),
}


def get_proximity_strategy(db: Session, strategy: Optional[str] = None) -> ProximityStrategy:
    """
    Pick the proximity strategy for a session.

    ``auto`` uses PostGIS when the session is bound to PostgreSQL and the
    in-memory filter otherwise.
    """
    strategy = (strategy or settings.PROXIMITY_STRATEGY).lower()
    if strategy == STRATEGY_AUTO:
        dialect = db.get_bind().dialect.name
        strategy = STRATEGY_POSTGIS if dialect == "postgresql" else STRATEGY_IN_MEMORY

    try:
        return _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown proximity strategy: {strategy!r}") from None
