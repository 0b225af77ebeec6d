"""
Wanderstein service for the read operations of the catalog.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import (
    InvalidCoordinatesError,
    StorageError,
    TrailmarksError,
    WandersteinNotFoundError,
)
from app.models.wanderstein import Wanderstein
from app.services.proximity import ProximityQuery, get_proximity_strategy

logger = logging.getLogger(__name__)


def _newest_first(db: Session):
    return db.query(Wanderstein).order_by(
        Wanderstein.created_at.desc(), Wanderstein.id.desc()
    )


class WandersteinService:
    """Service for reading Wandersteine."""

    @staticmethod
    def _run(title: str, operation):
        """
        Run a database operation and translate failures into service errors.

        Args:
            title: Error title shown to the client if the operation fails
            operation: Callable performing the query

        Raises:
            StorageError: If the database cannot be reached or queried
            TrailmarksError: On any other unexpected error
        """
        try:
            return operation()
        except TrailmarksError:
            raise
        except SQLAlchemyError as e:
            logger.exception("Database error: %s", title)
            raise StorageError(title=title) from e
        except Exception as e:
            logger.exception("Unexpected error: %s", title)
            raise TrailmarksError(title=title) from e

    @classmethod
    def get_recent(cls, db: Session) -> List[Wanderstein]:
        """
        Get the most recently added Wandersteine.

        Args:
            db: Database session

        Returns:
            Up to ``settings.RECENT_LIMIT`` Wandersteine, newest first
        """
        wandersteine = cls._run(
            "An error occurred while fetching recent Wandersteine",
            lambda: _newest_first(db).limit(settings.RECENT_LIMIT).all(),
        )
        logger.info("Retrieved %d recent Wandersteine", len(wandersteine))
        return wandersteine

    @classmethod
    def get_all(cls, db: Session) -> List[Wanderstein]:
        """
        Get all Wandersteine, newest first.
        """
        wandersteine = cls._run(
            "An error occurred while fetching Wandersteine",
            lambda: _newest_first(db).all(),
        )
        logger.info("Retrieved %d Wandersteine", len(wandersteine))
        return wandersteine

    @classmethod
    def get_by_unique_id(cls, db: Session, unique_id: str) -> Wanderstein:
        """
        Get a Wanderstein by its unique identifier (e.g. WS-2024-001).

        Args:
            db: Database session
            unique_id: Unique identifier, matched case-sensitively

        Returns:
            The matching Wanderstein

        Raises:
            WandersteinNotFoundError: If no Wanderstein has this identifier
        """
        wanderstein = cls._run(
            "An error occurred while fetching the Wanderstein",
            lambda: db.query(Wanderstein)
            .filter(Wanderstein.unique_id == unique_id)
            .first(),
        )
        if wanderstein is None:
            logger.warning("Wanderstein with unique ID %s not found", unique_id)
            raise WandersteinNotFoundError(unique_id)

        logger.info("Retrieved Wanderstein with unique ID %s", unique_id)
        return wanderstein

    @classmethod
    def get_nearby(
        cls,
        db: Session,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        radius_km: Optional[float] = None,
    ) -> List[Wanderstein]:
        """
        Get Wandersteine within a radius of a location.

        Without both latitude and longitude the search is centered on the
        default location (Bochum) with a 100 km radius; with an explicit
        center the default radius is 50 km.

        Args:
            db: Database session
            latitude: Latitude of the center point
            longitude: Longitude of the center point
            radius_km: Search radius in kilometers

        Returns:
            Matching Wandersteine, newest first

        Raises:
            InvalidCoordinatesError: If the center is outside the WGS84 range
        """
        query = ProximityQuery.resolve(latitude, longitude, radius_km)
        if not query.center.is_valid():
            logger.warning("Rejected nearby search with invalid center %s", query.center)
            raise InvalidCoordinatesError()

        # A radius of zero or less cannot contain anything
        if query.radius_km <= 0:
            return []

        def find():
            strategy = get_proximity_strategy(db)
            logger.debug("Using %s proximity strategy", strategy.name)
            return strategy.find_within(db, query.center, query.radius_km)

        wandersteine = cls._run("An error occurred while fetching nearby Wandersteine", find)
        logger.info(
            "Retrieved %d Wandersteine within %skm of %s",
            len(wandersteine),
            query.radius_km,
            query.center,
        )
        return wandersteine


# Create a singleton instance
wanderstein_service = WandersteinService()
