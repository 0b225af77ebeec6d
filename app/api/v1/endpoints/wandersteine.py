"""
Wandersteine API Endpoint

Read-only REST API for the hiking stone catalog.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.schemas.problem import ProblemDetails
from app.schemas.wanderstein import WandersteinDetailResponse, WandersteinResponse
from app.services.wanderstein_service import wanderstein_service

router = APIRouter()

SERVER_ERROR = {500: {"model": ProblemDetails, "description": "Internal server error"}}


@router.get("/recent", response_model=List[WandersteinResponse], responses=SERVER_ERROR)
def get_recent_wandersteine(db: Session = Depends(get_db)) -> Any:
    """
    Get the 5 most recently added Wandersteine.
    """
    wandersteine = wanderstein_service.get_recent(db)
    return [WandersteinResponse.from_entity(w) for w in wandersteine]


@router.get(
    "/nearby",
    response_model=List[WandersteinResponse],
    responses={
        400: {"model": ProblemDetails, "description": "Invalid coordinates"},
        **SERVER_ERROR,
    },
)
def get_nearby_wandersteine(
    latitude: Optional[float] = Query(
        None, description="Latitude of the center point (defaults to Bochum: 51.4818)"
    ),
    longitude: Optional[float] = Query(
        None, description="Longitude of the center point (defaults to Bochum: 7.2162)"
    ),
    radius_km: Optional[float] = Query(
        None,
        alias="radiusKm",
        description="Search radius in km (defaults to 100km, or 50km if a position is given)",
    ),
    db: Session = Depends(get_db),
) -> Any:
    """
    Get Wandersteine within a radius of a location, newest first.
    """
    wandersteine = wanderstein_service.get_nearby(
        db, latitude=latitude, longitude=longitude, radius_km=radius_km
    )
    return [WandersteinResponse.from_entity(w) for w in wandersteine]


@router.get("", response_model=List[WandersteinResponse], responses=SERVER_ERROR)
def get_all_wandersteine(db: Session = Depends(get_db)) -> Any:
    """
    Get all Wandersteine, newest first.
    """
    wandersteine = wanderstein_service.get_all(db)
    return [WandersteinResponse.from_entity(w) for w in wandersteine]


@router.get(
    "/{unique_id}",
    response_model=WandersteinDetailResponse,
    responses={
        404: {"model": ProblemDetails, "description": "Wanderstein not found"},
        **SERVER_ERROR,
    },
)
def get_wanderstein_by_unique_id(unique_id: str, db: Session = Depends(get_db)) -> Any:
    """
    Get a specific Wanderstein by its unique identifier (e.g. WS-2024-001).
    """
    wanderstein = wanderstein_service.get_by_unique_id(db, unique_id)
    return WandersteinDetailResponse.from_entity(wanderstein)
