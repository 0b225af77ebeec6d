"""
Wanderstein Response Schemas

Outward-facing shapes of a catalog record. Field names on the wire use the
mixed-case spelling the frontend depends on (``unique_Id``, ``created_At``...).
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.wanderstein import Wanderstein

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(value: datetime) -> str:
    """
    Format a timestamp as ``yyyy-MM-ddTHH:mm:ssZ`` in UTC.

    Naive datetimes are stored as UTC, so they are only tagged, not shifted.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


class WandersteinResponse(BaseModel):
    """List item shape of a Wanderstein."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    unique_id: str = Field(..., alias="unique_Id")
    preview_url: str = Field(..., alias="preview_Url")
    created_at: str = Field(..., alias="created_At")
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    location: str

    @classmethod
    def _entity_fields(cls, wanderstein: Wanderstein) -> dict:
        coordinates = wanderstein.coordinates
        return {
            "id": wanderstein.id,
            "name": wanderstein.name,
            "unique_id": wanderstein.unique_id,
            "preview_url": wanderstein.preview_url,
            "created_at": format_timestamp(wanderstein.created_at),
            "latitude": coordinates.latitude if coordinates is not None else None,
            "longitude": coordinates.longitude if coordinates is not None else None,
            "location": wanderstein.location,
        }

    @classmethod
    def from_entity(cls, wanderstein: Wanderstein) -> "WandersteinResponse":
        return cls(**cls._entity_fields(wanderstein))


class WandersteinDetailResponse(WandersteinResponse):
    """Detail shape of a Wanderstein, adds description and update time."""

    description: str
    updated_at: str = Field(..., alias="updated_At")

    @classmethod
    def from_entity(cls, wanderstein: Wanderstein) -> "WandersteinDetailResponse":
        return cls(
            **cls._entity_fields(wanderstein),
            description=wanderstein.description,
            updated_at=format_timestamp(wanderstein.updated_at),
        )
