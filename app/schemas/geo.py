"""
Geographic Coordinate Type

Value type for WGS84 positions used by the catalog and the proximity search.
"""

from pydantic import BaseModel, ConfigDict, Field


class GeoCoordinate(BaseModel):
    """
    Geographic coordinates (latitude and longitude) in decimal degrees.

    The range is not enforced on construction: a coordinate coming in as a
    query parameter has to be checked with ``is_valid`` before it is used.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")

    def is_valid(self) -> bool:
        """Check that both axes are inside the WGS84 range."""
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"
