from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from app.db.database import Base
from app.db.types import GeographyPoint


class Wanderstein(Base):
    __tablename__ = "wandersteine"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    unique_id = Column(String(50), nullable=False, unique=True, index=True)
    preview_url = Column(String(500), nullable=False, default="")
    description = Column(String(1000), nullable=False, default="")
    location = Column(String(200), nullable=False, default="")
    # None means "no known position", (0, 0) is a real place
    coordinates = Column("location_point", GeographyPoint(), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __init__(
        self,
        name,
        unique_id,
        preview_url="",
        description="",
        location="",
        coordinates=None,
        created_at=None,
        updated_at=None,
    ):
        now = datetime.now(timezone.utc)
        self.name = name
        self.unique_id = unique_id
        self.preview_url = preview_url
        self.description = description
        self.location = location
        self.coordinates = coordinates
        self.created_at = created_at or now
        self.updated_at = updated_at or self.created_at

    def __repr__(self) -> str:
        return f"<Wanderstein {self.unique_id!r}>"
