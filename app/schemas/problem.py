from typing import Optional

from pydantic import BaseModel


class ProblemDetails(BaseModel):
    """Error body following RFC 7807."""

    type: str
    title: str
    status: int
    detail: Optional[str] = None
