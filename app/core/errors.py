"""
Error taxonomy for the Trailmarks API.

Services raise these exceptions; ``app.main`` renders them as RFC 7807
problem details so clients always get a structured error body.
"""

from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.problem import ProblemDetails

PROBLEM_MEDIA_TYPE = "application/problem+json"


class TrailmarksError(Exception):
    """Base exception for all service errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    title: str = "An unexpected error occurred"

    def __init__(self, title: Optional[str] = None, detail: Optional[str] = None):
        self.title = title or self.title
        self.detail = detail
        super().__init__(detail or self.title)


class InvalidCoordinatesError(TrailmarksError):
    """Raised when a query center lies outside the WGS84 range."""

    status_code = status.HTTP_400_BAD_REQUEST
    title = "Invalid coordinates"

    def __init__(self):
        super().__init__(
            detail="The provided latitude or longitude values are outside valid ranges"
        )


class WandersteinNotFoundError(TrailmarksError):
    """Raised when no Wanderstein matches the requested unique ID."""

    status_code = status.HTTP_404_NOT_FOUND
    title = "Resource not found"

    def __init__(self, unique_id: str):
        self.unique_id = unique_id
        super().__init__(
            detail=f"The requested Wanderstein with ID '{unique_id}' was not found"
        )


class TranslationsNotFoundError(TrailmarksError):
    """Raised when a language has no translations."""

    status_code = status.HTTP_404_NOT_FOUND
    title = "Translations not found"

    def __init__(self, language: str):
        self.language = language
        super().__init__(detail=f"No translations found for language '{language}'")


class StorageError(TrailmarksError):
    """Raised when the database cannot be reached or queried."""


def problem_response(
    status_code: int, title: str, detail: Optional[str] = None
) -> JSONResponse:
    problem = ProblemDetails(
        type=f"https://httpstatuses.io/{status_code}",
        title=title,
        status=status_code,
        detail=detail,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def trailmarks_error_handler(request: Request, exc: TrailmarksError) -> JSONResponse:
    # The cause of a 500 is logged where it is raised, never sent to the client
    detail = None if exc.status_code >= 500 else exc.detail
    return problem_response(exc.status_code, exc.title, detail)


async def translations_not_found_handler(
    request: Request, exc: TranslationsNotFoundError
) -> JSONResponse:
    # The frontend reads the "message" field of this response
    return JSONResponse(
        status_code=exc.status_code, content={"message": exc.detail}
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    invalid = ", ".join(
        ".".join(str(part) for part in error["loc"][1:]) for error in exc.errors()
    )
    return problem_response(
        status.HTTP_400_BAD_REQUEST,
        "One or more validation errors occurred",
        f"Invalid value for: {invalid}",
    )
