from fastapi import APIRouter

from app.api.v1.endpoints import translations, wandersteine

api_router = APIRouter()

api_router.include_router(wandersteine.router, prefix="/wandersteine", tags=["wandersteine"])
api_router.include_router(translations.router, prefix="/translations", tags=["translations"])
