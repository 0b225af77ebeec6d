from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.services.translation_service import translation_service

router = APIRouter()


@router.get("/languages", response_model=List[str])
def get_supported_languages(db: Session = Depends(get_db)) -> Any:
    """
    Get all supported language codes.
    """
    return translation_service.get_supported_languages(db)


@router.get("/{language}", response_model=Dict[str, Any])
def get_translations(language: str, db: Session = Depends(get_db)) -> Any:
    """
    Get all translations for a language (e.g. "de", "en") as a nested dictionary.
    """
    return translation_service.get_translations(db, language)
