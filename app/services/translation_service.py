"""
Translation service for the UI texts stored in the database.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError, TranslationsNotFoundError
from app.models.translation import Translation

logger = logging.getLogger(__name__)


def set_nested_value(tree: Dict[str, Any], key: str, value: str) -> None:
    """
    Store ``value`` under a dot-separated ``key`` in a nested dictionary.

    If a prefix of the key already holds a text value (``a.b`` = "x" and then
    ``a.b.c`` = "y"), the deeper key is dropped and the first value is kept.
    """
    *parents, leaf = key.split(".")
    current = tree
    for part in parents:
        child = current.setdefault(part, {})
        if not isinstance(child, dict):
            return
        current = child
    current[leaf] = value


class TranslationService:
    """Service for reading translations."""

    @staticmethod
    def get_translations(db: Session, language: str) -> Dict[str, Any]:
        """
        Get all translations of a language as a nested dictionary.

        Args:
            db: Database session
            language: Language code (e.g. "de", "en"), case-insensitive

        Returns:
            Nested dictionary built from the dot-separated translation keys

        Raises:
            TranslationsNotFoundError: If the language has no translations
            StorageError: If the database query fails
        """
        try:
            translations = (
                db.query(Translation)
                .filter(Translation.language == language.lower())
                .order_by(Translation.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Error occurred while fetching translations for language %s", language)
            raise StorageError(title="Error fetching translations") from e

        if not translations:
            raise TranslationsNotFoundError(language)

        result: Dict[str, Any] = {}
        for translation in translations:
            set_nested_value(result, translation.key, translation.value)
        return result

    @staticmethod
    def get_supported_languages(db: Session) -> List[str]:
        """
        Get all language codes that have translations, sorted alphabetically.
        """
        try:
            rows = (
                db.query(Translation.language)
                .distinct()
                .order_by(Translation.language)
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Error occurred while fetching supported languages")
            raise StorageError(title="Error fetching languages") from e

        return [language for (language,) in rows]


# Create a singleton instance
translation_service = TranslationService()
