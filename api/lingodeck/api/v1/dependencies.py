"""
Shared endpoint dependencies.

Text services are created once in create_app and kept on app.state; tests
replace them through app.dependency_overrides.
"""
from fastapi import Request

from lingodeck.services.sentence_service import SentenceService
from lingodeck.services.translation_service import TranslationService


def get_sentence_service(request: Request) -> SentenceService:
    return request.app.state.sentence_service


def get_translation_service(request: Request) -> TranslationService:
    return request.app.state.translation_service
