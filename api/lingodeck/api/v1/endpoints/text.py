"""
Translation and sentence generation endpoints.
"""
from fastapi import APIRouter, Depends

from lingodeck.api.v1.dependencies import get_sentence_service, get_translation_service
from lingodeck.schemas.text import (
    SentenceRequest,
    SentenceResponse,
    TranslateRequest,
    TranslateResponse,
)
from lingodeck.services.sentence_service import SentenceService
from lingodeck.services.translation_service import TranslationService

router = APIRouter(tags=["text"])


@router.post("/translate", response_model=TranslateResponse)
def translate(
    request: TranslateRequest,
    translation_service: TranslationService = Depends(get_translation_service)
):
    """Translate a text between two languages."""
    translation = translation_service.translate_text(
        request.text,
        target_language=request.target,
        source_language=request.source
    )
    return TranslateResponse(translation=translation)


@router.post("/sentences", response_model=SentenceResponse)
def generate_sentence(
    request: SentenceRequest,
    sentence_service: SentenceService = Depends(get_sentence_service)
):
    """Generate a simple example sentence containing a word."""
    return SentenceResponse(
        sentence=sentence_service.generate_sentence(request.language, request.word)
    )
