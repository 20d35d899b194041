"""
Translation and sentence generation schemas.
"""
from pydantic import BaseModel, Field


class TranslateRequest(BaseModel):
    """Request to translate a text."""
    text: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1, description="Source language code or name")
    target: str = Field(..., min_length=1, description="Target language code or name")


class TranslateResponse(BaseModel):
    """Translated text."""
    translation: str


class SentenceRequest(BaseModel):
    """Request to generate an example sentence."""
    language: str = Field(..., min_length=1)
    word: str = Field(..., min_length=1)


class SentenceResponse(BaseModel):
    """Generated sentence (may be empty)."""
    sentence: str
