from lingodeck.core.config import Settings
from lingodeck.core.exceptions import UpstreamUnavailableError
from lingodeck.utils.language_utils import get_language_code
import html
import requests
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class TranslationService:
    """Service for translating text using Google Cloud Translation API."""

    def __init__(self, settings: Settings):
        """Initialize the translation service."""
        self.api_key = settings.google_translate_api_key
        self.timeout = settings.text_service_timeout
        self.base_url = "https://translation.googleapis.com/language/translate/v2"

        logger.info(f"TranslationService initialized. API key present: {bool(self.api_key)}")
        if not self.api_key:
            logger.warning("Google Translate API key not configured. Translation will fail.")

    def translate_text(
        self,
        text: str,
        target_language: str,
        source_language: Optional[str] = None
    ) -> str:
        """
        Translate text from source language to target language.

        Args:
            text: Text to translate
            target_language: Target language code or name (e.g., 'fr', 'Spanish')
            source_language: Source language code or name. If None, auto-detect.

        Returns:
            Translated text

        Raises:
            UpstreamUnavailableError: If translation fails
        """
        if not self.api_key:
            raise UpstreamUnavailableError("Google Translate API key not configured")

        mapped_target = get_language_code(target_language)
        mapped_source = get_language_code(source_language) if source_language else None

        if mapped_source and mapped_source == mapped_target:
            return text

        params = {
            'key': self.api_key,
            'q': text,
            'target': mapped_target,
            'format': 'text'
        }
        if mapped_source:
            params['source'] = mapped_source

        logger.debug(f"Translation request: '{text}' from '{mapped_source or 'auto'}' to '{mapped_target}'")

        try:
            response = requests.post(
                self.base_url,
                params=params,
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            logger.error(f"Translation API request timed out after {self.timeout}s")
            raise UpstreamUnavailableError("Translation timed out") from e
        except requests.exceptions.RequestException as e:
            error_msg = f"Translation API request failed: {str(e)}"
            if e.response is not None:
                error_msg += f" - Status: {e.response.status_code}"
            logger.error(error_msg)
            raise UpstreamUnavailableError(error_msg) from e

        try:
            translated_text = data['data']['translations'][0]['translatedText']
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected API response format: {data}")
            raise UpstreamUnavailableError("Unexpected translation API response format") from e

        translated_text = html.unescape(translated_text).strip()
        logger.info(f"Translated '{text}' from {source_language or 'auto'} to {target_language}: '{translated_text}'")
        return translated_text
