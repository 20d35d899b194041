from lingodeck.core.config import Settings
from lingodeck.core.exceptions import UpstreamUnavailableError
from lingodeck.models.enums import ProficiencyLevel, Scenario
from lingodeck.utils.language_utils import get_language_name
import requests
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a language learning assistant. Provide only the requested sentence without any "
    "explanations, descriptions, or additional text. The response should be a single sentence "
    "in the target language."
)

SCENARIO_PROMPTS = {
    Scenario.BASIC: "Write only a {level} level sentence in {language} using {word}. The output should be just the sentence, nothing else.",
    Scenario.DAILY: "Write only a {level} level sentence about daily activities in {language} using {word}. Return just the sentence.",
    Scenario.SOCIAL: "Write only a {level} level sentence about social interactions in {language} using {word}. Return just the sentence.",
    Scenario.QUESTION: "Write only a {level} level question in {language} using {word}. Return just the question.",
    Scenario.RESPONSE: "Write only a {level} level response in {language} using {word}. Return just the response.",
}

PROFICIENCY_SUFFIXES = {
    ProficiencyLevel.INTERMEDIATE: " Include common expressions where appropriate.",
    ProficiencyLevel.ADVANCED: " Use more sophisticated language structures.",
}

_LEADING_CHATTER = re.compile(r"^(here'?s?|this is|example|\(|\[).*", re.IGNORECASE)
_LEADING_NON_WORD = re.compile(r"^[^\w¿¡]+")
_BRACKETED = re.compile(r"[\(\[\{].*[\)\]\}]")


def clean_generated_sentence(text: str) -> str:
    """
    Strip the chatter language models wrap around a requested sentence.

    Removes a leading "Here's ..." / "Example ..." / bracketed line, leading
    punctuation or markup (keeping Spanish opening marks), bracketed asides and
    surrounding quotes.

    Args:
        text: Raw model output

    Returns:
        The cleaned sentence (may be empty)
    """
    cleaned = text.strip()
    cleaned = _LEADING_CHATTER.sub("", cleaned)
    cleaned = _LEADING_NON_WORD.sub("", cleaned)
    cleaned = _BRACKETED.sub("", cleaned)
    cleaned = cleaned.strip().strip('"').strip()
    return cleaned


class SentenceService:
    """Service for generating example sentences using Google Generative AI (Gemini) API."""

    def __init__(self, settings: Settings):
        """Initialize the sentence service."""
        self.api_key = settings.google_gemini_api_key
        self.model_name = settings.gemini_model
        self.timeout = settings.text_service_timeout
        self.base_url = f"https://generativelanguage.googleapis.com/v1beta/models/{self.model_name}:generateContent"

        logger.info(f"SentenceService initialized. Model: {self.model_name}, API key present: {bool(self.api_key)}")
        if not self.api_key:
            logger.warning("Google Gemini API key not configured. Sentence generation will fail.")

    def _generate(self, prompt: str, system_instruction: Optional[str] = None, temperature: float = 0.7) -> str:
        """
        Send one prompt to Gemini and return the generated text.

        Returns:
            Generated text, stripped. Empty when the model produced no text.

        Raises:
            UpstreamUnavailableError: If the key is missing, the request fails or times out,
                or the response is malformed
        """
        if not self.api_key:
            raise UpstreamUnavailableError("Google Gemini API key not configured")

        payload = {
            "contents": [{
                "parts": [{
                    "text": prompt
                }]
            }],
            "generationConfig": {
                "temperature": temperature,
                "topK": 40,
                "topP": 0.95,
                "maxOutputTokens": 1024,
            }
        }
        if system_instruction:
            payload["systemInstruction"] = {
                "parts": [{
                    "text": system_instruction
                }]
            }

        try:
            response = requests.post(
                f"{self.base_url}?key={self.api_key}",
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            logger.error(f"Gemini API request timed out after {self.timeout}s")
            raise UpstreamUnavailableError("Sentence generation timed out") from e
        except requests.exceptions.RequestException as e:
            error_msg = f"Gemini API request failed: {str(e)}"
            if e.response is not None:
                error_msg += f" - Status: {e.response.status_code}"
            logger.error(error_msg)
            raise UpstreamUnavailableError(error_msg) from e
        except ValueError as e:
            logger.error(f"Gemini API returned a non-JSON response: {e}")
            raise UpstreamUnavailableError("Gemini API returned a non-JSON response") from e

        candidates = data.get('candidates')
        if not candidates:
            logger.error(f"Unexpected API response format. Response: {data}")
            raise UpstreamUnavailableError("Gemini response missing candidates")

        candidate = candidates[0]
        parts = candidate.get('content', {}).get('parts') or []
        if not parts:
            # Blocked or truncated output: no sentence, but not a transport failure
            logger.warning(f"Gemini returned no text. Finish reason: {candidate.get('finishReason', 'UNKNOWN')}")
            return ""

        return parts[0].get('text', '').strip()

    def generate_sentence(self, language: str, word: str) -> str:
        """
        Generate one simple sentence in a language that includes a word.

        Args:
            language: Language code or name (e.g., 'es' or 'Spanish')
            word: Word the sentence must contain

        Returns:
            The sentence. An empty model answer is returned as an empty string.

        Raises:
            UpstreamUnavailableError: If the Gemini API cannot be reached or fails
        """
        language_name = get_language_name(language)
        prompt = (
            f"Please provide exactly one simple and concise sentence in '{language_name}' "
            f"that includes the word '{word}'. Ensure the sentence is easy to understand "
            f"and does not contain any extra explanations or examples."
        )
        logger.debug(f"Generating sentence for '{word}' in {language_name}")

        sentence = clean_generated_sentence(self._generate(prompt))
        logger.info(f"Generated sentence for '{word}' in {language_name}: '{sentence}'")
        return sentence

    def generate_scenario_sentence(
        self,
        language: str,
        word: str,
        scenario: Scenario,
        proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER
    ) -> str:
        """
        Generate a practice sentence for a scenario at a proficiency level.

        Args:
            language: Language code or name
            word: Target-language word to use
            scenario: Kind of sentence (basic, daily, social, question, response)
            proficiency_level: Learner level, adjusts prompt complexity

        Returns:
            The cleaned sentence (may be empty)

        Raises:
            UpstreamUnavailableError: If the Gemini API cannot be reached or fails
        """
        prompt = SCENARIO_PROMPTS[scenario].format(
            level=proficiency_level.value,
            language=get_language_name(language),
            word=word
        )
        prompt += PROFICIENCY_SUFFIXES.get(proficiency_level, "")

        raw = self._generate(prompt, system_instruction=SYSTEM_INSTRUCTION)
        return clean_generated_sentence(raw)
