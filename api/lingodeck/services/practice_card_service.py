"""
Practice card generation.

Turns a word in the learner's native language into a set of practice cards:
the word is translated into the study language, then one sentence is generated
per scenario and translated back so the learner can check its meaning.
"""
import logging
from typing import List, Optional
from pydantic import BaseModel

from lingodeck.models.enums import ProficiencyLevel, Scenario
from lingodeck.services.sentence_service import SentenceService
from lingodeck.services.translation_service import TranslationService

logger = logging.getLogger(__name__)

NATIVE_LANGUAGE = "English"


class PracticeCardDraft(BaseModel):
    """Content of one generated card, before it is attached to a deck."""
    word: str  # Target-language word
    answer_word: str  # Native-language word
    sentence: str
    sentence_translation: Optional[str] = None
    scenario: Scenario
    is_fallback: bool = False


def create_fallback_draft(target_word: str, answer_word: str, scenario: Scenario) -> PracticeCardDraft:
    """Draft used when a scenario could not be generated: the bare word pair."""
    return PracticeCardDraft(
        word=target_word,
        answer_word=answer_word,
        sentence=target_word,
        sentence_translation=answer_word,
        scenario=scenario,
        is_fallback=True,
    )


def generate_practice_cards(
    sentence_service: SentenceService,
    translation_service: TranslationService,
    answer_word: str,
    language: str,
    proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER
) -> List[PracticeCardDraft]:
    """
    Generate practice card drafts for a native-language word.

    Scenario failures are logged and replaced by a fallback draft. Drafts whose
    sentence is empty or just the target word are dropped; if nothing is left,
    a single basic fallback draft is returned.

    Args:
        sentence_service: Sentence generator
        translation_service: Translator
        answer_word: Word in the learner's native language (English)
        language: Language being studied (code or name)
        proficiency_level: Learner level used in the prompts

    Returns:
        List of drafts, at least one

    Raises:
        UpstreamUnavailableError: If the word itself cannot be translated
    """
    target_word = translation_service.translate_text(
        answer_word,
        target_language=language,
        source_language=NATIVE_LANGUAGE
    )
    logger.info(f"Generating practice cards for '{answer_word}' -> '{target_word}' ({language}, {proficiency_level.value})")

    drafts: List[PracticeCardDraft] = []
    for scenario in Scenario:
        try:
            sentence = sentence_service.generate_scenario_sentence(
                language, target_word, scenario, proficiency_level
            )
            sentence_translation = translation_service.translate_text(
                sentence,
                target_language=NATIVE_LANGUAGE,
                source_language=language
            ) if sentence else None
            drafts.append(PracticeCardDraft(
                word=target_word,
                answer_word=answer_word,
                sentence=sentence,
                sentence_translation=sentence_translation,
                scenario=scenario,
            ))
        except Exception as e:
            logger.error(f"Error generating card for scenario {scenario.value}: {e}")
            drafts.append(create_fallback_draft(target_word, answer_word, scenario))

    usable = [
        draft for draft in drafts
        if draft.sentence and draft.sentence != target_word
    ]
    logger.info(f"Practice card generation summary: {len(usable)} of {len(drafts)} scenario(s) usable")

    if not usable:
        return [create_fallback_draft(target_word, answer_word, Scenario.BASIC)]
    return usable
