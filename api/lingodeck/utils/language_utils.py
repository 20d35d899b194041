"""
Language code/name helpers shared by the text services.

Clients send either a code ('es') or a name ('Spanish'); prompts read better
with names and the translation API wants codes.
"""

LANGUAGE_NAMES = {
    'en': 'English',
    'fr': 'French',
    'es': 'Spanish',
    'de': 'German',
    'it': 'Italian',
    'pt': 'Portuguese',
    'ru': 'Russian',
    'ja': 'Japanese',
    'zh': 'Chinese',
    'ko': 'Korean',
    'ar': 'Arabic',
    'hi': 'Hindi',
    'nl': 'Dutch',
    'sv': 'Swedish',
    'pl': 'Polish',
    'tr': 'Turkish',
    'el': 'Greek',
    'uk': 'Ukrainian',
    'vi': 'Vietnamese',
    'jp': 'Japanese',  # Legacy client code
}

# Codes the translation API does not accept as-is
LANGUAGE_CODE_MAPPING = {
    'jp': 'ja',
}

_CODES_BY_NAME = {}
for _code, _name in LANGUAGE_NAMES.items():
    _CODES_BY_NAME.setdefault(_name.lower(), LANGUAGE_CODE_MAPPING.get(_code, _code))


def get_language_name(language: str) -> str:
    """
    Return the English name of a language given its code or name.

    Unknown values are returned stripped but otherwise unchanged.
    """
    value = language.strip()
    return LANGUAGE_NAMES.get(value.lower(), value)


def get_language_code(language: str) -> str:
    """
    Return the translation API code for a language given its code or name.

    Examples: 'Spanish' -> 'es', 'jp' -> 'ja', 'es' -> 'es'.
    """
    value = language.strip().lower()
    if value in _CODES_BY_NAME:
        return _CODES_BY_NAME[value]
    return LANGUAGE_CODE_MAPPING.get(value, value)
