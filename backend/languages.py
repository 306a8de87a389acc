"""Supported dictionary languages and their configuration.

Each language has:
- name: display name used in the language select
- all_token: the "show all" pseudo-letter at the head of the letter filter
- letters: initial letters offered by the letter filter, in alphabet order
- speech_locale: locale tag used for on-device speech synthesis
"""

LANGUAGES = {
    "en": {
        "name": "English",
        "all_token": "All",
        "letters": list("ABCDEFGHIJKLMNOPQRSTUVWXYZ"),
        "speech_locale": "en-US",
    },
    "tr": {
        "name": "Turkish",
        "all_token": "Tümü",
        "letters": [
            "A", "B", "C", "Ç", "D", "E", "F", "G", "Ğ", "H", "I", "İ", "J", "K", "L",
            "M", "N", "O", "Ö", "P", "R", "S", "Ş", "T", "U", "Ü", "V", "Y", "Z",
        ],
        "speech_locale": "tr-TR",
    },
}

LANGUAGE_CODES = list(LANGUAGES.keys())

DEFAULT_LANGUAGE = "en"

# Ordered from easiest to hardest.
DIFFICULTY_LEVELS = ["A1", "A2", "B1", "B2", "C1", "C2"]

WORD_TYPES = [
    "noun",
    "verb",
    "adjective",
    "adverb",
    "pronoun",
    "preposition",
    "conjunction",
    "interjection",
]


def get_language(code: str) -> dict:
    """Get language config by code. Raises ValueError if not found."""
    if code not in LANGUAGES:
        raise ValueError(f"Unsupported language: {code}. Supported: {LANGUAGE_CODES}")
    return LANGUAGES[code]


def all_token(code: str) -> str:
    return get_language(code)["all_token"]


def normalize_letter(code: str, letter: str | None) -> str:
    """The letter as shown in the filter; anything outside this language's alphabet means all."""
    if letter and letter in get_language(code)["letters"]:
        return letter
    return all_token(code)


def letter_filter(code: str, letter: str | None) -> str | None:
    """Letter value to send upstream, or None when the list is unfiltered.

    The sentinel token is never sent as a literal filter value.
    """
    if normalize_letter(code, letter) == all_token(code):
        return None
    return letter.lower()
