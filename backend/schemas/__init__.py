from schemas.word import (
    Translation, WordEntry, WordCreate, TranslationSummary, WordSummary, Suggestion,
)

__all__ = [
    "Translation", "WordEntry", "WordCreate",
    "TranslationSummary", "WordSummary", "Suggestion",
]
