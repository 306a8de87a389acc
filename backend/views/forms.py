"""Add-word form state."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from languages import DIFFICULTY_LEVELS, LANGUAGE_CODES, WORD_TYPES
from schemas.word import Translation, WordCreate

REQUIRED_FIELDS = {
    "word": "Word",
    "translation_word": "Translation",
    "definition": "Definition",
}


@dataclass
class AddWordForm:
    word: str = ""
    language: str = "en"
    type: str = "noun"
    difficulty: str = "B1"
    translation_word: str = ""
    definition: str = ""
    examples: list[str] = field(default_factory=lambda: [""])

    @classmethod
    def from_form(cls, data: Any) -> AddWordForm:
        """Build from submitted form data (a Starlette FormData or a plain dict)."""
        if hasattr(data, "getlist"):
            examples = [str(v) for v in data.getlist("examples")]
        else:
            examples = list(data.get("examples") or [])
        language = str(data.get("language") or "en")
        word_type = str(data.get("type") or "noun")
        difficulty = str(data.get("difficulty") or "B1")
        return cls(
            word=str(data.get("word") or ""),
            language=language if language in LANGUAGE_CODES else "en",
            type=word_type if word_type in WORD_TYPES else "noun",
            difficulty=difficulty if difficulty in DIFFICULTY_LEVELS else "B1",
            translation_word=str(data.get("translation_word") or ""),
            definition=str(data.get("definition") or ""),
            examples=examples or [""],
        )

    def add_example(self):
        self.examples.append("")

    def remove_example(self, index: int):
        if 0 <= index < len(self.examples):
            del self.examples[index]

    def missing_fields(self) -> list[str]:
        return [label for name, label in REQUIRED_FIELDS.items() if not getattr(self, name).strip()]

    def to_payload(self) -> dict:
        entry = WordCreate(
            word=self.word,
            language=self.language,
            difficulty=self.difficulty,
            translations=[
                Translation(
                    word=self.translation_word,
                    type=self.type,
                    definitions=[self.definition],
                    examples=[ex for ex in self.examples if ex.strip()],
                )
            ],
        )
        return entry.model_dump()
