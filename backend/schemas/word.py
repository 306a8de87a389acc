from typing import Literal

from pydantic import BaseModel, Field

Language = Literal["en", "tr"]
Difficulty = Literal["A1", "A2", "B1", "B2", "C1", "C2"]


class Translation(BaseModel):
    word: str
    type: str
    definitions: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)


class WordEntry(BaseModel):
    word: str
    language: Language
    difficulty: Difficulty
    translations: list[Translation] = Field(default_factory=list)


class WordCreate(BaseModel):
    word: str
    language: Language
    difficulty: Difficulty
    translations: list[Translation]


class TranslationSummary(BaseModel):
    word: str
    type: str = ""


class WordSummary(BaseModel):
    word: str
    translations: list[TranslationSummary] = Field(default_factory=list)


class Suggestion(BaseModel):
    word: str
    translation: str = ""
