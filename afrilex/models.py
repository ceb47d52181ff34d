from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TranslationRecord(BaseModel):
    """One translation of the source word, as returned by the research model."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    language: str
    translated_word: str = Field(alias="translatedWord")
    pronunciation: str = ""
    family: str = ""
    region: str = ""
    # Cognate cluster id. Missing means the record stands alone.
    similarity_group: Optional[int] = Field(default=None, alias="similarityGroup")
    notes: Optional[str] = None

    def matches(self, text):
        needle = text.strip().lower()
        if not needle:
            return True
        return (
            needle in self.language.lower()
            or needle in self.family.lower()
            or needle in self.region.lower()
        )


class ResearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source_word: str = Field(alias="sourceWord")
    translations: List[TranslationRecord] = Field(default_factory=list)
    linguistic_analysis: str = Field(default="", alias="linguisticAnalysis")

    def filter(self, text) -> List[TranslationRecord]:
        """Records whose language, family or region contains `text`."""
        return [t for t in self.translations if t.matches(text)]

    @property
    def language_count(self):
        return len({t.language for t in self.translations})
