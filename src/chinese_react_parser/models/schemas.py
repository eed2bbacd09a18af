from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chinese_react_parser.config import Settings, get_settings


class PartialKeywords(BaseModel):
    """Caller-supplied synonyms for one language. Every role is optional."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    thought: Optional[List[str]] = None
    action: Optional[List[str]] = None
    action_input: Optional[List[str]] = None
    final_answer: Optional[List[str]] = None
    observation: Optional[List[str]] = None

    @field_validator("thought", "action", "action_input", "final_answer", "observation")
    @classmethod
    def _no_empty_synonyms(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return value
        if any(not synonym.strip() for synonym in value):
            raise ValueError("synonyms must not be empty")
        return value


class CustomKeywords(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    chinese: Optional[PartialKeywords] = None
    english: Optional[PartialKeywords] = None


class ExtractionOptions(BaseModel):
    """
    Per-parser configuration.

    ``max_retries`` is accepted so existing call sites keep constructing
    options unchanged; no parsing step reads it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    debug: bool = False
    relaxed_mode: bool = True
    max_retries: int = Field(default=3, ge=0)
    custom_keywords: Optional[CustomKeywords] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **overrides) -> "ExtractionOptions":
        settings = settings or get_settings()
        values = {"debug": settings.debug, "relaxed_mode": settings.relaxed_mode}
        values.update(overrides)
        return cls(**values)
