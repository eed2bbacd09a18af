from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple, Union

from chinese_react_parser.errors import InvalidKeywordSetError


class Language(str, enum.Enum):
    ZH = "zh"
    EN = "en"


class Role(str, enum.Enum):
    THOUGHT = "thought"
    ACTION = "action"
    ACTION_INPUT = "action_input"
    FINAL_ANSWER = "final_answer"
    OBSERVATION = "observation"


REQUIRED_ROLES = (Role.THOUGHT, Role.ACTION, Role.ACTION_INPUT, Role.FINAL_ANSWER)


class Vendor(str, enum.Enum):
    QWEN = "qwen"
    CHATGLM = "chatglm"
    BAICHUAN = "baichuan"
    ERNIE = "ernie"


class ModelType(str, enum.Enum):
    QWEN = "qwen"
    CHATGLM = "chatglm"
    BAICHUAN = "baichuan"
    GLM = "glm"
    ERNIE = "ernie"
    MINIMAX = "minimax"
    AUTO = "auto"


@dataclass(frozen=True)
class KeywordSet:
    thought: Tuple[str, ...]
    action: Tuple[str, ...]
    action_input: Tuple[str, ...]
    final_answer: Tuple[str, ...]
    observation: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for role in REQUIRED_ROLES:
            if not self.for_role(role):
                raise InvalidKeywordSetError(f"Keyword set has no synonyms for role '{role.value}'")
        for role in Role:
            if any(not synonym.strip() for synonym in self.for_role(role)):
                raise InvalidKeywordSetError(f"Keyword set has an empty synonym for role '{role.value}'")

    @classmethod
    def from_mapping(cls, mapping: dict) -> "KeywordSet":
        return cls(**{role.value: tuple(mapping.get(role.value) or ()) for role in Role})

    def for_role(self, role: Role) -> Tuple[str, ...]:
        return getattr(self, role.value)

    def primary(self, role: Role) -> str:
        """First-preference synonym for a role."""
        return self.for_role(role)[0]


@dataclass(frozen=True)
class FieldMatch:
    action: str
    action_input: str
    thought: str = ""


@dataclass(frozen=True)
class CustomPattern:
    """A natural-language recognizer yielding a tool call from one regex match."""
    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], Optional[FieldMatch]]

    def match(self, text: str) -> Optional[FieldMatch]:
        for found in self.pattern.finditer(text):
            result = self.build(found)
            if result is not None:
                return result
        return None


@dataclass(frozen=True)
class VendorProfile:
    vendor: Vendor
    chinese: KeywordSet
    english: KeywordSet
    normalizer: Callable[[str], str]
    custom_patterns: Tuple[CustomPattern, ...] = ()
    format_notes: Tuple[str, ...] = ()
    display_name: str = ""

    def keywords(self, language: Language) -> KeywordSet:
        return self.chinese if language is Language.ZH else self.english


@dataclass(frozen=True)
class FinishOutcome:
    output: str
    log: str = ""


@dataclass(frozen=True)
class OperationOutcome:
    operation: str
    argument: str
    thought: str = ""
    log: str = field(default="", repr=False)


ParseOutcome = Union[FinishOutcome, OperationOutcome]
