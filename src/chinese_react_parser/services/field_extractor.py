"""
Tiered field extraction over normalized model output.

The final answer is searched with three increasingly permissive tiers
(strict, multiline, relaxed) per synonym. Tool calls are searched one
language at a time with a single line-anchored pattern per role, plus a
fallback that reads the argument from the line following a bare action.
"""

import logging
import re
from functools import lru_cache
from typing import Optional

from chinese_react_parser.constants import BOUNDARY_LABELS
from chinese_react_parser.models import FieldMatch, Language, Role
from chinese_react_parser.services.keyword_registry import KeywordRegistry

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.MULTILINE
_BOUNDARY = "|".join(re.escape(label) for label in BOUNDARY_LABELS)


@lru_cache(maxsize=256)
def _strict_pattern(keyword: str) -> re.Pattern:
    return re.compile(rf"^\s*{re.escape(keyword)}\s*[:：]\s*(.*)$", _FLAGS)


@lru_cache(maxsize=256)
def _line_pattern(keyword: str) -> re.Pattern:
    return re.compile(rf"(?:^|\n)\s*{re.escape(keyword)}\s*[:：]\s*(.*)(?:\n|$)", _FLAGS)


@lru_cache(maxsize=256)
def _relaxed_pattern(keyword: str) -> re.Pattern:
    return re.compile(
        rf"{re.escape(keyword)}\s*[:：]\s*([\s\S]*?)(?=\n\s*(?:{_BOUNDARY})|\Z)",
        re.IGNORECASE,
    )


@lru_cache(maxsize=256)
def _field_pattern(keyword: str) -> re.Pattern:
    return re.compile(rf"(?:^|\n)\s*{re.escape(keyword)}\s*[:：]\s*([^\n]+)", _FLAGS)


def _next_line_pattern(keyword: str, action: str) -> re.Pattern:
    return re.compile(
        rf"(?:^|\n)\s*{re.escape(keyword)}\s*[:：]\s*{re.escape(action)}\s*\n([^\n]+)",
        _FLAGS,
    )


class FieldExtractor:
    def __init__(self, registry: KeywordRegistry, relaxed_mode: bool = True, debug: bool = False):
        self.registry = registry
        self.relaxed_mode = relaxed_mode
        self.debug = debug

    def extract_final_answer(self, text: str) -> Optional[str]:
        """Return the first non-empty final answer across all synonyms and tiers."""
        for keyword in self.registry.final_answer_keywords():
            answer = self._final_answer_for(keyword, text)
            if answer:
                return answer
        return None

    def _final_answer_for(self, keyword: str, text: str) -> Optional[str]:
        strict = _strict_pattern(keyword).search(text)
        if strict and strict.group(1):
            self._trace("strict", keyword)
            return strict.group(1)

        for match in _line_pattern(keyword).finditer(text):
            if match.group(1):
                self._trace("multiline", keyword)
                return match.group(1)

        if self.relaxed_mode:
            relaxed = _relaxed_pattern(keyword).search(text)
            if relaxed and relaxed.group(1).strip():
                self._trace("relaxed", keyword)
                return relaxed.group(1).strip()
        return None

    def extract_action(self, text: str) -> Optional[FieldMatch]:
        """Try Chinese labels first, then English. Languages are never mixed."""
        for language in (Language.ZH, Language.EN):
            found = self.extract_action_by_language(text, language)
            if found:
                return found
        return None

    def extract_action_by_language(self, text: str, language: Language) -> Optional[FieldMatch]:
        thought = self._first_field(text, Role.THOUGHT, language)
        action = self._first_field(text, Role.ACTION, language)
        action_input = self._first_field(text, Role.ACTION_INPUT, language)

        if action and not action_input and self.relaxed_mode:
            action_input = self._action_input_fallback(text, action, language)

        if not (action and action_input):
            return None
        if self.debug:
            logger.debug("Matched tool call in %s labels: %s(%s)", language.value, action, action_input)
        return FieldMatch(action=action, action_input=action_input, thought=thought)

    def _first_field(self, text: str, role: Role, language: Language) -> str:
        for keyword in self.registry.keywords(role, language):
            match = _field_pattern(keyword).search(text)
            if match:
                return match.group(1).strip()
        return ""

    def _action_input_fallback(self, text: str, action: str, language: Language) -> str:
        """Use the line right after a bare ``action: name`` line as the argument."""
        for keyword in self.registry.keywords(Role.ACTION, language):
            match = _next_line_pattern(keyword, action).search(text)
            if match:
                return match.group(1).strip()
        return ""

    def _trace(self, tier: str, keyword: str) -> None:
        if self.debug:
            logger.debug("Final answer matched by %s tier on keyword %r", tier, keyword)
