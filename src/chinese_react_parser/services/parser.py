"""
Single-vendor ReAct output parser.

Resolution order for ``parse``:

1. normalize the text with the vendor's normalizer
2. final answer (strict, multiline, relaxed tiers)
3. labelled tool call, Chinese labels first, then English
4. vendor-specific natural-language phrasings (relaxed mode only)

Anything else raises ``UnparseableOutputError`` carrying the normalized text.
"""

import logging
from typing import Dict, Optional

from chinese_react_parser.errors import UnparseableOutputError
from chinese_react_parser.models import (
    ExtractionOptions,
    FieldMatch,
    FinishOutcome,
    KeywordSet,
    OperationOutcome,
    ParseOutcome,
    Role,
    Vendor,
    VendorProfile,
)
from chinese_react_parser.prompts import load_prompt
from chinese_react_parser.services.custom_patterns import match_custom_patterns
from chinese_react_parser.services.field_extractor import FieldExtractor
from chinese_react_parser.services.keyword_registry import KeywordRegistry

logger = logging.getLogger(__name__)


class ReActOutputParser:
    def __init__(self, profile: VendorProfile, options: Optional[ExtractionOptions] = None):
        self.profile = profile
        self.options = options or ExtractionOptions()
        self.registry = KeywordRegistry(profile, self.options.custom_keywords)
        self.extractor = FieldExtractor(
            self.registry,
            relaxed_mode=self.options.relaxed_mode,
            debug=self.options.debug,
        )

    @property
    def vendor(self) -> Vendor:
        return self.profile.vendor

    def parse(self, text: str) -> ParseOutcome:
        clean_text = self.profile.normalizer(text)
        if self.options.debug:
            logger.debug("[%s] parsing input: %s", self.vendor.value, clean_text)

        final_answer = self.extractor.extract_final_answer(clean_text)
        if final_answer:
            if self.options.debug:
                logger.debug("[%s] found final answer: %s", self.vendor.value, final_answer)
            return FinishOutcome(output=final_answer.strip(), log=clean_text)

        match = self.extractor.extract_action(clean_text)
        if match is None and self.options.relaxed_mode:
            match = match_custom_patterns(self.profile.custom_patterns, clean_text)
        if match is not None:
            if self.options.debug:
                logger.debug("[%s] found tool call: %s", self.vendor.value, match)
            return _operation(match, clean_text)

        raise UnparseableOutputError(
            self._error_message(clean_text),
            llm_output=clean_text,
            vendor=self.vendor.value,
        )

    async def aparse(self, text: str) -> ParseOutcome:
        return self.parse(text)

    def get_format_instructions(self) -> str:
        return load_prompt(
            "format_instructions",
            zh=primary_keywords(self.profile.chinese),
            en=primary_keywords(self.profile.english),
            vendor_name=self.profile.display_name or self.vendor.value,
            notes=list(self.profile.format_notes),
        )

    def get_type(self) -> str:
        return f"{self.vendor.value}_react_output_parser"

    def _error_message(self, text: str) -> str:
        return load_prompt(
            "parse_error",
            vendor=self.vendor.value,
            zh=primary_keywords(self.profile.chinese),
            text=text,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vendor={self.vendor.value!r}, options={self.options!r})"


def primary_keywords(keywords: KeywordSet) -> Dict[str, str]:
    return {role.value: keywords.primary(role) for role in Role if keywords.for_role(role)}


def _operation(match: FieldMatch, log: str) -> OperationOutcome:
    return OperationOutcome(
        operation=match.action.strip(),
        argument=match.action_input.strip(),
        thought=match.thought,
        log=log,
    )
