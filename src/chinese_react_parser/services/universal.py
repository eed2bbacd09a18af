"""Cascading parser that tries every vendor profile in a fixed order."""

import logging
from typing import List, Optional, Sequence

from chinese_react_parser.errors import UnparseableOutputError
from chinese_react_parser.models import ExtractionOptions, ParseOutcome, Role
from chinese_react_parser.prompts import load_prompt
from chinese_react_parser.services.parser import ReActOutputParser, primary_keywords
from chinese_react_parser.services.vendor_profiles import VENDOR_TRIAL_ORDER, get_profile

logger = logging.getLogger(__name__)


class UniversalReActParser:
    def __init__(
        self,
        options: Optional[ExtractionOptions] = None,
        parsers: Optional[Sequence[ReActOutputParser]] = None,
    ):
        self.options = options or ExtractionOptions()
        if parsers is None:
            parsers = [ReActOutputParser(get_profile(vendor), self.options) for vendor in VENDOR_TRIAL_ORDER]
        self.parsers = tuple(parsers)

    def parse(self, text: str) -> ParseOutcome:
        errors: List[UnparseableOutputError] = []
        for parser in self.parsers:
            try:
                outcome = parser.parse(text)
            except UnparseableOutputError as exc:
                errors.append(exc)
                if self.options.debug:
                    logger.debug("[universal] %s failed: %s", parser.get_type(), exc.message)
                continue
            if self.options.debug:
                logger.debug("[universal] parsed with %s", parser.get_type())
            return outcome

        details = "\n\n".join(error.message for error in errors)
        raise UnparseableOutputError(
            f"所有解析器都无法解析此输出。错误详情:\n{details}",
            llm_output=text,
            errors=errors,
        )

    async def aparse(self, text: str) -> ParseOutcome:
        return self.parse(text)

    def get_format_instructions(self) -> str:
        vendors = []
        for parser in self.parsers:
            keywords = primary_keywords(parser.profile.chinese)
            vendors.append({"name": parser.profile.display_name or parser.vendor.value, **keywords})
        first = self.parsers[0].profile.chinese if self.parsers else get_profile(VENDOR_TRIAL_ORDER[0]).chinese
        final_answer = {
            "thought": first.primary(Role.THOUGHT),
            "final_answer": first.primary(Role.FINAL_ANSWER),
        }
        return load_prompt("universal_format_instructions", vendors=vendors, final_answer=final_answer)

    def get_type(self) -> str:
        return "universal_chinese_react_parser"

    def __repr__(self) -> str:
        order = ", ".join(parser.vendor.value for parser in self.parsers)
        return f"{type(self).__name__}(order=[{order}])"
