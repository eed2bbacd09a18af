from typing import List, Optional, Tuple

from chinese_react_parser.models import CustomKeywords, Language, Role, VendorProfile


class KeywordRegistry:
    """Ordered synonym lookup for one vendor profile."""

    def __init__(self, profile: VendorProfile, custom_keywords: Optional[CustomKeywords] = None):
        self.profile = profile
        self.custom_keywords = custom_keywords

    def keywords(self, role: Role, language: Language) -> Tuple[str, ...]:
        return self.profile.keywords(language).for_role(role)

    def final_answer_keywords(self) -> List[str]:
        """Built-in final-answer synonyms (ZH, EN) followed by custom ones (ZH, EN)."""
        merged: List[str] = []
        merged.extend(self.keywords(Role.FINAL_ANSWER, Language.ZH))
        merged.extend(self.keywords(Role.FINAL_ANSWER, Language.EN))
        merged.extend(self._custom_final_answers())
        return _dedupe(merged)

    def _custom_final_answers(self) -> List[str]:
        if self.custom_keywords is None:
            return []
        extra: List[str] = []
        for partial in (self.custom_keywords.chinese, self.custom_keywords.english):
            if partial is not None and partial.final_answer:
                extra.extend(partial.final_answer)
        return extra


def _dedupe(keywords: List[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for keyword in keywords:
        key = keyword.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(keyword)
    return out
