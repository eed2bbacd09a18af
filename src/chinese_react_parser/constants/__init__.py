from chinese_react_parser.constants.keywords import (
    QWEN_KEYWORDS,
    CHATGLM_KEYWORDS,
    BAICHUAN_KEYWORDS,
    ERNIE_KEYWORDS,
    BOUNDARY_LABELS,
)
from chinese_react_parser.constants.text_patterns import (
    LINE_BREAK_PATTERN,
    HORIZONTAL_SPACE_PATTERN,
    LINE_LEADING_SPACE_PATTERN,
    COLON_PATTERN,
    FULLWIDTH_COLON_PATTERN,
    ERNIE_FILLER_PATTERNS,
    RESERVED_TOOL_NAMES,
)

__all__ = [
    "QWEN_KEYWORDS",
    "CHATGLM_KEYWORDS",
    "BAICHUAN_KEYWORDS",
    "ERNIE_KEYWORDS",
    "BOUNDARY_LABELS",
    "LINE_BREAK_PATTERN",
    "HORIZONTAL_SPACE_PATTERN",
    "LINE_LEADING_SPACE_PATTERN",
    "COLON_PATTERN",
    "FULLWIDTH_COLON_PATTERN",
    "ERNIE_FILLER_PATTERNS",
    "RESERVED_TOOL_NAMES",
]
