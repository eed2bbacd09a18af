"""
Field extraction for ReAct-style output of Chinese large language models.

Typical use::

    from chinese_react_parser import create_parser

    parser = create_parser("qwen")
    outcome = parser.parse("思考: 需要查天气\\n动作: search\\n动作输入: 北京天气")
"""

from chinese_react_parser.errors import (
    InvalidKeywordSetError,
    ReactParserError,
    UnparseableOutputError,
    UnsupportedModelError,
)
from chinese_react_parser.models import (
    CustomKeywords,
    ExtractionOptions,
    FinishOutcome,
    KeywordSet,
    Language,
    ModelType,
    OperationOutcome,
    ParseOutcome,
    PartialKeywords,
    Role,
    Vendor,
    VendorProfile,
)
from chinese_react_parser.services import (
    SUPPORTED_MODELS,
    VENDOR_TRIAL_ORDER,
    ReActOutputParser,
    UniversalReActParser,
    create_auto_parser,
    create_baichuan_parser,
    create_chatglm_parser,
    create_ernie_parser,
    create_parser,
    create_qwen_parser,
    get_supported_models,
    is_supported,
    normalize_text,
)

__version__ = "1.0.0"

__all__ = [
    "InvalidKeywordSetError",
    "ReactParserError",
    "UnparseableOutputError",
    "UnsupportedModelError",
    "CustomKeywords",
    "ExtractionOptions",
    "FinishOutcome",
    "KeywordSet",
    "Language",
    "ModelType",
    "OperationOutcome",
    "ParseOutcome",
    "PartialKeywords",
    "Role",
    "Vendor",
    "VendorProfile",
    "SUPPORTED_MODELS",
    "VENDOR_TRIAL_ORDER",
    "ReActOutputParser",
    "UniversalReActParser",
    "create_auto_parser",
    "create_baichuan_parser",
    "create_chatglm_parser",
    "create_ernie_parser",
    "create_parser",
    "create_qwen_parser",
    "get_supported_models",
    "is_supported",
    "normalize_text",
    "__version__",
]
