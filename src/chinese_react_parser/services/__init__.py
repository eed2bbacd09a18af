from chinese_react_parser.services.factory import (
    SUPPORTED_MODELS,
    create_auto_parser,
    create_baichuan_parser,
    create_chatglm_parser,
    create_ernie_parser,
    create_parser,
    create_qwen_parser,
    get_supported_models,
    is_supported,
)
from chinese_react_parser.services.field_extractor import FieldExtractor
from chinese_react_parser.services.keyword_registry import KeywordRegistry
from chinese_react_parser.services.normalizer import (
    normalize_ascii_colons,
    normalize_text,
    normalize_without_fillers,
)
from chinese_react_parser.services.parser import ReActOutputParser
from chinese_react_parser.services.universal import UniversalReActParser
from chinese_react_parser.services.vendor_profiles import (
    VENDOR_PROFILES,
    VENDOR_TRIAL_ORDER,
    get_profile,
)

__all__ = [
    "SUPPORTED_MODELS",
    "create_auto_parser",
    "create_baichuan_parser",
    "create_chatglm_parser",
    "create_ernie_parser",
    "create_parser",
    "create_qwen_parser",
    "get_supported_models",
    "is_supported",
    "FieldExtractor",
    "KeywordRegistry",
    "normalize_ascii_colons",
    "normalize_text",
    "normalize_without_fillers",
    "ReActOutputParser",
    "UniversalReActParser",
    "VENDOR_PROFILES",
    "VENDOR_TRIAL_ORDER",
    "get_profile",
]
