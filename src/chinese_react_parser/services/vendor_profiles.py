"""
Vendor profiles: keyword tables, normalizer and custom recognizers per vendor.

Profiles are immutable values consumed by the shared extraction engine, so a
new vendor is added by declaring one more profile here and registering it in
``VENDOR_PROFILES``.
"""

from typing import Dict

from chinese_react_parser.constants import (
    BAICHUAN_KEYWORDS,
    CHATGLM_KEYWORDS,
    ERNIE_KEYWORDS,
    QWEN_KEYWORDS,
)
from chinese_react_parser.models import KeywordSet, Vendor, VendorProfile
from chinese_react_parser.services.custom_patterns import (
    BAICHUAN_PATTERNS,
    CHATGLM_PATTERNS,
    ERNIE_PATTERNS,
    QWEN_PATTERNS,
)
from chinese_react_parser.services.normalizer import (
    normalize_ascii_colons,
    normalize_text,
    normalize_without_fillers,
)


def _profile(vendor: Vendor, table: dict, **kwargs) -> VendorProfile:
    return VendorProfile(
        vendor=vendor,
        chinese=KeywordSet.from_mapping(table["zh"]),
        english=KeywordSet.from_mapping(table["en"]),
        **kwargs,
    )


QWEN_PROFILE = _profile(
    Vendor.QWEN,
    QWEN_KEYWORDS,
    normalizer=normalize_text,
    custom_patterns=QWEN_PATTERNS,
    display_name="通义千问",
    format_notes=(
        "也支持：我将使用[工具名]来[参数描述]",
        "也支持：执行: [工具名], [参数]",
        "支持观察关键字：观察:, 结果:, 返回:",
    ),
)

CHATGLM_PROFILE = _profile(
    Vendor.CHATGLM,
    CHATGLM_KEYWORDS,
    normalizer=normalize_ascii_colons,
    custom_patterns=CHATGLM_PATTERNS,
    display_name="ChatGLM",
    format_notes=(
        "使用工具：[工具名] 查询：[参数]",
        "调用[工具名]，参数为[参数]",
        "支持中文冒号：和英文冒号:混用",
        "推荐使用中文冒号：格式",
    ),
)

BAICHUAN_PROFILE = _profile(
    Vendor.BAICHUAN,
    BAICHUAN_KEYWORDS,
    normalizer=normalize_text,
    custom_patterns=BAICHUAN_PATTERNS,
    display_name="百川",
    format_notes=(
        "使用[工具名]工具，输入[参数]",
        "调用工具[工具名]进行[操作]",
        "推荐使用\"工具\"而非\"动作\"关键字",
        "支持直接工具名调用：tool_name: parameter",
    ),
)

ERNIE_PROFILE = _profile(
    Vendor.ERNIE,
    ERNIE_KEYWORDS,
    normalizer=normalize_without_fillers,
    custom_patterns=ERNIE_PATTERNS,
    display_name="文心一言",
    format_notes=(
        "我需要调用[工具名]来[操作描述]",
        "现在调用[工具名]，参数是[参数]",
        "推荐使用\"调用工具\"关键字",
        "支持中英文混合：call [tool]: [parameter]",
        "会自动过滤常见的冗余表达",
    ),
)

VENDOR_PROFILES: Dict[Vendor, VendorProfile] = {
    Vendor.QWEN: QWEN_PROFILE,
    Vendor.CHATGLM: CHATGLM_PROFILE,
    Vendor.BAICHUAN: BAICHUAN_PROFILE,
    Vendor.ERNIE: ERNIE_PROFILE,
}

# Order in which the universal parser tries each vendor.
VENDOR_TRIAL_ORDER = (Vendor.QWEN, Vendor.CHATGLM, Vendor.BAICHUAN, Vendor.ERNIE)


def get_profile(vendor: Vendor) -> VendorProfile:
    return VENDOR_PROFILES[Vendor(vendor)]
