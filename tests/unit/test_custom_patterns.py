import pytest

from chinese_react_parser.models import FieldMatch
from chinese_react_parser.services.custom_patterns import (
    BAICHUAN_PATTERNS,
    CHATGLM_PATTERNS,
    ERNIE_PATTERNS,
    QWEN_PATTERNS,
    match_custom_patterns,
)


@pytest.mark.parametrize(
    "patterns,text,expected",
    [
        (
            QWEN_PATTERNS,
            "我将使用天气工具来查询北京",
            FieldMatch(action="天气", action_input="查询北京", thought="需要使用工具"),
        ),
        (
            QWEN_PATTERNS,
            "执行: search, 北京天气",
            FieldMatch(action="search", action_input="北京天气", thought="执行工具"),
        ),
        (
            CHATGLM_PATTERNS,
            "使用工具:search 查询:北京天气",
            FieldMatch(action="search", action_input="北京天气", thought="需要使用工具查询"),
        ),
        (
            CHATGLM_PATTERNS,
            "调用weather，参数为北京",
            FieldMatch(action="weather", action_input="北京", thought="调用工具"),
        ),
        (
            BAICHUAN_PATTERNS,
            "使用搜索工具，输入北京天气",
            FieldMatch(action="搜索", action_input="北京天气", thought="使用工具"),
        ),
        (
            BAICHUAN_PATTERNS,
            "调用工具calculator进行加法运算",
            FieldMatch(action="calculator", action_input="加法运算", thought="调用工具"),
        ),
        (
            BAICHUAN_PATTERNS,
            "weather_query: 上海",
            FieldMatch(action="weather_query", action_input="上海", thought="直接调用工具"),
        ),
        (
            ERNIE_PATTERNS,
            "我需要调用search来查询天气",
            FieldMatch(action="search", action_input="查询天气", thought="需要调用工具"),
        ),
        (
            ERNIE_PATTERNS,
            "现在调用translate，参数是hello",
            FieldMatch(action="translate", action_input="hello", thought="调用工具"),
        ),
        (
            ERNIE_PATTERNS,
            "call search: 北京天气",
            FieldMatch(action="search", action_input="北京天气", thought="执行操作"),
        ),
    ],
)
def test_vendor_phrasings_yield_tool_calls(patterns, text, expected):
    assert match_custom_patterns(patterns, text) == expected


def test_qwen_will_use_defaults_missing_argument():
    found = match_custom_patterns(QWEN_PATTERNS, "我将使用搜索工具")
    assert found.action == "搜索"
    assert found.action_input == "default"


def test_qwen_execute_requires_two_parts():
    assert match_custom_patterns(QWEN_PATTERNS, "执行: search") is None


def test_baichuan_bare_name_skips_reserved_labels():
    found = match_custom_patterns(BAICHUAN_PATTERNS, "Thought: checking\nsearch: 天气")
    assert found.action == "search"
    assert found.action_input == "天气"


def test_baichuan_bare_name_rejects_only_reserved_labels():
    assert match_custom_patterns(BAICHUAN_PATTERNS, "Thought: checking\nAnswer: nothing") is None


def test_chatglm_label_then_input_line():
    found = match_custom_patterns(CHATGLM_PATTERNS, "工具: search\n参数: 北京")
    assert (found.action, found.action_input) == ("search", "北京")


def test_unrelated_text_matches_nothing():
    for patterns in (QWEN_PATTERNS, CHATGLM_PATTERNS, BAICHUAN_PATTERNS, ERNIE_PATTERNS):
        assert match_custom_patterns(patterns, "no labels here") is None
