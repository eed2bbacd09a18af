import pytest

from chinese_react_parser.services.normalizer import (
    normalize_ascii_colons,
    normalize_text,
    normalize_without_fillers,
)


def test_normalize_text_trims_and_unifies_line_breaks():
    assert normalize_text("  思考: a\r\n动作: b  ") == "思考: a\n动作: b"


def test_normalize_text_collapses_horizontal_whitespace_but_keeps_lines():
    assert normalize_text("a \t  b\nc") == "a b\nc"


def test_normalize_text_strips_line_leading_whitespace():
    assert normalize_text("思考: a\n    动作: b\n\t动作输入: c") == "思考: a\n动作: b\n动作输入: c"


def test_normalize_text_rewrites_every_colon_variant():
    assert normalize_text("思考：a\n动作 :b\n时间 12:30") == "思考: a\n动作: b\n时间 12: 30"


def test_normalize_text_does_not_mutate_input():
    raw = "  最终答案：晴  "
    normalize_text(raw)
    assert raw == "  最终答案：晴  "


@pytest.mark.parametrize(
    "raw",
    [
        "思考：我需要搜索\n动作：search\n动作输入：北京天气",
        "  Thought:  x \r\n\r\n   Action :search\n\tAction Input:  y  ",
        "最终答案:",
        "：开头的冒号",
        "a \n b　c",
        "",
    ],
)
def test_normalize_text_is_idempotent(raw):
    once = normalize_text(raw)
    assert normalize_text(once) == once


def test_normalize_ascii_colons_does_not_add_space():
    assert normalize_ascii_colons("思考：a\n  工具：search") == "思考:a\n工具:search"


def test_normalize_ascii_colons_keeps_line_breaks():
    normalized = normalize_ascii_colons("工具：search\r\n工具输入：北京")
    assert normalized.splitlines() == ["工具:search", "工具输入:北京"]


def test_normalize_without_fillers_removes_polite_preambles():
    raw = "好的，我来帮您查询。\n思考：需要查天气\n调用工具：search\n输入：北京"
    assert normalize_without_fillers(raw) == "思考: 需要查天气\n调用工具: search\n输入: 北京"


def test_normalize_without_fillers_is_bounded_to_one_line():
    raw = "让我想想\n调用工具：search\n输入：北京"
    assert normalize_without_fillers(raw) == "调用工具: search\n输入: 北京"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("最终答案：让我们明天再聊", "最终答案: 让我们明天再聊"),
        ("最终答案：天气好的时候出门", "最终答案: 天气好的时候出门"),
        ("思考：根据您的要求，已完成\n最终答案：好的", "思考: 根据您的要求，已完成\n最终答案: 好的"),
    ],
)
def test_normalize_without_fillers_keeps_label_values(raw, expected):
    assert normalize_without_fillers(raw) == expected


def test_normalize_without_fillers_strips_indented_preamble():
    assert normalize_without_fillers("  好的，\n最终答案：晴") == "最终答案: 晴"
