import logging

import pytest

from chinese_react_parser.errors import UnparseableOutputError
from chinese_react_parser.models import FinishOutcome, OperationOutcome, Vendor
from chinese_react_parser.services.parser import ReActOutputParser
from chinese_react_parser.services.universal import UniversalReActParser
from chinese_react_parser.services.vendor_profiles import VENDOR_TRIAL_ORDER, get_profile


def test_default_trial_order():
    parser = UniversalReActParser()
    assert [p.vendor for p in parser.parsers] == [Vendor.QWEN, Vendor.CHATGLM, Vendor.BAICHUAN, Vendor.ERNIE]
    assert VENDOR_TRIAL_ORDER == (Vendor.QWEN, Vendor.CHATGLM, Vendor.BAICHUAN, Vendor.ERNIE)


def test_only_third_vendor_recognizes_input():
    text = "使用: search\n内容: 天气"
    for vendor in (Vendor.QWEN, Vendor.CHATGLM):
        with pytest.raises(UnparseableOutputError):
            ReActOutputParser(get_profile(vendor)).parse(text)

    outcome = UniversalReActParser().parse(text)
    assert outcome == ReActOutputParser(get_profile(Vendor.BAICHUAN)).parse(text)
    assert (outcome.operation, outcome.argument) == ("search", "天气")


class _StubParser:
    def __init__(self, name, outcome=None):
        self.name = name
        self.outcome = outcome
        self.calls = 0

    def parse(self, text):
        self.calls += 1
        if self.outcome is None:
            raise UnparseableOutputError(f"{self.name} failed", llm_output=text, vendor=self.name)
        return self.outcome

    def get_type(self):
        return f"{self.name}_react_output_parser"


def test_first_success_is_returned_and_later_parsers_skipped():
    winner = OperationOutcome(operation="search", argument="天气")
    stubs = [_StubParser("a"), _StubParser("b"), _StubParser("c", winner), _StubParser("d", FinishOutcome("x"))]
    parser = UniversalReActParser(parsers=stubs)

    assert parser.parse("anything") is winner
    assert [stub.calls for stub in stubs] == [1, 1, 1, 0]


def test_all_failures_are_aggregated_in_trial_order():
    stubs = [_StubParser(name) for name in ("a", "b", "c", "d")]
    parser = UniversalReActParser(parsers=stubs)

    with pytest.raises(UnparseableOutputError) as excinfo:
        parser.parse("anything")

    error = excinfo.value
    assert error.vendor is None
    assert [child.vendor for child in error.errors] == ["a", "b", "c", "d"]
    assert error.message.index("a failed") < error.message.index("b failed") < error.message.index("d failed")


def test_unlabelled_text_aggregates_all_four_vendor_messages():
    with pytest.raises(UnparseableOutputError) as excinfo:
        UniversalReActParser().parse("no labels here")

    message = excinfo.value.message
    assert message.startswith("所有解析器都无法解析此输出")
    for vendor in ("qwen", "chatglm", "baichuan", "ernie"):
        assert f"无法解析 {vendor} 模型输出" in message
    assert len(excinfo.value.errors) == 4


def test_get_type():
    assert UniversalReActParser().get_type() == "universal_chinese_react_parser"


def test_format_instructions_include_block_per_vendor():
    instructions = UniversalReActParser().get_format_instructions()
    for name in ("通义千问", "ChatGLM", "百川", "文心一言"):
        assert f"**{name}格式：**" in instructions
    assert "调用工具: 工具名称" in instructions
    assert "**最终答案格式（任何模型）：**" in instructions
    assert "最终答案: 你的答案" in instructions


def test_debug_logs_each_failure(debug_options, caplog):
    parser = UniversalReActParser(debug_options)
    with caplog.at_level(logging.DEBUG, logger="chinese_react_parser"):
        parser.parse("使用: search\n内容: 天气")
    messages = [record.getMessage() for record in caplog.records]
    assert any("qwen_react_output_parser failed" in m for m in messages)
    assert any("parsed with baichuan_react_output_parser" in m for m in messages)
