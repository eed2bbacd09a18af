"""
Natural-language tool-call recognizers, one tuple per vendor.

These cover phrasings that do not follow the ``label: value`` layout, such as
"我将使用搜索工具来查询天气". Each rule produces a complete ``FieldMatch``
from a single regex match and tags it with a fixed thought placeholder.
"""

import re
from typing import Callable, Optional

from chinese_react_parser.constants import RESERVED_TOOL_NAMES
from chinese_react_parser.models import CustomPattern, FieldMatch


def _pair(thought: str, default_input: str = "") -> Callable[[re.Match], Optional[FieldMatch]]:
    """Build a match handler reading the tool from group 1 and its input from group 2."""

    def build(match: re.Match) -> Optional[FieldMatch]:
        action = match.group(1).strip()
        action_input = match.group(2).strip() or default_input
        if not action or not action_input:
            return None
        return FieldMatch(action=action, action_input=action_input, thought=thought)

    return build


def _comma_separated_call(match: re.Match) -> Optional[FieldMatch]:
    parts = re.split(r"[，,]", match.group(1))
    if len(parts) < 2:
        return None
    action = parts[0].strip()
    action_input = ",".join(parts[1:]).strip()
    if not action or not action_input:
        return None
    return FieldMatch(action=action, action_input=action_input, thought="执行工具")


def _labelled_pair(match: re.Match) -> Optional[FieldMatch]:
    action = match.group(2).strip()
    action_input = match.group(3).strip()
    if not action or not action_input:
        return None
    return FieldMatch(action=action, action_input=action_input, thought="执行操作")


def _bare_tool_name(match: re.Match) -> Optional[FieldMatch]:
    name = match.group(1).strip()
    if name.lower() in RESERVED_TOOL_NAMES:
        return None
    return _pair("直接调用工具")(match)


QWEN_PATTERNS = (
    CustomPattern(
        name="will_use_tool",
        pattern=re.compile(r"我将(?:使用|调用|执行)([^，。\n]+?)(?:工具|功能)[，。]?(?:来|去)?([^。\n]*)"),
        build=_pair("需要使用工具", default_input="default"),
    ),
    CustomPattern(
        name="execute_line",
        pattern=re.compile(r"(?:^|\n)\s*执行\s*[:：]\s*([^\n]+)", re.IGNORECASE | re.MULTILINE),
        build=_comma_separated_call,
    ),
)

CHATGLM_PATTERNS = (
    CustomPattern(
        name="use_tool_query",
        pattern=re.compile(r"使用工具[：:]\s*([^，\n]+?)\s*查询[：:]\s*([^。\n]*)"),
        build=_pair("需要使用工具查询"),
    ),
    CustomPattern(
        name="call_with_parameter",
        pattern=re.compile(r"调用([^，\n]+?)[，]?\s*参数为\s*([^。\n]*)"),
        build=_pair("调用工具"),
    ),
    CustomPattern(
        name="label_then_input_line",
        pattern=re.compile(
            r"(?:^|\n)\s*(动作|工具|操作)\s*:\s*([^\n]+)\s*\n\s*(?:输入|参数)\s*:\s*([^\n]+)",
            re.IGNORECASE | re.MULTILINE,
        ),
        build=_labelled_pair,
    ),
)

BAICHUAN_PATTERNS = (
    CustomPattern(
        name="use_named_tool",
        pattern=re.compile(r"使用([^工具\n]+)工具[，]?\s*输入\s*([^。\n]*)"),
        build=_pair("使用工具"),
    ),
    CustomPattern(
        name="call_tool_to",
        pattern=re.compile(r"调用工具([^进行\n]+)进行([^。\n]*)"),
        build=_pair("调用工具"),
    ),
    CustomPattern(
        name="bare_tool_name",
        pattern=re.compile(r"(?:^|\n)\s*([a-zA-Z_][a-zA-Z0-9_]*)\s*[:：]\s*([^\n]+)", re.IGNORECASE | re.MULTILINE),
        build=_bare_tool_name,
    ),
)

ERNIE_PATTERNS = (
    CustomPattern(
        name="need_to_call",
        pattern=re.compile(r"我需要调用([^来\n]+)来([^。\n]*)"),
        build=_pair("需要调用工具"),
    ),
    CustomPattern(
        name="call_now_with_parameter",
        pattern=re.compile(r"现在调用([^，\n]+?)[，]?\s*参数是\s*([^。\n]*)"),
        build=_pair("调用工具"),
    ),
    CustomPattern(
        name="mixed_language_call",
        pattern=re.compile(r"(?:调用|call)\s*([a-zA-Z_\u4e00-\u9fff]+)\s*[:：]\s*([^\n]+)", re.IGNORECASE),
        build=_pair("执行操作"),
    ),
)


def match_custom_patterns(patterns, text: str) -> Optional[FieldMatch]:
    """Return the first complete tool call produced by ``patterns`` in order."""
    for rule in patterns:
        found = rule.match(text)
        if found:
            return found
    return None
