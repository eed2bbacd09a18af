import pytest

from chinese_react_parser.prompts import get_prompt_path, load_prompt


def test_bundled_templates_exist():
    for prompt_id in ("format_instructions", "universal_format_instructions", "parse_error"):
        assert get_prompt_path(prompt_id).exists()


def test_missing_template_raises():
    with pytest.raises(FileNotFoundError):
        load_prompt("does_not_exist")


def test_missing_required_variable_raises():
    with pytest.raises(ValueError):
        load_prompt("parse_error", vendor="qwen", text="x")


def test_frontmatter_is_not_rendered():
    zh = {"thought": "思考", "action": "动作", "action_input": "动作输入", "final_answer": "最终答案"}
    rendered = load_prompt("parse_error", vendor="qwen", zh=zh, text="原文")
    assert not rendered.startswith("---")
    assert "requires" not in rendered
    assert rendered.endswith("实际输出: 原文")
