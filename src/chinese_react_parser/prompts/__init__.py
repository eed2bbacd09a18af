"""Prompt loading and rendering utilities."""

from chinese_react_parser.prompts.loader import get_prompt_path, load_prompt, reload_prompts

__all__ = ["load_prompt", "get_prompt_path", "reload_prompts"]
