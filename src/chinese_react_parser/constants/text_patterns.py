import re

LINE_BREAK_PATTERN = re.compile(r"\r\n")
HORIZONTAL_SPACE_PATTERN = re.compile(r"[ \t]+")
LINE_LEADING_SPACE_PATTERN = re.compile(r"\n\s+")
COLON_PATTERN = re.compile(r"\s*[:：]\s*")
FULLWIDTH_COLON_PATTERN = re.compile(r"：")

# Polite preambles ERNIE tends to prepend. Each is anchored to a line start
# and bounded to that line.
ERNIE_FILLER_PATTERNS = [
    re.compile(r"^[ \t]*好的[，,]?", re.MULTILINE),
    re.compile(r"^[ \t]*我来帮您[^。\n]*。?", re.MULTILINE),
    re.compile(r"^[ \t]*让我[^。\n]*。?", re.MULTILINE),
    re.compile(r"^[ \t]*根据您的要求[，,]?", re.MULTILINE),
]

# Bare identifiers that must never be read as a tool name.
RESERVED_TOOL_NAMES = {
    "thought", "think", "thinking", "reasoning", "analysis",
    "action", "act", "tool", "use", "operation",
    "input", "parameter", "query",
    "answer", "result", "conclusion",
    "observation", "obs", "output",
}
