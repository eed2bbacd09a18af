"""
Built-in synonym tables for every supported vendor.

Each table maps a role to an ordered list of synonyms. Earlier entries are
preferred and the first entry is the one shown in format instructions.
"""

QWEN_KEYWORDS = {
    "zh": {
        "thought": ["思考", "推理", "分析", "想法"],
        "action": ["动作", "行动", "操作"],
        "action_input": ["动作输入", "操作输入", "输入", "参数"],
        "final_answer": ["最终答案", "答案", "结果", "回答"],
        "observation": ["观察", "结果", "返回"],
    },
    "en": {
        "thought": ["thought", "thinking", "think"],
        "action": ["action", "act"],
        "action_input": ["action input", "action_input", "input"],
        "final_answer": ["final answer", "answer", "result"],
        "observation": ["observation", "obs"],
    },
}

CHATGLM_KEYWORDS = {
    "zh": {
        "thought": ["思考", "分析", "理解", "考虑"],
        "action": ["动作", "行动", "工具", "操作"],
        "action_input": ["动作输入", "工具输入", "输入", "参数"],
        "final_answer": ["最终答案", "答案", "结论", "回答"],
        "observation": ["观察", "观察结果", "结果"],
    },
    "en": {
        "thought": ["thought", "thinking", "analysis"],
        "action": ["action", "tool", "operation"],
        "action_input": ["action input", "tool input", "input"],
        "final_answer": ["final answer", "answer", "conclusion"],
        "observation": ["observation", "result"],
    },
}

BAICHUAN_KEYWORDS = {
    "zh": {
        "thought": ["思考", "分析", "推理"],
        "action": ["工具", "动作", "操作", "使用"],
        "action_input": ["工具输入", "参数", "输入", "内容"],
        "final_answer": ["最终答案", "答案", "结果"],
        "observation": ["观察", "工具返回", "返回结果"],
    },
    "en": {
        "thought": ["thought", "think", "reasoning"],
        "action": ["tool", "action", "use"],
        "action_input": ["tool input", "parameter", "input"],
        "final_answer": ["final answer", "answer", "result"],
        "observation": ["observation", "tool result"],
    },
}

ERNIE_KEYWORDS = {
    "zh": {
        "thought": ["思考", "分析", "判断", "考虑"],
        "action": ["调用工具", "使用工具", "执行", "操作"],
        "action_input": ["输入", "参数", "内容", "查询"],
        "final_answer": ["最终答案", "答案", "结论", "回复"],
        "observation": ["观察", "工具结果", "返回", "输出"],
    },
    "en": {
        "thought": ["thought", "analysis", "thinking"],
        "action": ["call tool", "use tool", "action"],
        "action_input": ["input", "parameter", "query"],
        "final_answer": ["final answer", "answer", "conclusion"],
        "observation": ["observation", "tool result", "output"],
    },
}

# Labels that end a relaxed final-answer capture when they open a new line.
BOUNDARY_LABELS = ["思考", "动作", "最终答案", "Thought", "Action", "Final Answer"]
