"""
LangChain adapter.

Wraps any parser from this package as a ``langchain_core`` output parser so it
can sit at the end of a ReAct agent chain. Outcomes become ``AgentAction`` /
``AgentFinish`` and parse failures become ``OutputParserException``.
"""

from typing import Any, Union

from langchain_core.agents import AgentAction, AgentFinish
from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import BaseOutputParser

from chinese_react_parser.errors import UnparseableOutputError
from chinese_react_parser.models import FinishOutcome, ParseOutcome


def to_agent_step(outcome: ParseOutcome) -> Union[AgentAction, AgentFinish]:
    if isinstance(outcome, FinishOutcome):
        return AgentFinish(return_values={"output": outcome.output}, log=outcome.log)
    return AgentAction(tool=outcome.operation, tool_input=outcome.argument, log=outcome.log)


class LangChainReActOutputParser(BaseOutputParser[Union[AgentAction, AgentFinish]]):
    parser: Any

    def parse(self, text: str) -> Union[AgentAction, AgentFinish]:
        try:
            outcome = self.parser.parse(text)
        except UnparseableOutputError as exc:
            raise OutputParserException(exc.message, llm_output=exc.llm_output) from exc
        return to_agent_step(outcome)

    def get_format_instructions(self) -> str:
        return self.parser.get_format_instructions()

    @property
    def _type(self) -> str:
        return self.parser.get_type()
