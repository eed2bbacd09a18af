"""
Exceptions raised by the ReAct output parsers.

Every error derives from ``ReactParserError`` (itself a ``ValueError``) so a
host pipeline can catch the whole family with a single clause.
"""

from typing import Any, List, Optional


class ReactParserError(ValueError):
    """Base exception for all parser errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class UnparseableOutputError(ReactParserError):
    """Neither a final answer nor a complete tool call could be located."""

    def __init__(
        self,
        message: str,
        llm_output: str,
        vendor: Optional[str] = None,
        errors: Optional[List["UnparseableOutputError"]] = None,
    ) -> None:
        super().__init__(message, {"vendor": vendor, "llm_output": llm_output})
        self.llm_output = llm_output
        self.vendor = vendor
        self.errors = list(errors or [])


class UnsupportedModelError(ReactParserError):
    """The factory was asked for a model type outside the supported set."""

    def __init__(self, model_type: object, supported: List[str]) -> None:
        message = f"Unsupported model type: {model_type!r} (supported: {', '.join(supported)})"
        super().__init__(message, {"model_type": model_type, "supported": supported})
        self.model_type = model_type


class InvalidKeywordSetError(ReactParserError):
    """A keyword table is missing a role or contains an empty synonym."""
