"""
linecalc - Error Definitions
Stable error codes shared by every phase, plus the exception hierarchy.

Two kinds of failure exist:
  - ParseError  raised while lexing or parsing a line
  - EvalError   raised while evaluating a parsed statement
Both carry a symbolic code so callers can match on it without parsing text.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    # (message template, hint)
    LEXER_UNEXPECTED_CHARACTER = (
        "LEXER_001", "Unexpected character: {char}",
        "Remove the character; only identifiers, numbers, operators and parentheses are allowed",
    )
    LEXER_INVALID_NUMBER = (
        "LEXER_002", "Invalid number literal",
        "A '.' in a number must be followed by at least one digit (e.g. '1.5')",
    )
    LEXER_NUMBER_OVERFLOW = (
        "LEXER_003", "{kind} overflow literal: {literal}",
        "Use a smaller number",
    )

    PARSE_EXPECTED_IDENTIFIER = (
        "PARSE_001", "Expected identifier at statement start",
        "Start with a variable name (e.g., 'x', 'result')",
    )
    PARSE_EXPECTED_ASSIGN_OP = (
        "PARSE_002", "Expected assignment operator",
        "Use an assignment operator: =, +=, -=, *=, /=, %=, or ^=",
    )
    PARSE_UNEXPECTED_TOKEN = (
        "PARSE_003", "Unexpected token after expression",
        "Check for extra tokens after your expression",
    )
    PARSE_INVALID_MULTIPLICATIVE_OPERATOR = (
        "PARSE_004", "Invalid multiplicative operator",
        "Use valid operators: +, -, *, /, %, or ^",
    )
    PARSE_INVALID_NUMBER = (
        "PARSE_005", "Invalid number literal",
        "Check your number format - ensure it's a valid integer or decimal",
    )
    PARSE_EXPECTED_RPAREN = (
        "PARSE_006", "Expected ')' after expression",
        "Make sure every opening '(' has a matching closing ')'",
    )
    PARSE_EXPECTED_EXPRESSION = (
        "PARSE_007", "Expected expression",
        "Expected a value, variable, or expression (like '5', 'x', or '(2+3)')",
    )

    EVAL_UNSUPPORTED_STATEMENT = (
        "EVAL_001", "Unsupported statement type",
        "Check your statement structure - expected an assignment statement",
    )
    EVAL_UNSUPPORTED_EXPRESSION = (
        "EVAL_002", "Unsupported expression type",
        "Ensure the expression type is supported by the evaluator",
    )
    EVAL_NOT_ASSIGNABLE = (
        "EVAL_003", "Operand is not assignable for ++/--",
        "Only a bare variable can be incremented or decremented (e.g. 'i++')",
    )
    EVAL_DIVISION_BY_ZERO = (
        "EVAL_004", "Division by zero",
        "Cannot divide by zero - use a non-zero divisor",
    )
    EVAL_UNEXPECTED_ASSIGN_OP = (
        "EVAL_005", "Unexpected assignment operator: {op}",
        "Use an assignment operator: =, +=, -=, *=, /=, %=, or ^=",
    )
    EVAL_UNDEFINED_POWER = (
        "EVAL_006", "Power result is not a finite real number: {base} ^ {exponent}",
        "Avoid fractional powers of negative numbers and results beyond floating-point range",
    )

    ENV_UNDEFINED_VARIABLE = (
        "ENV_001", "Undefined variable: {name}. Assign it before use.",
        "Make sure the variable is defined before using it",
    )

    def __init__(self, code: str, template: str, hint: str):
        self.code = code
        self.template = template
        self.hint = hint

    def format(self, **params) -> str:
        return f"{self.code}: {self.template.format(**params)}"


class CalcError(Exception):
    """Base class for every error raised while processing a line."""

    kind = "CalcError"

    def __init__(
        self,
        code: ErrorCode,
        position: Optional[int] = None,
        context: Optional[str] = None,
        **params,
    ):
        self.code = code
        self.position = position
        self.context = context
        self.params = params
        self.detail = code.format(**params)
        super().__init__(self._render())

    def _render(self) -> str:
        text = f"[{self.kind}] {self.detail}"
        if self.position is not None:
            text += f" at position {self.position}"
        if self.context:
            text += f" ({self.context})"
        return text

    @property
    def hint(self) -> str:
        return self.code.hint

    def with_line_context(self, line_number: int, line: str) -> "CalcError":
        """Return a copy of this error decorated with the failing source line."""
        return type(self)(
            self.code,
            position=self.position,
            context=f"line {line_number}: {line}",
            **self.params,
        )


class ParseError(CalcError):
    kind = "ParseError"


class EvalError(CalcError):
    kind = "EvalError"
