"""
linecalc - Lexer
Tokenizes a single assignment line into a flat token stream.
"""

import re
import math
from dataclasses import dataclass
from typing import List
from enum import Enum, auto

from .errors import ErrorCode, ParseError


class TokenType(Enum):
    # Literals
    NUMBER        = auto()
    IDENTIFIER    = auto()
    # Arithmetic
    PLUS          = auto()   # +
    MINUS         = auto()   # -
    STAR          = auto()   # *
    SLASH         = auto()   # /
    PERCENT       = auto()   # %
    CARET         = auto()   # ^
    PLUS_PLUS     = auto()   # ++
    MINUS_MINUS   = auto()   # --
    # Assignment
    EQUAL         = auto()   # =
    PLUS_EQUAL    = auto()   # +=
    MINUS_EQUAL   = auto()   # -=
    STAR_EQUAL    = auto()   # *=
    SLASH_EQUAL   = auto()   # /=
    PERCENT_EQUAL = auto()   # %=
    CARET_EQUAL   = auto()   # ^=
    # Brackets
    LPAREN        = auto()   # (
    RPAREN        = auto()   # )
    # Sentinel
    EOF           = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    position: int

    def __repr__(self):
        return f"Token({self.type.name}, {self.lexeme!r}, position={self.position})"


class LexerError(ParseError):
    kind = "LexerError"


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Token specification: ordered list of (TokenType, regex) pairs.
# Two-character operators come first so the longest match wins.
_TOKEN_SPEC = [
    (TokenType.PLUS_PLUS,     r'\+\+'),
    (TokenType.MINUS_MINUS,   r'--'),
    (TokenType.PLUS_EQUAL,    r'\+='),
    (TokenType.MINUS_EQUAL,   r'-='),
    (TokenType.STAR_EQUAL,    r'\*='),
    (TokenType.SLASH_EQUAL,   r'/='),
    (TokenType.PERCENT_EQUAL, r'%='),
    (TokenType.CARET_EQUAL,   r'\^='),
    (TokenType.NUMBER,        r'\d+(?:\.\d+)?'),
    (TokenType.IDENTIFIER,    r'[^\W\d]\w*'),
    (TokenType.PLUS,          r'\+'),
    (TokenType.MINUS,         r'-'),
    (TokenType.STAR,          r'\*'),
    (TokenType.SLASH,         r'/'),
    (TokenType.PERCENT,       r'%'),
    (TokenType.CARET,         r'\^'),
    (TokenType.EQUAL,         r'='),
    (TokenType.LPAREN,        r'\('),
    (TokenType.RPAREN,        r'\)'),
]

_MASTER_RE = re.compile(
    r'(?:' + '|'.join(f'(?P<T{i}>{spec[1]})' for i, spec in enumerate(_TOKEN_SPEC)) + r')'
)

# Unicode whitespace except the no-break spaces
_WHITESPACE_RE = re.compile(r'[^\S\u00a0\u2007\u202f]+')


def tokenize(line: str) -> List[Token]:
    """
    Convert one source line into a list of Tokens terminated by EOF.
    Raises LexerError on the first unrecognized character or bad number;
    no partial token list is ever returned.
    """
    if line is None:
        line = ""
    tokens: List[Token] = []
    pos = 0
    length = len(line)

    while pos < length:
        m = _WHITESPACE_RE.match(line, pos)
        if m:
            pos = m.end()
            continue

        m = _MASTER_RE.match(line, pos)
        if not m:
            raise LexerError(
                ErrorCode.LEXER_UNEXPECTED_CHARACTER, position=pos, char=line[pos]
            )

        raw = m.group(0)
        tok_type = None
        for i, (ttype, _) in enumerate(_TOKEN_SPEC):
            if m.group(f'T{i}') is not None:
                tok_type = ttype
                break

        if tok_type == TokenType.NUMBER:
            _check_number(raw, line, m.end())

        tokens.append(Token(tok_type, raw, pos))
        pos = m.end()

    tokens.append(Token(TokenType.EOF, '', length))
    return tokens


def _check_number(raw: str, line: str, end: int) -> None:
    # A '.' right after the integer part with no digit behind it
    if '.' not in raw and end < len(line) and line[end] == '.':
        raise LexerError(ErrorCode.LEXER_INVALID_NUMBER, position=end)

    if '.' in raw:
        if math.isinf(float(raw)):
            raise LexerError(
                ErrorCode.LEXER_NUMBER_OVERFLOW, kind="Floating-point", literal=raw
            )
    elif len(raw.lstrip('0')) > 19 or int(raw) > INT64_MAX:
        raise LexerError(ErrorCode.LEXER_NUMBER_OVERFLOW, kind="Integer", literal=raw)
