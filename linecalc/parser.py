"""
linecalc - Recursive Descent Parser
Converts the token stream of one line into an assignment statement AST.

Grammar (loosest to tightest binding):

    statement      := IDENT assign-op expression EOF
    assign-op      := '=' | '+=' | '-=' | '*=' | '/=' | '%=' | '^='
    expression     := additive
    additive       := multiplicative (('+' | '-') multiplicative)*
    multiplicative := unary (('*' | '/' | '%') unary)*
    unary          := ('++' | '--' | '+' | '-') unary
                    | postfix ('^' unary)?
    postfix        := primary ('++' | '--')?
    primary        := NUMBER | IDENT | '(' expression ')'
"""

from typing import List

from .errors import ErrorCode, ParseError
from .lexer import Token, TokenType, tokenize
from .ast_nodes import (
    AssignOp, BinaryOp, UnaryOp, PostfixOp,
    AssignStmt, BinaryExpr, Expr, LiteralExpr, PostfixExpr, UnaryExpr, VarExpr,
)

_ASSIGN_OPS = {
    TokenType.EQUAL:         AssignOp.ASSIGN,
    TokenType.PLUS_EQUAL:    AssignOp.ADD_ASSIGN,
    TokenType.MINUS_EQUAL:   AssignOp.SUB_ASSIGN,
    TokenType.STAR_EQUAL:    AssignOp.MUL_ASSIGN,
    TokenType.SLASH_EQUAL:   AssignOp.DIV_ASSIGN,
    TokenType.PERCENT_EQUAL: AssignOp.MOD_ASSIGN,
    TokenType.CARET_EQUAL:   AssignOp.POW_ASSIGN,
}

_PREFIX_OPS = {
    TokenType.PLUS_PLUS:   UnaryOp.PRE_INC,
    TokenType.MINUS_MINUS: UnaryOp.PRE_DEC,
    TokenType.PLUS:        UnaryOp.PLUS,
    TokenType.MINUS:       UnaryOp.MINUS,
}

_POSTFIX_OPS = {
    TokenType.PLUS_PLUS:   PostfixOp.POST_INC,
    TokenType.MINUS_MINUS: PostfixOp.POST_DEC,
}


class Parser:
    def __init__(self, tokens: List[Token]):
        self._tokens = tokens
        self._pos = 0

    # ------------------------------------------------------------------ helpers

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        if tok.type != TokenType.EOF:
            self._pos += 1
        return tok

    def _expect(self, ttype: TokenType, code: ErrorCode) -> Token:
        tok = self._peek()
        if tok.type != ttype:
            raise ParseError(code, position=tok.position)
        return self._advance()

    def _match(self, *types: TokenType) -> bool:
        return self._peek().type in types

    # ------------------------------------------------------------------ public

    def parse_statement(self) -> AssignStmt:
        name_tok = self._expect(TokenType.IDENTIFIER, ErrorCode.PARSE_EXPECTED_IDENTIFIER)

        op_tok = self._peek()
        if op_tok.type not in _ASSIGN_OPS:
            raise ParseError(ErrorCode.PARSE_EXPECTED_ASSIGN_OP, position=op_tok.position)
        self._advance()

        expr = self._parse_expression()
        self._expect(TokenType.EOF, ErrorCode.PARSE_UNEXPECTED_TOKEN)

        return AssignStmt(
            name=name_tok.lexeme,
            op=_ASSIGN_OPS[op_tok.type],
            expr=expr,
            position=name_tok.position,
        )

    # ------------------------------------------------------------------ expressions

    def _parse_expression(self) -> Expr:
        return self._parse_additive()

    def _parse_additive(self) -> Expr:
        left = self._parse_multiplicative()

        while self._match(TokenType.PLUS, TokenType.MINUS):
            op_tok = self._advance()
            right = self._parse_multiplicative()
            op = BinaryOp.ADD if op_tok.type == TokenType.PLUS else BinaryOp.SUB
            left = BinaryExpr(left=left, op=op, right=right, position=op_tok.position)

        return left

    def _parse_multiplicative(self) -> Expr:
        left = self._parse_unary()

        while self._match(TokenType.STAR, TokenType.SLASH, TokenType.PERCENT):
            op_tok = self._advance()
            right = self._parse_unary()
            if op_tok.type == TokenType.STAR:
                op = BinaryOp.MUL
            elif op_tok.type == TokenType.SLASH:
                op = BinaryOp.DIV
            elif op_tok.type == TokenType.PERCENT:
                op = BinaryOp.MOD
            else:
                raise ParseError(
                    ErrorCode.PARSE_INVALID_MULTIPLICATIVE_OPERATOR, position=op_tok.position
                )
            left = BinaryExpr(left=left, op=op, right=right, position=op_tok.position)

        return left

    def _parse_unary(self) -> Expr:
        # A prefix operator wraps everything after it, so -2^2 is -(2^2)
        tok = self._peek()
        if tok.type in _PREFIX_OPS:
            self._advance()
            operand = self._parse_unary()
            return UnaryExpr(op=_PREFIX_OPS[tok.type], operand=operand, position=tok.position)

        expr = self._parse_postfix()

        # '^' is right-associative: recurse for the whole right side
        if self._match(TokenType.CARET):
            caret_tok = self._advance()
            right = self._parse_unary()
            expr = BinaryExpr(left=expr, op=BinaryOp.POW, right=right, position=caret_tok.position)

        return expr

    def _parse_postfix(self) -> Expr:
        expr = self._parse_primary()
        tok = self._peek()
        if tok.type in _POSTFIX_OPS:
            self._advance()
            return PostfixExpr(op=_POSTFIX_OPS[tok.type], operand=expr, position=tok.position)
        return expr

    def _parse_primary(self) -> Expr:
        tok = self._peek()

        if tok.type == TokenType.NUMBER:
            self._advance()
            return self._make_number(tok)

        if tok.type == TokenType.IDENTIFIER:
            self._advance()
            return VarExpr(name=tok.lexeme, position=tok.position)

        # Parenthesised expression
        if tok.type == TokenType.LPAREN:
            self._advance()
            expr = self._parse_expression()
            self._expect(TokenType.RPAREN, ErrorCode.PARSE_EXPECTED_RPAREN)
            return expr

        raise ParseError(ErrorCode.PARSE_EXPECTED_EXPRESSION, position=tok.position)

    # ------------------------------------------------------------------ helpers

    def _make_number(self, tok: Token) -> LiteralExpr:
        try:
            val = float(tok.lexeme) if '.' in tok.lexeme else int(tok.lexeme)
        except ValueError as e:
            raise ParseError(ErrorCode.PARSE_INVALID_NUMBER, position=tok.position) from e
        return LiteralExpr(value=val, position=tok.position)


def parse_line(line: str) -> AssignStmt:
    """Tokenize and parse one source line."""
    return Parser(tokenize(line)).parse_statement()
