"""
linecalc - Evaluator
Walks an assignment AST against an Environment.

Numeric rules:
  - int op int stays int, wrapped to signed 64-bit
  - any float operand promotes the result to float
  - integer '/' and '%' truncate toward zero
  - '/' and '%' by a zero operand fail before the operation is attempted
Sub-expressions are evaluated strictly left to right, so side effects of
++/-- are observed in source order.
"""

import math

from .ast_nodes import (
    AssignOp, BinaryOp, UnaryOp, PostfixOp, Number,
    ASTNode, AssignStmt, BinaryExpr, Expr, LiteralExpr, PostfixExpr, UnaryExpr, VarExpr,
)
from .environment import Environment
from .errors import ErrorCode, EvalError

_INT64_MASK = 2 ** 64
_INT64_SIGN = 2 ** 63


def wrap_int64(value: int) -> int:
    """Reduce an unbounded int to signed 64-bit two's complement."""
    return ((value + _INT64_SIGN) % _INT64_MASK) - _INT64_SIGN


def _is_float(*values: Number) -> bool:
    return any(isinstance(v, float) for v in values)


def _is_zero(value: Number) -> bool:
    return value == 0


def add(left: Number, right: Number) -> Number:
    if _is_float(left, right):
        return float(left) + float(right)
    return wrap_int64(left + right)


def subtract(left: Number, right: Number) -> Number:
    if _is_float(left, right):
        return float(left) - float(right)
    return wrap_int64(left - right)


def multiply(left: Number, right: Number) -> Number:
    if _is_float(left, right):
        return float(left) * float(right)
    return wrap_int64(left * right)


def divide(left: Number, right: Number) -> Number:
    if _is_zero(right):
        raise EvalError(ErrorCode.EVAL_DIVISION_BY_ZERO)
    if _is_float(left, right):
        return float(left) / float(right)
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return wrap_int64(quotient)


def modulo(left: Number, right: Number) -> Number:
    if _is_zero(right):
        raise EvalError(ErrorCode.EVAL_DIVISION_BY_ZERO)
    if _is_float(left, right):
        left, right = float(left), float(right)
        # IEEE remainder of an infinite dividend or a NaN operand is NaN
        if math.isinf(left) or math.isnan(left) or math.isnan(right):
            return math.nan
        return math.fmod(left, right)
    # remainder takes the sign of the dividend
    remainder = abs(left) % abs(right)
    return -remainder if left < 0 else remainder


def power(base: Number, exponent: Number) -> Number:
    if not _is_float(base, exponent) and exponent >= 0:
        return wrap_int64(pow(base, exponent, _INT64_MASK))
    if _is_zero(base) and exponent < 0:
        raise EvalError(ErrorCode.EVAL_DIVISION_BY_ZERO)
    try:
        result = math.pow(float(base), float(exponent))
    except (OverflowError, ValueError):
        raise EvalError(
            ErrorCode.EVAL_UNDEFINED_POWER, base=base, exponent=exponent
        ) from None
    return result


def negate(value: Number) -> Number:
    if _is_float(value):
        return -value
    return wrap_int64(-value)


_BINARY = {
    BinaryOp.ADD: add,
    BinaryOp.SUB: subtract,
    BinaryOp.MUL: multiply,
    BinaryOp.DIV: divide,
    BinaryOp.MOD: modulo,
    BinaryOp.POW: power,
}


def apply_binary(op: BinaryOp, left: Number, right: Number) -> Number:
    return _BINARY[op](left, right)


class Evaluator:
    def __init__(self, env: Environment):
        self.env = env

    def execute(self, stmt: ASTNode) -> Number:
        """Run one statement against the environment and return the bound value."""
        if not isinstance(stmt, AssignStmt):
            raise EvalError(ErrorCode.EVAL_UNSUPPORTED_STATEMENT)

        if stmt.op == AssignOp.ASSIGN:
            value = self.evaluate(stmt.expr)
            self.env.set(stmt.name, value)
            return value

        binary_op = stmt.op.binary_op
        if binary_op is None:
            raise EvalError(ErrorCode.EVAL_UNEXPECTED_ASSIGN_OP, op=stmt.op.value)

        # The target must already exist; read it before the right side runs
        current = self.env.get(stmt.name)
        rhs = self.evaluate(stmt.expr)
        value = apply_binary(binary_op, current, rhs)
        self.env.set(stmt.name, value)
        return value

    def evaluate(self, expr: Expr) -> Number:
        method = f"_visit_{type(expr).__name__}"
        visitor = getattr(self, method, self._visit_generic)
        return visitor(expr)

    # ------------------------------------------------------------------ visitor

    def _visit_generic(self, node: ASTNode) -> Number:
        raise EvalError(ErrorCode.EVAL_UNSUPPORTED_EXPRESSION)

    def _visit_LiteralExpr(self, node: LiteralExpr) -> Number:
        return node.value

    def _visit_VarExpr(self, node: VarExpr) -> Number:
        return self.env.get(node.name)

    def _visit_UnaryExpr(self, node: UnaryExpr) -> Number:
        if node.op == UnaryOp.PLUS:
            return self.evaluate(node.operand)
        if node.op == UnaryOp.MINUS:
            return negate(self.evaluate(node.operand))

        name = self._assignable_name(node.operand)
        step = add if node.op == UnaryOp.PRE_INC else subtract
        updated = step(self.env.get(name), 1)
        self.env.set(name, updated)
        return updated

    def _visit_PostfixExpr(self, node: PostfixExpr) -> Number:
        name = self._assignable_name(node.operand)
        old = self.env.get(name)
        step = add if node.op == PostfixOp.POST_INC else subtract
        self.env.set(name, step(old, 1))
        return old

    def _visit_BinaryExpr(self, node: BinaryExpr) -> Number:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        return apply_binary(node.op, left, right)

    # ------------------------------------------------------------------ helpers

    def _assignable_name(self, operand: Expr) -> str:
        if isinstance(operand, VarExpr):
            return operand.name
        raise EvalError(ErrorCode.EVAL_NOT_ASSIGNABLE)
