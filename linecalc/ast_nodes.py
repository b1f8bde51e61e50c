"""
linecalc - AST Node Definitions
Immutable AST for a single assignment line. Evaluation never mutates these
nodes; only the Environment changes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

Number = Union[int, float]


class UnaryOp(Enum):
    PLUS    = "+"
    MINUS   = "-"
    PRE_INC = "++"
    PRE_DEC = "--"


class PostfixOp(Enum):
    POST_INC = "++"
    POST_DEC = "--"


class BinaryOp(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"


class AssignOp(Enum):
    ASSIGN     = "="
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="
    MUL_ASSIGN = "*="
    DIV_ASSIGN = "/="
    MOD_ASSIGN = "%="
    POW_ASSIGN = "^="

    @property
    def binary_op(self) -> "BinaryOp":
        """The arithmetic a compound assignment applies; None for plain '='."""
        return _COMPOUND.get(self)


_COMPOUND = {
    AssignOp.ADD_ASSIGN: BinaryOp.ADD,
    AssignOp.SUB_ASSIGN: BinaryOp.SUB,
    AssignOp.MUL_ASSIGN: BinaryOp.MUL,
    AssignOp.DIV_ASSIGN: BinaryOp.DIV,
    AssignOp.MOD_ASSIGN: BinaryOp.MOD,
    AssignOp.POW_ASSIGN: BinaryOp.POW,
}


@dataclass(frozen=True)
class ASTNode:
    """Base class for all AST nodes."""
    position: int = 0


@dataclass(frozen=True)
class Expr(ASTNode):
    """Base class for expression nodes."""


@dataclass(frozen=True)
class LiteralExpr(Expr):
    """A numeric literal; int when the source had no '.', float otherwise."""
    value: Number = 0


@dataclass(frozen=True)
class VarExpr(Expr):
    """A variable reference."""
    name: str = ""


@dataclass(frozen=True)
class UnaryExpr(Expr):
    """+x, -x, ++x, --x"""
    op: UnaryOp = UnaryOp.PLUS
    operand: Expr = None


@dataclass(frozen=True)
class PostfixExpr(Expr):
    """x++, x--"""
    op: PostfixOp = PostfixOp.POST_INC
    operand: Expr = None


@dataclass(frozen=True)
class BinaryExpr(Expr):
    left: Expr = None
    op: BinaryOp = BinaryOp.ADD
    right: Expr = None


@dataclass(frozen=True)
class Stmt(ASTNode):
    """Base class for statement nodes."""


@dataclass(frozen=True)
class AssignStmt(Stmt):
    """name (= | += | -= | *= | /= | %= | ^=) expr"""
    name: str = ""
    op: AssignOp = AssignOp.ASSIGN
    expr: Expr = None
