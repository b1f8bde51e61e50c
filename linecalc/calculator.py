"""
linecalc - Calculator Driver
Feeds lines through lexer, parser and evaluator in order and returns the
formatted variable snapshot.
"""

import sys
import json
from enum import Enum
from typing import Iterable, List

from .lexer import tokenize
from .parser import Parser
from .environment import Environment
from .evaluator import Evaluator
from .errors import CalcError
from .formatter import format_values, format_value
from .ast_nodes import AssignStmt


def process_line(line: str, evaluator: Evaluator, log=None) -> None:
    """Lex, parse and execute a single non-blank line."""
    tokens = tokenize(line)
    if log:
        log(f"  {len(tokens)-1} tokens produced")
    stmt = Parser(tokens).parse_statement()
    value = evaluator.execute(stmt)
    if log:
        log(f"  {stmt.name} {stmt.op.value} -> {format_value(value)}")


def execute_lines(lines: Iterable[str], debug: bool = False) -> str:
    """
    Run every line against a fresh Environment.

    Parameters
    ----------
    lines : source lines; blank or whitespace-only lines are skipped
    debug : print per-line progress to stderr

    Returns
    -------
    The formatted bindings, e.g. "(i=82,j=1,x=6,y=80)"

    Raises
    ------
    ParseError / EvalError for the first failing line, decorated with
    "(line <n>: <text>)". Side effects committed by earlier lines, and by
    sub-expressions of the failing line evaluated before the failure, stay.
    """
    def log(msg):
        if debug:
            print(f"[linecalc] {msg}", file=sys.stderr)

    env = Environment()
    evaluator = Evaluator(env)

    for line_number, line in enumerate(lines, start=1):
        if line is None or not line.strip():
            continue
        log(f"Line {line_number}: {line}")
        try:
            process_line(line, evaluator, log if debug else None)
        except CalcError as e:
            raise e.with_line_context(line_number, line) from e

    log(f"{len(env)} variables bound")
    return format_values(env.values())


def execute_source(source: str, debug: bool = False, emit_ast: bool = False) -> str:
    """Evaluate source text, or return its parsed statements as JSON if emit_ast."""
    lines = source.splitlines()
    if emit_ast:
        return ast_to_json(parse_lines(lines))
    return execute_lines(lines, debug=debug)


def execute_file(input_path: str, debug: bool = False, emit_ast: bool = False) -> str:
    """Read a UTF-8 file and evaluate each of its lines."""
    with open(input_path, "r", encoding="utf-8") as f:
        source = f.read()
    return execute_source(source, debug=debug, emit_ast=emit_ast)


def parse_lines(lines: Iterable[str]) -> List[AssignStmt]:
    """Parse without evaluating; blank lines are skipped."""
    stmts = []
    for line_number, line in enumerate(lines, start=1):
        if line is None or not line.strip():
            continue
        try:
            stmts.append(Parser(tokenize(line)).parse_statement())
        except CalcError as e:
            raise e.with_line_context(line_number, line) from e
    return stmts


# ── AST serialization (for --emit-ast) ────────────────────────────────────────

def ast_to_json(stmts: List[AssignStmt]) -> str:
    return json.dumps(_node_to_dict(stmts), indent=2)


def _node_to_dict(node):
    if node is None:
        return None
    if isinstance(node, list):
        return [_node_to_dict(n) for n in node]
    if isinstance(node, Enum):
        return node.value  # operator enum
    if not hasattr(node, '__dataclass_fields__'):
        return node  # primitive
    d = {"_type": type(node).__name__}
    for field_name in node.__dataclass_fields__:
        val = getattr(node, field_name)
        d[field_name] = _node_to_dict(val)
    return d
