"""
linecalc - Output Formatter
Renders the final bindings as (name1=value1,name2=value2,...).
"""

from typing import Iterable, Tuple

from .ast_nodes import Number


def format_value(value: Number) -> str:
    if isinstance(value, float):
        return repr(value)
    return str(value)


def format_values(pairs: Iterable[Tuple[str, Number]]) -> str:
    return "(" + ",".join(f"{name}={format_value(value)}" for name, value in pairs) + ")"
