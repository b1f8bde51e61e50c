"""
linecalc - Environment
Insertion-ordered variable bindings shared by every line of one run.
"""

from typing import Dict, Iterator, List, Tuple

from .ast_nodes import Number
from .errors import ErrorCode, EvalError


class Environment:
    def __init__(self):
        # dict keeps first-insertion order; overwriting keeps the slot
        self._values: Dict[str, Number] = {}

    def get(self, name: str) -> Number:
        try:
            return self._values[name]
        except KeyError:
            raise EvalError(ErrorCode.ENV_UNDEFINED_VARIABLE, name=name) from None

    def set(self, name: str, value: Number) -> None:
        self._values[name] = value

    def values(self) -> List[Tuple[str, Number]]:
        """All bindings as (name, value) pairs in first-assignment order."""
        return list(self._values.items())

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self):
        return f"Environment({self._values!r})"
