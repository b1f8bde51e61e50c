"""
linecalc - line-oriented assignment calculator.
"""

from .calculator import execute_lines, execute_source, execute_file
from .errors import CalcError, ParseError, EvalError, ErrorCode

__version__ = "0.1.0"
