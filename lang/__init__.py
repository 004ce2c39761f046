"""Term language used by the stack editor."""

from lang.term import (
    Term, Var, Dup, Let, Lam, App, Ctr, U32, Op2, Rule, OPERATORS,
)
from lang.parser import ParseError, read_term, read_rule, read_file

__all__ = [
    "Term",
    "Var",
    "Dup",
    "Let",
    "Lam",
    "App",
    "Ctr",
    "U32",
    "Op2",
    "Rule",
    "OPERATORS",
    "ParseError",
    "read_term",
    "read_rule",
    "read_file",
]
