"""Term and rule values for the HVM-style term language.

All values are frozen dataclasses, so terms can be shared freely between
stack entries without copying.
"""

from dataclasses import dataclass


# Binary operators understood by Op2, in the order the parser tries them
# (longest symbols first so "<<" is not read as "<").
OPERATORS = (
    "<<", ">>", "<=", ">=", "==", "!=",
    "+", "-", "*", "/", "%", "&", "|", "^", "<", ">",
)


class Term:
    """Base class for all term nodes."""

    def to_display_text(self) -> str:
        """Return the human-readable form of the term."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_display_text()


@dataclass(frozen=True)
class Var(Term):
    """Variable reference."""

    name: str

    def to_display_text(self) -> str:
        return self.name


@dataclass(frozen=True)
class Dup(Term):
    """Duplication: ``dup a b = expr; body``."""

    nam0: str
    nam1: str
    expr: Term
    body: Term

    def to_display_text(self) -> str:
        return f"dup {self.nam0} {self.nam1} = {self.expr}; {self.body}"


@dataclass(frozen=True)
class Let(Term):
    """Local binding: ``let x = expr; body``."""

    name: str
    expr: Term
    body: Term

    def to_display_text(self) -> str:
        return f"let {self.name} = {self.expr}; {self.body}"


@dataclass(frozen=True)
class Lam(Term):
    """Lambda abstraction."""

    name: str
    body: Term

    def to_display_text(self) -> str:
        return f"λ{self.name} {self.body}"


@dataclass(frozen=True)
class App(Term):
    """Application of ``func`` to ``argm``."""

    func: Term
    argm: Term

    def to_display_text(self) -> str:
        return f"({self.func} {self.argm})"


@dataclass(frozen=True)
class Ctr(Term):
    """Constructor with a capitalized name and positional arguments."""

    name: str
    args: tuple[Term, ...] = ()

    def to_display_text(self) -> str:
        parts = [self.name] + [arg.to_display_text() for arg in self.args]
        return "(" + " ".join(parts) + ")"


@dataclass(frozen=True)
class U32(Term):
    """Unsigned 32-bit number."""

    numb: int

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "numb", self.numb & 0xFFFFFFFF)

    def to_display_text(self) -> str:
        return str(self.numb)


@dataclass(frozen=True)
class Op2(Term):
    """Binary numeric operation."""

    oper: str
    val0: Term
    val1: Term

    def __post_init__(self) -> None:
        if self.oper not in OPERATORS:
            raise ValueError(f"Unknown operator: {self.oper!r}")

    def to_display_text(self) -> str:
        return f"({self.oper} {self.val0} {self.val1})"


@dataclass(frozen=True)
class Rule:
    """Rewrite rule ``lhs = rhs``.

    Rules are stored and displayed by the editor but never combined.
    """

    lhs: Term
    rhs: Term

    def to_display_text(self) -> str:
        return f"{self.lhs} = {self.rhs}"

    def __str__(self) -> str:
        return self.to_display_text()
