"""Stack entry types."""

from dataclasses import dataclass
from typing import Union

from lang.term import Rule, Term


@dataclass(frozen=True)
class TermEntry:
    """Stack entry holding a term."""

    term: Term

    def to_display_text(self) -> str:
        return self.term.to_display_text()


@dataclass(frozen=True)
class RuleEntry:
    """Stack entry holding a rewrite rule."""

    rule: Rule

    def to_display_text(self) -> str:
        return self.rule.to_display_text()


StackEntry = Union[TermEntry, RuleEntry]
