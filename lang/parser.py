"""Text parser for terms and rules.

Grammar summary::

    term  := "λ" name term | "@" name term
           | "dup" name name "=" term ";" term
           | "let" name "=" term ";" term
           | "(" oper term term ")"
           | "(" Name term* ")"
           | "(" term term* ")"
           | number | Name | name
    rule  := term "=" term

Line comments start with ``//``.
"""

from typing import Callable, Optional, TypeVar

from lang.term import (
    Term, Var, Dup, Let, Lam, App, Ctr, U32, Op2, Rule, OPERATORS,
)

# Deepest nesting Parser.term accepts
MAX_DEPTH = 100

T = TypeVar("T")


class ParseError(ValueError):
    """Raised when text is not a well-formed term or rule."""

    def __init__(self, message: str, index: int) -> None:
        super().__init__(f"{message} at column {index + 1}")
        self.message = message
        self.index = index


def _is_name_char(char: str) -> bool:
    return char.isalnum() or char in "_."


class Parser:
    """Recursive-descent parser over a single input string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.index = 0
        self.depth = 0

    # -- low-level scanning ------------------------------------------------

    def skip(self) -> None:
        """Skip whitespace and ``//`` comments."""
        while self.index < len(self.text):
            if self.text[self.index].isspace():
                self.index += 1
            elif self.text.startswith("//", self.index):
                end = self.text.find("\n", self.index)
                self.index = len(self.text) if end == -1 else end + 1
            else:
                break

    def peek(self) -> str:
        self.skip()
        return self.text[self.index] if self.index < len(self.text) else ""

    def at_end(self) -> bool:
        return self.peek() == ""

    def error(self, message: str) -> ParseError:
        return ParseError(message, self.index)

    def consume(self, token: str) -> None:
        """Consume ``token`` or raise."""
        self.skip()
        if not self.text.startswith(token, self.index):
            found = self.text[self.index:self.index + 1] or "end of input"
            raise self.error(f"expected {token!r}, found {found!r}")
        self.index += len(token)

    def name(self) -> str:
        """Read a name made of letters, digits, ``_`` and ``.``."""
        self.skip()
        start = self.index
        while self.index < len(self.text) and _is_name_char(self.text[self.index]):
            self.index += 1
        if start == self.index:
            raise self.error("expected a name")
        return self.text[start:self.index]

    def keyword(self, word: str) -> bool:
        """Consume ``word`` if it appears as a whole word at the cursor."""
        self.skip()
        end = self.index + len(word)
        if not self.text.startswith(word, self.index):
            return False
        if end < len(self.text) and _is_name_char(self.text[end]):
            return False
        self.index = end
        return True

    def operator(self) -> Optional[str]:
        """Consume a binary operator followed by a separator, if present."""
        self.skip()
        for oper in OPERATORS:
            end = self.index + len(oper)
            if not self.text.startswith(oper, self.index):
                continue
            if end < len(self.text) and (self.text[end].isspace() or self.text[end] == "("):
                self.index = end
                return oper
        return None

    # -- grammar -----------------------------------------------------------

    def term(self) -> Term:
        if self.depth >= MAX_DEPTH:
            raise self.error("term nested too deeply")
        self.depth += 1
        try:
            return self._term()
        finally:
            self.depth -= 1

    def _term(self) -> Term:
        char = self.peek()
        if char == "":
            raise self.error("unexpected end of input")
        if char in ("λ", "@"):
            self.index += 1
            name = self.name()
            return Lam(name, self.term())
        if char == "(":
            self.index += 1
            return self.parenthesized()
        if char.isdigit():
            return self.number()
        if self.keyword("dup"):
            nam0 = self.name()
            nam1 = self.name()
            self.consume("=")
            expr = self.term()
            self.consume(";")
            return Dup(nam0, nam1, expr, self.term())
        if self.keyword("let"):
            name = self.name()
            self.consume("=")
            expr = self.term()
            self.consume(";")
            return Let(name, expr, self.term())
        if _is_name_char(char):
            name = self.name()
            if name[0].isupper():
                return Ctr(name)
            return Var(name)
        raise self.error(f"unexpected character {char!r}")

    def parenthesized(self) -> Term:
        """Parse the body of a parenthesized form; ``(`` is already consumed."""
        oper = self.operator()
        if oper is not None:
            val0 = self.term()
            val1 = self.term()
            self.consume(")")
            return Op2(oper, val0, val1)

        char = self.peek()
        if char.isalpha() and char.isupper():
            name = self.name()
            args = self.until_close(self.term)
            return Ctr(name, tuple(args))

        terms = self.until_close(self.term)
        if not terms:
            raise self.error("empty application")
        result = terms[0]
        for argm in terms[1:]:
            result = App(result, argm)
        return result

    def until_close(self, item: Callable[[], Term]) -> list[Term]:
        items = []
        while self.peek() != ")":
            if self.at_end():
                raise self.error("missing ')'")
            items.append(item())
        self.index += 1
        return items

    def number(self) -> U32:
        self.skip()
        start = self.index
        word = self.name()
        try:
            value = int(word, 16) if word.lower().startswith("0x") else int(word, 10)
        except ValueError:
            self.index = start
            raise self.error(f"invalid number {word!r}") from None
        return U32(value)

    def rule(self) -> Rule:
        lhs = self.term()
        self.skip()
        if self.text.startswith("==", self.index) or not self.text.startswith("=", self.index):
            raise self.error("expected '='")
        self.index += 1
        return Rule(lhs, self.term())

    def finish(self) -> None:
        if not self.at_end():
            raise self.error(f"unexpected trailing input {self.peek()!r}")


def _complete(parser: Parser, item: Callable[[], T]) -> T:
    """Run ``item`` and require the whole input to be consumed."""
    try:
        result = item()
    except RecursionError:
        raise parser.error("term nested too deeply") from None
    parser.finish()
    return result


def read_term(text: str) -> Term:
    """Parse a complete term.

    Args:
        text: Source text holding exactly one term.

    Returns:
        The parsed term.

    Raises:
        ParseError: If the text is not a single well-formed term.
    """
    parser = Parser(text)
    return _complete(parser, parser.term)


def read_rule(text: str) -> Rule:
    """Parse a complete ``lhs = rhs`` rule."""
    parser = Parser(text)
    return _complete(parser, parser.rule)


def read_file(text: str) -> list[Rule]:
    """Parse a sequence of rules, such as the contents of a source file."""
    parser = Parser(text)
    rules = []
    try:
        while not parser.at_end():
            rules.append(parser.rule())
    except RecursionError:
        raise parser.error("term nested too deeply") from None
    return rules
