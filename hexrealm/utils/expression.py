"""Integer arithmetic expressions with named bindings.

Used for configuration values that are formulas of earlier values and
for amounts typed at the command prompt (``invest budget / 10``).

Grammar:
    expr   := term (('+' | '-') term)*
    term   := factor (('*' | '/' | '%') factor)*
    factor := NUMBER | NAME | '(' expr ')' | '-' factor

Division and modulo truncate toward zero.
"""

import re
from dataclasses import dataclass
from typing import Mapping, Optional

TOKEN_PATTERN = re.compile(r"\s*(?:(\d+)|([A-Za-z_][A-Za-z0-9_]*)|(.))")


class ExpressionError(ValueError):
    """Base class for expression failures."""


class ExpressionSyntaxError(ExpressionError):
    """Raised when the text is not a well-formed expression."""


class ExpressionArithmeticError(ExpressionError):
    """Raised on division or modulo by zero."""


class UnboundNameError(ExpressionError):
    """Raised when an expression refers to a name with no binding."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unbound name: '{name}'")


@dataclass
class Token:
    kind: str  # "number", "name", "op" or "end"
    text: str
    pos: int


def tokenize(text: str) -> list[Token]:
    """Split expression text into tokens.

    Raises:
        ExpressionSyntaxError: On characters outside the grammar
    """
    tokens = []
    pos = 0
    text = text.rstrip()
    while pos < len(text):
        match = TOKEN_PATTERN.match(text, pos)
        number, name, op = match.groups()
        if number is not None:
            tokens.append(Token("number", number, match.start(1)))
        elif name is not None:
            tokens.append(Token("name", name, match.start(2)))
        elif op in "+-*/%()":
            tokens.append(Token("op", op, match.start(3)))
        else:
            raise ExpressionSyntaxError(f"Unexpected character '{op}' at position {match.start(3)}")
        pos = match.end()
    tokens.append(Token("end", "", len(text)))
    return tokens


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class ExpressionEvaluator:
    """Recursive-descent evaluator over a token list."""

    def __init__(self, text: str, bindings: Optional[Mapping[str, int]] = None):
        self.text = text
        self.bindings = bindings or {}
        self.tokens = tokenize(text)
        self.index = 0

    def evaluate(self) -> int:
        if self._peek().kind == "end":
            raise ExpressionSyntaxError("Empty expression")
        value = self._expr()
        token = self._peek()
        if token.kind != "end":
            raise ExpressionSyntaxError(f"Unexpected '{token.text}' at position {token.pos}")
        return value

    def _peek(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def _expr(self) -> int:
        value = self._term()
        while self._peek().text in ("+", "-") and self._peek().kind == "op":
            op = self._advance().text
            rhs = self._term()
            value = value + rhs if op == "+" else value - rhs
        return value

    def _term(self) -> int:
        value = self._factor()
        while self._peek().text in ("*", "/", "%") and self._peek().kind == "op":
            op = self._advance().text
            rhs = self._factor()
            if op == "*":
                value *= rhs
            elif rhs == 0:
                verb = "divided" if op == "/" else "taken modulo"
                raise ExpressionArithmeticError(f"Can't be {verb} by zero")
            elif op == "/":
                value = _truncating_div(value, rhs)
            else:
                value = value - rhs * _truncating_div(value, rhs)
        return value

    def _factor(self) -> int:
        token = self._advance()
        if token.kind == "number":
            return int(token.text)
        if token.kind == "name":
            if token.text not in self.bindings:
                raise UnboundNameError(token.text)
            return int(self.bindings[token.text])
        if token.text == "-":
            return -self._factor()
        if token.text == "(":
            value = self._expr()
            closing = self._advance()
            if closing.text != ")":
                raise ExpressionSyntaxError(f"Expected ')' at position {closing.pos}")
            return value
        if token.kind == "end":
            raise ExpressionSyntaxError("Unexpected end of expression")
        raise ExpressionSyntaxError(f"Unexpected '{token.text}' at position {token.pos}")


def evaluate(text: str, bindings: Optional[Mapping[str, int]] = None) -> int:
    """Evaluate an arithmetic expression.

    Args:
        text: Expression source, e.g. ``"init_budget * 2 + 10"``
        bindings: Values for the names the expression may use

    Returns:
        Integer result

    Raises:
        ExpressionSyntaxError: If the text is malformed
        UnboundNameError: If a name has no binding
        ExpressionArithmeticError: On division or modulo by zero

    Examples:
        >>> evaluate("7 / 2 + 1")
        4
        >>> evaluate("-7 % 3")
        -1
        >>> evaluate("budget / 10", {"budget": 250})
        25
    """
    return ExpressionEvaluator(text, bindings).evaluate()
