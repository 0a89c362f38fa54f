"""Conversion of infix expressions of single-character operands to postfix."""

from __future__ import annotations

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


class InvalidExpressionError(ValueError):
    """Raised for a malformed infix expression."""


def is_operator(symbol: str) -> bool:
    """Tell whether ``symbol`` is one of ``^ * / + -``."""
    return symbol in _PRECEDENCE


def precedence(symbol: str) -> int:
    """Return 3 for ``^``, 2 for ``*`` and ``/``, 1 for ``+`` and ``-``, else 0."""
    return _PRECEDENCE.get(symbol, 0)


def infix_to_postfix(expression: str) -> str:
    """Convert ``expression`` to postfix notation.

    Operands are single letters or digits; operators of equal precedence
    associate to the left. Raises InvalidExpressionError on an unknown symbol
    or unbalanced parentheses.
    """
    stack = ["("]
    output: list[str] = []

    def pop() -> str:
        if not stack:
            raise InvalidExpressionError("stack underflow: invalid infix expression")
        return stack.pop()

    for item in expression + ")":
        if item == "(":
            stack.append(item)
        elif item.isascii() and item.isalnum():
            output.append(item)
        elif is_operator(item):
            top = pop()
            while is_operator(top) and precedence(top) >= precedence(item):
                output.append(top)
                top = pop()
            stack.append(top)
            stack.append(item)
        elif item == ")":
            top = pop()
            while top != "(":
                output.append(top)
                top = pop()
        else:
            raise InvalidExpressionError(f"invalid symbol {item!r} in infix expression")
    if len(stack) > 1:
        raise InvalidExpressionError("invalid infix expression")
    return "".join(output)