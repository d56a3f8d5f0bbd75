"""Conversion of infix expressions over single-letter operands to postfix."""

from __future__ import annotations

from itertools import chain

__all__ = ["precedence", "infix_to_postfix"]

_PRECEDENCE = {
    "^": 3,
    "$": 3,
    "*": 2,
    "/": 2,
    "%": 2,
    "+": 1,
    "-": 1,
    "(": 0,
}


def precedence(operator: str) -> int:
    """Binding strength of an operator; the opening parenthesis ranks lowest."""
    try:
        return _PRECEDENCE[operator]
    except KeyError:
        raise ValueError(f"unknown operator {operator!r}") from None


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix.

    Operands are single ASCII letters; whitespace is ignored. Operators of
    equal precedence associate to the left.
    """
    output: list[str] = []
    stack = ["("]
    for char in chain(expression, ")"):
        if char.isspace():
            continue
        if char.isascii() and char.isalpha():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            rank = precedence(char)
            if not stack:
                raise ValueError("unmatched ')' in expression")
            while precedence(stack[-1]) >= rank:
                output.append(stack.pop())
            stack.append(char)
    if stack:
        raise ValueError("unmatched '(' in expression")
    return "".join(output)