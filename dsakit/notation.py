"""Conversions between infix, prefix and postfix expression notation."""

from __future__ import annotations


def precedence(operator: str) -> int:
    """Return the binding strength of an operator; -1 for anything else."""
    if operator in ("+", "-"):
        return 1
    if operator in ("*", "/"):
        return 2
    if operator == "^":
        return 3
    return -1


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    ``^`` is right associative; the other operators are left associative.
    Raises ``ValueError`` on an unmatched closing parenthesis.
    """
    out: list[str] = []
    stack: list[str] = []
    for char in expression:
        if _is_operand(char):
            out.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                out.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            rank = precedence(char)
            while stack and (
                rank < precedence(stack[-1])
                or (rank == precedence(stack[-1]) and char != "^")
            ):
                out.append(stack.pop())
            stack.append(char)
    out.extend(reversed(stack))
    return "".join(out)


def _fold_prefix(expression: str, combine) -> str:
    stack: list[str] = []
    for char in reversed(expression):
        if _is_operand(char):
            stack.append(char)
        else:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} is missing operands")
            first = stack.pop()
            second = stack.pop()
            stack.append(combine(first, char, second))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def prefix_to_infix(expression: str) -> str:
    """Convert a prefix expression to a fully parenthesised infix one."""
    return _fold_prefix(expression, lambda a, op, b: f"({a}{op}{b})")


def prefix_to_postfix(expression: str) -> str:
    """Convert a prefix expression to postfix."""
    return _fold_prefix(expression, lambda a, op, b: f"{a}{b}{op}")