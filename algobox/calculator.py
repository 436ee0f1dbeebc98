"""A four-function calculator."""

from __future__ import annotations

import argparse
import operator as _operator
from collections.abc import Callable, Sequence
from enum import Enum


class Operator(Enum):
    """Arithmetic operators the calculator understands."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def apply(self, first: float, second: float) -> float:
        """Apply the operator to two numbers."""
        if self is Operator.DIVIDE and second == 0:
            raise ZeroDivisionError("division by zero is not allowed")
        return _FUNCTIONS[self](float(first), float(second))


_FUNCTIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: _operator.add,
    Operator.SUBTRACT: _operator.sub,
    Operator.MULTIPLY: _operator.mul,
    Operator.DIVIDE: _operator.truediv,
}


def calculate(operator: Operator | str, first: float, second: float) -> float:
    """Apply ``operator`` (an :class:`Operator` or its symbol) to two numbers."""
    try:
        op = Operator(operator)
    except ValueError:
        raise ValueError(f"invalid operator: {operator!r}") from None
    return op.apply(first, second)


def _read_operator() -> str:
    text = input("Enter an operator (+, -, *, /): ").strip()
    return text[:1]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator, prompting for anything not given as arguments."""
    parser = argparse.ArgumentParser(description="Four-function calculator.")
    parser.add_argument("operator", nargs="?")
    parser.add_argument("first", nargs="?", type=float)
    parser.add_argument("second", nargs="?", type=float)
    args = parser.parse_args(argv)

    print("Welcome to the Calculator App!")
    symbol = args.operator if args.operator is not None else _read_operator()
    first = args.first if args.first is not None else float(input("Enter first number: "))
    second = (
        args.second if args.second is not None else float(input("Enter second number: "))
    )

    try:
        result = calculate(symbol, first, second)
    except ZeroDivisionError:
        print("Error: Division by zero is not allowed.")
    except ValueError:
        print("Error: Invalid operator.")
    else:
        print(f"Result: {result:.2f}")
    return 0