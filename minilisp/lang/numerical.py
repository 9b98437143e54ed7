"""Arithmetic primitives and the root Environment they live in. There is exactly one numeric kind (see Number), and
each primitive takes exactly two numbers.
"""

import operator

from minilisp.lang.error import DivisionByZero, InvalidForm
from minilisp.pure.environment import Environment
from minilisp.pure.evaluator import Primitive
from minilisp.pure.lexical import Number


def numeric_value(name, x):
    """Returns the float inside x, raising InvalidForm if x isn't a Number."""
    if not isinstance(x, Number):
        raise InvalidForm(x.display() if x is not None else "", f"'{name}' expects numbers")
    return x.value


def arithmetic(name, op):
    """Wraps the binary float operator op as a Primitive called name."""

    def fn(a, b):
        return Number(op(numeric_value(name, a), numeric_value(name, b)))

    return Primitive(name, fn)


def divide(a, b):
    dividend, divisor = numeric_value("/", a), numeric_value("/", b)
    if divisor == 0:
        raise DivisionByZero(f"(/ {a.display()} {b.display()})")
    return Number(dividend / divisor)


PRIMITIVES = {
    "+": arithmetic("+", operator.add),
    "-": arithmetic("-", operator.sub),
    "*": arithmetic("*", operator.mul),
    "/": Primitive("/", divide),
}


def standard_environment():
    """Returns a fresh root Environment holding the arithmetic primitives."""
    return Environment(list(PRIMITIVES), list(PRIMITIVES.values()))
