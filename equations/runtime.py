import math
import re
from typing import Callable, Optional

from equations.errors import NumericParseFailure, UnknownVariable
from equations.tokenizer import MINUS, PLUS, SLASH, STAR, split_first, split_last


Splitter = Callable[[re.Pattern[str], str], Optional[tuple[str, str]]]


def evaluate(expression: str, variables: dict[str, float]) -> float:
    """
    Reduces a normalized expression (see tokenizer.pad_operators) to a number.

    Operators are tried from the lowest precedence to the highest, each binary
    operator splitting the expression in two halves evaluated recursively.
    Runs of the same operator are reduced in a loop, grouped exactly as the
    recursive splits would group them.
    Increments and decrements update ``variables`` in place.
    """
    split = _find_split(expression)
    if split is not None:
        return _reduce_chain(split, variables)

    term = expression.strip()
    if term.startswith("-") and not term.startswith("--"):
        return -evaluate(term[1:], variables)
    if term.startswith("++"):
        return _step(term[2:], term, variables, delta=1.0, return_updated=True)
    if term.endswith("++"):
        return _step(term[:-2], term, variables, delta=1.0, return_updated=False)
    if term.startswith("--"):
        return _step(term[2:], term, variables, delta=-1.0, return_updated=True)
    if term.endswith("--"):
        return _step(term[:-2], term, variables, delta=-1.0, return_updated=False)
    if term in variables:
        return variables[term]
    return _parse_number(term, expression)


# index into BINARY_OPERATIONS, left part, right part
Split = tuple[int, str, str]


def _find_split(expression: str) -> Optional[Split]:
    for index, (pattern, splitter, _) in enumerate(BINARY_OPERATIONS):
        parts = splitter(pattern, expression)
        if parts is not None:
            return index, parts[0], parts[1]
    return None


def _reduce_chain(split: Split, variables: dict[str, float]) -> float:
    index, left, right = split
    _, splitter, impl = BINARY_OPERATIONS[index]

    if splitter is split_first:
        # a + b + c => a + (b + c)
        operands = [left]
        rest = right
        while True:
            next_split = _find_split(rest)
            if next_split is None or next_split[0] != index:
                break
            operands.append(next_split[1])
            rest = next_split[2]
        values = [evaluate(operand, variables) for operand in operands]
        result = evaluate(rest, variables)
        for value in reversed(values):
            result = impl(value, result)
        return result

    # a - b - c => (a - b) - c
    operands = [right]
    rest = left
    while True:
        next_split = _find_split(rest)
        if next_split is None or next_split[0] != index:
            break
        rest = next_split[1]
        operands.append(next_split[2])
    result = evaluate(rest, variables)
    for operand in reversed(operands):
        result = impl(result, evaluate(operand, variables))
    return result


def _step(name: str, term: str, variables: dict[str, float], delta: float, return_updated: bool) -> float:
    name = name.strip()
    if name not in variables:
        raise UnknownVariable(name=name, expression=term)
    old_value = variables[name]
    variables[name] = old_value + delta
    return variables[name] if return_updated else old_value


# plain decimal literal: 42, 1.5, .5, 1., 2e10
_NUMBER = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse_number(term: str, expression: str) -> float:
    if term[:1].isalpha():
        raise UnknownVariable(name=term, expression=expression)
    if not _NUMBER.fullmatch(term):
        raise NumericParseFailure(term)
    return float(term)


def divide(a: float, b: float) -> float:
    """Division by zero gives IEEE-754 infinities / NaN instead of raising"""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


BinaryOperationImpl = Callable[[float, float], float]

# checked in this order, first applicable split wins
BINARY_OPERATIONS: list[tuple[re.Pattern[str], Splitter, BinaryOperationImpl]] = [
    (PLUS, split_first, lambda a, b: a + b),
    (MINUS, split_last, lambda a, b: a - b),
    (STAR, split_first, lambda a, b: a * b),
    (SLASH, split_last, divide),
]
