import enum
import logging
import re
from dataclasses import dataclass

from equations.errors import MalformedStatement
from equations.tokenizer import pad_operators
from equations.utils import PrintableEnum

logger = logging.getLogger(__name__)


class StatementKind(PrintableEnum):
    ASSIGN = enum.auto()
    ADD_ASSIGN = enum.auto()
    SUB_ASSIGN = enum.auto()


@dataclass
class Statement:
    kind: StatementKind
    target: str
    expression: str


# "=" that is not a part of "+=" or "-="
_ASSIGN = re.compile(r"(?<![-+])=")
_ADD_ASSIGN = re.compile(r"\+=")
_SUB_ASSIGN = re.compile(r"-=")

_TARGET = re.compile(r"[A-Za-z]")

STATEMENT_SHAPES = [
    (StatementKind.ASSIGN, _ASSIGN),
    (StatementKind.ADD_ASSIGN, _ADD_ASSIGN),
    (StatementKind.SUB_ASSIGN, _SUB_ASSIGN),
]


def is_blank(line: str) -> bool:
    return not line.strip()


def parse_statement(line: str) -> Statement:
    for kind, pattern in STATEMENT_SHAPES:
        parts = pattern.split(line)
        if len(parts) != 2:
            continue
        target, rhs = parts[0].strip(), parts[1]
        if not _TARGET.match(target):
            raise MalformedStatement(line, reason="target must start with a letter")
        if is_blank(rhs):
            raise MalformedStatement(line, reason="missing expression")
        statement = Statement(kind=kind, target=target, expression=pad_operators(_compound_expression(kind, target, rhs)))
        logger.debug("Parsed %r as %s", line, statement)
        return statement
    raise MalformedStatement(line, reason="expected 'name = expr', 'name += expr' or 'name -= expr'")


def _compound_expression(kind: StatementKind, target: str, rhs: str) -> str:
    """a += 1 => a + 1"""
    if kind is StatementKind.ASSIGN:
        return rhs
    elif kind is StatementKind.ADD_ASSIGN:
        return f"{target} + {rhs}"
    elif kind is StatementKind.SUB_ASSIGN:
        return f"{target} - {rhs}"
    else:
        raise RuntimeError(f"Unexpected statement kind: {kind}")
