import enum
from dataclasses import dataclass

from equations.utils import PrintableEnum


class EquationError(Exception):
    pass


@dataclass
class NoStatementsFound(EquationError):
    def __str__(self) -> str:
        return "Did not find any equations to evaluate!"


@dataclass
class SourceUnavailable(EquationError):
    path: str
    reason: str

    def __str__(self) -> str:
        return f"Could not read file, please check file exists and has read permissions. ({self.path}: {self.reason})"


@dataclass
class MalformedStatement(EquationError):
    line: str
    reason: str

    def __str__(self) -> str:
        return f"Something went wrong, file structure is malformed. ({self.reason}: {self.line!r})"


@dataclass
class UnknownVariable(EquationError):
    name: str
    expression: str

    def __str__(self) -> str:
        return f"Reference to unknown variable {self.name!r} in {self.expression.strip()!r}"


@dataclass
class NumericParseFailure(EquationError):
    text: str

    def __str__(self) -> str:
        return f"Not a number: {self.text.strip()!r}"


@dataclass
class ExpressionTooDeep(EquationError):
    expression: str

    def __str__(self) -> str:
        return f"Expression is nested too deeply to evaluate: {self.expression.strip()[:40]!r}..."


class Diagnostic(PrintableEnum):
    NO_EQUATIONS_FOUND = enum.auto()
    PROBLEM_READING_FILE = enum.auto()
    MALFORMED_FILE = enum.auto()
    UNKNOWN_VARIABLE = enum.auto()
    NOT_A_NUMBER = enum.auto()
    TOO_DEEP = enum.auto()


def diagnostic_kind(error: EquationError) -> Diagnostic:
    if isinstance(error, NoStatementsFound):
        return Diagnostic.NO_EQUATIONS_FOUND
    elif isinstance(error, SourceUnavailable):
        return Diagnostic.PROBLEM_READING_FILE
    elif isinstance(error, MalformedStatement):
        return Diagnostic.MALFORMED_FILE
    elif isinstance(error, UnknownVariable):
        return Diagnostic.UNKNOWN_VARIABLE
    elif isinstance(error, NumericParseFailure):
        return Diagnostic.NOT_A_NUMBER
    elif isinstance(error, ExpressionTooDeep):
        return Diagnostic.TOO_DEEP
    else:
        raise RuntimeError(f"Unexpected error type: {error!r}")


def is_fatal(error: EquationError) -> bool:
    """Errors after which the rest of the input is not processed"""
    return diagnostic_kind(error) in (Diagnostic.NO_EQUATIONS_FOUND, Diagnostic.PROBLEM_READING_FILE)
