import logging
from typing import Callable, Iterable, Optional

from equations.errors import EquationError, ExpressionTooDeep, NoStatementsFound, SourceUnavailable
from equations.parser import Statement, is_blank, parse_statement
from equations.runtime import evaluate
from equations.utils import format_number

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[EquationError], None]


class EquationSolver:
    """
    Holds the variables of a single run. Statements are executed in order,
    each one seeing the results of all the previous ones.
    """

    def __init__(self) -> None:
        self._variables: dict[str, float] = dict()

    @property
    def variables(self) -> dict[str, float]:
        return dict(self._variables)

    def get_value(self, name: str) -> Optional[float]:
        return self._variables.get(name)

    def variable_names(self) -> set[str]:
        return set(self._variables)

    def execute(self, statement: Statement) -> float:
        """
        Evaluates the statement and stores the result. On failure the
        variables are left untouched, including increments done before the
        failing part of the expression.
        """
        working_copy = dict(self._variables)
        try:
            result = evaluate(statement.expression, working_copy)
        except RecursionError:
            raise ExpressionTooDeep(statement.expression) from None
        working_copy[statement.target] = result
        self._variables = working_copy
        logger.debug("%s = %s", statement.target, format_number(result))
        return result

    def execute_line(self, line: str) -> float:
        return self.execute(parse_statement(line))

    def run(self, lines: Iterable[str], on_error: Optional[ErrorCallback] = None) -> list[EquationError]:
        lines = list(lines)
        if not lines:
            raise NoStatementsFound()

        errors: list[EquationError] = []
        for line in lines:
            if is_blank(line):
                continue
            try:
                self.execute_line(line)
            except EquationError as e:
                logger.warning("Skipping statement %r: %s", line, e)
                errors.append(e)
                if on_error is not None:
                    on_error(e)
        return errors

    def output_string(self) -> str:
        return "(" + ",".join(f"{name}={format_number(self._variables[name])}" for name in sorted(self._variables)) + ")"


def read_statements(path: str) -> list[str]:
    try:
        with open(path, encoding="utf-8") as file:
            return [line.rstrip("\r\n") for line in file]
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(path=str(path), reason=str(e)) from e


def solve_file(path: str, on_error: Optional[ErrorCallback] = None) -> EquationSolver:
    solver = EquationSolver()
    solver.run(read_statements(path), on_error=on_error)
    return solver
