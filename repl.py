from equations.errors import EquationError
from equations.solver import EquationSolver
from equations.utils import format_number


if __name__ == "__main__":
    solver = EquationSolver()

    while True:
        line = input("> ")

        if not line.strip():
            print(solver.output_string())
            continue

        try:
            result = solver.execute_line(line)
        except EquationError as e:
            print(e)
            continue

        print(format_number(result))
