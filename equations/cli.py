import argparse
import logging
import sys
from typing import Optional

from equations.errors import EquationError, is_fatal
from equations.solver import solve_file


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate a file of equations and print the resulting variables")
    parser.add_argument("filename", help="Path to a file with one equation per line")
    parser.add_argument("--verbose", action="store_true", help="Log every statement as it is evaluated")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        solver = solve_file(args.filename, on_error=print)
    except EquationError as e:
        if not is_fatal(e):
            raise
        print(e)
        return 1

    print(solver.output_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
