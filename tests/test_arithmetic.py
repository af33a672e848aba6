import pytest

from equations.solver import EquationSolver


@pytest.mark.parametrize(
    "code, expected_output",
    [
        pytest.param("a = 1", "(a=1)"),
        pytest.param("a = 3 + 4", "(a=7)"),
        pytest.param("a = 3+4", "(a=7)"),
        pytest.param("a = 10 - 2 - 3", "(a=5)"),
        pytest.param("a = 2 * 3 + 1", "(a=7)"),
        pytest.param("a = 1 + 2 * 3", "(a=7)"),
        pytest.param("a = 1 - 2 + 3 - 4 + 5", "(a=3)"),
        pytest.param("a = 8 / 4 / 2", "(a=1)"),
        pytest.param("a = 8 / 2 * 4", "(a=16)"),
        pytest.param("a = 2 * 8 / 4 / 2", "(a=2)"),
        pytest.param("a = 7 / 2", "(a=3.5)"),
        pytest.param("a = -5", "(a=-5)"),
        pytest.param("a = 2 * -3", "(a=-6)"),
        # variables
        pytest.param("a = 1; b = 2; c = a + b", "(a=1,b=2,c=3)"),
        pytest.param("a = 5; a += 2", "(a=7)"),
        pytest.param("a = 5; a += 2; a -= 10", "(a=-3)"),
        pytest.param("a = 1; a -= -2", "(a=3)"),
        pytest.param("b = 3; a = 2; A = 1", "(A=1,a=2,b=3)"),
        # increments and decrements
        pytest.param("a = 5; b = ++a", "(a=6,b=6)"),
        pytest.param("a = 5; b = a++", "(a=6,b=5)"),
        pytest.param("a = 5; b = --a", "(a=4,b=4)"),
        pytest.param("a = 5; b = a--", "(a=4,b=5)"),
        pytest.param("a = 5; b = a++ + a", "(a=6,b=11)"),
        pytest.param("i = 0; j = 5; x = i++ + 5; y = 5 + --j", "(i=1,j=4,x=5,y=9)"),
        pytest.param("a = 1; b = a-- - 1", "(a=0,b=0)"),
    ],
)
def test_eval_arithmetic(code: str, expected_output: str) -> None:
    solver = EquationSolver()
    errors = solver.run(code.split(";"))
    assert errors == []
    assert solver.output_string() == expected_output
