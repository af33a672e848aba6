import re
from typing import Optional

# "+" that is not a part of "++" or "+="
PLUS = re.compile(r"(?<!\+)\+(?![+=])")
# "-" that is not a part of "--"
MINUS = re.compile(r"(?<!-)-(?!-)")
STAR = re.compile(r"\*")
SLASH = re.compile(r"/")

_PADDED_OPERATOR = re.compile(r"\s*(\*|/|(?<!\+)\+(?![+=])|(?<!-)-(?!-))\s*")


def pad_operators(expression: str) -> str:
    """
    Surrounds every binary operator with single spaces:

    a+b*  c => a + b * c
    a++ +--b => a++ + --b
    """
    return _PADDED_OPERATOR.sub(r" \1 ", expression)


def split_first(pattern: re.Pattern[str], expression: str) -> Optional[tuple[str, str]]:
    match = pattern.search(expression)
    if match is None:
        return None
    left, right = expression[: match.start()], expression[match.end() :]
    if not left.strip() or not right.strip():
        return None
    return left, right


def split_last(pattern: re.Pattern[str], expression: str) -> Optional[tuple[str, str]]:
    """
    Split on the last operator that has an operand on its left, so that
    unary minus is kept with its operand:

    10 - 2 - 3 => ("10 - 2 ", " 3")
    a - - 5 => ("a ", " - 5")
    """
    matches = list(pattern.finditer(expression, 1))
    if not matches or not expression[matches[-1].end() :].strip():
        return None
    for match in reversed(matches):
        if _operand_ends_at(expression, match.start()):
            return expression[: match.start()], expression[match.end() :]
    return None


def _operand_ends_at(text: str, end: int) -> bool:
    i = end - 1
    while i >= 0 and text[i].isspace():
        i -= 1
    if i < 0:
        return False
    if text[i] not in "+-*/":
        return True
    # postfix "a++" / "a--" is an operand, a dangling "a -" is not
    return i > 0 and text[i] in "+-" and text[i - 1] == text[i]
