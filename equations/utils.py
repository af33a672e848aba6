import enum
import math


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_number(value: float) -> str:
    """7.0 => '7', 7.5 => '7.5'"""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)
