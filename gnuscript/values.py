"""Value types accepted where gnuplot takes either a number or a literal string."""

from __future__ import annotations

from typing import Union


class StringOrDouble:
    """A string value that may also be given as a number.

    Numbers are formatted with six decimal places (``1.0`` becomes
    ``"1.000000"``); strings such as ``""`` or ``"*"`` are kept as they are.
    """

    __slots__ = ("value",)

    def __init__(self, val: Union[str, float, int, "StringOrDouble"] = 0.0) -> None:
        if isinstance(val, StringOrDouble):
            self.value: str = val.value
        elif isinstance(val, str):
            self.value = val
        elif isinstance(val, (int, float)) and not isinstance(val, bool):
            self.value = f"{float(val):.6f}"
        else:
            raise TypeError(
                f"StringOrDouble expects a string or a number, not {type(val).__name__}"
            )

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"StringOrDouble({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringOrDouble):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)