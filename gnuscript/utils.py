"""String helpers and gnuplot script fragments shared by the plotting classes."""

from __future__ import annotations

import math
import numbers
import re
import subprocess
from typing import Any, Sequence

from gnuscript.constants import MISSING_INDICATOR, POINT_TO_INCHES

_RULE = "#" + "=" * 78
_THIN_RULE = "#" + "-" * 78
_WHITESPACE_RUN = re.compile(r"([ \t\n\v\f\r])[ \t\n\v\f\r]+")
_INVALID_PATH_CHARS = frozenset(':*?!"<>|')


class GnuplotError(RuntimeError):
    """Raised when gnuplot cannot be started or reports a failure."""


def to_str(val: Any) -> str:
    """Format a value the way gnuplot scripts expect it.

    Floats use the shortest general notation with six significant digits
    (``2.0`` becomes ``"2"``), booleans become ``"1"`` or ``"0"``, and
    anything else is converted with ``str``.
    """
    if isinstance(val, str):
        return val
    if isinstance(val, bool):
        return "1" if val else "0"
    if isinstance(val, numbers.Integral):
        return str(int(val))
    if isinstance(val, numbers.Real):
        return format(float(val), "g")
    return str(val)


def trimleft(text: str, character: str = " ") -> str:
    """Remove leading occurrences of ``character``."""
    return text.lstrip(character)


def trimright(text: str, character: str = " ") -> str:
    """Remove trailing occurrences of ``character``."""
    return text.rstrip(character)


def trim(text: str, character: str = " ") -> str:
    """Remove ``character`` from both ends of ``text``."""
    return trimleft(trimright(text, character), character)


def collapse_whitespaces(text: str) -> str:
    """Reduce every run of whitespace to its first character."""
    return _WHITESPACE_RUN.sub(r"\1", text)


def remove_extra_whitespaces(text: str) -> str:
    """Collapse whitespace runs and trim spaces from both ends."""
    return trim(collapse_whitespaces(text))


def minsize(*args: Sequence[Any]) -> int:
    """Return the length of the shortest of the given sequences."""
    if not args:
        raise ValueError("minsize requires at least one sequence")
    return min(len(arg) for arg in args)


def escape_if_needed(val: Any) -> str:
    """Quote strings; write non-finite numbers as the missing-value marker."""
    if isinstance(val, str):
        return f'"{val}"'
    return to_str(val) if math.isfinite(float(val)) else MISSING_INDICATOR


def format_rows(*args: Sequence[Any]) -> str:
    """Write the sequences side by side as whitespace-separated data rows.

    Rows stop at the end of the shortest sequence.
    """
    if not args:
        raise ValueError("format_rows requires at least one sequence")
    return "".join(
        " ".join(escape_if_needed(item) for item in row) + "\n" for row in zip(*args)
    )


def titlestr(word: str) -> str:
    """Return the formatted string for a plot title."""
    return word if word == "columnheader" else f"'{word}'"


def option_str(option: str) -> str:
    """Return ``option`` followed by a space, or nothing when it is empty."""
    return f"{option} " if option else ""


def option_value_str(option: str, value: str) -> str:
    """Return ``"option value "``, or nothing when ``value`` is empty."""
    return f"{option} {value} " if value else ""


def cmd_value_str(cmd: str, value: str) -> str:
    """Return a ``cmd value`` line, or nothing when ``value`` is empty."""
    return f"{cmd} {value}\n" if value else ""


def cmd_value_escaped_str(cmd: str, value: str) -> str:
    """Return a ``cmd 'value'`` line, or nothing when ``value`` is empty."""
    return f"{cmd} '{value}'\n" if value else ""


def figure_size_str(sx: float, sy: float) -> str:
    """Return the formatted size pair ``sx,sy``."""
    return f"{to_str(sx)},{to_str(sy)}"


def canvas_size_str(width: int, height: int, asinches: bool) -> str:
    """Return the canvas size in points, or in inches when ``asinches`` is true."""
    if asinches:
        return (
            f"{to_str(width * POINT_TO_INCHES)}in,"
            f"{to_str(height * POINT_TO_INCHES)}in"
        )
    return f"{to_str(width)},{to_str(height)}"


def rgb(color: str | int) -> str:
    """Return the gnuplot colour for a name/hex string or an integer colour."""
    if isinstance(color, str):
        return f"rgb '{color}'"
    return f"rgb {to_str(color)}"


class Angle:
    """Formatting of angles in the units gnuplot understands."""

    @staticmethod
    def deg(val: float) -> str:
        """Return the angle in whole degrees."""
        return f"{int(val)}deg"

    @staticmethod
    def rad(val: float) -> str:
        """Return the angle in radians."""
        return to_str(val)

    @staticmethod
    def pi(val: float) -> str:
        """Return the angle as a multiple of pi."""
        return f"{to_str(val)}pi"


def write_dataset(index: int, *args: Sequence[Any]) -> str:
    """Return a numbered data set block that gnuplot reads as one index."""
    header = f"{_RULE}\n# DATASET #{index}\n{_RULE}\n"
    # Two blank lines tell gnuplot that a new data set begins afterwards.
    return header + format_rows(*args) + "\n\n"


def unset_palette_cmd() -> str:
    """Return the command that unsets palette line styles."""
    return "do for [i=1:20] { unset style line i }\n"


def show_terminal_cmd(size: str, font: str, title: str) -> str:
    """Return the terminal commands for showing a plot in a window."""
    lines = [_RULE, "# TERMINAL", _RULE, "set termoption enhanced"]
    if font:
        lines.append(f"set termoption {font}")
    # The canvas size can only be set through "set terminal", so the default
    # terminal (GNUTERM) is selected explicitly.
    title_part = f" title '{title}' " if title else ""
    lines.append(f"set terminal GNUTERM size {size}{title_part}")
    lines.append("set encoding utf8")
    return "\n".join(lines) + "\n"


def save_terminal_cmd(extension: str, size: str, font: str) -> str:
    """Return the terminal commands for saving a plot to a file."""
    lines = [
        _RULE,
        "# TERMINAL",
        _RULE,
        f"set terminal {extension} size {size} enhanced rounded {font}",
        "set encoding utf8",
    ]
    return "\n".join(lines) + "\n"


def output_cmd(filename: str) -> str:
    """Return the commands that direct gnuplot output to ``filename``."""
    lines = [_RULE, "# OUTPUT", _RULE, f"set output '{filename}'", "set encoding utf8"]
    return "\n".join(lines) + "\n"


def multiplot_cmd(rows: int, columns: int, title: str) -> str:
    """Return the multiplot commands for a grid of ``rows`` by ``columns``."""
    command = "set multiplot"
    if rows != 0 or columns != 0:
        command += f" layout {rows},{columns}"
    command += " rowsfirst downwards"
    if title:
        command += f" title '{title}'"
    return "\n".join([_RULE, "# MULTIPLOT", _RULE, command]) + "\n"


def run_script(scriptfilename: str, persistent: bool) -> None:
    """Run gnuplot on a script file.

    With ``persistent`` the plot window stays open after gnuplot exits.
    Raises GnuplotError when gnuplot cannot be run or reports an error.
    """
    command = ["gnuplot"]
    if persistent:
        command.append("-persistent")
    command.append(scriptfilename)
    try:
        result = subprocess.run(command, check=False)
    except OSError as exc:
        raise GnuplotError(f"could not run gnuplot: {exc}") from exc
    if result.returncode != 0:
        raise GnuplotError(
            f"gnuplot reported an internal error (exit status {result.returncode})"
        )


def cleanpath(path: str) -> str:
    """Remove characters gnuplot cannot use in an output path."""
    return "".join(ch for ch in path if ch not in _INVALID_PATH_CHARS)