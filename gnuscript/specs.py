"""Base specification type and the small option groups shared by plot elements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from gnuscript.utils import option_str, remove_extra_whitespaces, to_str


class Specs(ABC):
    """Base class for objects that render themselves as gnuplot option text."""

    @abstractmethod
    def repr(self) -> str:
        """Return the gnuplot formatted string for this object."""

    def __str__(self) -> str:
        return self.repr()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.repr()!r})"


class DepthSpecs(Specs):
    """Depth of a plot element relative to the others (front, back or behind)."""

    def __init__(self) -> None:
        self._depth = "back"

    def front(self) -> DepthSpecs:
        """Display the element in front of all other plot elements."""
        self._depth = "front"
        return self

    def back(self) -> DepthSpecs:
        """Display the element behind all other plot elements."""
        self._depth = "back"
        return self

    def behind(self) -> DepthSpecs:
        """Display the element behind everything.

        In 2D plots this acts like ``front``; in 3D plots it applies in hidden mode.
        """
        self._depth = "behind"
        return self

    def repr(self) -> str:
        return self._depth


class FontSpecs(Specs):
    """Font name and point size of a text element."""

    def __init__(self) -> None:
        self._fontname = ""
        self._fontsize = ""

    def font_name(self, name: str) -> FontSpecs:
        """Set the font name (e.g. Helvetica, Georgia, Times)."""
        self._fontname = name
        return self

    def font_size(self, size: int) -> FontSpecs:
        """Set the font point size (e.g. 10, 12, 16)."""
        if size < 0:
            raise ValueError("font size must not be negative")
        self._fontsize = str(int(size))
        return self

    def repr(self) -> str:
        if self._fontname or self._fontsize:
            return f"font '{self._fontname},{self._fontsize}'"
        return ""


class OffsetSpecs(Specs):
    """Offset of a plot element in characters, graph or screen coordinates."""

    def __init__(self) -> None:
        self._xoffset = "0"
        self._yoffset = "0"

    def shift_along_x(self, chars: float) -> OffsetSpecs:
        """Shift along x by a number of characters (fractions allowed)."""
        self._xoffset = to_str(chars)
        return self

    def shift_along_y(self, chars: float) -> OffsetSpecs:
        """Shift along y by a number of characters (fractions allowed)."""
        self._yoffset = to_str(chars)
        return self

    def shift_along_graph_x(self, val: float) -> OffsetSpecs:
        """Shift along x in the graph coordinate system."""
        self._xoffset = f"graph {to_str(val)}"
        return self

    def shift_along_graph_y(self, val: float) -> OffsetSpecs:
        """Shift along y in the graph coordinate system."""
        self._yoffset = f"graph {to_str(val)}"
        return self

    def shift_along_screen_x(self, val: float) -> OffsetSpecs:
        """Shift along x in the screen coordinate system."""
        self._xoffset = f"screen {to_str(val)}"
        return self

    def shift_along_screen_y(self, val: float) -> OffsetSpecs:
        """Shift along y in the screen coordinate system."""
        self._yoffset = f"screen {to_str(val)}"
        return self

    def repr(self) -> str:
        offset = ""
        if self._xoffset != "0" or self._yoffset != "0":
            offset = f"offset {self._xoffset}, {self._yoffset}"
        return remove_extra_whitespaces(option_str(offset))