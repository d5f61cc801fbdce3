"""Fill and layout option groups for plot elements and figures."""

from __future__ import annotations

from gnuscript.specs import Specs
from gnuscript.utils import option_value_str, remove_extra_whitespaces, to_str


class FillSpecs(Specs):
    """Colour or pattern fill of a plot element, together with its border."""

    def __init__(self) -> None:
        self._fillmode = ""
        self._fillcolor = ""
        self._transparent = ""
        self._density = ""
        self._pattern_number = ""
        self._bordercolor = ""
        self._borderlinewidth = ""
        self._bordershow = ""

    def fill_empty(self) -> FillSpecs:
        """Use an empty fill."""
        self._fillmode = "empty"
        return self

    def fill_solid(self) -> FillSpecs:
        """Use a solid fill."""
        self._fillmode = "solid"
        return self

    def fill_pattern(self, number: int) -> FillSpecs:
        """Use the fill pattern with the given number."""
        self._fillmode = "pattern"
        self._pattern_number = to_str(number)
        return self

    def fill_color(self, color: str) -> FillSpecs:
        """Set the colour of the solid or pattern fill."""
        self._fillcolor = f"fillcolor '{color}'"
        return self

    def fill_intensity(self, value: float) -> FillSpecs:
        """Set the fill intensity, clamped to [0, 1]; this selects a solid fill."""
        value = min(max(0.0, float(value)), 1.0)
        self._density = to_str(value)
        self._fillmode = "solid"
        return self

    def fill_transparent(self, active: bool = True) -> FillSpecs:
        """Make the fill transparent or opaque; selects a solid fill if none is set."""
        self._transparent = "transparent" if active else ""
        if not self._fillmode:
            self._fillmode = "solid"
        return self

    def border_line_color(self, color: str) -> FillSpecs:
        """Set the colour of the border line."""
        self._bordercolor = f"'{color}'"
        return self

    def border_line_width(self, value: int) -> FillSpecs:
        """Set the width of the border line."""
        self._borderlinewidth = to_str(value)
        return self

    def border_show(self, show: bool = True) -> FillSpecs:
        """Show or hide the border."""
        self._bordershow = "yes" if show else "no"
        return self

    def border_hide(self) -> FillSpecs:
        """Hide the border."""
        return self.border_show(False)

    def repr(self) -> str:
        if self._fillmode == "solid":
            fillstyle = f"fillstyle {self._transparent} solid {self._density}"
        elif self._fillmode == "pattern":
            fillstyle = f"fillstyle {self._transparent} pattern {self._pattern_number}"
        elif self._fillmode == "empty":
            fillstyle = "fillstyle empty"
        else:
            fillstyle = ""

        if self._bordershow == "yes":
            borderstyle = (
                "border "
                + option_value_str("linecolor", self._bordercolor)
                + option_value_str("linewidth", self._borderlinewidth)
            )
        elif self._bordershow == "no":
            borderstyle = "noborder"
        else:
            borderstyle = ""

        return remove_extra_whitespaces(f"{self._fillcolor} {fillstyle} {borderstyle}")


class LayoutSpecs(Specs):
    """Placement of a figure on the canvas: origin, size and margins."""

    def __init__(self) -> None:
        self._origin: tuple[float, float] | None = None
        self._size: tuple[float, float] | None = None
        self._margins: tuple[float, float, float, float] | None = None
        self._margins_absolute = False

    def origin(self, x: float, y: float) -> LayoutSpecs:
        """Set the origin relative to the canvas (0,0 bottom left, 1,1 top right)."""
        self._origin = (x, y)
        return self

    def size(self, sx: float, sy: float) -> LayoutSpecs:
        """Set the size relative to the canvas (1 fills the whole canvas)."""
        self._size = (sx, sy)
        return self

    def margins_absolute(
        self,
        left: float = -1,
        right: float = -1,
        top: float = -1,
        bottom: float = -1,
    ) -> LayoutSpecs:
        """Set absolute margins; -1 lets gnuplot compute a margin itself."""
        self._margins = (left, right, top, bottom)
        self._margins_absolute = True
        return self

    def repr(self) -> str:
        lines = []
        if self._origin is not None:
            x, y = self._origin
            lines.append(f"set origin {to_str(x)},{to_str(y)}")
        if self._size is not None:
            sx, sy = self._size
            lines.append(f"set size {to_str(sx)},{to_str(sy)}")
        if self._margins is not None:
            prefix = "" if self._margins_absolute else "at screen "
            for name, value in zip(("lmargin", "rmargin", "tmargin", "bmargin"), self._margins):
                lines.append(f"set {name} {prefix}{to_str(value)}")
        return "".join(line + "\n" for line in lines)