# gnuscript

Small, composable pieces for writing gnuplot scripts from Python.

`gnuscript` turns plot options into gnuplot command text. It does not draw
anything itself. It builds strings that you write to a script file, and it
can pass that file to `gnuplot` for you.

## Installation

```
pip install gnuscript
```

To run the script files you also need `gnuplot` on your `PATH`.

## Modules

- `gnuscript.constants`: numeric constants (`PI`, `GOLDEN_RATIO`,
  `INCH_TO_POINTS`, `POINT_TO_INCHES`, `MISSING_INDICATOR`, ...) and the
  default style values (`DEFAULT_FIGURE_WIDTH`, `DEFAULT_GRID_LINECOLOR`,
  `DEFAULT_TICS_SCALE_MAJOR_BY`, ...).
- `gnuscript.values.StringOrDouble`: takes a number or a string and stores it
  as a gnuplot value. Numbers are written with six decimal places (`1.0`
  becomes `"1.000000"`). Strings such as `""` or `"*"` are kept unchanged.
- `gnuscript.utils`: string helpers and script builders:
  - formatting: `to_str`, `trimleft`, `trimright`, `trim`,
    `collapse_whitespaces`, `remove_extra_whitespaces`, `titlestr`,
    `option_str`, `option_value_str`, `cmd_value_str`,
    `cmd_value_escaped_str`, `figure_size_str`, `canvas_size_str`, `rgb` and
    `Angle` (`deg`, `rad`, `pi`);
  - data: `minsize`, `escape_if_needed`, `format_rows`, `write_dataset`;
  - script sections: `show_terminal_cmd`, `save_terminal_cmd`, `output_cmd`,
    `multiplot_cmd`, `unset_palette_cmd`;
  - files and running: `cleanpath` removes the characters `:*?!"<>|` from an
    output path. `run_script` runs `gnuplot` on a script file and raises
    `GnuplotError` if gnuplot cannot be started or exits with a non-zero
    status.
- `gnuscript.specs`: the abstract `Specs` base class and the `DepthSpecs`,
  `FontSpecs` and `OffsetSpecs` option objects.
- `gnuscript.styles`: the `FillSpecs` and `LayoutSpecs` option objects.

Every specs object has a `repr()` method that returns its gnuplot text.
`str()` of the object returns the same text. The setter methods return the
object itself, so you can chain calls.

## Example

```python
from gnuscript.styles import FillSpecs, LayoutSpecs
from gnuscript.utils import output_cmd, run_script, save_terminal_cmd

fill = FillSpecs().fill_solid().fill_color("pink").fill_intensity(0.5).border_show(True)
print(fill.repr())
# fillcolor 'pink' fillstyle solid 0.5 border

layout = LayoutSpecs().origin(0.0, 0.5).size(0.5, 0.5)
print(layout.repr(), end="")
# set origin 0,0.5
# set size 0.5,0.5

script = (
    save_terminal_cmd("pdfcairo", "6in,4in", "font 'Helvetica,12'")
    + output_cmd("sine.pdf")
    + layout.repr()
    + "plot sin(x)\n"
)
with open("sine.plt", "w", encoding="utf-8") as fh:
    fh.write(script)

run_script("sine.plt", False)
```

To write data for gnuplot, pass columns of values to `write_dataset`:

```python
from gnuscript.utils import write_dataset

text = write_dataset(0, [0, 1, 2], [1.0, float("nan"), 4.0])
```

The result is a data set block with a `# DATASET #0` comment header, followed
by one row per value and two blank lines. Rows end at the shortest column.
Strings are written in double quotes. Non-finite numbers are written as
`"?"`.

## What it does not do

`gnuscript` has no plot, figure or canvas objects, and it has no built-in
colour palettes. Line, point, border, grid, tics and legend options are not
included either. You write the `plot` commands and any other settings
yourself, and join them with the fragments above into a script.

## Running the tests

```
pip install -e .[test]
pytest
```