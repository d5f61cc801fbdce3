"""Building blocks for gnuplot scripts: constants, option specs, data sets and script sections."""

__version__ = "0.3.1"

__all__ = ["constants", "values", "utils", "specs", "styles"]