"""Print source files with a framed header, line numbers and syntax colouring."""

__version__ = "0.1.0"