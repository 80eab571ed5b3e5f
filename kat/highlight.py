"""Colouring of source lines and the framed listing around them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO

from kat.params import LanguageParams, params_for
from kat.resources import icon_for

DEFAULT_WIDTH = 40
_GUTTER = 7


@dataclass(frozen=True)
class Palette:
    """Escape sequences used for each colour.

    ``remove`` is a regular expression matching one colour escape; when it is
    empty no escapes are stripped from string literals.
    """

    white: str = ""
    white_bold: str = ""
    pink: str = ""
    reset: str = ""
    green: str = ""
    yellow: str = ""
    blue_light: str = ""
    gray_four: str = ""
    gray_many: str = ""
    orange: str = ""
    purple: str = ""
    remove: str = ""


PLAIN_PALETTE = Palette()

COLOUR_PALETTE = Palette(
    white="\033[38;2;255;255;255m",
    white_bold="\033[1;38;2;255;255;255m",
    pink="\033[38;2;249;38;114m",
    reset="\033[0m",
    green="\033[38;2;166;226;46m",
    yellow="\033[38;2;230;219;116m",
    blue_light="\033[38;2;102;217;239m",
    gray_four="\033[38;2;68;68;68m",
    gray_many="\033[38;2;117;113;94m",
    orange="\033[38;2;253;151;31m",
    purple="\033[38;2;190;132;255m",
    remove="\033\\[[0-9;]*m",
)


def palette_for(pager: bool) -> Palette:
    """Return the empty palette when output goes to a pager, colours otherwise."""
    return PLAIN_PALETTE if pager else COLOUR_PALETTE


def _compile(pattern: str) -> "re.Pattern[str]":
    return re.compile(pattern, re.ASCII)


class Highlighter:
    """Colours lines one at a time, remembering open multi-line comments."""

    def __init__(self, params: LanguageParams, palette: Palette) -> None:
        self.params = params
        self.palette = palette
        self.in_comment = False
        self._comment = _compile(params.comment)
        self._fn1 = _compile(params.fn1)
        self._fn2 = _compile(params.fn2)
        self._special = [_compile(word + r"\b") for word in params.special]
        self._keywords = [_compile(r"\b" + word + r"\b") for word in params.keywords]
        self._header_and_url = _compile(params.header_and_url)
        self._args_fn = _compile(params.args_fn)
        self._literal_str = _compile(params.literal_str)
        self._str_newline = _compile(params.str_newline)
        self._colour_in_string = (
            _compile(f'(".*?)(?:{palette.remove})+(.*?")') if palette.remove else None
        )

    def _wrap(self, colour: str) -> "callable":
        reset = self.palette.reset
        return lambda m: colour + m.group(0) + reset

    def highlight(self, line: str) -> str:
        """Return ``line`` with colour escapes inserted."""
        p, c = self.params, self.palette

        if self.in_comment:
            end = line.find(p.multicom2)
            if end == -1:
                return c.gray_four + line + c.reset
            self.in_comment = False
            cut = end + 2
            line = c.gray_four + line[:cut] + c.reset + line[cut:]
            line = line[:cut] + self.highlight(line[cut:])

        line = self._comment.sub(self._wrap(c.gray_four), line)

        start = line.find(p.multicom1)
        if start != -1:
            line = line[:start] + c.gray_four + p.multicom1 + line[start + 2:]
            self.in_comment = True

        line = self._fn1.sub(lambda m: c.green + m.group(1) + c.reset + "(", line)
        line = self._fn2.sub(
            lambda m: m.group(1) + " " + c.green + m.group(2) + c.reset + "(", line
        )

        for pattern in self._special:
            line = pattern.sub(self._wrap(c.pink), line)
        for pattern in self._keywords:
            line = pattern.sub(self._wrap(c.blue_light), line)

        line = self._header_and_url.sub(self._wrap(c.yellow), line)
        line = self._args_fn.sub(lambda m: c.orange + m.group(1) + c.reset, line)

        if self._colour_in_string is not None:
            line = self._colour_in_string.sub(lambda m: m.group(1) + m.group(2), line)
        line = self._literal_str.sub(self._wrap(c.yellow), line)

        line = self._str_newline.sub(lambda m: c.purple + m.group(0) + c.yellow, line)
        return line


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class Kat:
    """Prints a file as a numbered, framed and highlighted listing."""

    def __init__(self, filename: str, pager: bool = False, width: int = DEFAULT_WIDTH) -> None:
        self.filename = filename
        suffix = Path(filename).suffix
        self.filetype = suffix[1:] if suffix.startswith(".") else suffix
        self.palette = palette_for(pager)
        self.params = params_for(self.filetype)
        self.width = width
        self._highlighter = Highlighter(self.params, self.palette)

    def _rule(self, joint: str) -> str:
        c = self.palette
        return (c.gray_four + "\u2500") * _GUTTER + joint + "\u2500" * self.width + c.reset + "\n"

    def header(self) -> str:
        """Return the three header lines: top rule, file line, separator."""
        c = self.palette
        title = (
            c.gray_four + " " + c.white + "  " + icon_for(self.filetype) + "  "
            + c.gray_four + " \u2502 " + c.white_bold + self.filename + c.reset + "\n"
        )
        return self._rule("\u252c") + title + self._rule("\u253c")

    def footer(self) -> str:
        """Return the closing rule."""
        return self._rule("\u2534")

    def format_line(self, line: str, number: int) -> str:
        """Return one numbered, highlighted line ending in a newline."""
        c = self.palette
        indent = "   " if number < 10 else "  "
        body = self._highlighter.highlight(line)
        return f"{indent}{c.gray_four}{number}   \u2502 {c.reset}{body}\n"

    def render(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield the header, each formatted line and the footer."""
        self._highlighter = Highlighter(self.params, self.palette)
        yield self.header()
        for number, line in enumerate(lines, start=1):
            yield self.format_line(line, number)
        yield self.footer()

    def print_code(self, out: Optional[TextIO] = None) -> None:
        """Write the listing of the file to ``out``; raises OSError if unreadable."""
        if out is None:
            import sys

            out = sys.stdout
        lines = _read_lines(self.filename)
        for chunk in self.render(lines):
            out.write(chunk)