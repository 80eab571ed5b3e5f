# kat

`kat` prints a source file to the terminal like `cat`. It adds a framed header
with the file's type icon and name, numbers each line, and colours keywords,
function names, comments and string literals.

The language is chosen from the file extension. These extensions get their own
rules: `c`, `cpp`, `h`, `hpp`, `ter`, `java`, `py`, `js`, `ts`, `cs`, `go`,
`sh`, `bash`, `swift`, `rs`, `sql` and `my`. The `js`, `ts` and `cs` extensions
are coloured with the same rules as `py`. Any other file is printed uncoloured
inside the same frame.

When standard output is not a terminal, for example when piped into a pager or
a file, no colour codes are written; only the frame, line numbers and text.

## Installation

```
pip install .
```

## Usage

```
kat path/to/file.cpp
kat --help
kat --version
```

Only the first argument is used.

- `--help`, `-h`: print usage and exit with status 0.
- `--version`, `-v`: print the version and exit with status 0.

Any other argument beginning with `-` is rejected with `Invalid parameter.` and
exit status 1. Running `kat` with no argument, or naming a file that cannot be
opened, also exits with status 1.

## Use from Python

```python
import sys
from kat.highlight import Kat

Kat("example.py", pager=True, width=40).print_code(sys.stdout)
```

- `Kat.render(lines)` yields the header, each numbered line and the footer as
  strings, without reading a file; `Kat.header()`, `Kat.footer()` and
  `Kat.format_line(line, number)` give the pieces separately.
- `kat.params.params_for(extension)` returns the `LanguageParams` (keyword
  lists and patterns) for an extension without its dot.
- `kat.highlight.Highlighter(params, palette).highlight(line)` colours one
  line at a time, remembering an open multi-line comment between calls.
  `kat.highlight.palette_for(pager)` returns the empty palette when `pager` is
  true and the colour palette otherwise.
- `kat.resources.icon_for(extension)` returns the header icon glyph.
- `kat.cli.main(argv)` runs the command and returns its exit status.

## Limitations

The frame is a fixed 40 characters wide by default (the `width` argument of
`Kat`); it does not follow the terminal's width. Colouring is done by regular
expressions line by line, not by parsing, so it is approximate. The header
icons are glyphs from a patched icon font and show as placeholders without one.

## Running the tests

```
pip install ".[test]"
pytest
```