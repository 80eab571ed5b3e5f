import re
from dataclasses import fields

import pytest

from kat.highlight import Highlighter, Kat, Palette, palette_for
from kat.params import params_for
from kat.resources import icon_for

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def test_pager_palette_is_empty():
    palette = palette_for(True)
    assert all(getattr(palette, f.name) == "" for f in fields(Palette))


def test_colour_palette_values():
    palette = palette_for(False)
    assert palette.reset == "\033[0m"
    assert palette.green == "\033[38;2;166;226;46m"
    assert palette.gray_four == "\033[38;2;68;68;68m"


def test_plain_text_is_unchanged():
    h = Highlighter(params_for("txt"), palette_for(False))
    line = 'int main() { printf("x\\n"); } // note'
    assert h.highlight(line) == line


def test_c_declaration_colours():
    p = palette_for(False)
    h = Highlighter(params_for("c"), p)
    assert h.highlight("int main() {") == f"{p.blue_light}int{p.reset} {p.green}main{p.reset}() {{"


def test_c_line_comment():
    p = palette_for(False)
    h = Highlighter(params_for("c"), p)
    assert h.highlight("x // note") == f"x {p.gray_four}// note{p.reset}"


@pytest.mark.parametrize(
    "line",
    ["int main() {", "return 0;", "x // note", 'printf("hi\\n");'],
)
def test_stripped_colours_match_pager_output(line):
    coloured = Highlighter(params_for("cpp"), palette_for(False)).highlight(line)
    plain = Highlighter(params_for("cpp"), palette_for(True)).highlight(line)
    assert ANSI.sub("", coloured) == plain
    assert coloured != plain


def test_multiline_comment_state():
    p = palette_for(False)
    h = Highlighter(params_for("c"), p)
    h.highlight("a /* b")
    assert h.in_comment is True
    assert h.highlight("still inside") == p.gray_four + "still inside" + p.reset
    h.highlight("done */")
    assert h.in_comment is False
    assert h.highlight("x") == "x"


def test_filetype_from_extension():
    assert Kat("dir/archive.tar.gz", True).filetype == "gz"
    assert Kat(".bashrc", True).filetype == ""
    assert Kat("main.cpp", True).params == params_for("cpp")


def test_header_in_pager_mode():
    lines = Kat("main.cpp", True).header().splitlines()
    assert len(lines) == 3
    assert lines[0] == "\u2500" * 7 + "\u252c" + "\u2500" * 40
    assert lines[1] == f"   {icon_for('cpp')}   \u2502 main.cpp"
    assert lines[2] == "\u2500" * 7 + "\u253c" + "\u2500" * 40


def test_footer_respects_width():
    assert Kat("a.txt", True, width=10).footer() == "\u2500" * 7 + "\u2534" + "\u2500" * 10 + "\n"


def test_format_line_number_padding():
    kat = Kat("a.txt", True)
    assert kat.format_line("hello", 3) == "   3   \u2502 hello\n"
    assert kat.format_line("hello", 12) == "  12   \u2502 hello\n"


def test_render_frames_lines():
    kat = Kat("a.txt", True)
    chunks = list(kat.render(["a", "b"]))
    assert chunks[0] == kat.header()
    assert chunks[-1] == kat.footer()
    assert chunks[1:-1] == [kat.format_line("a", 1), kat.format_line("b", 2)]


def test_coloured_render_strips_to_plain():
    lines = ["int x;", "return x;"]
    coloured = "".join(Kat("f.c", False).render(lines))
    plain = "".join(Kat("f.c", True).render(lines))
    assert ANSI.sub("", coloured) == plain


def test_print_code_writes_listing(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    kat = Kat(str(path), True)

    class Sink:
        def __init__(self):
            self.parts = []

        def write(self, text):
            self.parts.append(text)

    sink = Sink()
    kat.print_code(sink)
    output = "".join(sink.parts)
    assert output == "".join(Kat(str(path), True).render(["first", "second"]))


def test_print_code_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Kat(str(tmp_path / "missing.c"), True).print_code(None)