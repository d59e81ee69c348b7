import numpy as np
import pytest

from eca1d.automaton import ElementaryAutomaton
from eca1d.visualize import (
    RESET,
    RenderMode,
    TermColor,
    bg_escape,
    braille_glyph,
    draw_ascii,
    draw_braille,
    draw_unicode,
    fg_escape,
    format_rule_table,
    render,
)

WHITE_FG = "\x1b[37m"
WHITE_BG = "\x1b[47m"
BLACK_FG = "\x1b[30m"
BLACK_BG = "\x1b[40m"


@pytest.mark.parametrize(
    "color, code",
    [
        (TermColor.BLACK, 0),
        (TermColor.RED, 1),
        (TermColor.GREEN, 2),
        (TermColor.YELLOW, 3),
        (TermColor.BLUE, 4),
        (TermColor.MAGENTA, 5),
        (TermColor.CYAN, 6),
        (TermColor.WHITE, 7),
    ],
)
def test_escape_codes(color, code):
    assert fg_escape(color) == f"\x1b[3{code}m"
    assert bg_escape(color) == f"\x1b[4{code}m"


def test_reset_escape_codes():
    assert fg_escape(TermColor.RESET) == RESET
    assert bg_escape(TermColor.RESET) == RESET
    assert RESET == "\x1b[0m"


def test_color_from_name():
    assert TermColor.from_name("Magenta") == TermColor.MAGENTA
    with pytest.raises(ValueError):
        TermColor.from_name("purple")


def test_draw_ascii():
    assert draw_ascii([[0, 1, 0, 1, 0]]) == ".#.#.\n"


def test_draw_ascii_multiple_rows():
    assert draw_ascii([[1, 0], [0, 2], [0, 0]]) == "#.\n.#\n..\n"
    assert draw_ascii([]) == ""


def test_draw_half_block_symbol():
    expected = f"{WHITE_BG}{BLACK_FG}▄{RESET}\n"
    assert draw_unicode([[1], [0]], TermColor.WHITE, TermColor.BLACK) == expected


def test_draw_half_block_bottom_alive():
    expected = f"{BLACK_BG}{WHITE_FG}▄{RESET}\n"
    assert draw_unicode([[0], [1]], TermColor.WHITE, TermColor.BLACK) == expected


def test_draw_half_block_drops_unpaired_row():
    data = [[1, 1], [0, 0], [1, 1]]
    cell = f"{WHITE_BG}{BLACK_FG}▄{RESET}"
    assert draw_unicode(data, TermColor.WHITE, TermColor.BLACK) == cell * 2 + "\n"


def test_draw_half_block_too_few_rows():
    assert draw_unicode([[1, 0, 1]], TermColor.WHITE, TermColor.BLACK) == ""
    assert draw_unicode([], TermColor.WHITE, TermColor.BLACK) == ""


def test_draw_half_block_uses_shorter_row():
    out = draw_unicode([[1, 1, 1], [0]], TermColor.WHITE, TermColor.BLACK)
    assert out.count("▄") == 1


def test_draw_braille_symbol():
    data = [[1, 0], [1, 1], [0, 0], [0, 1]]
    expected = f"{WHITE_FG}{BLACK_BG}⢓\n{RESET}"
    assert draw_braille(data, TermColor.WHITE, TermColor.BLACK) == expected
    assert "⢓" == chr(0x2800 + 0x01 + 0x02 + 0x10 + 0x80)


def test_braille_glyph_dots():
    assert braille_glyph([[0, 0]] * 4) == chr(0x2800)
    assert braille_glyph([[1, 1]] * 4) == chr(0x28FF)
    assert braille_glyph([[0, 1], [0, 0], [0, 0], [0, 0]]) == chr(0x2808)
    assert braille_glyph([[0, 0], [0, 0], [0, 0], [1, 0]]) == chr(0x2840)


def test_draw_braille_drops_incomplete_blocks():
    # 5 rows x 5 columns -> one row of two glyphs
    data = [[1] * 5 for _ in range(5)]
    out = draw_braille(data, TermColor.WHITE, TermColor.BLACK)
    assert out == f"{WHITE_FG}{BLACK_BG}" + chr(0x28FF) * 2 + f"\n{RESET}"


def test_draw_braille_too_few_rows():
    out = draw_braille([[1, 1]] * 3, TermColor.GREEN, TermColor.BLUE)
    assert out == "\x1b[32m\x1b[44m" + RESET


def test_draw_braille_single_reset():
    data = [[1, 0, 1, 0]] * 8
    out = draw_braille(data, TermColor.WHITE, TermColor.BLACK)
    assert out.count(RESET) == 1
    assert out.endswith(RESET)
    assert out.count("\n") == 2


def test_render_dispatch():
    data = [[1, 0], [0, 1], [1, 1], [0, 0]]
    assert render(data, RenderMode.ASCII) == draw_ascii(data)
    assert render(data, "unicode") == draw_unicode(data, TermColor.WHITE, TermColor.BLACK)
    assert render(data, RenderMode.BRAILLE, TermColor.RED, TermColor.BLACK) == draw_braille(
        data, TermColor.RED, TermColor.BLACK
    )


def test_render_accepts_numpy_history():
    data = np.array([[0, 1, 0, 1, 0]], dtype=np.uint8)
    assert draw_ascii(data) == ".#.#.\n"


def test_render_automaton_history():
    ca = ElementaryAutomaton([0, 0, 1, 0, 0], 90)
    assert draw_ascii(ca.run(3)) == "..#..\n.#.#.\n#...#\n"


def test_format_rule_table():
    lines = format_rule_table(30).split("\n")
    assert lines[0] == "| 000 | 001 | 010 | 011 | 100 | 101 | 110 | 111 |"
    assert lines[1] == "|  0  |  1  |  1  |  1  |  1  |  0  |  0  |  0  |"
