"""Terminal rendering of 1-bit images built from automaton histories."""

from enum import Enum
from typing import Sequence, Union

from .automaton import RuleTable


class TermColor(Enum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    RESET = "reset"

    @classmethod
    def from_name(cls, name: str) -> "TermColor":
        """Parse a color name, case-insensitive."""
        return cls(name.strip().lower())


class RenderMode(Enum):
    ASCII = "ascii"
    UNICODE = "unicode"  # 2x1 half blocks
    BRAILLE = "braille"  # 4x2 braille cells


RESET = "\x1b[0m"
HALF_BLOCK = "▄"
BRAILLE_BASE = 0x2800

# (foreground, background) escape pair per color
_ESCAPES = {
    TermColor.BLACK: ("\x1b[30m", "\x1b[40m"),
    TermColor.RED: ("\x1b[31m", "\x1b[41m"),
    TermColor.GREEN: ("\x1b[32m", "\x1b[42m"),
    TermColor.YELLOW: ("\x1b[33m", "\x1b[43m"),
    TermColor.BLUE: ("\x1b[34m", "\x1b[44m"),
    TermColor.MAGENTA: ("\x1b[35m", "\x1b[45m"),
    TermColor.CYAN: ("\x1b[36m", "\x1b[46m"),
    TermColor.WHITE: ("\x1b[37m", "\x1b[47m"),
    TermColor.RESET: (RESET, RESET),
}

# Dot value for each (row, col) of a 4x2 braille cell.
# See https://en.wikipedia.org/wiki/Braille_Patterns
_BRAILLE_DOTS = (
    (0, 0, 0x01), (0, 1, 0x08),
    (1, 0, 0x02), (1, 1, 0x10),
    (2, 0, 0x04), (2, 1, 0x20),
    (3, 0, 0x40), (3, 1, 0x80),
)

Matrix = Sequence[Sequence[int]]


def fg_escape(color: TermColor) -> str:
    """Foreground escape sequence for the color."""
    return _ESCAPES[color][0]


def bg_escape(color: TermColor) -> str:
    """Background escape sequence for the color."""
    return _ESCAPES[color][1]


def draw_ascii(data: Matrix) -> str:
    """Render the image with '#' for live cells and '.' for dead ones."""
    lines = []
    for row in data:
        lines.append("".join("#" if el > 0 else "." for el in row) + "\n")
    return "".join(lines)


def draw_unicode(data: Matrix, fg: TermColor, bg: TermColor) -> str:
    """Render the image with unicode HALF BLOCKS, two rows per text line.

    The top cell sets the background and the bottom cell the foreground of
    the lower half block, so each character carries two pixels. A trailing
    unpaired row is dropped.
    """
    res = []
    for i in range(0, len(data) - 1, 2):
        for top, bottom in zip(data[i], data[i + 1]):
            top_color = bg_escape(fg if top > 0 else bg)
            bottom_color = fg_escape(fg if bottom > 0 else bg)
            res.append(f"{top_color}{bottom_color}{HALF_BLOCK}{RESET}")
        res.append("\n")
    return "".join(res)


def braille_glyph(block: Matrix) -> str:
    """Braille character for a 4x2 block."""
    codepoint = BRAILLE_BASE
    for r, c, dot in _BRAILLE_DOTS:
        if block[r][c] > 0:
            codepoint += dot
    return chr(codepoint)


def draw_braille(data: Matrix, fg: TermColor, bg: TermColor) -> str:
    """Render the image with unicode braille symbols, one per 4x2 block.

    Incomplete trailing blocks (fewer than 4 rows or 2 columns left) are
    dropped rather than padded. Colors are set once for the whole image.
    """
    res = [fg_escape(fg), bg_escape(bg)]
    for i in range(0, len(data) - 3, 4):
        rows = data[i:i + 4]
        width = min(len(row) for row in rows)
        for j in range(0, width - 1, 2):
            block = [row[j:j + 2] for row in rows]
            res.append(braille_glyph(block))
        res.append("\n")
    res.append(RESET)
    return "".join(res)


def render(
    data: Matrix,
    mode: Union[RenderMode, str] = RenderMode.ASCII,
    fg: TermColor = TermColor.WHITE,
    bg: TermColor = TermColor.BLACK,
) -> str:
    """Render the image in the given mode."""
    mode = RenderMode(mode)
    if mode == RenderMode.BRAILLE:
        return draw_braille(data, fg, bg)
    elif mode == RenderMode.UNICODE:
        return draw_unicode(data, fg, bg)
    return draw_ascii(data)


def format_rule_table(rule: Union[int, RuleTable]) -> str:
    """Two-line table of each neighborhood pattern and its next state."""
    table = rule if isinstance(rule, RuleTable) else RuleTable(rule)
    top = "".join(f" {p} |" for p in table.patterns())
    bottom = "".join(f"  {v}  |" for v in table.values())
    return f"|{top}\n|{bottom}"
