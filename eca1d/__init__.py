"""Elementary 1D Cellular Automata Explorer - simulate elementary cellular automata and draw them in the terminal."""

__version__ = "0.1.0"

from .automaton import Bit, RuleTable, ElementaryAutomaton, single_cell_seed, random_seed
from .visualize import TermColor, RenderMode, draw_ascii, draw_unicode, draw_braille, render, format_rule_table

__all__ = [
    "Bit",
    "RuleTable",
    "ElementaryAutomaton",
    "single_cell_seed",
    "random_seed",
    "TermColor",
    "RenderMode",
    "draw_ascii",
    "draw_unicode",
    "draw_braille",
    "render",
    "format_rule_table",
]
