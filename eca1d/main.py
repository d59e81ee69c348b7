#!/usr/bin/env python3
"""CLI for exploring elementary 1D cellular automata in the terminal."""

import argparse
import shutil
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from . import __version__
from .automaton import ElementaryAutomaton, random_seed, single_cell_seed
from .visualize import RenderMode, TermColor, format_rule_table, render

# Used when the terminal size can't be detected.
DEFAULT_TERMINAL_SIZE = (80, 40)


def parse_rule(value: str) -> int:
    """Parse a rule given as a decimal number or a 0b-prefixed binary string."""
    err = "has to be binary string (ex 0b01010101) or number between 0-255"
    try:
        rule = int(value[2:], 2) if value.startswith("0b") else int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(err)
    if not (0 <= rule <= 255):
        raise argparse.ArgumentTypeError(err)
    return rule


def parse_count(value: str) -> int:
    """Parse a non-negative integer."""
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("has to be a number")
    if count < 0:
        raise argparse.ArgumentTypeError("has to be a number")
    return count


def parse_density(value: str) -> float:
    """Parse a seed density between 0 and 1."""
    try:
        density = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError("has to be number")
    if density > 1.0 or density < 0.0:
        raise argparse.ArgumentTypeError("has to be between 0 and 1")
    return density


def parse_color(value: str) -> TermColor:
    """Parse a color name, excluding reset."""
    try:
        color = TermColor.from_name(value)
    except ValueError:
        color = None
    if color is None or color == TermColor.RESET:
        names = ", ".join(c.value for c in TermColor if c != TermColor.RESET)
        raise argparse.ArgumentTypeError(f"has to be one of {names}")
    return color


def terminal_size() -> Tuple[int, int]:
    """(columns, lines) of the attached terminal."""
    size = shutil.get_terminal_size(fallback=DEFAULT_TERMINAL_SIZE)
    return size.columns, size.lines


def resolve_dimensions(
    mode: RenderMode,
    term_size: Tuple[int, int],
    width: Optional[int] = None,
    iterations: Optional[int] = None,
    print_rules: bool = False,
) -> Tuple[int, int]:
    """Pick width and iterations that fill the terminal unless given explicitly.

    Braille symbols hold 4x2 cells and HALF BLOCKS 2x1, so the automaton is
    scaled up to match. Printing the rules takes two extra lines at the top.
    """
    term_width, term_height = term_size
    if width is None:
        width = term_width * 2 if mode == RenderMode.BRAILLE else term_width
    if iterations is None:
        offset = 3 if print_rules else 1
        if mode == RenderMode.BRAILLE:
            mult = 4
        elif mode == RenderMode.UNICODE:
            mult = 2
        else:
            mult = 1
        iterations = max(term_height - offset, 0) * mult
    return width, iterations


@dataclass
class RunConfig:
    """Everything needed for one run, resolved from the command line."""
    rule: int
    width: int
    iterations: int
    mode: RenderMode = RenderMode.ASCII
    density: Optional[float] = None
    seed: Optional[int] = None
    fg: TermColor = TermColor.WHITE
    bg: TermColor = TermColor.BLACK
    print_rules: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace, term_size: Tuple[int, int]) -> "RunConfig":
        if args.braille:
            mode = RenderMode.BRAILLE
        elif args.unicode:
            mode = RenderMode.UNICODE
        else:
            mode = RenderMode.ASCII
        width, iterations = resolve_dimensions(
            mode, term_size, args.width, args.iterations, args.print_rules
        )
        return cls(
            rule=args.rule,
            width=width,
            iterations=iterations,
            mode=mode,
            density=args.random,
            seed=args.seed,
            fg=args.fg,
            bg=args.bg,
            print_rules=args.print_rules,
        )

    def make_seed(self) -> List[int]:
        """Random seed when a density is set, otherwise a single centre cell."""
        if self.density is not None:
            return random_seed(self.width, self.density, rng=np.random.default_rng(self.seed))
        return single_cell_seed(self.width)


def run(config: RunConfig) -> str:
    """Simulate and render according to the config."""
    if config.width < 1 or config.iterations == 0:
        history = []
    else:
        ca = ElementaryAutomaton(config.make_seed(), config.rule)
        history = ca.run(config.iterations)
    return render(history, config.mode, config.fg, config.bg)


def build_parser() -> argparse.ArgumentParser:
    """Command-line parser for the explorer."""
    parser = argparse.ArgumentParser(
        prog="eca1d",
        description="Elementary 1D Cellular Automata Explorer - quickly explore different rules for elementary 1D cellular automata",
    )
    parser.add_argument("rule", type=parse_rule, help="The rule to use (0-255 or binary like 0b01011010)")
    parser.add_argument("-w", "--width", type=parse_count, default=None,
                        help="Width of the automaton (defaults to the terminal width)")
    parser.add_argument("-i", "--iter", dest="iterations", type=parse_count, default=None,
                        help="Number of simulation steps (defaults to the terminal height - 1)")
    parser.add_argument("-r", "--random", type=parse_density, default=None,
                        help="Randomly generated seed with the given density (0-1)")
    parser.add_argument("--seed", type=parse_count, default=None, help="Random seed for --random")
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("-b", "--braille", action="store_true",
                            help="Draw the image using unicode braille symbols")
    mode_group.add_argument("-u", "--unicode", action="store_true",
                            help="Draw the image using unicode HALF BLOCK symbols")
    parser.add_argument("-p", "--print-rules", action="store_true", help="Print the rules")
    parser.add_argument("--fg", type=parse_color, default=TermColor.WHITE, help="Foreground color")
    parser.add_argument("--bg", type=parse_color, default=TermColor.BLACK, help="Background color")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print run details to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Simulate, render and print the automaton described by argv."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = RunConfig.from_args(args, terminal_size())

    if args.verbose:
        print(f"Rule: {config.rule} ({format(config.rule, '08b')})", file=sys.stderr)
        print(f"  Width: {config.width}", file=sys.stderr)
        print(f"  Iterations: {config.iterations}", file=sys.stderr)
        print(f"  Mode: {config.mode.value}", file=sys.stderr)
        if config.density is not None:
            print(f"  Random density: {config.density}", file=sys.stderr)

    if config.print_rules:
        print(format_rule_table(config.rule))

    print(run(config), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
