"""1D elementary cellular automaton simulation engine with circular boundaries."""

import numpy as np
from enum import IntEnum
from typing import List, Optional, Sequence, Union


class Bit(IntEnum):
    """Two-valued cell state."""
    DEAD = 0
    ALIVE = 1

    @classmethod
    def from_value(cls, value: int) -> "Bit":
        """Any value greater than 0 is alive."""
        return cls.ALIVE if value > 0 else cls.DEAD


class RuleTable:
    """Next-state table for the 8 possible 3-cell neighborhoods.

    Entry i is the next value of the center cell for the neighborhood whose
    bits (left, center, right) read as the binary number i, so 0 = 000 and
    7 = 111. Entry i equals bit i of the rule number.
    """

    def __init__(self, rule: int):
        if int(rule) != rule or not (0 <= rule <= 255):
            raise ValueError("rule must be an integer in [0,255]")
        self.rule = int(rule)
        self.table = np.array([(self.rule >> i) & 1 for i in range(8)], dtype=np.uint8)
        self.table.flags.writeable = False

    def get(self, left: int, center: int, right: int) -> Bit:
        """Look up the next state for the neighborhood (left, center, right)."""
        idx = (Bit.from_value(left) << 2) | (Bit.from_value(center) << 1) | Bit.from_value(right)
        return Bit(int(self.table[idx]))

    def values(self) -> List[int]:
        """Table values in pattern order 000..111."""
        return [int(v) for v in self.table]

    @staticmethod
    def patterns() -> List[str]:
        return [format(i, "03b") for i in range(8)]

    def to_string(self) -> str:
        """8-bit binary form of the rule, most significant bit first."""
        return format(self.rule, "08b")

    def __repr__(self):
        return f"RuleTable({self.rule})"

    def __eq__(self, other):
        if not isinstance(other, RuleTable):
            return False
        return self.rule == other.rule

    def __hash__(self):
        return hash(self.rule)


class ElementaryAutomaton:
    """1D elementary cellular automaton with toroidal (wraparound) boundaries."""

    def __init__(self, seed: Sequence[int], rule: Union[int, RuleTable]):
        if len(seed) == 0:
            raise ValueError("seed must contain at least one cell")
        self.rule = rule if isinstance(rule, RuleTable) else RuleTable(rule)
        self._state = (np.asarray(seed) > 0).astype(np.uint8)
        self.generation = 0

    @property
    def width(self) -> int:
        return len(self._state)

    @property
    def state(self) -> List[int]:
        """Copy of the current generation as 0/1 ints."""
        return self._state.tolist()

    def step(self):
        """Advance simulation by one generation.

        The new row is built from a snapshot of the old one; the leftmost and
        rightmost cells are each other's neighbors.
        """
        x = self._state
        left = np.roll(x, 1)
        right = np.roll(x, -1)
        idx = (left << 2) | (x << 1) | right
        self._state = self.rule.table[idx].astype(np.uint8)
        self.generation += 1

    def run(self, n: int) -> List[List[int]]:
        """Run for n steps, returning n rows starting with the current state.

        Each row is captured before the step that follows it, so repeated
        calls continue from wherever the previous call left off.
        """
        if n < 0:
            raise ValueError("n must be non-negative")
        rows = []
        for _ in range(n):
            rows.append(self.state)
            self.step()
        return rows

    def population(self) -> int:
        """Count live cells."""
        return int(np.sum(self._state))


def single_cell_seed(width: int) -> List[int]:
    """Seed with a single live cell in the middle."""
    if width < 1:
        raise ValueError("width must be at least 1")
    seed = [0] * width
    seed[width // 2] = 1
    return seed


def random_seed(width: int, density: float, rng: Optional[np.random.Generator] = None) -> List[int]:
    """Seed where each cell is alive with probability `density`."""
    if not (0.0 <= density <= 1.0):
        raise ValueError("density must be in [0,1]")
    if rng is None:
        rng = np.random.default_rng()
    return (rng.random(width) < density).astype(np.uint8).tolist()
