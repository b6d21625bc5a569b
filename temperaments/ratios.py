from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
import math
from typing import List, Tuple

def ratio_to_cents(ratio: float) -> float:
    return 1200.0 * math.log2(ratio)

@dataclass(frozen=True)
class IntervalRatio:
    """Just-intonation interval n1:n2. Cents are always recomputed from the terms."""
    n1: int
    n2: int
    label: str = ""
    note: str = ""

    def __post_init__(self):
        if self.n1 <= 0 or self.n2 <= 0:
            raise ValueError(f"Ratio terms must be positive, got {self.n1}:{self.n2}")

    @property
    def cents(self) -> float:
        return ratio_to_cents(self.n1 / self.n2)

    @classmethod
    def from_fraction(cls, frac: Fraction, label: str = "", note: str = "") -> "IntervalRatio":
        return cls(frac.numerator, frac.denominator, label, note)

    def __str__(self) -> str:
        return f"{self.n1}:{self.n2}"

UNISON = IntervalRatio(1, 1, "P1", "C")

# minor second through octave, ascending
DEFAULT_CATALOGUE: Tuple[IntervalRatio, ...] = (
    IntervalRatio(16, 15, "m2", "Db"),
    IntervalRatio(9, 8, "M2", "D"),
    IntervalRatio(6, 5, "m3", "Eb"),
    IntervalRatio(5, 4, "M3", "E"),
    IntervalRatio(4, 3, "P4", "F"),
    IntervalRatio(11, 8, "11HTT"),
    IntervalRatio(7, 5, "l7TT"),
    IntervalRatio(10, 7, "g7TT"),
    IntervalRatio(3, 2, "P5", "G"),
    IntervalRatio(8, 5, "m6", "Ab"),
    IntervalRatio(5, 3, "M6", "A"),
    IntervalRatio(7, 4, "H7", "Bbb"),
    IntervalRatio(9, 5, "m7", "Bb"),
    IntervalRatio(15, 8, "M7", "B"),
    IntervalRatio(2, 1, "P8", "C"),
)

# Harry Partch's 43-tone scale, unison and octave closure included
PARTCH_43: List[Fraction] = [Fraction(n, d) for n, d in [
    (1, 1), (81, 80), (33, 32), (21, 20), (16, 15), (12, 11), (11, 10), (10, 9),
    (9, 8), (8, 7), (7, 6), (32, 27), (6, 5), (11, 9), (5, 4), (14, 11),
    (9, 7), (21, 16), (4, 3), (27, 20), (11, 8), (7, 5), (10, 7), (16, 11),
    (40, 27), (3, 2), (32, 21), (14, 9), (11, 7), (8, 5), (18, 11), (5, 3),
    (27, 16), (12, 7), (7, 4), (16, 9), (9, 5), (20, 11), (11, 6), (15, 8),
    (40, 21), (64, 33), (160, 81), (2, 1),
]]

def partch_ratios() -> List[IntervalRatio]:
    by_terms = {(r.n1, r.n2): r for r in DEFAULT_CATALOGUE}
    out = []
    for frac in PARTCH_43:
        ref = UNISON if frac == 1 else by_terms.get((frac.numerator, frac.denominator))
        label, note = (ref.label, ref.note) if ref else ("", "")
        out.append(IntervalRatio.from_fraction(frac, label, note))
    return out
