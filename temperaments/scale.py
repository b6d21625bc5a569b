from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from temperaments.ratios import IntervalRatio, DEFAULT_CATALOGUE

@dataclass(frozen=True)
class ScaleStep:
    index: int
    cents: float
    frequency: Optional[float] = None

@dataclass(frozen=True)
class AnnotatedStep:
    """A generated step paired with its placement result."""
    step: ScaleStep
    ratio: Optional[IntervalRatio] = None
    note_name: Optional[str] = None

    @property
    def index(self) -> int:
        return self.step.index

    @property
    def cents(self) -> float:
        return self.step.cents

    @property
    def frequency(self) -> Optional[float]:
        return self.step.frequency

    @property
    def just_error(self) -> Optional[float]:
        if self.ratio is None:
            return None
        return self.cents - self.ratio.cents

@dataclass(frozen=True)
class Scale:
    name: str
    steps: Tuple[AnnotatedStep, ...]
    catalogue: Tuple[IntervalRatio, ...] = field(default=DEFAULT_CATALOGUE, repr=False)

    @property
    def nb_steps(self) -> int:
        return len(self.steps) - 1

    def placed(self) -> Tuple[AnnotatedStep, ...]:
        return tuple(s for s in self.steps if s.ratio is not None)

    def unplaced_ratios(self) -> Tuple[IntervalRatio, ...]:
        used = {s.ratio for s in self.steps if s.ratio is not None}
        return tuple(r for r in self.catalogue if r not in used)
