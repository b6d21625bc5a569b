from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from temperaments.ratios import IntervalRatio, DEFAULT_CATALOGUE, partch_ratios
from temperaments.scale import ScaleStep, Scale
from temperaments.placement import place_ratios, annotate_exact
from temperaments.notes import edo_note_names

logger = logging.getLogger(__name__)

class ScaleFamily(Enum):
    EDO = "edo"
    CARLOS = "carlos"
    ORWELL = "orwell"
    PARTCH = "partch"

# ─────────────────────────── Parameters ───────────────────────────

@dataclass(frozen=True)
class EdoParams:
    divisions: int
    ref_frequency: float = 261.625565
    family = ScaleFamily.EDO

    def __post_init__(self):
        if self.divisions < 1:
            raise ValueError("EDO needs at least one division")

    @property
    def name(self) -> str:
        return f"{self.divisions}-EDO"

@dataclass(frozen=True)
class CarlosParams:
    w5: int
    w3maj: int
    w3min: int
    nb_steps: int
    octaves: int = 1
    label: str = "Wendy Carlos scale"
    family = ScaleFamily.CARLOS

    @property
    def name(self) -> str:
        return self.label

@dataclass(frozen=True)
class OrwellParams:
    """Closed-form generator when edo is None, else `generator_steps` of `edo`-EDO."""
    nb_steps: int
    edo: Optional[int] = None
    generator_steps: Optional[int] = None
    family = ScaleFamily.ORWELL

    def __post_init__(self):
        if self.nb_steps < 1:
            raise ValueError("Orwell needs at least one step")
        if (self.edo is None) != (self.generator_steps is None):
            raise ValueError("edo and generator_steps go together")
        if self.edo is not None and (self.edo < 1 or self.generator_steps < 1):
            raise ValueError("edo and generator_steps must be positive")

    @property
    def name(self) -> str:
        if self.edo is None:
            return f"Orwell {self.nb_steps} (P12/7)"
        return f"Orwell {self.nb_steps} ({self.generator_steps}-{self.edo})"

@dataclass(frozen=True)
class PartchParams:
    family = ScaleFamily.PARTCH

    @property
    def nb_steps(self) -> int:
        return 43

    @property
    def name(self) -> str:
        return "Partch 43"

Params = Union[EdoParams, CarlosParams, OrwellParams, PartchParams]

CARLOS_PRESETS: Dict[str, CarlosParams] = {
    "a": CarlosParams(9, 5, 4, 15 + 2, label="Wendy Carlos scale Alpha"),    # 15.39 per octave
    "b": CarlosParams(11, 6, 5, 18 + 2, label="Wendy Carlos scale Beta"),    # 18.8 per octave
    "g": CarlosParams(20, 11, 9, 34 + 2, label="Wendy Carlos scale Gamma"),  # 34.19 per octave
    "d": CarlosParams(50, 28, 31, 91 + 2, label="Wendy Carlos scale Delta"),
    "pq41": CarlosParams(24, 13, 11, 41 + 2, label="Wendy Carlos scale Pq41EDO"),
    "pq53": CarlosParams(31, 17, 14, 53 + 2, label="Wendy Carlos scale Pq53EDO"),
    "pq65": CarlosParams(38, 21, 17, 65 + 2, label="Wendy Carlos scale Pq65EDO"),
    "g3va": CarlosParams(20, 11, 9, 34 * 3 - 1, octaves=3, label="Wendy Carlos scale Gamma3va"),
}

# (edo, generator steps); None is the closed-form P12/7 generator
ORWELL_PRESETS: Dict[str, Optional[Tuple[int, int]]] = {
    "calc": None,
    "7-31": (31, 7),
    "12-53": (53, 12),
    "19-84": (84, 19),
}

# ─────────────────────────── Families ───────────────────────────

def edo_steps(p: EdoParams) -> List[ScaleStep]:
    idx = np.arange(p.divisions + 1)
    cents = 1200.0 / p.divisions * idx
    freqs = p.ref_frequency * 2.0 ** (idx / p.divisions)
    return [ScaleStep(int(i), float(c), float(f)) for i, c, f in zip(idx, cents, freqs)]

def carlos_step_cents(w5: int, w3maj: int, w3min: int) -> float:
    """
    Least-squares step size so that w5 steps ~ 3:2, w3maj steps ~ 5:4, w3min steps ~ 6:5.
    All-zero weights give NaN.
    """
    a = w5 * math.log2(3 / 2) + w3maj * math.log2(5 / 4) + w3min * math.log2(6 / 5)
    b = w5 * w5 + w3maj * w3maj + w3min * w3min
    if b == 0:
        logger.warning("Carlos weights are all zero, step size is undefined")
    return float(1200.0 * np.float64(a) / np.float64(b))

def carlos_steps(p: CarlosParams) -> List[ScaleStep]:
    step = carlos_step_cents(p.w5, p.w3maj, p.w3min)
    idx = np.arange(p.nb_steps + 1)
    if p.octaves > 1:
        period = (p.nb_steps + 1) // p.octaves
        cents = step * (idx % period) + 1200.0 * (idx // period)
    else:
        cents = step * idx
    return [ScaleStep(int(i), float(c)) for i, c in zip(idx, cents)]

def carlos_sweep(fifths: Sequence[int] = range(38, 46)) -> List[Dict]:
    """Step sizes for weight triples scaled off the fifth count (34/62 and 28/62 of it)."""
    f1, f2 = 17.0 / 62 * 2, 14.0 / 62 * 2
    rows = []
    for w5 in fifths:
        w3maj, w3min = int(round(w5 * f1)), int(round(w5 * f2))
        step = carlos_step_cents(w5, w3maj, w3min)
        rows.append({"weights": (w5, w3maj, w3min), "step_cents": step,
                     "steps_per_octave": 1200.0 / step})
    return rows

def orwell_generator_cents() -> float:
    # perfect twelfth (P5 + octave) in 7 equal parts
    return (IntervalRatio(3, 2).cents + 1200.0) / 7

def orwell_steps(p: OrwellParams) -> List[ScaleStep]:
    n = p.nb_steps
    acc = np.zeros(n)
    if p.edo is None:
        gen = orwell_generator_cents()
        cents = 0.0
        for i in range(n):
            acc[i] = cents
            cents += gen
            if cents > 1200:
                cents -= 1200
    else:
        gen_idx = p.generator_steps % p.edo
        for i in range(1, n):
            acc[i] = 1200.0 / p.edo * gen_idx
            gen_idx = (gen_idx + p.generator_steps) % p.edo
    acc = np.sort(acc)
    steps = [ScaleStep(i, float(c)) for i, c in enumerate(acc)]
    steps.append(ScaleStep(n, 1200.0))
    return steps

def partch_steps(p: PartchParams) -> List[ScaleStep]:
    return [ScaleStep(i, r.cents) for i, r in enumerate(partch_ratios())]

_GENERATORS = {
    ScaleFamily.EDO: edo_steps,
    ScaleFamily.CARLOS: carlos_steps,
    ScaleFamily.ORWELL: orwell_steps,
    ScaleFamily.PARTCH: partch_steps,
}

def generate(params: Params) -> List[ScaleStep]:
    family = getattr(params, "family", None)
    if family not in _GENERATORS:
        raise TypeError(f"Unknown scale parameters: {params!r}")
    return _GENERATORS[family](params)

# ─────────────────────────── Pipeline ───────────────────────────

def build_scale(params: Params, catalogue: Sequence[IntervalRatio] = DEFAULT_CATALOGUE) -> Scale:
    steps = generate(params)
    if params.family is ScaleFamily.PARTCH:
        annotated = annotate_exact(steps, partch_ratios())
        return Scale(params.name, annotated, tuple(partch_ratios()))
    annotated = place_ratios(steps, catalogue)
    if params.family is ScaleFamily.EDO:
        annotated = edo_note_names(annotated)
    return Scale(params.name, annotated, tuple(catalogue))
