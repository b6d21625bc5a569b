from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Tuple

from temperaments.ratios import IntervalRatio, UNISON, DEFAULT_CATALOGUE
from temperaments.scale import ScaleStep, AnnotatedStep

logger = logging.getLogger(__name__)

Slots = List[Optional[IntervalRatio]]

def valid_range(ratio: IntervalRatio, slots: Slots) -> Tuple[int, int]:
    """
    Index window a ratio may occupy without inverting pitch order:
    from the highest placed ratio below it up to the lowest placed ratio above it.
    """
    start, end = 1, len(slots) - 1
    for i in range(len(slots) - 1, -1, -1):
        placed = slots[i]
        if placed is not None and placed.cents < ratio.cents:
            start = i
            break
    for i, placed in enumerate(slots):
        if placed is not None and placed.cents > ratio.cents:
            end = i
            break
    return start, end

def next_best_candidate(pending: Sequence[IntervalRatio], steps: Sequence[ScaleStep],
                        slots: Slots) -> Optional[Tuple[int, int]]:
    """
    Return (pending index, step index) of the globally closest free pair, or None.
    Exact ties go to the first pair enumerated: earliest pending ratio, then earliest step.
    """
    best = None
    best_diff = float("inf")
    for ri, ratio in enumerate(pending):
        start, end = valid_range(ratio, slots)
        target = ratio.cents
        for si in range(start, end + 1):
            if slots[si] is not None:
                continue
            diff = abs(target - steps[si].cents)
            if diff < best_diff:
                best, best_diff = (ri, si), diff
    return best

def place_ratios(steps: Sequence[ScaleStep],
                 catalogue: Sequence[IntervalRatio] = DEFAULT_CATALOGUE) -> Tuple[AnnotatedStep, ...]:
    """Greedy global-best placement of catalogue ratios onto pitch-ordered steps."""
    if not steps:
        return ()
    slots: Slots = [None] * len(steps)
    slots[0] = UNISON
    pending = [r for r in catalogue if r.n1 != r.n2]
    # every pass rescans all pending ratios so easy matches claim their slot first
    while pending:
        found = next_best_candidate(pending, steps, slots)
        if found is None:
            break
        ri, si = found
        ratio = pending.pop(ri)
        slots[si] = ratio
        logger.debug("placing ratio %s %.2f @ %d %.2f", ratio, ratio.cents, si, steps[si].cents)
    if pending:
        logger.info("%d ratio(s) left unplaced: %s", len(pending), ", ".join(str(r) for r in pending))
    return tuple(AnnotatedStep(step, slots[i]) for i, step in enumerate(steps))

def annotate_exact(steps: Sequence[ScaleStep], ratios: Sequence[IntervalRatio]) -> Tuple[AnnotatedStep, ...]:
    """Pair each step with the ratio it was generated from."""
    if len(steps) != len(ratios):
        raise ValueError(f"{len(steps)} steps but {len(ratios)} ratios")
    return tuple(AnnotatedStep(step, ratio) for step, ratio in zip(steps, ratios))
