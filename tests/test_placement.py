import logging
import math

import pytest

from temperaments.generators import (
    CARLOS_PRESETS, EdoParams, OrwellParams, carlos_steps, edo_steps, orwell_steps,
)
from temperaments.placement import annotate_exact, next_best_candidate, place_ratios, valid_range
from temperaments.ratios import DEFAULT_CATALOGUE, UNISON, IntervalRatio
from temperaments.scale import ScaleStep


def steps_at(*cents):
    return [ScaleStep(i, c) for i, c in enumerate(cents)]


def sample_step_lists():
    lists = [edo_steps(EdoParams(n)) for n in (5, 7, 12, 19, 22, 31, 53)]
    lists += [carlos_steps(p) for p in CARLOS_PRESETS.values()]
    lists += [orwell_steps(OrwellParams(9)), orwell_steps(OrwellParams(13, 53, 12)),
              orwell_steps(OrwellParams(9, 31, 7)), orwell_steps(OrwellParams(13, 84, 19))]
    return lists


def test_twelve_edo_fifth():
    placed = place_ratios(edo_steps(EdoParams(12, 261.625)))
    seventh = placed[7]
    assert seventh.cents == pytest.approx(700.0)
    assert (seventh.ratio.n1, seventh.ratio.n2) == (3, 2)
    assert seventh.just_error == pytest.approx(-1.955, abs=0.01)


def test_root_is_unison():
    placed = place_ratios(edo_steps(EdoParams(12)))
    assert placed[0].ratio == UNISON
    assert placed[0].just_error == 0.0


@pytest.mark.parametrize("steps", sample_step_lists())
def test_no_cents_inversions(steps):
    placed = [s for s in place_ratios(steps) if s.ratio is not None]
    for lower, upper in zip(placed, placed[1:]):
        assert lower.index < upper.index
        assert lower.ratio.cents <= upper.ratio.cents


@pytest.mark.parametrize("steps", sample_step_lists())
def test_each_ratio_used_once(steps):
    used = [s.ratio for s in place_ratios(steps) if s.ratio is not None]
    assert len(used) == len(set(used))


def test_deterministic():
    first = place_ratios(edo_steps(EdoParams(31)))
    second = place_ratios(edo_steps(EdoParams(31)))
    assert [s.ratio for s in first] == [s.ratio for s in second]


def test_small_scale_leaves_ratios_unplaced():
    placed = place_ratios(edo_steps(EdoParams(5)))
    used = {s.ratio for s in placed if s.ratio is not None} - {UNISON}
    assert 0 < len(used) <= 5
    assert len(DEFAULT_CATALOGUE) - len(used) >= 10


def test_unassigned_step_has_no_error():
    placed = place_ratios(edo_steps(EdoParams(53)))
    free = [s for s in placed if s.ratio is None]
    assert free
    assert all(s.just_error is None for s in free)


def test_unsorted_catalogue_keeps_order():
    catalogue = list(reversed(DEFAULT_CATALOGUE))
    placed = [s for s in place_ratios(edo_steps(EdoParams(22)), catalogue) if s.ratio is not None]
    cents = [s.ratio.cents for s in placed]
    assert cents == sorted(cents)


def test_tie_goes_to_earliest_step():
    placed = place_ratios(steps_at(0.0, 1100.0, 1300.0), [IntervalRatio(2, 1)])
    assert placed[1].ratio == IntervalRatio(2, 1)
    assert placed[2].ratio is None


def test_tie_goes_to_earliest_ratio():
    first, second = IntervalRatio(2, 1, "first"), IntervalRatio(2, 1, "second")
    placed = place_ratios(steps_at(0.0, 1200.0), [first, second])
    assert placed[1].ratio is first


def test_valid_range():
    fifth = IntervalRatio(3, 2)
    slots = [UNISON, None, None, fifth, None]
    assert valid_range(IntervalRatio(9, 8), slots) == (0, 3)
    assert valid_range(IntervalRatio(2, 1), slots) == (3, 4)


def test_next_best_candidate_none_when_full():
    slots = [UNISON, IntervalRatio(2, 1)]
    assert next_best_candidate([IntervalRatio(3, 2)], steps_at(0.0, 1200.0), slots) is None


def test_nan_steps_place_nothing():
    placed = place_ratios(steps_at(0.0, math.nan, math.nan))
    assert [s.ratio for s in placed] == [UNISON, None, None]


def test_annotate_exact_length_mismatch():
    with pytest.raises(ValueError):
        annotate_exact(steps_at(0.0, 1200.0), [UNISON])


def test_unplaced_ratios_logged(caplog):
    with caplog.at_level(logging.INFO, logger="temperaments.placement"):
        place_ratios(edo_steps(EdoParams(5)))
    summary = [r for r in caplog.records if r.levelno == logging.INFO]
    assert len(summary) == 1
    assert "left unplaced" in summary[0].getMessage()


def test_unison_in_catalogue_is_not_placed():
    placed = place_ratios(steps_at(0.0, 10.0, 1200.0), [IntervalRatio(1, 1), IntervalRatio(2, 1)])
    assert [str(s.ratio) if s.ratio else None for s in placed] == ["1:1", None, "2:1"]
