from __future__ import annotations
from typing import Dict, List, Optional

from temperaments.config import ReportSettings
from temperaments.notes import keyboard_note
from temperaments.scale import AnnotatedStep, Scale

HEADER = ["Steps", "Note", "Cents", "-- Just", "ratio", "cents", "error --", "Frequency", "Kbd note"]

def _num(value: Optional[float], decimals: int, width: int = 0) -> str:
    if value is None:
        return ""
    return f"{value:{width}.{decimals}f}"

def step_note(step: AnnotatedStep) -> str:
    if step.note_name is not None:
        return step.note_name
    return step.ratio.note if step.ratio is not None else ""

def step_row(step: AnnotatedStep) -> Dict:
    """Plain dict for tables and JSON export."""
    r = step.ratio
    return {
        "index": step.index,
        "note": step_note(step),
        "cents": step.cents,
        "interval": r.label if r else None,
        "ratio": str(r) if r else None,
        "ratio_cents": r.cents if r else None,
        "just_error": step.just_error,
        "frequency": step.frequency,
        "keyboard": keyboard_note(step.index),
    }

def scale_rows(scale: Scale) -> List[Dict]:
    return [step_row(s) for s in scale.steps]

def render_table(scale: Scale, settings: Optional[ReportSettings] = None) -> str:
    settings = settings or ReportSettings()
    d = settings.decimals
    steps = reversed(scale.steps) if settings.descending else scale.steps
    lines = ["\t".join(HEADER)]
    for s in steps:
        cols = [f"{s.index:d}", step_note(s), _num(s.cents, d, 7)]
        if s.ratio is not None:
            cols += [s.ratio.label, str(s.ratio), _num(s.ratio.cents, d), _num(s.just_error, d)]
        else:
            cols += ["", "", "", ""]
        cols += [_num(s.frequency, d), keyboard_note(s.index)]
        lines.append("\t".join(cols))
    return "\n".join(lines)

def render_placed(scale: Scale, settings: Optional[ReportSettings] = None) -> str:
    d = (settings or ReportSettings()).decimals
    return "\n".join(
        "\t".join([s.ratio.label, str(s.ratio), _num(s.ratio.cents, d), _num(s.just_error, d)])
        for s in scale.placed()
    )

def render_cents(scale: Scale, settings: Optional[ReportSettings] = None) -> str:
    d = (settings or ReportSettings()).decimals
    return "\n".join(_num(s.cents, d) for s in scale.steps)

def render_sweep(rows: List[Dict], settings: Optional[ReportSettings] = None) -> str:
    d = (settings or ReportSettings()).decimals
    lines = ["5ths\tM3\tm3\tstep\tper octave"]
    for row in rows:
        w5, w3maj, w3min = row["weights"]
        lines.append(f"{w5}\t{w3maj}\t{w3min}\t{_num(row['step_cents'], d)}\t{row['steps_per_octave']:.4f}")
    return "\n".join(lines)
