from __future__ import annotations
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from temperaments.scale import AnnotatedStep

KEYBOARD_NOTES = ["C", "C#", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B"]

NATURALS = ["C", "D", "E", "F", "G", "A", "B", "C"]
IS_TONE = [True, True, False, True, True, True, False]

def keyboard_note(index: int) -> str:
    return f"{KEYBOARD_NOTES[index % 12]}{index // 12 + 1}"

def spell_degree(note: str, next_note: str, size: int) -> List[str]:
    """Names for the `size` steps from `note` up to (not including) `next_note`."""
    half = (size - 1) // 2
    names = [note + "#" * k for k in range(half + 1)]
    if (size - 1) % 2:
        names.append(f"{note}{'#' * (half + 1)}/{next_note}{'b' * (half + 1)}")
    names.extend(next_note + "b" * k for k in range(half, 0, -1))
    return names

def edo_spelling(nb_steps: int, tone_steps: int) -> Optional[List[str]]:
    half_tone_steps = (nb_steps - tone_steps * 5) // 2
    if tone_steps < 1 or half_tone_steps < 1:
        return None
    names = []
    for i in range(len(NATURALS) - 1):
        size = tone_steps if IS_TONE[i] else half_tone_steps
        names.extend(spell_degree(NATURALS[i], NATURALS[i + 1], size))
    names.append("C")
    if len(names) > nb_steps + 1:
        return None
    return names

def edo_note_names(steps: Sequence[AnnotatedStep]) -> Tuple[AnnotatedStep, ...]:
    """
    Spell an equal division with sharps and flats, sizing the whole tone from the
    step that received the 9:8 major second. Steps are returned unchanged when the
    scale is too small or no major second was placed.
    """
    nb_steps = len(steps) - 1
    if nb_steps < 12:
        return tuple(steps)
    tone = next((s.index for s in steps if s.ratio is not None and s.ratio.label == "M2"), None)
    names = edo_spelling(nb_steps, tone) if tone is not None else None
    if names is None:
        return tuple(steps)
    return tuple(replace(s, note_name=names[i]) if i < len(names) else s for i, s in enumerate(steps))
