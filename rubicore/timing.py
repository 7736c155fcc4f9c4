"""Conversions between measures, beats, steps and milliseconds."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rubicore.time_change import TimeChange

__all__ = [
    "measure_to_ms",
    "beats_to_ms",
    "steps_to_ms",
    "measure_range_to_ms",
    "measure_to_beats",
    "measure_to_steps",
    "beats_to_steps",
    "beats_to_measures",
    "steps_to_measures",
    "ms_to_measures",
]


def measure_to_ms(measure: float, bpm: float, time_signature_numerator: float) -> float:
    """Length in milliseconds of ``measure`` measures at the given tempo."""
    return measure * (60000.0 / (bpm / time_signature_numerator))


def beats_to_ms(beat: float, bpm: float) -> float:
    """Length in milliseconds of ``beat`` beats at the given tempo."""
    return beat * (60000.0 / bpm)


def steps_to_ms(step: float, bpm: float, time_signature_denominator: float) -> float:
    """Length in milliseconds of ``step`` steps at the given tempo."""
    return step * (60000.0 / bpm / time_signature_denominator)


def measure_range_to_ms(
    start: float, end: float, time_changes: Sequence[TimeChange]
) -> float:
    """Milliseconds spanned between two measure positions across tempo changes."""
    if start > end:
        raise ValueError("The starting point can not go above the end point.")
    if not time_changes:
        raise ValueError("Time change list is empty.")

    prev = time_changes[0]
    if len(time_changes) == 1:
        return measure_to_ms(end - start, prev.bpm, prev.time_signature_numerator)

    last = len(time_changes) - 1
    ms_result = 0.0
    for index, cur in enumerate(time_changes[1:], start=1):
        if cur.time < start:
            continue

        if cur.time > end or index == last:
            ms_result += measure_to_ms(end - prev.time, prev.bpm, prev.time_signature_numerator)
            break

        ms_result += measure_to_ms(cur.time - prev.time, prev.bpm, prev.time_signature_numerator)
        prev = cur

    return ms_result


def measure_to_beats(measure: float, time_signature_numerator: float) -> float:
    """Number of beats in ``measure`` measures."""
    return measure * time_signature_numerator


def measure_to_steps(
    measure: float, time_signature_numerator: float, time_signature_denominator: float
) -> float:
    """Number of steps in ``measure`` measures."""
    return beats_to_steps(
        measure_to_beats(measure, time_signature_numerator), time_signature_denominator
    )


def beats_to_steps(beats: float, time_signature_denominator: float) -> float:
    """Number of steps in ``beats`` beats."""
    return beats * time_signature_denominator


def beats_to_measures(beats: float, time_signature_numerator: float) -> float:
    """Number of measures in ``beats`` beats."""
    return beats / time_signature_numerator


def steps_to_measures(
    steps: float, time_signature_numerator: float, time_signature_denominator: float
) -> float:
    """Number of measures in ``steps`` steps."""
    return steps / (time_signature_numerator * time_signature_denominator)


def ms_to_measures(ms_time: float, time_changes: Sequence[TimeChange]) -> float:
    """Measure position of a millisecond time, using the tempo in effect then."""
    if not time_changes:
        raise ValueError("Time change list is empty.")

    time_change = time_changes[-1]
    for previous, current in zip(time_changes, time_changes[1:]):
        if current.ms_time > ms_time:
            time_change = previous
            break

    measure_value = measure_to_ms(1, time_change.bpm, time_change.time_signature_numerator)
    offset = ms_time - time_change.ms_time
    return time_change.time + offset / measure_value