"""Tempo and time-signature change points of a chart."""

from __future__ import annotations

from dataclasses import dataclass

from rubicore.timing import beats_to_ms, measure_to_ms, steps_to_ms

__all__ = ["TimeChange"]


@dataclass
class TimeChange:
    """A tempo change starting at measure ``time``; ``ms_time`` is its start in milliseconds."""

    time: float
    bpm: float
    time_signature_numerator: float = 4.0
    time_signature_denominator: float = 4.0
    ms_time: float = 0.0

    @property
    def measure_value(self) -> float:
        """Length of one measure in milliseconds."""
        return measure_to_ms(1.0, self.bpm, self.time_signature_numerator)

    @property
    def beat_value(self) -> float:
        """Length of one beat in milliseconds."""
        return beats_to_ms(1.0, self.bpm)

    @property
    def step_value(self) -> float:
        """Length of one step in milliseconds."""
        return steps_to_ms(1.0, self.bpm, self.time_signature_denominator)