"""Scroll-velocity changes of a chart."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rubicore.time_change import TimeChange
from rubicore.timing import measure_to_ms

__all__ = ["SvChange"]


@dataclass
class SvChange:
    """A scroll-speed multiplier starting at measure ``time``."""

    time: float = 0.0
    multiplier: float = 1.0
    ms_time: float = 0.0
    position: float = 0.0

    def convert_data(
        self,
        time_changes: Sequence[TimeChange],
        previous_change: SvChange | None = None,
    ) -> None:
        """Compute ``ms_time`` and, given the previous change, the scroll ``position``."""
        if not time_changes:
            raise ValueError("Time change list is empty.")

        time_change = next(
            (
                time_changes[index - 1]
                for index, current in enumerate(time_changes)
                if current.time > self.time
            ),
            time_changes[-1],
        )

        self.ms_time = (
            measure_to_ms(
                self.time - time_change.time,
                time_change.bpm,
                time_change.time_signature_numerator,
            )
            + time_change.ms_time
        )
        if previous_change is None:
            return

        self.position = (
            previous_change.position
            + (self.ms_time - previous_change.ms_time) * previous_change.multiplier
        )