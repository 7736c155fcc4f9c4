"""Notes placed on chart rows."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rubicore.row_data import RowData
    from rubicore.sv_change import SvChange
    from rubicore.time_change import TimeChange

__all__ = ["NoteData", "note_lane_key", "is_note_lane", "is_note_type"]


def _row_position(row: RowData) -> float:
    if row.section is None:
        raise ValueError("Row is not attached to a section.")
    return row.section.measure + float(row.offset) / float(row.quant)


@dataclass(eq=False)
class NoteData:
    """A note on a lane, starting on one row and optionally ending on another."""

    lane: int = 0
    type: str = ""
    measure_time: float = 0.0
    measure_length: float = 0.0
    ms_time: float = 0.0
    ms_length: float = 0.0
    starting_scroll_velocity: int = 0
    ending_scroll_velocity: int = 0
    starting_row: RowData | None = None
    ending_row: RowData | None = None
    should_miss: bool = False
    hit: bool = False
    spawned: bool = False
    counts_towards_score: bool = True

    def convert_data(
        self,
        time_changes: Sequence[TimeChange],
        sv_changes: Sequence[SvChange],
    ) -> None:
        """Compute the measure position and length from the rows the note sits on."""
        if self.starting_row is None:
            return

        self.measure_time = _row_position(self.starting_row)
        if self.ending_row is None:
            self.measure_length = 0.0
        else:
            self.measure_length = _row_position(self.ending_row) - self.measure_time


def note_lane_key(note: NoteData) -> int:
    """Sort key ordering notes by lane."""
    return note.lane


def is_note_lane(note: Any, lane: int) -> bool:
    """Whether ``note`` is a note on ``lane``."""
    return isinstance(note, NoteData) and note.lane == lane


def is_note_type(note: Any, note_type: str) -> bool:
    """Whether ``note`` is a note of type ``note_type``."""
    return isinstance(note, NoteData) and note.type == note_type