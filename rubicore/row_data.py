"""Rows of a chart section, each holding the notes that start or end on it."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rubicore.chart import QuantValue, SectionData
from rubicore.note_data import NoteData, is_note_lane, is_note_type, note_lane_key

if TYPE_CHECKING:
    from rubicore.sv_change import SvChange
    from rubicore.time_change import TimeChange

__all__ = ["RowData"]


def _contains(notes: list[NoteData], note: NoteData) -> bool:
    return any(existing is note for existing in notes)


def _remove_identical(notes: list[NoteData], note: NoteData) -> None:
    for index, existing in enumerate(notes):
        if existing is note:
            del notes[index]
            return


def _remove_at_lane(notes: list[NoteData], lane: int) -> None:
    for index, existing in enumerate(notes):
        if is_note_lane(existing, lane):
            del notes[index]
            return


@dataclass(eq=False)
class RowData:
    """A row at ``offset`` subdivisions of ``quant`` into its section's measure."""

    section: SectionData | None = None
    lane_priority: int = 0
    offset: int = 0
    quant: QuantValue = QuantValue.FOURTH
    starting_notes: list[NoteData] = field(default_factory=list)
    ending_notes: list[NoteData] = field(default_factory=list)

    def get_notes(self, include_ends: bool = False) -> list[NoteData]:
        """Notes starting on this row, plus those ending on it if asked, by lane."""
        notes = list(self.starting_notes)
        if not include_ends:
            return notes
        notes.extend(self.ending_notes)
        notes.sort(key=note_lane_key)
        return notes

    def get_note_at_lane(self, lane: int, include_ends: bool = False) -> NoteData | None:
        """The note on ``lane``, looking at ending notes only if asked."""
        found = next((n for n in self.starting_notes if is_note_lane(n, lane)), None)
        if found is not None or not include_ends:
            return found
        return next((n for n in self.ending_notes if is_note_lane(n, lane)), None)

    def get_notes_of_type(self, note_type: str, include_ends: bool = False) -> list[NoteData]:
        """Notes of ``note_type`` on this row."""
        notes = [n for n in self.starting_notes if is_note_type(n, note_type)]
        if include_ends:
            notes.extend(n for n in self.ending_notes if is_note_type(n, note_type))
            notes.sort(key=note_lane_key)
        return notes

    def get_note_types(self) -> list[str]:
        """Distinct non-empty note types on this row, in order of first appearance."""
        types: list[str] = []
        for note in (*self.starting_notes, *self.ending_notes):
            if note.type and note.type not in types:
                types.append(note.type)
        return types

    def _check_lane_free(self, note: NoteData) -> None:
        if self.has_note_at_lane(note.lane):
            raise ValueError(f"Already has note at lane {note.lane}.")

    def add_start_note(self, note: NoteData) -> None:
        """Add a note that starts on this row."""
        self._check_lane_free(note)
        self.starting_notes.append(note)
        self.starting_notes.sort(key=note_lane_key)

    def add_end_note(self, note: NoteData) -> None:
        """Add a note that ends on this row."""
        self._check_lane_free(note)
        self.ending_notes.append(note)
        self.ending_notes.sort(key=note_lane_key)

    def remove_note(self, note: NoteData) -> None:
        """Remove ``note`` from this row, wherever it is held."""
        _remove_identical(self.starting_notes, note)
        _remove_identical(self.ending_notes, note)

    def remove_note_at_lane(self, lane: int) -> None:
        """Remove the notes on ``lane`` from this row."""
        _remove_at_lane(self.starting_notes, lane)
        _remove_at_lane(self.ending_notes, lane)

    def has_note_at_lane(self, lane: int) -> bool:
        """Whether any note, starting or ending, is on ``lane``."""
        return any(is_note_lane(n, lane) for n in (*self.starting_notes, *self.ending_notes))

    def is_note_starting(self, note: NoteData) -> bool:
        """Whether ``note`` starts on this row."""
        return _contains(self.starting_notes, note)

    def is_note_ending(self, note: NoteData) -> bool:
        """Whether ``note`` ends on this row."""
        return _contains(self.ending_notes, note)

    def convert_data(
        self,
        time_changes: Sequence[TimeChange],
        sv_changes: Sequence[SvChange],
    ) -> None:
        """Attach this row to its notes and let them compute their timing."""
        for note in self.starting_notes:
            note.starting_row = self
            note.convert_data(time_changes, sv_changes)
        for note in self.ending_notes:
            note.ending_row = self
            note.convert_data(time_changes, sv_changes)