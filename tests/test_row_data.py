import pytest

from rubicore.chart import QuantValue, SectionData
from rubicore.note_data import NoteData
from rubicore.row_data import RowData


def test_defaults():
    row = RowData()
    assert row.quant == QuantValue.FOURTH
    assert row.offset == 0 and row.lane_priority == 0
    assert row.get_notes() == []


def test_add_start_note_sorted_by_lane():
    row = RowData()
    for lane in (3, 0, 2):
        row.add_start_note(NoteData(lane=lane))
    assert [n.lane for n in row.starting_notes] == [0, 2, 3]


def test_add_duplicate_lane_raises():
    row = RowData()
    row.add_start_note(NoteData(lane=1))
    with pytest.raises(ValueError):
        row.add_start_note(NoteData(lane=1))
    with pytest.raises(ValueError):
        row.add_end_note(NoteData(lane=1))


def test_end_note_blocks_start_note_on_lane():
    row = RowData()
    row.add_end_note(NoteData(lane=4))
    with pytest.raises(ValueError):
        row.add_start_note(NoteData(lane=4))


def test_get_notes_include_ends():
    row = RowData()
    a, b, c = NoteData(lane=2), NoteData(lane=0), NoteData(lane=1)
    row.add_start_note(a)
    row.add_start_note(b)
    row.add_end_note(c)
    assert row.get_notes() == [b, a]
    assert row.get_notes(include_ends=True) == [b, c, a]


def test_get_notes_returns_copy():
    row = RowData()
    row.add_start_note(NoteData(lane=0))
    notes = row.get_notes()
    notes.clear()
    assert len(row.starting_notes) == 1


def test_get_note_at_lane():
    row = RowData()
    start, end = NoteData(lane=1), NoteData(lane=2)
    row.add_start_note(start)
    row.add_end_note(end)
    assert row.get_note_at_lane(1) is start
    assert row.get_note_at_lane(2) is None
    assert row.get_note_at_lane(2, include_ends=True) is end
    assert row.get_note_at_lane(7, include_ends=True) is None


def test_get_notes_of_type():
    row = RowData()
    a = NoteData(lane=3, type="mine")
    b = NoteData(lane=0, type="normal")
    c = NoteData(lane=1, type="mine")
    row.add_start_note(a)
    row.add_start_note(b)
    row.add_end_note(c)
    assert row.get_notes_of_type("mine") == [a]
    assert row.get_notes_of_type("mine", include_ends=True) == [c, a]
    assert row.get_notes_of_type("roll", include_ends=True) == []


def test_get_note_types_unique_in_order():
    row = RowData()
    row.add_start_note(NoteData(lane=0, type="normal"))
    row.add_start_note(NoteData(lane=1, type=""))
    row.add_start_note(NoteData(lane=2, type="mine"))
    row.add_end_note(NoteData(lane=3, type="normal"))
    row.add_end_note(NoteData(lane=4, type="roll"))
    assert row.get_note_types() == ["normal", "mine", "roll"]


def test_remove_note():
    row = RowData()
    start, end = NoteData(lane=0), NoteData(lane=1)
    row.add_start_note(start)
    row.add_end_note(end)
    row.remove_note(end)
    assert row.is_note_ending(end) is False
    assert row.is_note_starting(start) is True
    row.remove_note(start)
    assert row.get_notes(include_ends=True) == []


def test_remove_note_missing_is_noop():
    row = RowData()
    kept = NoteData(lane=0)
    row.add_start_note(kept)
    row.remove_note(NoteData(lane=0))
    assert row.starting_notes == [kept]


def test_remove_note_at_lane():
    row = RowData()
    row.add_start_note(NoteData(lane=0))
    row.add_end_note(NoteData(lane=1))
    row.remove_note_at_lane(1)
    assert row.has_note_at_lane(1) is False
    assert row.has_note_at_lane(0) is True
    row.remove_note_at_lane(0)
    assert row.has_note_at_lane(0) is False


def test_is_note_starting_and_ending_by_identity():
    row = RowData()
    note = NoteData(lane=2)
    row.add_start_note(note)
    assert row.is_note_starting(note) is True
    assert row.is_note_ending(note) is False
    assert row.is_note_starting(NoteData(lane=2)) is False


def test_convert_data_links_rows_and_computes():
    section = SectionData(measure=1)
    start_row = RowData(section=section, offset=0, quant=QuantValue.EIGHTH)
    end_row = RowData(section=SectionData(measure=2), offset=4, quant=QuantValue.EIGHTH)
    note = NoteData(lane=0)
    start_row.add_start_note(note)
    end_row.add_end_note(note)

    start_row.convert_data([], [])
    assert note.starting_row is start_row
    assert note.measure_time == pytest.approx(1.0)
    assert note.measure_length == 0.0

    end_row.convert_data([], [])
    assert note.ending_row is end_row
    assert note.measure_length == pytest.approx(1.5)