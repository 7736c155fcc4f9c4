import pytest

from rubicore.sv_change import SvChange
from rubicore.time_change import TimeChange
from rubicore.timing import measure_to_ms


def _changes():
    first = TimeChange(time=0.0, bpm=120.0)
    second = TimeChange(time=4.0, bpm=90.0, ms_time=measure_to_ms(4.0, 120.0, 4.0))
    return [first, second]


def test_defaults():
    change = SvChange()
    assert (change.time, change.multiplier, change.ms_time, change.position) == (0.0, 1.0, 0.0, 0.0)


def test_ms_time_in_first_section():
    change = SvChange(time=2.0)
    change.convert_data(_changes())
    assert change.ms_time == pytest.approx(measure_to_ms(2.0, 120.0, 4.0))


def test_ms_time_in_last_section():
    changes = _changes()
    change = SvChange(time=6.0)
    change.convert_data(changes)
    assert change.ms_time == pytest.approx(changes[1].ms_time + measure_to_ms(2.0, 90.0, 4.0))


def test_without_previous_position_untouched():
    change = SvChange(time=2.0, position=7.0)
    change.convert_data(_changes())
    assert change.position == 7.0


def test_position_follows_previous_multiplier():
    changes = _changes()
    first = SvChange(time=0.0, multiplier=2.0)
    first.convert_data(changes)
    second = SvChange(time=3.0)
    second.convert_data(changes, first)
    assert first.ms_time == pytest.approx(0.0)
    assert second.position == pytest.approx(2.0 * second.ms_time)


def test_unit_multiplier_position_equals_elapsed_ms():
    changes = _changes()
    first = SvChange(time=0.0)
    first.convert_data(changes)
    second = SvChange(time=5.0)
    second.convert_data(changes, first)
    assert second.position == pytest.approx(second.ms_time)


def test_positions_accumulate_along_chain():
    changes = _changes()
    chain = [SvChange(time=0.0, multiplier=1.0), SvChange(time=1.0, multiplier=0.5), SvChange(time=3.0)]
    previous = None
    for change in chain:
        change.convert_data(changes, previous)
        previous = change
    assert chain[2].position == pytest.approx(
        chain[1].ms_time + (chain[2].ms_time - chain[1].ms_time) * 0.5
    )


def test_empty_time_changes_raise():
    with pytest.raises(ValueError):
        SvChange(time=1.0).convert_data([])