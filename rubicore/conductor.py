"""Song-position tracking that reports measure, beat and step crossings."""

from __future__ import annotations

import math
import time as _time_module
from collections.abc import Callable, Sequence
from typing import Any, ClassVar

from rubicore.time_change import TimeChange

__all__ = ["Conductor", "SIGNALS"]

SIGNALS = frozenset({"beat_hit", "step_hit", "measure_hit", "time_change_reached"})

_INT_MIN = -(2**31)


class Conductor:
    """Tracks playback time against a list of tempo changes and emits rhythm signals.

    Signals, connected with :meth:`connect`:

    * ``measure_hit(measure)``, ``beat_hit(beat)``, ``step_hit(step)``: an integer
      position was crossed.
    * ``time_change_reached(time_change)``: a new tempo change became current.
    """

    _singleton: ClassVar[Conductor | None] = None

    def __init__(self, clock: Callable[[], float] = _time_module.time) -> None:
        self._clock = clock
        self.time_change_index = 0
        self.offset = 0.0
        self.speed = 1.0
        self.playing = False

        self._relative_start_time = 0.0
        self._relative_time_offset = 0.0
        self._time = 0.0
        self._time_changes: list[TimeChange] = []
        self._cache: dict[str, tuple[tuple[float, int], float]] = {}

        self._last_measure = _INT_MIN
        self._last_beat = _INT_MIN
        self._last_step = _INT_MIN

        self._listeners: dict[str, list[Callable[[Any], None]]] = {
            name: [] for name in SIGNALS
        }
        Conductor._singleton = self

    @classmethod
    def get_singleton(cls) -> Conductor | None:
        """The most recently created conductor, if any."""
        return cls._singleton

    # Signals

    def connect(self, signal: str, callback: Callable[[Any], None]) -> None:
        """Call ``callback`` with the signal's argument each time ``signal`` is emitted."""
        listeners = self._listeners_for(signal)
        if callback in listeners:
            raise ValueError(f"Callback already connected to signal {signal!r}.")
        listeners.append(callback)

    def disconnect(self, signal: str, callback: Callable[[Any], None]) -> None:
        """Stop calling ``callback`` for ``signal``."""
        listeners = self._listeners_for(signal)
        if callback not in listeners:
            raise ValueError(f"Callback is not connected to signal {signal!r}.")
        listeners.remove(callback)

    def _listeners_for(self, signal: str) -> list[Callable[[Any], None]]:
        try:
            return self._listeners[signal]
        except KeyError:
            raise ValueError(f"Unknown signal {signal!r}.") from None

    def _emit(self, signal: str, value: Any) -> None:
        for callback in list(self._listeners[signal]):
            callback(value)

    # Time

    @property
    def time(self) -> float:
        """Song time in seconds, scaled by ``speed``."""
        return self.audio_time * self.speed

    @time.setter
    def time(self, value: float) -> None:
        self.audio_time = value / self.speed

    @property
    def audio_time(self) -> float:
        """Playback time in seconds, including ``offset``."""
        if self.playing:
            elapsed = self._clock() - self._relative_start_time + self._relative_time_offset
        else:
            elapsed = self._time if self._time != 0.0 else 0.0
        return self.offset + elapsed

    @audio_time.setter
    def audio_time(self, value: float) -> None:
        self._time = value
        self._relative_start_time = self._clock()
        self._relative_time_offset = value

        self._last_measure = math.floor(self.current_measure())
        self._last_beat = math.floor(self.current_beat())
        self._last_step = math.floor(self.current_step())

    @property
    def time_changes(self) -> list[TimeChange]:
        """The tempo changes, in order; setting them restarts from the first."""
        return self._time_changes

    @time_changes.setter
    def time_changes(self, value: Sequence[TimeChange]) -> None:
        self._time_changes = list(value)
        self._cache.clear()
        self.time_change_index = 0
        self._emit("time_change_reached", self.current_time_change())

    # Playback

    def run_callbacks(self) -> None:
        """Advance the current tempo change and emit signals for positions crossed."""
        if not self.playing:
            return

        while self.time_change_index < len(self._time_changes) - 1:
            next_change = self._time_changes[self.time_change_index + 1]
            if next_change.ms_time / 1000.0 > self.time:
                break
            self.time_change_index += 1
            self._emit("time_change_reached", next_change)

        cur_measure = math.floor(self.current_measure())
        cur_beat = math.floor(self.current_beat())
        cur_step = math.floor(self.current_step())

        for measure in range(self._last_measure + 1, cur_measure + 1):
            self._emit("measure_hit", measure)
        for beat in range(self._last_beat + 1, cur_beat + 1):
            self._emit("beat_hit", beat)
        for step in range(self._last_step + 1, cur_step + 1):
            self._emit("step_hit", step)

        self._last_measure = cur_measure
        self._last_beat = cur_beat
        self._last_step = cur_step

    def play(self, time: float = 0.0) -> None:
        """Start playing from ``time`` seconds."""
        self.time = time
        self.resume()

    def resume(self) -> None:
        """Continue playing from where playback was."""
        self.playing = True

    def pause(self) -> None:
        """Freeze playback at the current time."""
        self._time = self.audio_time
        self.playing = False

    def stop(self) -> None:
        """Rewind to the start and pause."""
        self.time = 0.0
        self.pause()

    def reset(self) -> None:
        """Forget all tempo changes and restore default offset and speed, stopped."""
        self._time_changes = []
        self._cache.clear()
        self.time_change_index = 0
        self.offset = 0.0
        self.speed = 1.0
        self.stop()

    # Position

    def current_time_change(self) -> TimeChange | None:
        """The tempo change in effect, or ``None`` when there are none."""
        if not self._time_changes:
            return None
        return self._time_changes[self.time_change_index]

    def current_step(self) -> float:
        """Current position in steps."""
        return self._position("step")

    def current_beat(self) -> float:
        """Current position in beats."""
        return self._position("beat")

    def current_measure(self) -> float:
        """Current position in measures."""
        return self._position("measure")

    def _position(self, unit: str) -> float:
        if not self._time_changes:
            return 0.0

        now = self.time
        key = (now, self.time_change_index)
        cached = self._cache.get(unit)
        if cached is not None and cached[0] == key:
            return cached[1]

        change = self._time_changes[self.time_change_index]
        numerator = change.time_signature_numerator
        denominator = change.time_signature_denominator
        if unit == "step":
            period = 60.0 / (change.bpm * denominator)
            units_before = change.time * numerator * denominator
        elif unit == "beat":
            period = 60.0 / change.bpm
            units_before = change.time * numerator
        else:
            period = 60.0 / (change.bpm / numerator)
            units_before = change.time

        if len(self._time_changes) <= 1:
            return now / period

        value = (now - change.ms_time / 1000.0) / period + units_before
        self._cache[unit] = (key, value)
        return value