"""Chart-wide constants, quantization values and sections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["MAX_LANE_COUNT", "QuantValue", "SectionData"]

MAX_LANE_COUNT = 32


class QuantValue(IntEnum):
    """Subdivisions of a measure a row can be placed on."""

    FOURTH = 4
    EIGHTH = 8
    TWELFTH = 12
    SIXTEENTH = 16
    TWENTY_FOURTH = 24
    THIRTY_SECOND = 32
    FORTY_EIGHTH = 48
    SIXTY_FOURTH = 64
    HUNDRED_NINETY_SECOND = 192


@dataclass(eq=False)
class SectionData:
    """A section of a chart, starting at a whole measure."""

    measure: int = 0