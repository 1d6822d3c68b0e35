"""Loads resolved to numeric values on a single element."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CalculationLoadType(Enum):
    """Kinds of load that the solver understands."""

    POINT = "point"
    LINE = "line"
    TRIANGULAR = "triangular"
    ROTATIONAL = "rotational"
    STRAIN = "strain"


@dataclass
class CalculationLoad:
    """A load on one element with offsets measured from the element's start node.

    Rotation is in degrees; -90 points straight down in global coordinates.
    For triangular loads the maximum strength is at ``offset_start``.
    """

    element_number: int
    offset_start: float
    offset_end: float
    strength: float
    rotation: float
    load_type: CalculationLoadType

    def length(self) -> float:
        """Length of the loaded span, regardless of offset order."""
        return abs(self.offset_end - self.offset_start)

    @classmethod
    def point(
        cls,
        offset: float,
        strength: float,
        rotation: float,
        element_number: int = -1,
    ) -> "CalculationLoad":
        """A point load at ``offset`` acting at ``rotation`` degrees."""
        return cls(
            element_number=element_number,
            offset_start=offset,
            offset_end=offset,
            strength=strength,
            rotation=rotation,
            load_type=CalculationLoadType.POINT,
        )

    @classmethod
    def rotational(
        cls,
        offset: float,
        strength: float,
        element_number: int = -1,
    ) -> "CalculationLoad":
        """A concentrated moment at ``offset``."""
        return cls(
            element_number=element_number,
            offset_start=offset,
            offset_end=offset,
            strength=strength,
            rotation=0.0,
            load_type=CalculationLoadType.ROTATIONAL,
        )