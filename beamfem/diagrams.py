"""Points of internal force and deflection diagrams along an element."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class ForceType(Enum):
    """What a diagram point describes."""

    MOMENT = "moment"
    AXIAL = "axial"
    SHEAR = "shear"
    DEFLECTION = "deflection"


@dataclass(frozen=True)
class InternalForcePoint:
    """One value of a diagram at a position along an element.

    For deflection points ``value_x`` is the axial displacement and
    ``value_y`` the transverse deflection; other kinds use ``value_y`` only.
    """

    force_type: ForceType
    value_x: float
    value_y: float
    pos_on_element: float
    element_number: int
    load_comb_number: int = 0


def sample_positions(element_length: float, split_interval: float) -> Iterator[float]:
    """Positions along an element where diagram values are taken.

    Steps from 0 by ``split_interval``. Sampling stops as soon as a step
    reaches or passes the element's length, so the far end itself is not
    sampled; an element of zero length yields its start only, and one of
    negative length yields nothing.
    """
    if split_interval <= 0.0:
        raise ValueError(f"split interval must be positive, got {split_interval}")
    x = 0.0
    while x <= element_length:
        yield x
        x += split_interval
        if x >= element_length:
            return