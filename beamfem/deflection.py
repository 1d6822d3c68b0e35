"""Transverse deflection at a point along an element.

The deflection is the double integral of the bending moment divided by the
bending stiffness EI. The integration constants come from the element's
start-node displacements, and the start-node reactions add their own terms.
Loads are given in element-local terms: the sine of ``load.rotation`` is
the load's component along the local Z axis.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

import numpy as np

from beamfem.loads import CalculationLoad, CalculationLoadType


def _components(values: Sequence[float] | np.ndarray, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=float).reshape(-1)
    if array.size < 3:
        raise ValueError(
            f"{name} need three components (X, Z, rotation about Y), got {array.size}"
        )
    return array


def _z_factor(load: CalculationLoad) -> float:
    return math.sin(math.radians(load.rotation))


def _point_term(load: CalculationLoad, x: float) -> float:
    if load.offset_start > x:
        return 0.0
    # A downward load has a negative Z factor, so the sign is already right.
    return load.strength * _z_factor(load) * (x - load.offset_start) ** 3 / 6.0


def _rotational_term(load: CalculationLoad, x: float) -> float:
    if load.offset_start > x:
        return 0.0
    return -load.strength * (x - load.offset_start) ** 2 / 2.0


def _line_term(load: CalculationLoad, x: float) -> float:
    if load.offset_start > x:
        return 0.0
    z_factor = _z_factor(load)
    term = load.strength * z_factor * (x - load.offset_start) ** 4 / 24.0
    if load.offset_end <= x:
        # An opposite load from the end to x cancels what lies past the end.
        term -= load.strength * z_factor * (x - load.offset_end) ** 4 / 24.0
    return term


def _triangular_ltr(load: CalculationLoad, x: float) -> float:
    """Load largest at its left end (``offset_start``)."""
    if load.offset_start > x:
        return 0.0
    z_factor = _z_factor(load)
    slope = load.strength / (load.offset_end - load.offset_start)
    t = x - load.offset_start
    term = slope * z_factor * t**5 * 2.0 / 120.0
    if load.offset_end <= x:
        # A triangular load past the end cancels the part that was extended.
        term += slope * z_factor * (x - load.offset_end) ** 5 / 120.0
    term -= slope * z_factor * t**5 / 40.0
    term += load.strength * z_factor * t**4 / 24.0
    return term


def _triangular_rtl(load: CalculationLoad, x: float) -> float:
    """Load largest at its right end (``offset_start``)."""
    left = load.offset_end
    right = load.offset_start
    if left > x:
        return 0.0
    z_factor = _z_factor(load)
    slope = load.strength / (right - left)
    term = slope * z_factor * (x - left) ** 5 / 120.0
    if right <= x:
        term -= load.strength * z_factor * (x - right) ** 4 / 24.0
        term -= slope * z_factor * (x - right) ** 5 / 120.0
    return term


def _triangular_term(load: CalculationLoad, x: float) -> float:
    if load.offset_start == load.offset_end:
        return 0.0
    if load.offset_start < load.offset_end:
        return _triangular_ltr(load, x)
    return _triangular_rtl(load, x)


_TERMS: dict[CalculationLoadType, Callable[[CalculationLoad, float], float]] = {
    CalculationLoadType.POINT: _point_term,
    CalculationLoadType.ROTATIONAL: _rotational_term,
    CalculationLoadType.LINE: _line_term,
    CalculationLoadType.TRIANGULAR: _triangular_term,
}


def deflection_at(
    x: float,
    loads: Iterable[CalculationLoad],
    local_reactions: Sequence[float] | np.ndarray,
    local_displacements: Sequence[float] | np.ndarray,
    bending_stiffness: float,
) -> float:
    """Deflection along local Z at distance ``x`` from the element's start.

    ``local_reactions`` and ``local_displacements`` are the start node's
    values in element-local coordinates: X, Z and rotation about Y.
    ``bending_stiffness`` is EI. Strain loads do not bend the element.
    """
    if bending_stiffness == 0.0:
        raise ValueError("bending stiffness must be non-zero")
    reactions = _components(local_reactions, "local reactions")
    displacements = _components(local_displacements, "local displacements")

    total = 0.0
    for load in loads:
        term = _TERMS.get(load.load_type)
        if term is not None:
            total += term(load, x)

    total += float(displacements[2]) * bending_stiffness * x
    total += float(displacements[1]) * bending_stiffness
    total += float(reactions[1]) * x**3 / 6.0
    total -= float(reactions[2]) * x**2 / 2.0
    return total / bending_stiffness