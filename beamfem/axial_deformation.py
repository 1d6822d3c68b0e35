"""Axial displacement at a point along an element.

The displacement is the integral of the axial force divided by the axial
stiffness EA, starting from the start node's local X displacement. Loads
are given in element-local terms: the cosine of ``load.rotation`` is the
load's component along the local X axis.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

import numpy as np

from beamfem.loads import CalculationLoad, CalculationLoadType


def _first_component(values: Sequence[float] | np.ndarray, name: str) -> float:
    array = np.asarray(values, dtype=float).reshape(-1)
    if array.size < 1:
        raise ValueError(f"{name} need at least the X component")
    return float(array[0])


def _x_factor(load: CalculationLoad) -> float:
    return math.cos(math.radians(load.rotation))


def _point_term(load: CalculationLoad, x: float) -> float:
    if load.offset_start > x:
        return 0.0
    return load.strength * _x_factor(load) * (x - load.offset_start)


def _line_term(load: CalculationLoad, x: float) -> float:
    if load.offset_start > x:
        return 0.0
    x_factor = _x_factor(load)
    term = load.strength * x_factor * (x - load.offset_start) ** 2 / 2.0
    if load.offset_end <= x:
        # An opposite load from the end to x cancels what lies past the end.
        term -= load.strength * x_factor * (x - load.offset_end) ** 2 / 2.0
    return term


def _triangular_ltr(load: CalculationLoad, x: float) -> float:
    """Load largest at its left end (``offset_start``)."""
    if load.offset_start > x:
        return 0.0
    x_factor = _x_factor(load)
    slope = load.strength / (load.offset_end - load.offset_start)
    t = x - load.offset_start
    term = slope * x_factor * t**3 / 6.0
    if load.offset_end <= x:
        term += slope * x_factor * (x - load.offset_end) ** 3 / 6.0
    term -= slope * x_factor * t**3 / 3.0
    term += load.strength * x_factor * t**2 / 2.0
    return term


def _triangular_rtl(load: CalculationLoad, x: float) -> float:
    """Load largest at its right end (``offset_start``)."""
    left = load.offset_end
    right = load.offset_start
    if left > x:
        return 0.0
    x_factor = _x_factor(load)
    slope = load.strength / (right - left)
    term = slope * x_factor * (x - left) ** 3 / 6.0
    if right <= x:
        term -= load.strength * x_factor * (x - right) ** 2 / 2.0
        term -= slope * x_factor * (x - right) ** 3 / 6.0
    return term


def _triangular_term(load: CalculationLoad, x: float) -> float:
    if load.offset_start == load.offset_end:
        return 0.0
    if load.offset_start < load.offset_end:
        return _triangular_ltr(load, x)
    return _triangular_rtl(load, x)


_TERMS: dict[CalculationLoadType, Callable[[CalculationLoad, float], float]] = {
    CalculationLoadType.POINT: _point_term,
    CalculationLoadType.LINE: _line_term,
    CalculationLoadType.TRIANGULAR: _triangular_term,
}


def axial_deformation_at(
    x: float,
    loads: Iterable[CalculationLoad],
    local_reactions: Sequence[float] | np.ndarray,
    local_displacements: Sequence[float] | np.ndarray,
    axial_stiffness: float,
) -> float:
    """Displacement along local X at distance ``x`` from the element's start.

    Only the X components of ``local_reactions`` and ``local_displacements``
    are used. ``axial_stiffness`` is EA. Rotational and strain loads add
    nothing here.
    """
    if axial_stiffness == 0.0:
        raise ValueError("axial stiffness must be non-zero")
    reaction_x = _first_component(local_reactions, "local reactions")
    displacement_x = _first_component(local_displacements, "local displacements")

    total = 0.0
    for load in loads:
        term = _TERMS.get(load.load_type)
        if term is not None:
            total -= term(load, x)

    total += displacement_x * axial_stiffness
    total -= reaction_x * x
    return total / axial_stiffness