"""Moment, shear and axial force at a point along an element.

``local_reactions`` are the element's start-node reactions in element-local
coordinates: X force, Z force and moment about Y.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from beamfem.loads import CalculationLoad, CalculationLoadType


def _reactions(local_reactions: Sequence[float] | np.ndarray) -> np.ndarray:
    values = np.asarray(local_reactions, dtype=float).reshape(-1)
    if values.size < 2:
        raise ValueError("local reactions need at least the X and Z forces")
    return values


def _z_factor(load: CalculationLoad) -> float:
    return math.sin(math.radians(load.rotation))


def _loaded_length(load: CalculationLoad, x: float) -> float:
    if load.offset_end <= x:
        return load.offset_end - load.offset_start
    return x - load.offset_start


def _moment_triangular_ltr(load: CalculationLoad, x: float) -> float:
    """Moment at ``x`` from a triangular load largest at its left end."""
    if load.offset_start > x:
        return 0.0
    z_factor = _z_factor(load)
    if load.offset_end <= x:
        load_length = load.offset_end - load.offset_start
        offset = x - (load.offset_start + load_length / 3.0)
        return load.strength * z_factor * load_length / 2.0 * offset
    # Split at x into a triangular part and a uniform part.
    load_length = x - load.offset_start
    offset_tri = x - (load.offset_start + load_length / 3.0)
    strength_uniform = load.strength - load.strength * load_length / (
        load.offset_end - load.offset_start
    )
    strength_tri = load.strength - strength_uniform
    offset_uniform = x - (load.offset_start + load_length / 2.0)
    return (
        strength_tri * z_factor * load_length / 2.0 * offset_tri
        + strength_uniform * z_factor * load_length * offset_uniform
    )


def _moment_triangular_rtl(load: CalculationLoad, x: float) -> float:
    """Moment at ``x`` from a triangular load largest at its right end."""
    left = load.offset_end
    right = load.offset_start
    if left > x:
        return 0.0
    z_factor = _z_factor(load)
    if right <= x:
        load_length = right - left
        offset = x - (left + load_length * 2.0 / 3.0)
        return load.strength * z_factor * load_length / 2.0 * offset
    load_length = x - left
    offset = x - (left + load_length * 2.0 / 3.0)
    strength_at_x = load.strength * load_length / (right - left)
    return strength_at_x * z_factor * load_length / 2.0 * offset


def _linear_force_triangular_ltr(
    load: CalculationLoad, x: float, dir_factor: float
) -> float:
    """Shear or axial force at ``x`` from a triangular load largest at its left end."""
    if load.offset_start > x:
        return 0.0
    if load.offset_end <= x:
        return load.strength * dir_factor * (load.offset_end - load.offset_start) / 2.0
    load_length = x - load.offset_start
    strength_uniform = load.strength - load.strength * load_length / (
        load.offset_end - load.offset_start
    )
    strength_tri = load.strength - strength_uniform
    return (
        strength_tri * dir_factor * load_length / 2.0
        + strength_uniform * dir_factor * load_length
    )


def _linear_force_triangular_rtl(
    load: CalculationLoad, x: float, dir_factor: float
) -> float:
    """Shear or axial force at ``x`` from a triangular load largest at its right end."""
    left = load.offset_end
    right = load.offset_start
    if left > x:
        return 0.0
    if right <= x:
        return load.strength * dir_factor * (right - left) / 2.0
    load_length = x - left
    strength_at_x = load.strength * load_length / (right - left)
    return strength_at_x * dir_factor * load_length / 2.0


def moment_at(
    x: float,
    loads: Iterable[CalculationLoad],
    local_reactions: Sequence[float] | np.ndarray,
) -> float:
    """Bending moment at distance ``x`` from the element's start."""
    reactions = _reactions(local_reactions)
    moment = 0.0
    for load in loads:
        z_factor = _z_factor(load)
        kind = load.load_type
        if kind is CalculationLoadType.POINT:
            if load.offset_start <= x:
                moment += load.strength * z_factor * (x - load.offset_start)
        elif kind is CalculationLoadType.ROTATIONAL:
            if load.offset_start <= x:
                moment -= load.strength
        elif kind is CalculationLoadType.LINE:
            if load.offset_start <= x:
                load_length = _loaded_length(load, x)
                offset = x - (load.offset_start + load_length / 2.0)
                moment += load.strength * z_factor * load_length * offset
        elif kind is CalculationLoadType.TRIANGULAR:
            if load.offset_start < load.offset_end:
                moment += _moment_triangular_ltr(load, x)
            else:
                moment += _moment_triangular_rtl(load, x)
    return moment + float(reactions[1]) * x


def shear_at(
    x: float,
    loads: Iterable[CalculationLoad],
    local_reactions: Sequence[float] | np.ndarray,
) -> float:
    """Shear force at distance ``x`` from the element's start."""
    reactions = _reactions(local_reactions)
    shear = 0.0
    for load in loads:
        z_factor = _z_factor(load)
        kind = load.load_type
        if kind is CalculationLoadType.POINT:
            if load.offset_start <= x:
                shear += load.strength * z_factor
        elif kind is CalculationLoadType.LINE:
            if load.offset_start <= x:
                shear += load.strength * z_factor * _loaded_length(load, x)
        elif kind is CalculationLoadType.TRIANGULAR:
            if load.offset_start < load.offset_end:
                shear += _linear_force_triangular_ltr(load, x, z_factor)
            else:
                shear += _linear_force_triangular_rtl(load, x, z_factor)
    return shear + float(reactions[1])


def axial_force_at(
    x: float,
    loads: Iterable[CalculationLoad],
    local_reactions: Sequence[float] | np.ndarray,
) -> float:
    """Axial force at distance ``x`` from the element's start; tension is positive."""
    reactions = _reactions(local_reactions)
    axial = 0.0
    for load in loads:
        x_factor = -math.cos(math.radians(load.rotation))
        kind = load.load_type
        if kind is CalculationLoadType.POINT:
            if load.offset_start <= x:
                axial += load.strength * x_factor
        elif kind is CalculationLoadType.LINE:
            if load.offset_start <= x:
                axial += load.strength * x_factor * _loaded_length(load, x)
        elif kind is CalculationLoadType.TRIANGULAR:
            if load.offset_start < load.offset_end:
                axial += _linear_force_triangular_ltr(load, x, x_factor)
            else:
                axial += _linear_force_triangular_rtl(load, x, x_factor)
    return axial - float(reactions[0])