"""Equivalent nodal loads of element loads in element-local coordinates.

Every function returns a vector of six values: X force, Z force and moment
about Y at the start node, then the same three at the end node.
"""

from __future__ import annotations

import math

import numpy as np

from beamfem.loads import CalculationLoad


def _local_factors(load_rotation: float, element_rotation: float) -> tuple[float, float]:
    angle = math.radians(load_rotation - element_rotation)
    return math.cos(angle), math.sin(angle)


def point_load_equivalents(
    element_length: float, element_rotation: float, load: CalculationLoad
) -> np.ndarray:
    """Fixed-end forces of a point load at ``load.offset_start``."""
    local_x, local_z = _local_factors(load.rotation, element_rotation)
    value_x = local_x * load.strength
    value_z = local_z * load.strength
    length = element_length
    a = load.offset_start
    b = length - a
    return np.array(
        [
            b / length * value_x,
            b**2 * (3.0 * a + b) / length**3 * value_z,
            a * b**2 / length**2 * value_z,
            a / length * value_x,
            a**2 * (a + 3.0 * b) / length**3 * value_z,
            -(a**2) * b / length**2 * value_z,
        ]
    )


def rotational_load_equivalents(
    element_length: float, load: CalculationLoad
) -> np.ndarray:
    """Fixed-end forces of a concentrated moment at ``load.offset_start``."""
    length = element_length
    strength = load.strength
    a = load.offset_start
    b = length - a
    return np.array(
        [
            0.0,
            -6.0 * a * b / length**3 * strength,
            -b * (2.0 * a - b) / length**2 * strength,
            0.0,
            6.0 * a * b / length**3 * strength,
            -a * (2.0 * b - a) / length**2 * strength,
        ]
    )


def _covers_element(load: CalculationLoad, load_length: float, element_length: float) -> bool:
    return (load_length - element_length) < 0.1 and load.offset_start == 0.0


def _partial_equivalents(
    load: CalculationLoad,
    element_length: float,
    element_rotation: float,
    forces: tuple[float, float, float, float, float, float],
    swap_offsets: bool,
) -> np.ndarray:
    """Equivalents of a load not covering the whole element.

    The load's own fixed-end forces (start X, start Z, start moment, end X,
    end Z, end moment) are applied to the element as point and moment loads
    at the load's ends.
    """
    start_x, start_z, start_m, end_x, end_z, end_m = forces
    if swap_offsets:
        start, end = load.offset_end, load.offset_start
    else:
        start, end = load.offset_start, load.offset_end

    along = element_rotation
    across = element_rotation + 90.0
    return (
        point_load_equivalents(element_length, element_rotation, CalculationLoad.point(start, start_x, along))
        + point_load_equivalents(element_length, element_rotation, CalculationLoad.point(start, start_z, across))
        + rotational_load_equivalents(element_length, CalculationLoad.rotational(start, start_m))
        + point_load_equivalents(element_length, element_rotation, CalculationLoad.point(end, end_x, along))
        + point_load_equivalents(element_length, element_rotation, CalculationLoad.point(end, end_z, across))
        + rotational_load_equivalents(element_length, CalculationLoad.rotational(end, end_m))
    )


def line_load_equivalents(
    element_length: float, element_rotation: float, load: CalculationLoad
) -> np.ndarray:
    """Fixed-end forces of a uniform line load from ``offset_start`` to ``offset_end``."""
    strength = load.strength
    load_length = load.offset_end - load.offset_start
    local_x, local_z = _local_factors(load.rotation, element_rotation)

    half_x = load_length / 2.0 * local_x * strength
    half_z = load_length / 2.0 * local_z * strength
    moment = load_length**2 / 12.0 * strength * local_z
    forces = (half_x, half_z, moment, half_x, half_z, -moment)

    if _covers_element(load, load_length, element_length):
        return np.array(forces)
    return _partial_equivalents(load, element_length, element_rotation, forces, False)


def triangular_load_equivalents(
    element_length: float, element_rotation: float, load: CalculationLoad
) -> np.ndarray:
    """Fixed-end forces of a triangular load, largest at ``offset_start``."""
    strength = load.strength
    load_length = load.length()
    local_x, local_z = _local_factors(load.rotation, element_rotation)

    major_x = load_length * 2.0 / 6.0 * local_x * strength
    minor_x = load_length * 1.0 / 6.0 * local_x * strength
    major_z = 7.0 * load_length / 20.0 * local_z * strength
    minor_z = 3.0 * load_length / 20.0 * local_z * strength
    major_m = load_length**2 / 20.0 * local_z * strength
    minor_m = load_length**2 / 30.0 * local_z * strength

    if load.offset_start < load.offset_end:
        forces = (major_x, major_z, major_m, minor_x, minor_z, -minor_m)
    else:
        forces = (minor_x, minor_z, minor_m, major_x, major_z, -major_m)

    if _covers_element(load, load_length, element_length):
        return np.array(forces)
    return _partial_equivalents(
        load,
        element_length,
        element_rotation,
        forces,
        load.offset_start > load.offset_end,
    )


def strain_load_equivalents(
    axial_stiffness: float, element_length: float, load: CalculationLoad
) -> np.ndarray:
    """End forces of an imposed axial strain ``load.strength`` on an element of stiffness EA."""
    value = axial_stiffness / element_length * load.strength
    return np.array([-value, 0.0, 0.0, value, 0.0, 0.0])