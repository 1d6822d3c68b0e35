"""Assembly of element loads into the global equivalent load vector."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

import numpy as np

from beamfem.equivalent_loads import (
    line_load_equivalents,
    point_load_equivalents,
    rotational_load_equivalents,
    strain_load_equivalents,
    triangular_load_equivalents,
)
from beamfem.loads import CalculationLoad, CalculationLoadType
from beamfem.matrices import DOF, element_rotation_matrix


class _Element(Protocol):
    """What assembly needs to know about an element."""

    number: int
    node_start: int
    node_end: int
    length: float
    rotation: float
    axial_stiffness: float
    releases: Sequence[bool]


def _local_equivalents(
    element_length: float,
    element_rotation: float,
    axial_stiffness: float,
    load: CalculationLoad,
) -> np.ndarray:
    kind = load.load_type
    if kind is CalculationLoadType.POINT:
        return point_load_equivalents(element_length, element_rotation, load)
    if kind is CalculationLoadType.LINE:
        return line_load_equivalents(element_length, element_rotation, load)
    if kind is CalculationLoadType.TRIANGULAR:
        return triangular_load_equivalents(element_length, element_rotation, load)
    if kind is CalculationLoadType.ROTATIONAL:
        return rotational_load_equivalents(element_length, load)
    if kind is CalculationLoadType.STRAIN:
        return strain_load_equivalents(axial_stiffness, element_length, load)
    raise ValueError(f"unsupported load type: {kind!r}")


def element_global_equivalent_loads(
    element_number: int,
    element_length: float,
    element_rotation: float,
    axial_stiffness: float,
    loads: Iterable[CalculationLoad],
) -> np.ndarray:
    """Sum of the equivalent loads on one element, in global coordinates.

    Only loads whose ``element_number`` matches are used. The result holds
    six values: X, Z and moment at the start node, then at the end node.
    """
    transform = element_rotation_matrix(element_rotation).T
    total = np.zeros(2 * DOF)
    for load in loads:
        if load.element_number != element_number:
            continue
        local = _local_equivalents(
            element_length, element_rotation, axial_stiffness, load
        )
        total += transform @ local
    return total


def assemble(
    node_count: int,
    elements: Iterable[_Element],
    loads: Iterable[CalculationLoad],
) -> np.ndarray:
    """The global equivalent load column vector.

    Node ``n`` owns rows ``(n - 1) * 3`` to ``(n - 1) * 3 + 2``. Each released
    end degree of freedom gets a row of its own after the node rows, in the
    order the elements and their releases are given.
    """
    element_list = list(elements)
    load_list = list(loads)

    for element in element_list:
        if len(element.releases) != 2 * DOF:
            raise ValueError(
                f"element {element.number} needs {2 * DOF} release flags, "
                f"got {len(element.releases)}"
            )
        for node in (element.node_start, element.node_end):
            if not 1 <= node <= node_count:
                raise ValueError(
                    f"element {element.number} refers to node {node}, "
                    f"outside 1..{node_count}"
                )

    release_count = sum(
        sum(1 for released in element.releases if released)
        for element in element_list
    )
    vector = np.zeros(node_count * DOF + release_count)
    release_row = node_count * DOF

    for element in element_list:
        equivalents = element_global_equivalent_loads(
            element.number,
            element.length,
            element.rotation,
            element.axial_stiffness,
            load_list,
        )
        for i, (value, released) in enumerate(zip(equivalents, element.releases)):
            if released:
                vector[release_row] += value
                release_row += 1
                continue
            node = element.node_start if i < DOF else element.node_end
            vector[(node - 1) * DOF + i % DOF] += value

    return vector.reshape(-1, 1)