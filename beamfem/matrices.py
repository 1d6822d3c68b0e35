"""Rotation matrices and extraction of the unknown degrees of freedom."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

import numpy as np

DOF = 3


def element_rotation_matrix(rotation_degrees: float) -> np.ndarray:
    """The 6x6 transformation from global to element-local coordinates."""
    angle = math.radians(rotation_degrees)
    c = math.cos(angle)
    s = math.sin(angle)
    block = np.array([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])
    matrix = np.zeros((2 * DOF, 2 * DOF))
    matrix[:DOF, :DOF] = block
    matrix[DOF:, DOF:] = block
    return matrix


def unknown_translation_rows(
    support_locks: Mapping[int, Sequence[bool]], row_count: int
) -> list[int]:
    """Rows of the joined system whose displacement is unknown.

    ``support_locks`` maps node numbers (starting at 1) to three flags
    (X translation, Z translation, rotation about Y); unlocked ones are
    unknown. Rows past the node rows belong to element releases and are
    always unknown. The result is sorted.
    """
    rows: list[int] = []
    for number, locks in support_locks.items():
        if number < 1:
            raise ValueError(f"node numbers start at 1, got {number}")
        if len(locks) != DOF:
            raise ValueError(
                f"node {number} needs {DOF} support flags, got {len(locks)}"
            )
        base = (number - 1) * DOF
        rows.extend(base + i for i, locked in enumerate(locks) if not locked)
    rows.extend(range(len(support_locks) * DOF, row_count))
    rows.sort()
    return rows


def unknown_translation_stiffness_rows(
    rows: Sequence[int], matrix: np.ndarray
) -> np.ndarray:
    """The square sub-matrix of ``matrix`` at the given rows and columns."""
    indices = list(rows)
    return np.asarray(matrix, dtype=float)[np.ix_(indices, indices)].copy()


def unknown_translation_eq_loads_rows(
    rows: Sequence[int], matrix: np.ndarray
) -> np.ndarray:
    """The given rows of a load column vector, as a column vector."""
    column = np.asarray(matrix, dtype=float)
    if column.ndim == 1:
        column = column.reshape(-1, 1)
    return column[list(rows), 0:1].copy()