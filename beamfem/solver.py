"""Solving the joined stiffness system for displacements and reactions."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import numpy as np

from beamfem.matrices import (
    DOF,
    unknown_translation_eq_loads_rows,
    unknown_translation_rows,
    unknown_translation_stiffness_rows,
)

logger = logging.getLogger(__name__)

# Above this many unknown rows the system is solved by Cholesky decomposition.
_CHOLESKY_THRESHOLD = 100


def _with_support_springs(
    stiffness_matrix: np.ndarray,
    support_springs: Mapping[int, Sequence[float]],
) -> np.ndarray:
    """A copy of the stiffness matrix with spring stiffnesses on its diagonal."""
    matrix = np.array(stiffness_matrix, dtype=float, copy=True)
    for number, springs in support_springs.items():
        if len(springs) != DOF:
            raise ValueError(
                f"node {number} needs {DOF} spring values, got {len(springs)}"
            )
        if number <= 0:
            continue
        for i, spring in enumerate(springs):
            if spring != 0.0:
                row = (number - 1) * DOF + i
                matrix[row, row] += spring
    return matrix


def _solve_cholesky(stiffness: np.ndarray, loads: np.ndarray) -> np.ndarray | None:
    try:
        lower = np.linalg.cholesky(stiffness)
    except np.linalg.LinAlgError:
        return None
    intermediate = np.linalg.solve(lower, loads)
    return np.linalg.solve(lower.T, intermediate)


def _solve_inverse(stiffness: np.ndarray, loads: np.ndarray) -> np.ndarray | None:
    logger.debug("Using regular inversion")
    try:
        inverted = np.linalg.inv(stiffness)
    except np.linalg.LinAlgError:
        return None
    return inverted @ loads


def calculate_displacements(
    support_locks: Mapping[int, Sequence[bool]],
    support_springs: Mapping[int, Sequence[float]],
    col_height: int,
    stiffness_matrix: np.ndarray,
    equivalent_loads: np.ndarray,
) -> np.ndarray:
    """Global displacements as a column vector of ``col_height`` rows.

    Row ``(node - 1) * 3 + dir`` holds the displacement of a node, with
    ``dir`` 0 for X translation, 1 for Z translation and 2 for rotation
    about Y; release rows follow the node rows. Locked rows are zero.
    Support springs are added to the diagonal for the solve only; the given
    stiffness matrix is left untouched. If the system cannot be solved,
    all displacements are zero.
    """
    matrix = _with_support_springs(stiffness_matrix, support_springs)
    rows = unknown_translation_rows(support_locks, matrix.shape[0])
    full = np.zeros((col_height, 1))
    if not rows:
        return full

    stiffness = unknown_translation_stiffness_rows(rows, matrix)
    loads = unknown_translation_eq_loads_rows(rows, equivalent_loads)

    if stiffness.shape[0] > _CHOLESKY_THRESHOLD:
        solved = _solve_cholesky(stiffness, loads)
    else:
        solved = _solve_inverse(stiffness, loads)
    if solved is None:
        return full

    full[rows, 0] = solved[:, 0]
    return full


def calculate_reactions(
    stiffness_matrix: np.ndarray,
    displacements: np.ndarray,
    equivalent_loads: np.ndarray,
) -> np.ndarray:
    """Support reactions in global coordinates, ``K @ d - F``, as a column vector."""
    stiffness = np.asarray(stiffness_matrix, dtype=float)
    disp = np.asarray(displacements, dtype=float).reshape(-1, 1)
    loads = np.asarray(equivalent_loads, dtype=float).reshape(-1, 1)
    return stiffness @ disp - loads