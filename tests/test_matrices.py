import math

import numpy as np
import pytest

from beamfem.matrices import (
    element_rotation_matrix,
    unknown_translation_eq_loads_rows,
    unknown_translation_rows,
    unknown_translation_stiffness_rows,
)


def test_rotation_matrix_zero_is_identity():
    assert np.allclose(element_rotation_matrix(0.0), np.eye(6))


@pytest.mark.parametrize("angle", [30.0, 45.0, 90.0, 120.0, -90.0])
def test_rotation_matrix_is_orthogonal(angle):
    matrix = element_rotation_matrix(angle)
    assert matrix.shape == (6, 6)
    assert np.allclose(matrix @ matrix.T, np.eye(6))
    assert np.isclose(np.linalg.det(matrix), 1.0)


def test_rotation_matrix_layout():
    angle = 30.0
    matrix = element_rotation_matrix(angle)
    c = math.cos(math.radians(angle))
    s = math.sin(math.radians(angle))
    for offset in (0, 3):
        assert matrix[offset, offset] == pytest.approx(c)
        assert matrix[offset, offset + 1] == pytest.approx(s)
        assert matrix[offset + 1, offset] == pytest.approx(-s)
        assert matrix[offset + 1, offset + 1] == pytest.approx(c)
        assert matrix[offset + 2, offset + 2] == 1.0
    assert np.allclose(matrix[:3, 3:], 0.0)
    assert np.allclose(matrix[3:, :3], 0.0)


def test_opposite_rotations_cancel():
    product = element_rotation_matrix(75.0) @ element_rotation_matrix(-75.0)
    assert np.allclose(product, np.eye(6))


def test_all_locked_nodes_have_no_unknowns():
    locks = {1: (True, True, True), 2: (True, True, True)}
    assert unknown_translation_rows(locks, 6) == []


def test_free_nodes_are_all_unknown():
    locks = {1: (False, False, False), 2: (False, False, False)}
    assert unknown_translation_rows(locks, 6) == list(range(6))


def test_hinged_and_free_node_rows():
    locks = {2: (False, False, False), 1: (True, True, False)}
    rows = unknown_translation_rows(locks, 6)
    assert rows == sorted(rows)
    assert 0 not in rows and 1 not in rows
    assert rows == list(range(2, 6))


def test_release_rows_are_appended():
    locks = {1: (True, True, True), 2: (True, True, True)}
    assert unknown_translation_rows(locks, 8) == list(range(6, 8))


def test_bad_support_flags_raise():
    with pytest.raises(ValueError):
        unknown_translation_rows({1: (True, False)}, 3)
    with pytest.raises(ValueError):
        unknown_translation_rows({0: (True, True, True)}, 3)


def test_stiffness_rows_pick_rows_and_columns():
    matrix = np.arange(36, dtype=float).reshape(6, 6)
    rows = [1, 3, 4]
    sub = unknown_translation_stiffness_rows(rows, matrix)
    assert sub.shape == (3, 3)
    for i, r in enumerate(rows):
        for j, c in enumerate(rows):
            assert sub[i, j] == matrix[r, c]


def test_stiffness_rows_is_a_copy():
    matrix = np.ones((3, 3))
    sub = unknown_translation_stiffness_rows([0, 2], matrix)
    sub[0, 0] = 5.0
    assert matrix[0, 0] == 1.0


def test_eq_loads_rows_pick_column_entries():
    column = np.arange(6, dtype=float).reshape(6, 1) * 10.0
    rows = [0, 2, 5]
    picked = unknown_translation_eq_loads_rows(rows, column)
    assert picked.shape == (3, 1)
    for i, r in enumerate(rows):
        assert picked[i, 0] == column[r, 0]


def test_eq_loads_rows_accepts_flat_vector():
    vector = np.array([1.0, 2.0, 3.0])
    picked = unknown_translation_eq_loads_rows([2, 0], vector)
    assert picked.shape == (2, 1)
    assert picked[0, 0] == vector[2]
    assert picked[1, 0] == vector[0]


def test_empty_rows_give_empty_results():
    assert unknown_translation_stiffness_rows([], np.eye(3)).shape == (0, 0)
    assert unknown_translation_eq_loads_rows([], np.zeros((3, 1))).shape == (0, 1)