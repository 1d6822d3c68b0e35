import pytest

from beamfem.axial_deformation import axial_deformation_at
from beamfem.internal_forces import axial_force_at
from beamfem.loads import CalculationLoad, CalculationLoadType

EA = 210e3 * 100.0 * 100.0
L = 4000.0


def _load(kind, start, end, strength, rotation):
    return CalculationLoad(
        element_number=1,
        offset_start=start,
        offset_end=end,
        strength=strength,
        rotation=rotation,
        load_type=kind,
    )


LOAD_CASES = {
    "point": [CalculationLoad.point(2000.0, 10000.0, 0.0, element_number=1)],
    "point_skewed": [CalculationLoad.point(2000.0, 10000.0, -45.0, element_number=1)],
    "line_full": [_load(CalculationLoadType.LINE, 0.0, L, 10.0, 0.0)],
    "line_slice": [_load(CalculationLoadType.LINE, 500.0, 1500.0, 10.0, 30.0)],
    "tri_ltr_full": [_load(CalculationLoadType.TRIANGULAR, 0.0, L, 10.0, 0.0)],
    "tri_ltr_slice": [_load(CalculationLoadType.TRIANGULAR, 500.0, 1500.0, 10.0, 45.0)],
    "tri_rtl_full": [_load(CalculationLoadType.TRIANGULAR, L, 0.0, 10.0, 0.0)],
    "tri_rtl_slice": [_load(CalculationLoadType.TRIANGULAR, 1500.0, 500.0, 10.0, -45.0)],
    "mixed": [
        _load(CalculationLoadType.LINE, 0.0, L, 5.0, 180.0),
        _load(CalculationLoadType.TRIANGULAR, 500.0, 1500.0, 10.0, 0.0),
        CalculationLoad.point(2000.0, 3000.0, 0.0, element_number=1),
    ],
}

REACTIONS = [-3000.0, 1234.0, 0.0]


@pytest.mark.parametrize("case", sorted(LOAD_CASES))
@pytest.mark.parametrize("x", [250.0, 1000.0, 1750.0, 2600.0, 3900.0])
def test_slope_times_stiffness_is_axial_force(case, x):
    loads = LOAD_CASES[case]
    h = 0.5
    displacements = [0.2, 0.0, 0.0]
    ahead = axial_deformation_at(x + h, loads, REACTIONS, displacements, EA)
    behind = axial_deformation_at(x - h, loads, REACTIONS, displacements, EA)
    slope_force = EA * (ahead - behind) / (2.0 * h)
    expected = axial_force_at(x, loads, REACTIONS)
    assert slope_force == pytest.approx(expected, rel=1e-6, abs=1e-2)


@pytest.mark.parametrize("case", sorted(LOAD_CASES))
def test_start_value_is_start_displacement(case):
    loads = LOAD_CASES[case]
    result = axial_deformation_at(0.0, loads, REACTIONS, [0.37, 5.0, 0.01], EA)
    assert result == pytest.approx(0.37, abs=1e-12)


def test_unloaded_bar_deforms_linearly():
    reactions = [2500.0, 0.0, 0.0]
    u0 = 0.1
    first = axial_deformation_at(1000.0, [], reactions, [u0, 0.0, 0.0], EA) - u0
    second = axial_deformation_at(2000.0, [], reactions, [u0, 0.0, 0.0], EA) - u0
    assert second == pytest.approx(2.0 * first, rel=1e-12)
    assert first < 0.0


def test_bar_held_at_both_ends_returns_to_zero():
    p = 10000.0
    loads = [CalculationLoad.point(L / 2, p, 0.0, element_number=1)]
    reactions = [-p / 2, 0.0, 0.0]
    zero = [0.0, 0.0, 0.0]
    assert axial_deformation_at(L, loads, reactions, zero, EA) == pytest.approx(
        0.0, abs=1e-12
    )
    left = axial_deformation_at(1000.0, loads, reactions, zero, EA)
    right = axial_deformation_at(3000.0, loads, reactions, zero, EA)
    assert left == pytest.approx(right, rel=1e-12)
    assert left > 0.0


def test_rotational_and_strain_loads_are_ignored():
    base = LOAD_CASES["line_full"]
    extra = base + [
        CalculationLoad.rotational(1000.0, 5e6, element_number=1),
        _load(CalculationLoadType.STRAIN, 0.0, L, 1e-3, 0.0),
    ]
    displacements = [0.05, 0.0, 0.0]
    assert axial_deformation_at(
        3000.0, extra, REACTIONS, displacements, EA
    ) == pytest.approx(axial_deformation_at(3000.0, base, REACTIONS, displacements, EA))


def test_transverse_loads_do_not_stretch():
    loads = [_load(CalculationLoadType.LINE, 0.0, L, 10.0, -90.0)]
    with_load = axial_deformation_at(2500.0, loads, REACTIONS, [0.0, 0.0, 0.0], EA)
    without = axial_deformation_at(2500.0, [], REACTIONS, [0.0, 0.0, 0.0], EA)
    assert with_load == pytest.approx(without, abs=1e-12)


def test_empty_reactions_are_rejected():
    with pytest.raises(ValueError):
        axial_deformation_at(1000.0, [], [], [0.0, 0.0, 0.0], EA)


def test_empty_displacements_are_rejected():
    with pytest.raises(ValueError):
        axial_deformation_at(1000.0, [], [0.0, 0.0, 0.0], [], EA)


def test_zero_axial_stiffness_is_rejected():
    with pytest.raises(ValueError):
        axial_deformation_at(1000.0, [], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], 0.0)