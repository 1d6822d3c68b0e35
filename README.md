# beamfem

Finite element building blocks for plane (2D) beam and frame structures. Each
node has three degrees of freedom: translation along X, translation along Z
and rotation about Y. In the global vectors, node `n` owns rows
`(n - 1) * 3` to `(n - 1) * 3 + 2`, and rows for released element ends follow
the node rows.

The package turns element loads into nodal equivalent loads, assembles them
into a global load vector, solves a given stiffness system for displacements
and support reactions, and evaluates internal forces and deformations at
points along an element.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

- `beamfem.loads`: `CalculationLoadType` (`POINT`, `LINE`, `TRIANGULAR`,
  `ROTATIONAL`, `STRAIN`) and the `CalculationLoad` dataclass. A load belongs
  to one element (`element_number`) and is placed by `offset_start` and
  `offset_end`, measured from the element's start node. `rotation` is in
  degrees, and -90 points downwards. A triangular load is largest at
  `offset_start`. `length()` gives the loaded span. The `CalculationLoad.point`
  and `CalculationLoad.rotational` class methods build point and moment loads.
- `beamfem.equivalent_loads`: fixed-end forces in the element's local axes,
  each a vector of six values (X, Z and moment at the start node, then at the
  end node). The functions are `point_load_equivalents`,
  `rotational_load_equivalents`, `line_load_equivalents`,
  `triangular_load_equivalents` and `strain_load_equivalents`. A line or
  triangular load that does not cover the whole element is applied through
  point and moment loads at its ends.
- `beamfem.matrices`: `element_rotation_matrix` (the 6×6 transformation from
  global to local axes), `unknown_translation_rows`, which takes a mapping of
  node number to three lock flags and gives the sorted unknown rows, and
  `unknown_translation_stiffness_rows` and `unknown_translation_eq_loads_rows`,
  which pick those rows out of a matrix or a load vector.
- `beamfem.assembly`: `element_global_equivalent_loads` sums one element's
  loads and rotates them into global axes. `assemble(node_count, elements,
  loads)` builds the global equivalent load column vector. Each element only
  needs the attributes `number`, `node_start`, `node_end`, `length`,
  `rotation` (degrees), `axial_stiffness` (EA) and `releases`, which holds six
  flags. Released end values go into their own rows after the node rows.
- `beamfem.solver`: `calculate_displacements(support_locks, support_springs,
  col_height, stiffness_matrix, equivalent_loads)` adds the support springs to
  a copy of the stiffness matrix and solves for the unknown rows. It uses
  Cholesky decomposition above 100 unknowns and matrix inversion otherwise.
  The result is returned as a full column vector, with zeros in locked rows.
  If the system cannot be solved, every displacement is zero.
  `calculate_reactions` returns `K @ u - f`.
- `beamfem.internal_forces`: `moment_at`, `shear_at` and `axial_force_at` at
  distance `x` along an element, from the element's loads and its start-node
  reactions in local axes.
- `beamfem.deflection`: `deflection_at` gives the transverse deflection from
  the loads, the start-node local reactions and displacements, and the bending
  stiffness EI.
- `beamfem.axial_deformation`: `axial_deformation_at` gives the axial
  displacement, using EA in the same way.
- `beamfem.diagrams`: `ForceType`, the frozen `InternalForcePoint` dataclass
  and `sample_positions(element_length, split_interval)`. The last yields the
  positions where diagram values are taken: it starts at 0 and steps by the
  interval, and it stops once a step reaches the element's length.

## Example

```python
from beamfem.loads import CalculationLoad
from beamfem.equivalent_loads import point_load_equivalents

# A 10 kN load pointing down at mid-span of a horizontal 4 m element (units N, mm)
load = CalculationLoad.point(2000.0, 10000.0, -90.0, 1)
print(point_load_equivalents(4000.0, 0.0, load))
# start: Z -5000 N, M -5e6 Nmm; end: Z -5000 N, M 5e6 Nmm
```

Units are the caller's choice, but they must agree with each other. The tests
use millimetres, newtons and N/mm².

## What the package does not do

- It does not build element or global stiffness matrices. The caller passes
  the joined stiffness matrix to `beamfem.solver`.
- It has no structure model: there are no node, element, profile or material
  classes, and no one-call analysis of a whole structure. The caller computes
  element lengths, rotations, EA, EI and the local start-node reactions and
  displacements, and passes them in.
- Load offsets and strengths are plain numbers. Expressions such as `L/2` are
  not evaluated.
- There are no load combinations, no file input or output, and no command.