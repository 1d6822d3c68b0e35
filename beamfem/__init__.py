"""Finite element building blocks for 2D beam and frame structures."""

__version__ = "0.1.0"

__all__ = [
    "loads",
    "matrices",
    "solver",
    "equivalent_loads",
    "assembly",
    "internal_forces",
    "deflection",
    "axial_deformation",
    "diagrams",
]