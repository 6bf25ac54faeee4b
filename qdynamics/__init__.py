"""Dynamics of small closed and open quantum systems: Hamiltonian matrices, Schrodinger evolution and the Lindblad master equation."""

__version__ = "0.1.0"

__all__ = ["numerics", "linalg", "energy_map", "hamiltonian", "dynamic", "master"]