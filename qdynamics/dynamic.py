"""Closed-system time evolution: pure-state density matrices and Schrodinger dynamics."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

import numpy as np

from qdynamics.hamiltonian import Hamiltonian
from qdynamics.linalg import norm

StateFunc = Callable[[np.ndarray], np.ndarray]


def _fit_to_basis(init_state: Any, hamiltonian: Hamiltonian) -> np.ndarray:
    """Write ``init_state`` as an amplitude vector on the Hamiltonian's basis.

    ``init_state`` is either a sequence of amplitudes in basis order or a
    mapping from basis states to amplitudes; states left out get amplitude 0.
    """
    size = hamiltonian.size()
    if isinstance(init_state, Mapping):
        basis = hamiltonian.basis
        if not basis:
            raise ValueError("the Hamiltonian has no basis to place the state on")
        index = {state: i for i, state in enumerate(basis)}
        vector = np.zeros(size, dtype=complex)
        for state, amplitude in init_state.items():
            if state not in index:
                raise ValueError(f"state {state!r} is not in the basis of the Hamiltonian")
            vector[index[state]] = amplitude
        return vector

    vector = np.array(init_state, dtype=complex).ravel()
    if vector.size != size:
        raise ValueError(f"state has {vector.size} components, expected {size}")
    return vector


def _normalized(vector: np.ndarray) -> np.ndarray:
    length = norm(vector)
    if length == 0:
        raise ValueError("cannot normalize a zero state vector")
    return vector / length


def _identity(vector: np.ndarray) -> np.ndarray:
    return vector


def create_init_rho(init_state: Sequence[complex]) -> np.ndarray:
    """Density matrix ``|psi><psi|`` of a pure state."""
    psi = np.array(init_state, dtype=complex).ravel()
    return np.outer(psi, psi.conj())


def _evolve(
    lambdas: np.ndarray, eigenvalues: np.ndarray, eigenvectors: np.ndarray, t: float, h: float
) -> np.ndarray:
    phases = np.exp(complex(0, -1.0 / h) * eigenvalues * t)
    return eigenvectors @ (lambdas * phases)


def schrodinger(
    init_state: Any, hamiltonian: Hamiltonian, time_vec: Sequence[float]
) -> np.ndarray:
    """Solve the Schrodinger equation through the eigen-decomposition of ``H``.

    Returns a real matrix whose row ``i`` holds the probability of basis state
    ``i`` and whose column ``j`` corresponds to ``time_vec[j]``.
    """
    eigenvalues, eigenvectors = hamiltonian.eigen()
    psi0 = _fit_to_basis(init_state, hamiltonian)
    lambdas = eigenvectors.conj().T @ psi0  # <phi_i|psi(0)>

    times = [float(t) for t in time_vec]
    probs = np.zeros((eigenvalues.size, len(times)), dtype=float)
    for column, t in enumerate(times):
        psi_t = _evolve(lambdas, eigenvalues, eigenvectors, t, hamiltonian.h)
        probs[:, column] = np.abs(psi_t) ** 2
    return probs


def schrodinger_step(init_state: Any, hamiltonian: Hamiltonian, t: float) -> np.ndarray:
    """Return the state vector at time ``t`` evolved from ``init_state``."""
    eigenvalues, eigenvectors = hamiltonian.eigen()
    psi0 = _fit_to_basis(init_state, hamiltonian)
    lambdas = eigenvectors.conj().T @ psi0
    return _evolve(lambdas, eigenvalues, eigenvectors, float(t), hamiltonian.h)


def exp_evolution(
    init_state: Any,
    hamiltonian: Hamiltonian,
    dt: float,
    steps_count: int,
    func: StateFunc | None = None,
) -> np.ndarray:
    """Evolve by repeated application of ``exp(-i H dt / h)``.

    ``func`` is applied to the state vector before the first record and after
    every step; its result replaces the state. The initial state is normalized
    after ``func`` has been applied to it. Returns probabilities with
    ``steps_count + 1`` columns, the first one for the initial state.
    """
    if steps_count < 0:
        raise ValueError("steps_count must not be negative")
    transform = func if func is not None else _identity

    state = _fit_to_basis(init_state, hamiltonian)
    hamiltonian.find_exp(dt)
    probs = np.zeros((state.size, steps_count + 1), dtype=float)

    state = _normalized(np.asarray(transform(state), dtype=complex))
    probs[:, 0] = np.abs(state) ** 2

    for step in range(1, steps_count + 1):
        state = hamiltonian.run_exp(state)
        state = np.asarray(transform(state), dtype=complex)
        probs[:, step] = np.abs(state) ** 2
    return probs


def exp_evolution_step(init_state: Any, hamiltonian: Hamiltonian, dt: float) -> np.ndarray:
    """Return the state vector after one step ``exp(-i H dt / h)``."""
    hamiltonian.find_exp(dt)
    return hamiltonian.run_exp(_fit_to_basis(init_state, hamiltonian))