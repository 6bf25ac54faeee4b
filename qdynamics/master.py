"""Open-system dynamics: the Lindblad quantum master equation for the density matrix."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from qdynamics.dynamic import _fit_to_basis, create_init_rho
from qdynamics.hamiltonian import Hamiltonian
from qdynamics.numerics import runge_kutta_2, runge_kutta_4


class QmeAlgorithm(enum.Enum):
    """Integration scheme for the master equation."""

    RUNGE_KUTTA_4 = "runge_kutta_4"
    RUNGE_KUTTA_2 = "runge_kutta_2"


_SOLVERS = {
    QmeAlgorithm.RUNGE_KUTTA_4: runge_kutta_4,
    QmeAlgorithm.RUNGE_KUTTA_2: runge_kutta_2,
}


def _lindblad_equation(
    hamiltonian: Hamiltonian,
) -> Callable[[float, np.ndarray], np.ndarray]:
    """Right-hand side ``d rho / dt`` of the master equation for ``hamiltonian``."""
    h = hamiltonian.h
    H = hamiltonian.matrix
    channels = []
    for gamma, A in hamiltonian.decoherence:
        A_dag = A.conj().T
        channels.append((gamma, A, A_dag, A_dag @ A))

    def equation(t: float, rho: np.ndarray) -> np.ndarray:
        res = complex(0, -1.0 / h) * (H @ rho - rho @ H)
        for gamma, A, A_dag, A_dag_A in channels:
            dissipator = gamma * (A @ rho @ A_dag) - 0.5 * gamma * (A_dag_A @ rho + rho @ A_dag_A)
            res = res + dissipator / h
        return res

    return equation


def quantum_master_equation(
    init_state: Any,
    hamiltonian: Hamiltonian,
    time_vec: Sequence[float],
    algorithm: QmeAlgorithm | str = QmeAlgorithm.RUNGE_KUTTA_4,
) -> np.ndarray:
    """Integrate the Lindblad master equation starting from a pure state.

    The decoherence channels of ``hamiltonian`` enter as
    ``gamma / h * (A rho A^+ - 1/2 {A^+ A, rho})``. Returns a real matrix whose
    row ``i`` holds the population of basis state ``i`` and whose column ``j``
    corresponds to ``time_vec[j]``. Small steps in ``time_vec`` are needed for
    accurate results.
    """
    try:
        scheme = QmeAlgorithm(algorithm)
    except ValueError:
        raise ValueError(f"unknown master equation algorithm: {algorithm!r}") from None

    dim = hamiltonian.size()
    rho_0 = create_init_rho(_fit_to_basis(init_state, hamiltonian))
    times = [float(t) for t in time_vec]

    rho_vec = _SOLVERS[scheme](times, rho_0, _lindblad_equation(hamiltonian))

    probs = np.zeros((dim, len(times)), dtype=float)
    for column, rho in enumerate(rho_vec):
        probs[:, column] = np.abs(np.diag(rho))
    return probs