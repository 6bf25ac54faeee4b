"""Hamiltonian matrices with cached eigen-decomposition and time-evolution operator."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np
from scipy.linalg import expm

DEFAULT_WIDTH = 15
_DT_EPS = 1e-32


def _format_complex(value: complex) -> str:
    value = complex(value)
    return f"({value.real:g},{value.imag:g})"


class Hamiltonian:
    """A Hermitian Hamiltonian on a finite basis, with optional decoherence channels.

    ``decoherence`` holds ``(gamma, A)`` pairs: the rate of a Lindblad channel
    and its jump operator written on the same basis as the Hamiltonian.
    ``h`` is the Planck constant used in the evolution operator ``exp(-i H dt / h)``.
    """

    def __init__(
        self,
        matrix: Any,
        basis: Sequence[Any] | None = None,
        decoherence: Iterable[tuple[float, Any]] | None = None,
        h: float = 1.0,
    ) -> None:
        array = np.array(matrix, dtype=complex)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Hamiltonian must be a square matrix, got shape {array.shape}")
        if h == 0:
            raise ValueError("the Planck constant must not be zero")
        self._matrix = array
        self._matrix.setflags(write=False)

        self._basis = list(basis) if basis is not None else []
        if self._basis and len(self._basis) != array.shape[0]:
            raise ValueError(
                f"basis has {len(self._basis)} states but the matrix is {array.shape[0]}x{array.shape[0]}"
            )

        channels = []
        for gamma, operator in decoherence or ():
            op = np.array(operator, dtype=complex)
            if op.shape != array.shape:
                raise ValueError(
                    f"decoherence operator has shape {op.shape}, expected {array.shape}"
                )
            channels.append((float(gamma), op))
        self._decoherence = channels

        self.h = float(h)
        self._eigenvalues: np.ndarray | None = None
        self._eigenvectors: np.ndarray | None = None
        self._exp: np.ndarray | None = None
        self._exp_dt: float | None = None

    @property
    def matrix(self) -> np.ndarray:
        """The Hamiltonian matrix (read-only)."""
        return self._matrix

    @property
    def basis(self) -> list[Any]:
        """The basis states, in the order of the matrix rows."""
        return list(self._basis)

    @property
    def decoherence(self) -> list[tuple[float, np.ndarray]]:
        """The ``(gamma, operator)`` decoherence channels."""
        return [(gamma, op.copy()) for gamma, op in self._decoherence]

    def size(self) -> int:
        """Dimension of the Hamiltonian."""
        return self._matrix.shape[0]

    def __len__(self) -> int:
        return self.size()

    def eigen(self) -> tuple[np.ndarray, np.ndarray]:
        """Eigenvalues (ascending) and eigenvectors (columns); computed once and cached."""
        if self._eigenvalues is None or self._eigenvectors is None:
            values, vectors = np.linalg.eigh(self._matrix, UPLO="U")
            self._eigenvalues = values
            self._eigenvectors = vectors
        return self._eigenvalues.copy(), self._eigenvectors.copy()

    def eigenvalues(self) -> np.ndarray:
        """Eigenvalues in ascending order."""
        return self.eigen()[0]

    def eigenvectors(self) -> np.ndarray:
        """Matrix whose columns are the eigenvectors."""
        return self.eigen()[1]

    def find_exp(self, dt: float) -> np.ndarray:
        """Compute (or reuse) the step operator ``exp(-i H dt / h)``."""
        dt = float(dt)
        if self._exp is None or self._exp_dt is None or abs(dt - self._exp_dt) >= _DT_EPS:
            self._exp = expm(self._matrix * dt * complex(0, -1.0 / self.h))
            self._exp_dt = dt
        return self._exp.copy()

    def run_exp(self, state: Any) -> np.ndarray:
        """Apply the step operator prepared by :meth:`find_exp` to a state vector."""
        if self._exp is None:
            raise RuntimeError("find_exp must be called before run_exp")
        vector = np.asarray(state, dtype=complex).ravel()
        if vector.size != self.size():
            raise ValueError(f"state has {vector.size} components, expected {self.size()}")
        return self._exp @ vector

    def show(self, width: int = DEFAULT_WIDTH) -> None:
        """Print the matrix, each element right-aligned in a field of ``width``."""
        out = sys.stdout
        for row in self._matrix:
            out.write("".join(f"{_format_complex(value):>{width}} " for value in row))
            out.write("\n")