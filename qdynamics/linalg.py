"""Dense linear algebra: products, rotations, tridiagonalisation and eigenproblems."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from qdynamics.numerics import DEFAULT_EPS

_JACOBI_MAX_ITER = 100_000


def _square(matrix: Any, dtype: Any = None) -> np.ndarray:
    array = np.array(matrix, dtype=dtype)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"expected a square matrix, got shape {array.shape}")
    return array


def scalar_product(a: Any, b: Any) -> complex | float:
    """Return ``<a|b>``: the first vector is conjugated, as in a bra-ket product."""
    va = np.asarray(a).ravel()
    vb = np.asarray(b).ravel()
    if va.shape != vb.shape:
        raise ValueError(f"vector sizes differ: {va.size} and {vb.size}")
    return np.vdot(va, vb).item()


def norm(v: Any) -> float:
    """Euclidean norm of a real or complex vector."""
    values = np.asarray(v).ravel()
    return math.sqrt(float(np.sum(np.abs(values) ** 2)))


def off(matrix: Any) -> float:
    """Frobenius norm of the off-diagonal part of a square matrix."""
    array = _square(matrix)
    off_diagonal = array - np.diag(np.diag(array))
    return math.sqrt(float(np.sum(np.abs(off_diagonal) ** 2)))


def givens(a: float, b: float, eps: float = DEFAULT_EPS) -> tuple[float, float]:
    """Return ``(c, s)`` of the rotation that zeroes ``b`` against ``a``."""
    if abs(b) < eps:
        return 1.0, 0.0
    if abs(b) > abs(a):
        t = -a / b
        s = 1.0 / math.sqrt(1.0 + t * t)
        c = s * t
    else:
        t = -b / a
        c = 1.0 / math.sqrt(1.0 + t * t)
        s = c * t
    return c, s


def tridiagonal_qr(matrix: Any) -> np.ndarray:
    """Reduce a tridiagonal matrix to upper-triangular form with Givens rotations.

    Returns the rotated copy; the input is left untouched.
    """
    T = _square(matrix, dtype=float)
    n = T.shape[0]
    for k in range(n - 1):
        c, s = givens(T[k, k], T[k + 1, k])
        last = min(k + 2, n - 1)
        row_k = T[k, k : last + 1].copy()
        row_next = T[k + 1, k : last + 1].copy()
        T[k, k : last + 1] = row_k * c - s * row_next
        T[k + 1, k : last + 1] = row_k * s + c * row_next
    return T


def mgs(matrix: Any, eps: float = DEFAULT_EPS) -> np.ndarray:
    """Build the tridiagonal projection of a Hermitian matrix on its Krylov basis.

    The Krylov sequence starts from the first unit vector and is orthogonalised
    with modified Gram-Schmidt; the process stops early when it breaks down.
    """
    A = _square(matrix, dtype=complex)
    m = A.shape[0]
    v = np.zeros((m, m), dtype=complex)
    v[0, 0] = 1.0
    H = np.zeros((m, m), dtype=float)

    for j in range(m):
        w = A @ v[j]
        for i in range(j + 1):
            if i >= j - 1:
                H[i, j] = np.vdot(w, v[i]).real
            w = w - v[i] * H[i, j]
        w_norm = norm(w)
        if w_norm < eps:
            return H
        if j != m - 1:
            H[j + 1, j] = w_norm
            v[j + 1] = w / w_norm
    return H


def jacobi(matrix: Any, eps: float = DEFAULT_EPS) -> tuple[np.ndarray, np.ndarray]:
    """Eigen-decompose a real symmetric matrix with Jacobi rotations.

    Returns the eigenvalues and a matrix whose columns are the eigenvectors.
    """
    B = _square(matrix, dtype=float)
    n = B.shape[0]
    eigenvectors = np.eye(n)
    upper = np.triu_indices(n, k=1)

    for iteration in range(1, _JACOBI_MAX_ITER):
        if iteration % 1000 == 0 and off(B) < eps:
            break
        if n < 2:
            break
        magnitudes = np.abs(B[upper])
        best = int(np.argmax(magnitudes))
        if magnitudes[best] < eps:
            break
        p, q = int(upper[0][best]), int(upper[1][best])

        theta = math.atan2(2.0 * B[p, q], B[q, q] - B[p, p]) / 2.0
        c, s = math.cos(theta), math.sin(theta)

        row_p, row_q = B[p].copy(), B[q].copy()
        B[p] = row_p * c - row_q * s
        B[q] = row_p * s + row_q * c

        for target in (B, eigenvectors):
            col_p, col_q = target[:, p].copy(), target[:, q].copy()
            target[:, p] = col_p * c - col_q * s
            target[:, q] = col_p * s + col_q * c

    return np.diag(B).copy(), eigenvectors


def hermit_lanczos(matrix: Any) -> tuple[np.ndarray, np.ndarray]:
    """Eigenvalues (ascending) and eigenvectors (columns) of a Hermitian matrix.

    Only the upper triangle of the matrix is read.
    """
    A = _square(matrix, dtype=complex)
    eigenvalues, eigenvectors = np.linalg.eigh(A, UPLO="U")
    return eigenvalues, eigenvectors


def tensor_multiply(a: Any, b: Any) -> np.ndarray:
    """Kronecker (tensor) product of two matrices."""
    return np.kron(np.asarray(a), np.asarray(b))