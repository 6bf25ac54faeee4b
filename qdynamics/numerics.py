"""Numerical helpers: grids, root finding, interpolation, ODE steppers and formatting."""

from __future__ import annotations

import math
import warnings
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

DEFAULT_EPS = 1e-9


def linspace(start: float, end: float, num: int) -> list[float]:
    """Return ``num`` evenly spaced values from ``start`` to ``end`` inclusive."""
    start = float(start)
    end = float(end)
    if num <= 0:
        return []
    if num == 1:
        return [start]
    delta = (end - start) / (num - 1)
    values = [start + delta * i for i in range(num - 1)]
    values.append(end)
    return values


def is_zero(value: complex, eps: float = DEFAULT_EPS) -> bool:
    """Return True when ``|value| < eps``; works for real and complex numbers."""
    return abs(value) < eps


def is_digit(char: str) -> bool:
    """Return True for a single ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"


def read_number(text: str, start_index: int = 0) -> tuple[int, int]:
    """Read a decimal number starting at ``start_index``.

    Returns the number and the index just past its last digit.
    """
    index = start_index
    number = 0
    while index < len(text) and is_digit(text[index]):
        number = number * 10 + (ord(text[index]) - ord("0"))
        index += 1
    return number, index


def ck_n(k: int, n: int) -> int:
    """Binomial coefficient C(n, k), taken from row ``n`` of Pascal's triangle."""
    if n < 0 or k < 0 or k > n:
        raise ValueError(f"invalid binomial arguments k={k}, n={n}")
    line = [1]
    for _ in range(n):
        line = [1, *(a + b for a, b in zip(line, line[1:])), 1]
    return line[k]


def fsolve(
    f: Callable[[float], float],
    a: float,
    b: float,
    target: float = 0.0,
    eps: float = DEFAULT_EPS,
) -> float:
    """Solve ``f(t) = target`` on ``[a, b]`` by bisection; ``f`` must be increasing.

    If the interval collapses without reaching the target, a RuntimeWarning is
    issued and the right end of the interval is returned.
    """
    t = (a + b) / 2.0
    while abs(f(t) - target) >= eps:
        if f(t) - target > 0:
            b = t
        else:
            a = t
        t = (a + b) / 2.0
        if abs(a - b) < eps:
            warnings.warn("f without zero", RuntimeWarning, stacklevel=2)
            return b
    return t


def fmin(
    f: Callable[[float], float], a: float, b: float, eps: float = DEFAULT_EPS
) -> float:
    """Locate the minimum of a unimodal ``f`` on ``[a, b]`` by dichotomy."""
    a_n, b_n = a, b
    length = b - a
    x_n = (a + b) / 2.0
    while length >= 2 * eps:
        x_n = (a_n + b_n) / 2.0
        c_n = x_n - eps / 2.0
        d_n = x_n + eps / 2.0
        if f(c_n) < f(d_n):
            b_n = d_n
        else:
            a_n = c_n
        length = b_n - a_n
    return x_n


def thomas_algorithm(matrix: Any, y: Sequence[float]) -> list[float]:
    """Solve a tridiagonal system ``matrix @ x = y`` (matrix indexable as rows)."""
    k = len(y)
    if k < 2:
        raise ValueError("Thomas algorithm needs a system of at least 2 equations")
    B = matrix
    a = [0.0] * k
    b = [0.0] * k
    x = [0.0] * k
    a[0] = -B[0][1] / B[0][0]
    b[0] = y[0] / B[0][0]
    for i in range(1, k - 1):
        a[i] = B[i][i + 1] / (-B[i][i] - B[i][i - 1] * a[i - 1])
        b[i] = (B[i][i - 1] * b[i - 1] - y[i]) / (-B[i][i] - a[i - 1] * B[i][i - 1])
    a[k - 1] = 0.0
    x[k - 1] = (B[k - 1][k - 2] * b[k - 2] - y[k - 1]) / (
        -B[k - 1][k - 1] - B[k - 1][k - 2] * a[k - 2]
    )
    for i in range(k - 2, -1, -1):
        x[i] = a[i] * x[i + 1] + b[i]
    return x


def cubic_spline_interpolate(
    x: Sequence[float], f: Sequence[float], eps: float = DEFAULT_EPS
) -> Callable[[float], float]:
    """Build a natural cubic spline through the points ``(x[i], f[i])``.

    The returned callable raises ValueError for arguments outside ``[x[0], x[-1]]``.
    """
    if len(x) != len(f):
        raise ValueError("x and f must have the same length")
    if len(x) < 2:
        raise ValueError("spline interpolation needs at least 2 points")
    xs = [float(v) for v in x]
    fs = [float(v) for v in f]
    n = len(xs) - 1

    h = [0.0] + [xs[i] - xs[i - 1] for i in range(1, n + 1)]

    C = [[0.0] * (n + 1) for _ in range(n + 1)]
    C[0][0] = 1.0
    C[n][n] = 1.0
    for i in range(1, n):
        C[i][i - 1] = h[i] / 6.0
        C[i][i] = (h[i] + h[i + 1]) / 3.0
        C[i][i + 1] = h[i + 1] / 6.0

    rhs = [0.0] * (n + 1)
    for i in range(1, n):
        rhs[i] = (fs[i + 1] - fs[i]) / h[i + 1] - (fs[i] - fs[i - 1]) / h[i]

    c = thomas_algorithm(C, rhs)

    a = list(fs)
    b = [0.0] * (n + 1)
    d = [0.0] * (n + 1)
    for i in range(1, n + 1):
        d[i] = (c[i] - c[i - 1]) / h[i]
        b[i] = (a[i] - a[i - 1]) / h[i] + h[i] / 2.0 * c[i] - h[i] * h[i] / 6.0 * d[i]

    def spline(t: float) -> float:
        if t + eps < xs[0] or t - eps > xs[-1]:
            raise ValueError(f"{t} is not between {xs[0]} and {xs[-1]}")
        if is_zero(t - xs[0], eps):
            return fs[0]
        if is_zero(t - xs[-1], eps):
            return fs[-1]
        for i in range(1, n + 1):
            if xs[i - 1] <= t <= xs[i]:
                diff = t - xs[i]
                return (
                    a[i]
                    + b[i] * diff
                    + c[i] * diff * diff / 2.0
                    + d[i] * diff * diff * diff / 6.0
                )
        raise ValueError(f"{t} is not between {xs[0]} and {xs[-1]}")

    return spline


def runge_kutta_4(x: Sequence[float], y0: T, f: Callable[[float, T], T]) -> list[T]:
    """Integrate ``y' = f(t, y)`` over the grid ``x`` with the classic RK4 scheme."""
    if not x:
        return []
    y = [y0]
    for x_cur, x_next in zip(x, x[1:]):
        step = x_next - x_cur
        cur = y[-1]
        k1 = f(x_cur, cur)
        k2 = f(x_cur + step / 2.0, cur + k1 * (step / 2.0))
        k3 = f(x_cur + step / 2.0, cur + k2 * (step / 2.0))
        k4 = f(x_cur + step, cur + k3 * step)
        y.append(cur + (k1 + (k2 + k3) * 2 + k4) * (step / 6.0))
    return y


def runge_kutta_2(x: Sequence[float], y0: T, f: Callable[[float, T], T]) -> list[T]:
    """Integrate ``y' = f(t, y)`` over the grid ``x`` with Heun's second-order scheme."""
    if not x:
        return []
    y = [y0]
    for x_cur, x_next in zip(x, x[1:]):
        step = x_next - x_cur
        cur = y[-1]
        k1 = f(x_cur, cur)
        k2 = f(x_cur + step, cur + k1 * step)
        y.append(cur + (k1 + k2) * (step / 2.0))
    return y


def make_rank_map(size: int, rank: int, world_size: int) -> tuple[int, int]:
    """Share ``size`` items among ``world_size`` workers.

    Returns ``(start, count)`` for worker ``rank``; the first ``size % world_size``
    workers get one extra item.
    """
    per_worker = size // world_size
    rest = size - per_worker * world_size
    count = per_worker + (1 if rank < rest else 0)
    start = rank * per_worker + min(rank, rest)
    return start, count


def get_index_from_state(state: Iterable[int]) -> int:
    """Read a sequence of qubit levels as a binary number, most significant first."""
    index = 0
    for qubit in state:
        index = (index << 1) + qubit
    return index


def to_string_double_with_precision(
    value: float, precision: int, max_number_size: int
) -> str:
    """Format a real number as an explicit sign and a zero-padded fixed-point field."""
    sign = "+" if value >= 0 else "-"
    return f"{sign}{abs(value):0{max_number_size}.{precision}f}"


def to_string_complex_with_precision(
    value: complex, precision: int, max_number_size: int
) -> str:
    """Format a complex number as ``±real±imagj`` with zero-padded parts."""
    value = complex(value)
    real = to_string_double_with_precision(value.real, precision, max_number_size)
    imag = to_string_double_with_precision(value.imag, precision, max_number_size)
    return f"{real}{imag}j"


def vector_to_string(lines: Iterable[str]) -> str:
    """Join lines, each followed by a newline, stopping at the first empty one."""
    parts = []
    for line in lines:
        if not line:
            break
        parts.append(line + "\n")
    return "".join(parts)


def f_vector(f: Callable[[T], T], x: Iterable[T]) -> list[T]:
    """Apply ``f`` to every element of ``x``."""
    return [f(value) for value in x]


def set_bool_check(values: Iterable[T], func: Callable[[T], bool]) -> set[T]:
    """Return the set of values for which ``func`` holds."""
    return {value for value in values if func(value)}