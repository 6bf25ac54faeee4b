# qdynamics

Numerical tools for the time evolution of small closed and open quantum
systems. You supply a Hamiltonian matrix written on a basis you have chosen,
and optionally a set of decoherence channels. The package then computes the
occupation probability of every basis state over time. It does this either by
solving the Schrodinger equation or by integrating the Lindblad quantum master
equation.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

### `qdynamics.hamiltonian`

`Hamiltonian(matrix, basis=None, decoherence=None, h=1.0)` holds the
following:

- A square complex matrix, exposed as the read-only `matrix` property.
- An optional list of basis states. This is the `basis` property, and its
  length must match the matrix.
- Decoherence channels, given as `(gamma, A)` pairs. Each `A` is a jump
  operator on the same basis. They are available through the `decoherence`
  property.
- Planck's constant `h`, which must not be zero.

Methods:

- `size()` (also `len(H)`) returns the dimension.
- `eigen()`, `eigenvalues()` and `eigenvectors()` compute the
  eigen-decomposition once and cache it. Eigenvalues come in ascending order,
  and eigenvectors are the columns of the matrix.
- `find_exp(dt)` builds the step operator `exp(-i H dt / h)`. It is kept for
  later calls with the same `dt`.
- `run_exp(state)` applies the step operator to a state vector. It raises
  `RuntimeError` if `find_exp` has not been called.
- `show(width=15)` prints the matrix to standard output.

### `qdynamics.dynamic`

These functions cover closed-system evolution. Wherever an initial state is
taken, it may be given in either of two forms:

- a sequence of amplitudes in basis order;
- a mapping from basis states to amplitudes. Missing states get amplitude 0,
  and unknown states raise `ValueError`.

Functions:

- `create_init_rho(state)` returns the density matrix `|psi><psi|`.
- `schrodinger(init_state, H, time_vec)` returns a probability matrix. Row `i`
  is basis state `i`, and column `j` is time `time_vec[j]`. It is computed from
  the eigen-decomposition of `H`.
- `schrodinger_step(init_state, H, t)` returns the state vector at time `t`.
- `exp_evolution(init_state, H, dt, steps_count, func=None)` repeatedly
  applies `exp(-i H dt / h)` and returns `steps_count + 1` columns of
  probabilities. `func` is optional. When given, it transforms the state
  before the first record and after every step. The initial state is
  normalized.
- `exp_evolution_step(init_state, H, dt)` returns the state vector after one
  step.

### `qdynamics.master`

`quantum_master_equation(init_state, H, time_vec, algorithm=QmeAlgorithm.RUNGE_KUTTA_4)`
integrates the Lindblad equation from a pure initial state.

- Each channel contributes `gamma / h * (A rho A^+ - 1/2 {A^+ A, rho})`.
- The result is a population matrix with the same layout as `schrodinger`.
- `QmeAlgorithm` selects `RUNGE_KUTTA_4` or `RUNGE_KUTTA_2`. The values
  `"runge_kutta_4"` and `"runge_kutta_2"` are also accepted as strings.
- Any other algorithm raises `ValueError`.

If the populations drift, use a finer time grid.

### `qdynamics.numerics`

- `linspace`
- `fsolve`: bisection solving `f(t) = target` for an increasing `f`. It issues
  a `RuntimeWarning` if no solution is found.
- `fmin`: minimum of a unimodal function.
- `thomas_algorithm`: tridiagonal solver.
- `cubic_spline_interpolate`: the returned callable raises `ValueError`
  outside `[x[0], x[-1]]`.
- `runge_kutta_2`, `runge_kutta_4`
- `ck_n`: binomial coefficient.
- `make_rank_map`: splits `size` items among workers and returns
  `(start, count)`.
- `get_index_from_state`: reads qubit levels as a binary number.
- `read_number`, `is_digit`, `is_zero`
- `f_vector`, `set_bool_check`
- Fixed-width number formatting: `to_string_double_with_precision`,
  `to_string_complex_with_precision` and `vector_to_string`.

### `qdynamics.linalg`

- `scalar_product`: `<a|b>`, which conjugates the first vector.
- `norm`
- `off`: off-diagonal Frobenius norm.
- `givens`: rotations.
- `tridiagonal_qr`
- `mgs`: modified Gram–Schmidt Krylov tridiagonalisation.
- `jacobi`: eigenvalues of real symmetric matrices.
- `hermit_lanczos`: Hermitian eigen-decomposition.
- `tensor_multiply`: Kronecker product.

### `qdynamics.energy_map`

`next_permutation(values, max_num)` steps through the ways of splitting
`max_num` quanta over `len(values)` places.

## Example

```python
import numpy as np

from qdynamics.dynamic import schrodinger
from qdynamics.hamiltonian import Hamiltonian
from qdynamics.master import QmeAlgorithm, quantum_master_equation
from qdynamics.numerics import linspace

g = 0.01
matrix = np.array([[1.0, g], [g, 1.0]], dtype=complex)
leak = np.array([[0.0, 1.0], [0.0, 0.0]], dtype=complex)

H = Hamiltonian(matrix, basis=["|1;0>", "|0;1>"], decoherence=[(0.005, leak)], h=1.0)

time_vec = linspace(0, 500, 501)

closed = schrodinger({"|1;0>": 1.0}, H, time_vec)
open_ = quantum_master_equation([1.0, 0.0], H, time_vec, QmeAlgorithm.RUNGE_KUTTA_4)

print(closed[:, -1], open_[:, -1])
```

## What the package does not do

You must build the Hamiltonian matrix, the basis and the jump operators
yourself. The package does not provide:

- basis-state types;
- operator algebra that generates a basis and a Hamiltonian from rules;
- ready-made cavity models.

It also does not:

- plot results;
- write result files;
- run computations distributed over several processes.

## Running the tests

```
pytest
```