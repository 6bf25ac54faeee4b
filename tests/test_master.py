import math

import numpy as np
import pytest

from qdynamics.dynamic import schrodinger
from qdynamics.hamiltonian import Hamiltonian
from qdynamics.master import QmeAlgorithm, quantum_master_equation
from qdynamics.numerics import linspace


def _rabi_hamiltonian(decoherence=None):
    matrix = [[0.0, 0.3], [0.3, 1.0]]
    return Hamiltonian(matrix, basis=["g", "e"], decoherence=decoherence)


def _decay_hamiltonian(gamma):
    lowering = [[0.0, 1.0], [0.0, 0.0]]
    return Hamiltonian(
        [[0.0, 0.0], [0.0, 1.0]], basis=["g", "e"], decoherence=[(gamma, lowering)]
    )


@pytest.mark.parametrize("algorithm", [QmeAlgorithm.RUNGE_KUTTA_4, QmeAlgorithm.RUNGE_KUTTA_2])
def test_without_decoherence_matches_schrodinger(algorithm):
    H = _rabi_hamiltonian()
    times = linspace(0, 5, 501)
    probs = quantum_master_equation([1, 0], H, times, algorithm)
    expected = schrodinger([1, 0], H, times)
    assert probs.shape == (2, 501)
    assert np.allclose(probs, expected, atol=1e-3)


def test_initial_column_is_initial_populations():
    H = _rabi_hamiltonian()
    psi = [math.sqrt(0.25), math.sqrt(0.75)]
    probs = quantum_master_equation(psi, H, linspace(0, 1, 11))
    assert probs[:, 0] == pytest.approx([0.25, 0.75])


def test_trace_is_preserved_with_decay():
    H = _decay_hamiltonian(0.2)
    probs = quantum_master_equation([0, 1], H, linspace(0, 10, 1001))
    assert np.allclose(probs.sum(axis=0), 1.0, atol=1e-6)


def test_excited_population_decays_exponentially():
    gamma = 0.2
    H = _decay_hamiltonian(gamma)
    times = linspace(0, 10, 1001)
    probs = quantum_master_equation([0, 1], H, times)
    for column in (0, 250, 500, 1000):
        assert probs[1, column] == pytest.approx(math.exp(-gamma * times[column]), rel=1e-5)


def test_populations_stay_between_zero_and_one():
    lowering = [[0.0, 1.0], [0.0, 0.0]]
    H = _rabi_hamiltonian(decoherence=[(0.1, lowering)])
    probs = quantum_master_equation([1, 0], H, linspace(0, 20, 2001))
    assert float(probs.min()) >= 0.0
    assert float(probs.max()) <= 1.0 + 1e-9


def test_algorithm_given_by_name():
    H = _rabi_hamiltonian()
    times = linspace(0, 2, 201)
    by_name = quantum_master_equation([1, 0], H, times, "runge_kutta_2")
    by_enum = quantum_master_equation([1, 0], H, times, QmeAlgorithm.RUNGE_KUTTA_2)
    assert np.array_equal(by_name, by_enum)


def test_mapping_initial_state():
    H = _rabi_hamiltonian()
    times = linspace(0, 2, 21)
    by_map = quantum_master_equation({"e": 1}, H, times)
    by_vec = quantum_master_equation([0, 1], H, times)
    assert np.allclose(by_map, by_vec)


def test_unknown_algorithm_raises():
    H = _rabi_hamiltonian()
    with pytest.raises(ValueError):
        quantum_master_equation([1, 0], H, linspace(0, 1, 3), "euler")


def test_wrong_state_size_raises():
    H = _rabi_hamiltonian()
    with pytest.raises(ValueError):
        quantum_master_equation([1, 0, 0], H, linspace(0, 1, 3))


def test_empty_time_grid_gives_no_columns():
    H = _rabi_hamiltonian()
    probs = quantum_master_equation([1, 0], H, [])
    assert probs.shape == (2, 0)