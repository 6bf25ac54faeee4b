import numpy as np
import pytest

from qdynamics.hamiltonian import Hamiltonian


@pytest.fixture
def hermitian():
    return np.array(
        [[1.0, 0.5 - 0.2j, 0.0], [0.5 + 0.2j, 2.0, 0.3j], [0.0, -0.3j, 0.5]],
        dtype=complex,
    )


def test_size_matches_matrix(hermitian):
    H = Hamiltonian(hermitian, basis=["a", "b", "c"])
    assert H.size() == 3
    assert len(H) == 3
    assert H.basis == ["a", "b", "c"]


def test_non_square_rejected():
    with pytest.raises(ValueError):
        Hamiltonian([[1, 2, 3], [4, 5, 6]])


def test_basis_size_mismatch_rejected(hermitian):
    with pytest.raises(ValueError):
        Hamiltonian(hermitian, basis=["a", "b"])


def test_decoherence_shape_checked(hermitian):
    with pytest.raises(ValueError):
        Hamiltonian(hermitian, decoherence=[(0.1, np.eye(2))])


def test_decoherence_kept(hermitian):
    A = np.diag([0, 1, 0])
    H = Hamiltonian(hermitian, decoherence=[(0.2, A)])
    (gamma, op), = H.decoherence
    assert gamma == pytest.approx(0.2)
    assert np.allclose(op, A)


def test_eigenvalues_of_diagonal():
    H = Hamiltonian(np.diag([3.0, 1.0, 2.0]))
    assert np.allclose(H.eigenvalues(), [1.0, 2.0, 3.0])


def test_eigen_reconstructs_matrix(hermitian):
    H = Hamiltonian(hermitian)
    values, vectors = H.eigen()
    rebuilt = vectors @ np.diag(values) @ vectors.conj().T
    assert np.allclose(rebuilt, hermitian)
    assert np.allclose(vectors.conj().T @ vectors, np.eye(3))
    assert np.allclose(H.eigenvectors(), vectors)


def test_run_exp_requires_find_exp(hermitian):
    H = Hamiltonian(hermitian)
    with pytest.raises(RuntimeError):
        H.run_exp([1, 0, 0])


def test_run_exp_wrong_size(hermitian):
    H = Hamiltonian(hermitian)
    H.find_exp(0.1)
    with pytest.raises(ValueError):
        H.run_exp([1, 0])


def test_exp_is_unitary(hermitian):
    H = Hamiltonian(hermitian)
    U = H.find_exp(0.7)
    assert np.allclose(U.conj().T @ U, np.eye(3))


def test_exp_zero_step_is_identity(hermitian):
    H = Hamiltonian(hermitian)
    H.find_exp(0.0)
    state = np.array([0.6, 0.8j, 0.0])
    assert np.allclose(H.run_exp(state), state)


def test_exp_matches_eigen_evolution(hermitian):
    H = Hamiltonian(hermitian)
    dt = 0.4
    H.find_exp(dt)
    state = np.array([1.0, 0.0, 0.0], dtype=complex)
    values, vectors = H.eigen()
    expected = vectors @ (np.exp(-1j * values * dt) * (vectors.conj().T @ state))
    assert np.allclose(H.run_exp(state), expected)


def test_planck_constant_scales_time(hermitian):
    state = np.array([0.0, 1.0, 0.0], dtype=complex)
    H1 = Hamiltonian(hermitian, h=1.0)
    H2 = Hamiltonian(hermitian, h=2.0)
    H1.find_exp(0.5)
    H2.find_exp(1.0)
    assert np.allclose(H1.run_exp(state), H2.run_exp(state))


def test_find_exp_recomputes_on_new_step(hermitian):
    H = Hamiltonian(hermitian)
    small = H.find_exp(0.1)
    large = H.find_exp(0.2)
    assert np.allclose(large, small @ small)


def test_run_exp_preserves_norm(hermitian):
    H = Hamiltonian(hermitian)
    H.find_exp(1.3)
    state = np.array([0.6, 0.0, 0.8])
    assert np.linalg.norm(H.run_exp(state)) == pytest.approx(1.0)


def test_show_layout(capsys):
    H = Hamiltonian(np.diag([1.0, 2.0]))
    H.show(width=8)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].split() == ["(1,0)", "(0,0)"]
    assert all(len(line) == 2 * 9 for line in lines)


def test_show_to_stdout(capsys):
    H = Hamiltonian(np.diag([1.0, 2.0]))
    H.show(width=6)
    captured = capsys.readouterr().out.splitlines()
    assert captured[1].split() == ["(0,0)", "(2,0)"]


def test_matrix_is_read_only(hermitian):
    H = Hamiltonian(hermitian)
    with pytest.raises(ValueError):
        H.matrix[0, 0] = 5
    assert H.matrix[0, 0] == hermitian[0, 0]