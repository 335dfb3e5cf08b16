# Copyright 2024 GSim Development Team
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import warnings

import numpy as np
import pytest
import scipy.linalg

from gsim.algebra import (
    adjoint_representation,
    adjoint_representations,
    lie_closure,
    project,
    reconstruct,
)
from gsim.exceptions import (
    BasisMismatchError,
    DegenerateInputError,
    GSimValueError,
)
from gsim.operators import commutator


@pytest.fixture
def tfim_basis(tfim_generators):
    return lie_closure(tfim_generators)


def test_shape_and_symmetry(tfim_basis, tfim_generators):
    reps = adjoint_representations(tfim_basis, tfim_generators)
    assert reps.shape == (3, 6, 6)
    assert reps.dtype == float
    for k, rep in enumerate(reps):
        np.testing.assert_allclose(rep, -rep.T, atol=1e-12)
        np.testing.assert_array_equal(
            rep, adjoint_representation(tfim_basis, tfim_generators[k])
        )


def test_commutator_action(tfim_basis, tfim_generators):
    rng = np.random.default_rng(42)
    for gen, rep in zip(
        tfim_generators, adjoint_representations(tfim_basis, tfim_generators)
    ):
        coords = rng.normal(size=len(tfim_basis))
        op = reconstruct(tfim_basis, coords)
        expected = project(tfim_basis, -1j * commutator(gen, op))
        np.testing.assert_allclose(rep @ coords, expected, atol=1e-10)


def test_conjugation(paulis):
    basis = lie_closure([paulis["X"], paulis["Y"]])
    rep = adjoint_representation(basis, paulis["X"])
    op = 0.3 * paulis["Y"] - 0.7 * paulis["Z"]
    theta = 0.37
    unitary = scipy.linalg.expm(-1j * theta * paulis["X"])
    expected = project(basis, unitary @ op @ unitary.conj().T)
    np.testing.assert_allclose(
        scipy.linalg.expm(theta * rep) @ project(basis, op),
        expected,
        atol=1e-12,
    )


def test_commuting_generator(paulis):
    basis = lie_closure([paulis["Z"]])
    np.testing.assert_array_equal(
        adjoint_representation(basis, paulis["Z"]), np.zeros((1, 1))
    )


def test_errors(paulis, tfim_basis):
    with pytest.raises(BasisMismatchError, match="'generator' has shape"):
        adjoint_representation(tfim_basis, paulis["X"])
    with pytest.raises(BasisMismatchError, match=r"'generators\[0\]'"):
        adjoint_representations(tfim_basis, [paulis["X"]])
    with pytest.raises(GSimValueError, match="is not Hermitian"):
        adjoint_representation(
            lie_closure([paulis["X"]]), 1j * paulis["X"]
        )
    with pytest.raises(DegenerateInputError, match="basis of the algebra"):
        adjoint_representation([], paulis["X"])


def test_imaginary_part_warning(paulis):
    # Raising operator: not a Hermitian basis element
    basis = [np.array([[0, 1], [0, 0]])]
    with pytest.warns(UserWarning, match="imaginary part of up to 2"):
        rep = adjoint_representation(basis, paulis["Z"])
    np.testing.assert_array_equal(rep, np.zeros((1, 1)))
    with pytest.warns(UserWarning, match=r"'generators\[1\]'"):
        adjoint_representations(basis, [np.zeros((2, 2)), paulis["Z"]])

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        adjoint_representation(
            lie_closure([paulis["X"], paulis["Y"]]), 1e6 * paulis["X"]
        )
        adjoint_representation(basis, paulis["Z"], imag_tol=2.0)
