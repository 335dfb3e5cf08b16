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
from __future__ import annotations

import itertools

import numpy as np
import pytest

from gsim.algebra import lie_closure, orthonormalize, projection_residual
from gsim.exceptions import (
    BasisMismatchError,
    ClosureLimitError,
    DegenerateInputError,
    GSimValueError,
)
from gsim.operators import commutator, is_hermitian


def gram_matrix(basis: np.ndarray) -> np.ndarray:
    return np.einsum("iab,jab->ij", basis.conj(), basis)


def assert_closed(basis: np.ndarray) -> None:
    for b1, b2 in itertools.combinations(basis, 2):
        assert projection_residual(basis, 1j * commutator(b1, b2)) < 1e-8


class TestOrthonormalize:
    def test_independent(self, paulis):
        basis = orthonormalize([paulis["X"], paulis["X"] + paulis["Z"]])
        assert basis.shape == (2, 2, 2)
        np.testing.assert_allclose(gram_matrix(basis), np.eye(2), atol=1e-12)
        np.testing.assert_allclose(basis[0], paulis["X"] / np.sqrt(2))
        np.testing.assert_allclose(basis[1], paulis["Z"] / np.sqrt(2))

    def test_dependent(self, paulis):
        x, y = paulis["X"], paulis["Y"]
        basis = orthonormalize([x, 2 * x, x - 3 * y, y, np.zeros((2, 2))])
        assert len(basis) == 2

    def test_near_dependent(self, paulis):
        x, y = paulis["X"], paulis["Y"]
        assert len(orthonormalize([x, x + 1e-12 * y])) == 1
        assert len(orthonormalize([x, x + 1e-12 * y], tol=1e-14)) == 2

    def test_scale_invariance(self, paulis):
        x, y = paulis["X"], paulis["Y"]
        basis = orthonormalize([1e-10 * x])
        assert len(basis) == 1
        np.testing.assert_allclose(basis[0], x / np.sqrt(2))
        assert len(orthonormalize([x, 1e-9 * y])) == 2
        assert len(orthonormalize([1e-9 * x, 1e-9 * (x + 1e-12 * y)])) == 1
        assert len(orthonormalize([x, np.zeros((2, 2))])) == 1

    def test_extend(self, paulis):
        basis = orthonormalize([paulis["Z"]])
        extended = orthonormalize([paulis["Z"], paulis["Y"]], basis=basis)
        assert len(extended) == 2
        np.testing.assert_array_equal(extended[0], basis[0])
        assert len(orthonormalize([], basis=basis)) == 1
        assert orthonormalize([]).shape == (0, 0, 0)


class TestLieClosure:
    def test_single_generator(self, paulis):
        basis = lie_closure([paulis["Z"]])
        assert basis.shape == (1, 2, 2)
        np.testing.assert_allclose(basis[0], paulis["Z"] / np.sqrt(2))

    @pytest.mark.parametrize(
        "gen",
        [
            np.diag([1.0, 2.0, -0.5]),
            np.array([[0, 1 - 1j], [1 + 1j, 3]]),
        ],
    )
    def test_single_generator_normalized(self, gen):
        basis = lie_closure([gen])
        assert len(basis) == 1
        np.testing.assert_allclose(basis[0], gen / np.linalg.norm(gen))

    def test_commuting_generators(self, paulis):
        z1 = np.kron(paulis["Z"], paulis["I"])
        z2 = np.kron(paulis["I"], paulis["Z"])
        basis = lie_closure([z1, z2, z1 + z2])
        assert len(basis) == 2

    def test_su2(self, paulis):
        basis = lie_closure([paulis["X"], paulis["Y"]])
        assert len(basis) == 3
        np.testing.assert_allclose(gram_matrix(basis), np.eye(3), atol=1e-12)
        # i[X, Y] = -2Z
        np.testing.assert_allclose(
            np.abs(basis[2]), np.abs(paulis["Z"]) / np.sqrt(2), atol=1e-12
        )
        assert_closed(basis)

    def test_tfim(self, tfim_generators):
        basis = lie_closure(tfim_generators)
        # so(4) for two sites with open boundaries
        assert len(basis) == 6
        np.testing.assert_allclose(gram_matrix(basis), np.eye(6), atol=1e-10)
        assert all(is_hermitian(b) for b in basis)
        for gen in tfim_generators:
            assert projection_residual(basis, gen) < 1e-10
        assert_closed(basis)

    def test_full_algebra(self, paulis):
        # Local X and Y terms with a ZZ coupling generate all of su(4)
        gens = [
            np.kron(paulis["X"], paulis["I"]),
            np.kron(paulis["Y"], paulis["I"]),
            np.kron(paulis["I"], paulis["X"]),
            np.kron(paulis["I"], paulis["Y"]),
            np.kron(paulis["Z"], paulis["Z"]),
        ]
        basis = lie_closure(gens)
        assert len(basis) == 15
        assert_closed(basis)

    def test_repeated_generators(self, paulis):
        x, y = paulis["X"], paulis["Y"]
        assert len(lie_closure([x, y, x, -y])) == 3

    @pytest.mark.parametrize("scale", [1e-12, 1e-9, 1e9])
    def test_scaled_generators(self, paulis, scale):
        gens = [paulis["X"], scale * paulis["Y"]]
        basis = lie_closure(gens)
        assert len(basis) == 3
        for gen in gens:
            assert projection_residual(basis, gen) <= 1e-8 * np.linalg.norm(
                gen
            )
        assert len(lie_closure([scale * paulis["X"]])) == 1
        assert len(lie_closure([scale * g for g in gens])) == 3

    def test_relative_hermiticity(self, paulis):
        # Rounding errors on a large generator
        basis = lie_closure([1e9 * paulis["X"] + 1e-5j * paulis["Z"]])
        np.testing.assert_allclose(
            basis[0], paulis["X"] / np.sqrt(2), atol=1e-12
        )
        with pytest.raises(GSimValueError, match="is not Hermitian"):
            lie_closure([1e-9 * (paulis["X"] + 1e-3j * paulis["Z"])])

    def test_errors(self, paulis):
        with pytest.raises(DegenerateInputError, match="At least one"):
            lie_closure([])
        with pytest.raises(DegenerateInputError, match="are zero"):
            lie_closure([np.zeros((2, 2)), np.zeros((2, 2))])
        # Catchable as a ValueError
        with pytest.raises(ValueError):
            lie_closure([np.zeros((3, 3))])
        with pytest.raises(GSimValueError, match=r"'generators\[1\]' is not"):
            lie_closure([paulis["X"], 1j * paulis["X"]])
        with pytest.raises(BasisMismatchError):
            lie_closure([paulis["X"], np.eye(4)])

    def test_max_dim(self, paulis):
        gens = [paulis["X"], paulis["Y"]]
        assert len(lie_closure(gens, max_dim=3)) == 3
        with pytest.raises(
            ClosureLimitError, match="has more than 2 dimensions"
        ):
            lie_closure(gens, max_dim=2)
        with pytest.raises(ClosureLimitError):
            lie_closure(gens + [paulis["Z"]], max_dim=2)
