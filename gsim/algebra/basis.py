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
r"""Construction of an orthonormal basis of a dynamical Lie algebra.

The algebra generated by Hermitian operators :math:`H_1, \dots, H_n` is
represented by Hermitian matrices: the real span of :math:`G_\alpha`
stands for the algebra spanned by :math:`-iG_\alpha`. Under this
convention, the bracket of two basis elements is taken to be
:math:`i[G_\alpha, G_\beta]`, which is again Hermitian.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

import numpy as np

from gsim.exceptions import (
    ClosureLimitError,
    DegenerateInputError,
    GSimValueError,
)
from gsim.operators import (
    OperatorLike,
    commutator,
    hermitian_part,
    hs_norm,
    is_hermitian,
    to_operators,
)


def _as_basis(basis: np.ndarray | Sequence[OperatorLike]) -> np.ndarray:
    arr = to_operators(basis, name="basis")
    if len(arr) == 0:
        raise DegenerateInputError("The basis of the algebra is empty.")
    return arr


def _orthogonal_component(
    candidate: np.ndarray, basis: np.ndarray, tol: float, zero_tol: float
) -> Optional[np.ndarray]:
    """Normalized component of 'candidate' orthogonal to 'basis'.

    Returns None when the norm of the candidate is at most 'zero_tol' or
    when, once normalized, its component orthogonal to the basis has a norm
    of at most 'tol'.
    """
    norm = hs_norm(candidate)
    if norm <= zero_tol:
        return None
    vec = candidate / norm
    # Classical Gram-Schmidt, repeated once to recover orthogonality lost
    # to cancellation
    for _ in range(2):
        if not len(basis):
            break
        coeffs = np.tensordot(basis.conj(), vec, axes=([1, 2], [0, 1]))
        vec = vec - np.tensordot(coeffs, basis, axes=1)
    vec = hermitian_part(vec)
    residual = hs_norm(vec)
    if residual <= tol:
        return None
    return vec / residual


def orthonormalize(
    operators: Sequence[OperatorLike],
    tol: float = 1e-8,
    basis: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Extends an orthonormal basis with the given Hermitian operators.

    Each operator is normalized, orthogonalized against the basis built so
    far and only kept if the norm of what remains exceeds 'tol'. Operators
    that are numerically linearly dependent on the previous ones are thus
    dropped, as are exactly zero operators. The test does not depend on the
    scale of the operators.

    Args:
        operators: The Hermitian operators to orthonormalize, in order.
        tol: The independence threshold.
        basis: An optional orthonormal basis to extend. It is not modified.

    Returns:
        An array of shape (m, d, d) holding the orthonormal basis, starting
        with the elements of 'basis' (when given).
    """
    ops = to_operators(operators, name="operators")
    if basis is None:
        if not len(ops):
            return ops
        basis = np.zeros((0, *ops.shape[1:]), dtype=np.complex128)
    else:
        basis = np.asarray(basis, dtype=np.complex128)
    for op in ops:
        elem = _orthogonal_component(op, basis, tol, zero_tol=0.0)
        if elem is not None:
            basis = np.concatenate([basis, elem[np.newaxis]])
    return basis


def lie_closure(
    generators: Sequence[OperatorLike],
    tol: float = 1e-8,
    max_dim: Optional[int] = None,
    hermiticity_tol: float = 1e-8,
) -> np.ndarray:
    r"""Computes an orthonormal basis of the Lie algebra of the generators.

    The basis starts with the orthonormalized generators and is grown by a
    work-list fixed point: every time elements are added, their brackets
    :math:`i[B_{new}, B]` with all the elements before them are
    orthogonalized against the current basis and kept when independent.
    The loop stops once a pass adds nothing, which must happen since the
    dimension can't exceed :math:`d^2`.

    Args:
        generators: The Hermitian generators, all of the same dimension.
        tol: The independence threshold of the Gram-Schmidt process. Only
            exactly zero generators are considered zero, whatever their
            scale.
        max_dim: If defined, fails as soon as the basis grows beyond it.
        hermiticity_tol: The tolerance on the Hermiticity of the
            generators, relative to their norms.

    Returns:
        The basis as an array of shape (m, d, d), orthonormal with respect
        to the Hilbert-Schmidt inner product.
    """
    gens = to_operators(generators, name="generators")
    if not len(gens):
        raise DegenerateInputError("At least one generator must be given.")
    for i, gen in enumerate(gens):
        if not is_hermitian(gen, tol=hermiticity_tol):
            raise GSimValueError(f"'generators[{i}]' is not Hermitian.")

    basis = orthonormalize(gens, tol=tol)
    if not len(basis):
        raise DegenerateInputError(
            "All the generators are zero, so they generate no algebra."
        )
    _check_dim(basis, max_dim)

    frontier = range(len(basis))
    while frontier:
        pass_start = len(basis)
        for i in frontier:
            for j in range(i):
                candidate = 1j * commutator(basis[i], basis[j])
                # Brackets of unit elements, so the zero test is absolute
                elem = _orthogonal_component(
                    candidate, basis, tol, zero_tol=tol
                )
                if elem is not None:
                    basis = np.concatenate([basis, elem[np.newaxis]])
                    _check_dim(basis, max_dim)
        frontier = range(pass_start, len(basis))
    return basis


def _check_dim(basis: np.ndarray, max_dim: Optional[int]) -> None:
    if max_dim is not None and len(basis) > max_dim:
        raise ClosureLimitError(max_dim=max_dim)
