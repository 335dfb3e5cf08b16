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
"""Coordinates of operators in a basis of the algebra.

Projecting an operator that is not contained in the span of the basis
silently drops its orthogonal component. Simulation results involving
such states or observables are therefore approximations; the size of the
dropped component is given by `projection_residual()`.
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike

from gsim.algebra.basis import _as_basis
from gsim.exceptions import BasisMismatchError, DimensionMismatchError
from gsim.operators import OperatorLike, hs_norm, is_hermitian, to_operator


def project(
    basis: np.ndarray | Sequence[OperatorLike],
    operator: OperatorLike,
    hermiticity_tol: float = 1e-8,
) -> np.ndarray:
    """Computes the coordinates v_i = <B_i, X> of an operator.

    Args:
        basis: The orthonormal basis, of shape (m, d, d).
        operator: The operator X to project, of shape (d, d).
        hermiticity_tol: Below this tolerance, X is considered Hermitian
            and its (then real) coordinates are returned as floats.

    Returns:
        The coordinate vector of shape (m,).
    """
    basis_arr = _as_basis(basis)
    op = _to_matching_operator(basis_arr, operator)
    coords = np.tensordot(basis_arr.conj(), op, axes=([1, 2], [0, 1]))
    if is_hermitian(op, tol=hermiticity_tol):
        return np.ascontiguousarray(coords.real)
    return coords


def reconstruct(
    basis: np.ndarray | Sequence[OperatorLike], coords: ArrayLike
) -> np.ndarray:
    """Builds the operator sum_i v_i B_i from its coordinates."""
    basis_arr = _as_basis(basis)
    coords_arr = np.asarray(coords)
    if coords_arr.shape != (len(basis_arr),):
        raise DimensionMismatchError(
            what="The coordinate vector",
            expected=(len(basis_arr),),
            invalid=coords_arr.shape,
        )
    return np.tensordot(coords_arr, basis_arr, axes=1)


def projection_residual(
    basis: np.ndarray | Sequence[OperatorLike], operator: OperatorLike
) -> float:
    """The norm of the component of an operator outside of the basis span.

    It is zero (up to rounding) exactly when the operator is contained in
    the algebra.
    """
    basis_arr = _as_basis(basis)
    op = _to_matching_operator(basis_arr, operator)
    coords = np.tensordot(basis_arr.conj(), op, axes=([1, 2], [0, 1]))
    return hs_norm(op - reconstruct(basis_arr, coords))


def _to_matching_operator(
    basis: np.ndarray, operator: OperatorLike
) -> np.ndarray:
    op = to_operator(operator, name="operator")
    if op.shape != basis.shape[1:]:
        raise BasisMismatchError(
            what="'operator'", expected=basis.shape[1:], invalid=op.shape
        )
    return op
