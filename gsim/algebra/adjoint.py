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
r"""The adjoint representation of generators in a basis of their algebra.

For a Hermitian generator :math:`H` and a Hermitian orthonormal basis
:math:`\{B_i\}`, the adjoint matrix is

.. math::

    R_H[i, j] = \langle B_i, [-iH, B_j] \rangle
    = \text{Tr}(B_i [-iH, B_j]),

which is real. With this convention, the gate :math:`U = e^{-i\theta H}`
maps the coordinates :math:`v` of :math:`X` to the coordinates of
:math:`U X U^\dagger`, namely :math:`e^{\theta R_H} v`.
"""
from __future__ import annotations

import warnings
from collections.abc import Sequence

import numpy as np

from gsim.algebra.basis import _as_basis
from gsim.exceptions import BasisMismatchError, GSimValueError
from gsim.operators import (
    OperatorLike,
    hs_norm,
    is_hermitian,
    to_operator,
    to_operators,
)


def adjoint_representation(
    basis: np.ndarray | Sequence[OperatorLike],
    generator: OperatorLike,
    hermiticity_tol: float = 1e-8,
    imag_tol: float = 1e-8,
) -> np.ndarray:
    """Computes the adjoint matrix of a generator.

    Args:
        basis: The orthonormal Hermitian basis of the algebra, of shape
            (m, d, d).
        generator: The Hermitian generator, of shape (d, d).
        hermiticity_tol: The tolerance on the Hermiticity of the generator,
            relative to its norm.
        imag_tol: The largest imaginary part of an entry, relative to the
            norm of the generator, that is discarded without a warning.

    Returns:
        The real (m, m) matrix R such that R @ v holds the coordinates of
        [-iH, X] for the operator X with coordinates v.
    """
    basis_arr = _as_basis(basis)
    gen = to_operator(generator, name="generator")
    return _adjoint_matrix(
        basis_arr, gen, "'generator'", hermiticity_tol, imag_tol
    )


def adjoint_representations(
    basis: np.ndarray | Sequence[OperatorLike],
    generators: Sequence[OperatorLike],
    hermiticity_tol: float = 1e-8,
    imag_tol: float = 1e-8,
) -> np.ndarray:
    """Computes the adjoint matrices of several generators.

    Takes the same arguments as `adjoint_representation()`, with one
    generator per entry of 'generators'.

    Returns:
        An array of shape (n, m, m), where entry k is the adjoint matrix
        of 'generators[k]'.
    """
    basis_arr = _as_basis(basis)
    gens = to_operators(generators, name="generators")
    m = len(basis_arr)
    reps = np.zeros((len(gens), m, m), dtype=float)
    for k, gen in enumerate(gens):
        reps[k] = _adjoint_matrix(
            basis_arr, gen, f"'generators[{k}]'", hermiticity_tol, imag_tol
        )
    return reps


def _adjoint_matrix(
    basis: np.ndarray,
    gen: np.ndarray,
    name: str,
    hermiticity_tol: float,
    imag_tol: float,
) -> np.ndarray:
    if gen.shape != basis.shape[1:]:
        raise BasisMismatchError(
            what=name, expected=basis.shape[1:], invalid=gen.shape
        )
    if not is_hermitian(gen, tol=hermiticity_tol):
        raise GSimValueError(f"{name} is not Hermitian.")
    # -i[H, B_j] for all j at once, shape (m, d, d)
    comms = -1j * (gen @ basis - basis @ gen)
    rep = np.einsum("iab,jab->ij", basis.conj(), comms)
    max_imag = float(np.max(np.abs(rep.imag)))
    if max_imag > imag_tol * hs_norm(gen):
        warnings.warn(
            f"The adjoint matrix of {name} has entries with an imaginary "
            f"part of up to {max_imag:.3g}, which is discarded. Is the basis "
            "made of Hermitian operators?",
            stacklevel=3,
        )
    return np.ascontiguousarray(rep.real)
