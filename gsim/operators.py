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
"""Dense operators and the elementary operations on them."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Union

import numpy as np
import qutip
from numpy.typing import ArrayLike

from gsim.exceptions import BasisMismatchError, DimensionMismatchError

OperatorLike = Union[ArrayLike, qutip.Qobj]


def to_operator(obj: OperatorLike, name: str = "operator") -> np.ndarray:
    """Converts an operator-like object into a dense complex matrix.

    Args:
        obj: A square matrix, given as an ArrayLike or as a qutip.Qobj
            of type 'oper'.
        name: How to refer to the object in error messages.

    Returns:
        A new complex128 array of shape (d, d).
    """
    if isinstance(obj, qutip.Qobj):
        if not obj.isoper:
            raise TypeError(
                f"{name!r} must be a qutip.Qobj with type 'oper', not "
                f"{obj.type!r}."
            )
        arr = np.array(obj.full(), dtype=np.complex128)
    else:
        try:
            arr = np.array(obj, dtype=np.complex128)
        except (TypeError, ValueError) as e:
            raise DimensionMismatchError(
                what=repr(name), expected="(d, d)", invalid="ragged"
            ) from e
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] == 0:
        raise DimensionMismatchError(
            what=repr(name), expected="(d, d)", invalid=arr.shape
        )
    return arr


def to_operators(
    objs: Sequence[OperatorLike], name: str = "operators"
) -> np.ndarray:
    """Stacks operator-like objects of a common dimension.

    Returns:
        An array of shape (n, d, d). Empty sequences give shape (0, 0, 0).
    """
    if isinstance(objs, qutip.Qobj) or (
        isinstance(objs, np.ndarray) and objs.ndim == 2
    ):
        raise TypeError(
            f"{name!r} must be a sequence of operators, not a single one."
        )
    ops = [to_operator(obj, name=f"{name}[{i}]") for i, obj in enumerate(objs)]
    if not ops:
        return np.zeros((0, 0, 0), dtype=np.complex128)
    dim = ops[0].shape
    for i, op in enumerate(ops[1:], start=1):
        if op.shape != dim:
            raise BasisMismatchError(
                what=f"'{name}[{i}]'", expected=dim, invalid=op.shape
            )
    return np.stack(ops)


def hs_norm(a: np.ndarray) -> float:
    """The norm induced by the Hilbert-Schmidt inner product."""
    return float(np.linalg.norm(a))


def commutator(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """[a, b] = ab - ba."""
    return a @ b - b @ a


def dagger(a: np.ndarray) -> np.ndarray:
    """The conjugate transpose of one operator or of a stack of them."""
    return np.conj(np.swapaxes(a, -1, -2))


def is_hermitian(a: np.ndarray, tol: float = 1e-8) -> bool:
    """Whether ||a - a^dagger|| is at most 'tol' times ||a||."""
    return hs_norm(a - dagger(a)) <= tol * hs_norm(a)


def hermitian_part(a: np.ndarray) -> np.ndarray:
    """(a + a^dagger) / 2."""
    return 0.5 * (a + dagger(a))


def freeze(arr: np.ndarray) -> np.ndarray:
    """Marks an array as read-only and returns it."""
    arr.flags.writeable = False
    return arr
