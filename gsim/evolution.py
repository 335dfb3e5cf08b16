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
"""Evolution of coordinate vectors through a parameterized circuit."""
from __future__ import annotations

import warnings
from collections.abc import Sequence
from typing import TYPE_CHECKING, Tuple, Union

import numpy as np
import scipy.linalg
from numpy.typing import ArrayLike
from scipy.sparse.linalg import expm_multiply

from gsim.config import EXPM_METHODS, ExpmMethod
from gsim.exceptions import DimensionMismatchError, IndexOutOfRangeError

if TYPE_CHECKING:
    from gsim.bundle import Bundle

CircuitStep = Tuple[float, int]
Circuit = Sequence[Union[CircuitStep, Sequence]]


def validate_circuit(circuit: Circuit, n_generators: int) -> list[CircuitStep]:
    """Checks a circuit description and normalizes its steps.

    Every step must be a (parameter, generator_index) pair, where the
    parameter is a finite real number (strings are rejected) and the index
    is a non-negative integer smaller than 'n_generators'. The whole
    circuit is checked before any step is applied.

    Returns:
        The steps, as (float, int) tuples in temporal order.
    """
    steps = []
    for step, item in enumerate(circuit):
        try:
            param, index = item
        except (TypeError, ValueError):
            raise TypeError(
                f"Step {step} of the circuit must be a (parameter, "
                f"generator_index) pair, not {item!r}."
            ) from None
        if isinstance(index, (bool, np.bool_)) or not isinstance(
            index, (int, np.integer)
        ):
            raise TypeError(
                f"The generator index of step {step} must be an integer, "
                f"not {index!r}."
            )
        if not 0 <= index < n_generators:
            raise IndexOutOfRangeError(
                index=int(index), n_generators=n_generators, step=step
            )
        try:
            value = float(param)
        except (TypeError, ValueError):
            value = None
        if value is None or isinstance(param, (str, bytes)):
            raise TypeError(
                f"The parameter of step {step} must be a real number, "
                f"not {param!r}."
            )
        if not np.isfinite(value):
            raise ValueError(
                f"The parameter of step {step} must be finite, not {value}."
            )
        steps.append((value, int(index)))
    return steps


def evolve(
    adjoint_reps: ArrayLike,
    e_in: ArrayLike,
    circuit: Circuit,
    method: ExpmMethod = "expm",
) -> np.ndarray:
    r"""Applies a circuit to a coordinate vector.

    Starting from :math:`v_0 = e_{in}`, each step :math:`(\theta_j, k_j)`
    computes :math:`v_j = e^{\theta_j R_{k_j}} v_{j-1}`, strictly in the
    order of the circuit.

    Args:
        adjoint_reps: The adjoint matrices, of shape (n, m, m).
        e_in: The initial coordinate vector, of shape (m,).
        circuit: The (parameter, generator_index) steps.
        method: "expm" to build each matrix exponential or "expm_multiply"
            to only compute its action on the vector.

    Returns:
        The final coordinate vector, of shape (m,).
    """
    if method not in EXPM_METHODS:
        raise ValueError(
            f"'method' must be one of {EXPM_METHODS}, not {method!r}."
        )
    reps = np.asarray(adjoint_reps)
    if reps.ndim != 3 or reps.shape[1] != reps.shape[2]:
        raise DimensionMismatchError(
            what="'adjoint_reps'", expected="(n, m, m)", invalid=reps.shape
        )
    vec = np.array(e_in)
    if vec.shape != (reps.shape[1],):
        raise DimensionMismatchError(
            what="'e_in'", expected=(reps.shape[1],), invalid=vec.shape
        )
    for param, index in validate_circuit(circuit, len(reps)):
        if method == "expm":
            vec = scipy.linalg.expm(param * reps[index]) @ vec
        else:
            vec = expm_multiply(param * reps[index], vec)
    return vec


def expectation(
    obs_coords: ArrayLike, coords: ArrayLike, imag_tol: float = 1e-8
) -> float:
    """The expectation value <obs_coords, coords>.

    The imaginary part is dropped; a warning is issued when it is larger
    than 'imag_tol', which only happens for non-Hermitian inputs.
    """
    obs = np.asarray(obs_coords)
    vec = np.asarray(coords)
    if obs.shape != vec.shape or obs.ndim != 1:
        raise DimensionMismatchError(
            what="The observable's coordinate vector",
            expected=vec.shape,
            invalid=obs.shape,
        )
    value = complex(np.vdot(obs, vec))
    if abs(value.imag) > imag_tol:
        warnings.warn(
            f"The expectation value has an imaginary part of {value.imag}, "
            "which is discarded.",
            stacklevel=2,
        )
    return value.real


def simulate(bundle: Bundle, circuit: Circuit) -> float:
    """Computes the expectation value of the bundle's observable.

    Args:
        bundle: The bundle holding the adjoint matrices, the initial
            coordinates and the observable's coordinates.
        circuit: The (parameter, generator_index) steps, in temporal order.
            Indices refer to the generators the bundle was built with.

    Returns:
        The expectation value of the observable after the circuit.
    """
    final = evolve(
        bundle.adjoint_reps,
        bundle.e_in,
        circuit,
        method=bundle.config.expm_method,
    )
    return expectation(
        bundle.obs_coords, final, imag_tol=bundle.config.imag_tol
    )
