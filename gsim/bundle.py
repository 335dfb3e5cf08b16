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
"""Defines the Bundle class and the function building it."""
from __future__ import annotations

import warnings
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from gsim._bundle_drawer import BundleDrawer
from gsim.algebra.adjoint import adjoint_representations
from gsim.algebra.basis import _as_basis, lie_closure
from gsim.algebra.projection import project, projection_residual, reconstruct
from gsim.config import GSimConfig
from gsim.evolution import Circuit, evolve, simulate
from gsim.exceptions import BasisMismatchError, DimensionMismatchError
from gsim.operators import OperatorLike, freeze, to_operator, to_operators


@dataclass(repr=False, eq=False, frozen=True)
class Bundle(BundleDrawer):
    """Everything needed to simulate circuits in a dynamical Lie algebra.

    A bundle is built once (usually with `build()`) and can then be shared
    by any number of `simulate()` calls, as it is never modified. All its
    arrays are read-only.

    Args:
        basis: The orthonormal Hermitian basis of the algebra, of shape
            (m, d, d).
        e_in: The coordinates of the initial state, of shape (m,).
        adjoint_reps: The adjoint matrices of the generators, of shape
            (n, m, m), in the order in which circuits refer to them.
        observable: The observable, of shape (d, d).
        obs_coords: The coordinates of the observable. Computed from
            `observable` when not given.
        initial_state: The initial state the coordinates were obtained
            from, if known.
        generators: The generators the adjoint matrices were obtained
            from, if known.
        config: The configuration used to build the bundle, whose
            `expm_method` and `imag_tol` are also used by `simulate()`.
    """

    basis: np.ndarray
    e_in: np.ndarray
    adjoint_reps: np.ndarray
    observable: np.ndarray
    obs_coords: Optional[np.ndarray] = None
    initial_state: Optional[np.ndarray] = None
    generators: Optional[np.ndarray] = None
    config: GSimConfig = field(default_factory=GSimConfig)

    def __post_init__(self) -> None:
        if not isinstance(self.config, GSimConfig):
            raise TypeError(
                f"'config' must be a GSimConfig, not {type(self.config)}."
            )
        basis = _as_basis(self.basis)
        m, d = len(basis), basis.shape[1]

        reps = np.array(self.adjoint_reps)
        if reps.ndim != 3 or reps.shape[1:] != (m, m):
            raise DimensionMismatchError(
                what="'adjoint_reps'", expected=("n", m, m), invalid=reps.shape
            )
        e_in = np.array(self.e_in)
        if e_in.shape != (m,):
            raise DimensionMismatchError(
                what="'e_in'", expected=(m,), invalid=e_in.shape
            )
        observable = to_operator(self.observable, name="observable")
        if observable.shape != (d, d):
            raise BasisMismatchError(
                what="'observable'", expected=(d, d), invalid=observable.shape
            )
        if self.obs_coords is None:
            obs_coords = project(
                basis,
                observable,
                hermiticity_tol=self.config.hermiticity_tol,
            )
        else:
            obs_coords = np.array(self.obs_coords)
        if obs_coords.shape != (m,):
            raise DimensionMismatchError(
                what="'obs_coords'", expected=(m,), invalid=obs_coords.shape
            )
        object.__setattr__(self, "basis", freeze(basis))
        object.__setattr__(self, "adjoint_reps", freeze(reps))
        object.__setattr__(self, "e_in", freeze(e_in))
        object.__setattr__(self, "observable", freeze(observable))
        object.__setattr__(self, "obs_coords", freeze(obs_coords))

        if self.initial_state is not None:
            state = to_operator(self.initial_state, name="initial_state")
            if state.shape != (d, d):
                raise BasisMismatchError(
                    what="'initial_state'",
                    expected=(d, d),
                    invalid=state.shape,
                )
            object.__setattr__(self, "initial_state", freeze(state))
        if self.generators is not None:
            gens = to_operators(self.generators, name="generators")
            if gens.shape != (len(reps), d, d):
                raise DimensionMismatchError(
                    what="'generators'",
                    expected=(len(reps), d, d),
                    invalid=gens.shape,
                )
            object.__setattr__(self, "generators", freeze(gens))

    @property
    def dim(self) -> int:
        """The dimension of the dynamical Lie algebra."""
        return len(self.basis)

    @property
    def hilbert_dim(self) -> int:
        """The dimension of the space the operators act on."""
        return int(self.basis.shape[1])

    @property
    def n_generators(self) -> int:
        """The number of generators circuits can refer to."""
        return len(self.adjoint_reps)

    @property
    def state_residual(self) -> Optional[float]:
        """The norm of the part of the initial state outside the algebra.

        None when the bundle does not know its initial state.
        """
        if self.initial_state is None:
            return None
        return projection_residual(self.basis, self.initial_state)

    @property
    def observable_residual(self) -> float:
        """The norm of the part of the observable outside the algebra."""
        return projection_residual(self.basis, self.observable)

    def evolve(self, circuit: Circuit) -> np.ndarray:
        """The coordinates of the state after the given circuit."""
        return evolve(
            self.adjoint_reps,
            self.e_in,
            circuit,
            method=self.config.expm_method,
        )

    def simulate(self, circuit: Circuit) -> float:
        """The expectation value of the observable after the given circuit.

        Equivalent to `gsim.simulate(self, circuit)`.
        """
        return simulate(self, circuit)

    def reconstruct_state(self, circuit: Circuit = ()) -> np.ndarray:
        """The state after the given circuit, as a (d, d) matrix.

        Only the component of the initial state inside the algebra is
        evolved, so this is the projection of the true final state.
        """
        return reconstruct(self.basis, self.evolve(circuit))

    def draw(
        self,
        fig_name: str | None = None,
        kwargs_savefig: dict = {},
        custom_axes: Optional[Sequence[Axes]] = None,
        show: bool = True,
    ) -> None:
        """Draws the adjoint matrices of the generators.

        Args:
            fig_name: The name on which to save the figure.
                If None the figure will not be saved.
            kwargs_savefig: Keywords arguments for
                ``matplotlib.pyplot.savefig``. Not applicable if `fig_name`
                is ``None``.
            custom_axes: If present, one Axes per generator on which to draw
                instead of creating a new figure.
            show: Whether or not to call `plt.show()` before returning.
        """
        if custom_axes is None:
            _, axes = self._initialize_fig_axes(self.n_generators)
        else:
            axes = list(custom_axes)
            if len(axes) != self.n_generators:
                raise ValueError(
                    f"{self.n_generators} axes are needed to draw this "
                    f"bundle, but {len(axes)} were given."
                )
        self._draw_adjoint_reps(
            axes,
            self.adjoint_reps.real,
            [f"Generator {k}" for k in range(self.n_generators)],
        )
        self._save_and_show(fig_name, kwargs_savefig, show)

    def draw_coords(
        self,
        circuit: Circuit = (),
        fig_name: str | None = None,
        kwargs_savefig: dict = {},
        custom_ax: Optional[Axes] = None,
        show: bool = True,
    ) -> None:
        """Draws the coordinates of the state and of the observable.

        Args:
            circuit: If given, the state's coordinates are drawn after
                this circuit instead of at the start.
            fig_name: The name on which to save the figure.
                If None the figure will not be saved.
            kwargs_savefig: Keywords arguments for
                ``matplotlib.pyplot.savefig``. Not applicable if `fig_name`
                is ``None``.
            custom_ax: If present, instead of creating its own Axes object,
                the function will use the provided one.
            show: Whether or not to call `plt.show()` before returning.
        """
        if custom_ax is None:
            _, custom_ax = plt.subplots(figsize=(6, 3))
        self._draw_coords(
            custom_ax,
            {"state": self.evolve(circuit), "observable": self.obs_coords},
        )
        self._save_and_show(fig_name, kwargs_savefig, show)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(dim={self.dim}, "
            f"hilbert_dim={self.hilbert_dim}, "
            f"n_generators={self.n_generators})"
        )


def build(
    initial_state: OperatorLike,
    observable: OperatorLike,
    generators: Sequence[OperatorLike],
    config: Optional[GSimConfig] = None,
    **options: Any,
) -> Bundle:
    """Builds the bundle used to simulate circuits of the given generators.

    This computes the orthonormal basis of the dynamical Lie algebra of the
    generators, their adjoint matrices and the coordinates of the initial
    state and observable. Components of the state or observable outside of
    the algebra are dropped. When both have such a component, simulation
    results are only approximate and a warning is issued.

    Args:
        initial_state: The initial density matrix, of shape (d, d).
        observable: The Hermitian observable, of shape (d, d).
        generators: The Hermitian generators, of shape (d, d). Circuits
            refer to them by their position in this sequence.
        config: The configuration to use. Defaults to `GSimConfig()`.

    Other Parameters:
        options: Alternatively to `config`, options given to `GSimConfig`.

    Returns:
        The bundle.
    """
    if config is not None and options:
        raise ValueError(
            "Options can be given either through 'config' or as keyword "
            "arguments, but not both."
        )
    if config is None:
        config = GSimConfig(**options)
    elif not isinstance(config, GSimConfig):
        raise TypeError(
            f"'config' must be a GSimConfig, not {type(config)}."
        )

    gens = to_operators(generators, name="generators")
    basis = lie_closure(
        gens,
        tol=config.closure_tol,
        max_dim=config.max_dla_dim,
        hermiticity_tol=config.hermiticity_tol,
    )
    d = basis.shape[1]
    state = to_operator(initial_state, name="initial_state")
    obs = to_operator(observable, name="observable")
    for name, op in (("initial_state", state), ("observable", obs)):
        if op.shape != (d, d):
            raise BasisMismatchError(
                what=repr(name), expected=(d, d), invalid=op.shape
            )
    # The evolution preserves the algebra and its orthogonal complement, so
    # the dropped components only contribute to expectation values when
    # both the state and the observable have one
    residuals = (
        projection_residual(basis, state),
        projection_residual(basis, obs),
    )
    if min(residuals) > config.residual_warn_tol:
        warnings.warn(
            "Both 'initial_state' and 'observable' have components outside "
            "of the dynamical Lie algebra (of norms "
            f"{residuals[0]:.3g} and {residuals[1]:.3g}), which are "
            "dropped; simulation results will only be approximate.",
            stacklevel=2,
        )

    return Bundle(
        basis=basis,
        e_in=project(basis, state, hermiticity_tol=config.hermiticity_tol),
        adjoint_reps=adjoint_representations(
            basis,
            gens,
            hermiticity_tol=config.hermiticity_tol,
            imag_tol=config.imag_tol,
        ),
        observable=obs,
        initial_state=state,
        generators=gens,
        config=config,
    )
