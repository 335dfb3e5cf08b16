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
"""Defines the GSimConfig class."""
from __future__ import annotations

import copy
from typing import Any, ClassVar, Literal, Optional

EXPM_METHODS = ("expm", "expm_multiply")

ExpmMethod = Literal["expm", "expm_multiply"]


class GSimConfig:
    """The numerical configuration of a simulation bundle.

    Args:
        closure_tol: The norm below which a normalized candidate element of
            the Lie closure is considered to already lie in the span of the
            basis.
        hermiticity_tol: The tolerance used to decide whether an operator
            is Hermitian, relative to its norm.
        imag_tol: The largest imaginary part that can be discarded from a
            quantity known to be real without a warning. For adjoint
            matrices, it is relative to the norm of the generator.
        residual_warn_tol: The norm of the component of the initial state
            (or of the observable) outside of the algebra above which a
            warning is issued when building a bundle.
        max_dla_dim: If defined, the closure fails with a ClosureLimitError
            when the algebra has more dimensions than this.
        expm_method: How the exponentials of the adjoint matrices are
            applied. "expm" builds the full matrix exponential, while
            "expm_multiply" only computes its action on the coordinate vector.
    """

    closure_tol: float
    hermiticity_tol: float
    imag_tol: float
    residual_warn_tol: float
    max_dla_dim: Optional[int]
    expm_method: ExpmMethod

    _defaults: ClassVar[dict[str, Any]] = dict(
        closure_tol=1e-8,
        hermiticity_tol=1e-8,
        imag_tol=1e-8,
        residual_warn_tol=1e-8,
        max_dla_dim=None,
        expm_method="expm",
    )

    def __init__(self, **options: Any) -> None:
        """Initializes a GSimConfig."""
        cls_name = self.__class__.__name__
        if invalid_kwargs := set(options) - set(self._defaults):
            raise ValueError(
                f"{cls_name!r} received unexpected keyword arguments: "
                f"{invalid_kwargs}; only the following keyword "
                f"arguments are expected: {set(self._defaults)}."
            )
        opts = {**self._defaults, **options}
        for name in (
            "closure_tol",
            "hermiticity_tol",
            "imag_tol",
            "residual_warn_tol",
        ):
            opts[name] = float(opts[name])
            if not opts[name] > 0:
                raise ValueError(
                    f"'{name}' must be greater than zero, not {opts[name]}."
                )
        max_dim = opts["max_dla_dim"]
        if max_dim is not None:
            if isinstance(max_dim, bool) or int(max_dim) != max_dim:
                raise TypeError(
                    f"'max_dla_dim' must be an integer, not {max_dim!r}."
                )
            if max_dim < 1:
                raise ValueError(
                    f"'max_dla_dim' must be at least 1, not {max_dim}."
                )
            opts["max_dla_dim"] = int(max_dim)
        if opts["expm_method"] not in EXPM_METHODS:
            raise ValueError(
                f"'expm_method' must be one of {EXPM_METHODS}, not "
                f"{opts['expm_method']!r}."
            )
        self._options = opts

    def __getattr__(self, name: str) -> Any:
        if (
            # Needed to avoid recursion error
            "_options" in self.__dict__
            and name in self._options
        ):
            return self._options[name]
        raise AttributeError(f"{name!r} is not an option of {self!r}.")

    def to_dict(self) -> dict[str, Any]:
        """Returns a copy of all the options, defaults included."""
        return copy.deepcopy(self._options)

    def with_changes(self, **changes: Any) -> GSimConfig:
        """Creates a new config with some options changed."""
        return type(self)(**{**self._options, **changes})

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GSimConfig):
            return False
        return self._options == other._options

    def __repr__(self) -> str:
        opts = ", ".join(f"{k}={v!r}" for k, v in self._options.items())
        return f"{self.__class__.__name__}({opts})"
