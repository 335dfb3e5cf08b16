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
"""Errors raised when building or evaluating a simulation bundle."""

from __future__ import annotations

from dataclasses import dataclass

from gsim.exceptions.base import GSimError, GSimValueError


class DegenerateInputError(GSimValueError):
    """The generator set spans no direction of operator space.

    Raised when no generators are given or when all of them are the
    zero matrix, in which case there is no Lie algebra to simulate in.
    """

    pass


@dataclass
class DimensionMismatchError(GSimValueError):
    """Two shapes that must agree do not.

    Attributes:
        what: A description of the offending object.
        expected: The expected shape (or length).
        invalid: The shape (or length) that was received.
    """

    what: str
    expected: object
    invalid: object

    def __str__(self) -> str:
        return (
            f"{self.what} has shape {self.invalid}, which is incompatible "
            f"with the expected shape {self.expected}."
        )


@dataclass
class BasisMismatchError(DimensionMismatchError):
    """An operator does not act on the same space as the algebra basis."""

    def __str__(self) -> str:
        return (
            f"{self.what} has shape {self.invalid}, but the basis of the "
            f"algebra is made of operators of shape {self.expected}."
        )


@dataclass
class IndexOutOfRangeError(IndexError, GSimError):
    """A circuit refers to a generator that does not exist.

    Attributes:
        index: The offending generator index.
        n_generators: The number of generators the bundle was built with.
        step: The position of the offending step in the circuit.
    """

    index: int
    n_generators: int
    step: int

    def __str__(self) -> str:
        return (
            f"Step {self.step} of the circuit refers to generator "
            f"{self.index}, but only generators 0 to {self.n_generators - 1}"
            " are defined."
        )


@dataclass
class ClosureLimitError(GSimError):
    """The Lie closure grew beyond the allowed dimension.

    Attributes:
        max_dim: The maximal dimension that was allowed.
    """

    max_dim: int

    def __str__(self) -> str:
        return (
            "The dynamical Lie algebra has more than "
            f"{self.max_dim} dimensions (the value of 'max_dla_dim')."
        )
