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

"""Simulation of parameterized circuits in their dynamical Lie algebra."""

from gsim._version import __version__ as __version__
from gsim.config import GSimConfig
from gsim.bundle import Bundle, build
from gsim.evolution import evolve, expectation, simulate
from gsim.exceptions import (
    BasisMismatchError,
    ClosureLimitError,
    DegenerateInputError,
    DimensionMismatchError,
    GSimError,
    GSimValueError,
    IndexOutOfRangeError,
)

# Exposing relevant submodules
from gsim import (
    algebra as algebra,
    operators as operators,
)

__all__ = [
    # gsim.config
    "GSimConfig",
    # gsim.bundle
    "Bundle",
    "build",
    # gsim.evolution
    "evolve",
    "expectation",
    "simulate",
    # gsim.exceptions
    "BasisMismatchError",
    "ClosureLimitError",
    "DegenerateInputError",
    "DimensionMismatchError",
    "GSimError",
    "GSimValueError",
    "IndexOutOfRangeError",
]
