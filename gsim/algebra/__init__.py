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
"""Lie-algebraic building blocks: basis, adjoint matrices, coordinates."""

from gsim.algebra.basis import lie_closure, orthonormalize
from gsim.algebra.adjoint import (
    adjoint_representation,
    adjoint_representations,
)
from gsim.algebra.projection import (
    project,
    projection_residual,
    reconstruct,
)

__all__ = [
    "lie_closure",
    "orthonormalize",
    "adjoint_representation",
    "adjoint_representations",
    "project",
    "projection_residual",
    "reconstruct",
]
