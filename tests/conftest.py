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

import matplotlib.pyplot as plt
import numpy as np
import pytest

import gsim

I2 = np.eye(2, dtype=complex)
X = np.array([[0, 1], [1, 0]], dtype=complex)
Y = np.array([[0, -1j], [1j, 0]], dtype=complex)
Z = np.array([[1, 0], [0, -1]], dtype=complex)


@pytest.fixture
def paulis() -> dict[str, np.ndarray]:
    return {"I": I2, "X": X, "Y": Y, "Z": Z}


@pytest.fixture
def ket0_dm() -> np.ndarray:
    return np.array([[1, 0], [0, 0]], dtype=complex)


@pytest.fixture
def qubit_bundle(ket0_dm) -> gsim.Bundle:
    """Single qubit, X and Y rotations, measured in Z."""
    return gsim.build(ket0_dm, Z, [X, Y])


@pytest.fixture
def tfim_generators() -> list[np.ndarray]:
    """Two-qubit transverse field Ising generators: XI, IX and ZZ."""
    return [np.kron(X, I2), np.kron(I2, X), np.kron(Z, Z)]


@pytest.fixture
def patch_plt_show(monkeypatch):
    # Close residual figures
    plt.close("all")
    # Closes a figure instead of showing it
    monkeypatch.setattr(plt, "show", plt.close)
