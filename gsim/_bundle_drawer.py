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

from __future__ import annotations

from collections.abc import Sequence as abcSequence
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure


class BundleDrawer:
    """Helper functions for Bundle drawing."""

    @staticmethod
    def _initialize_fig_axes(
        n_panels: int, panel_size: float = 3.0
    ) -> tuple[Figure, np.ndarray]:
        n_cols = min(n_panels, 4)
        n_rows = -(-n_panels // n_cols)
        fig, axes = plt.subplots(
            n_rows,
            n_cols,
            figsize=(panel_size * n_cols, panel_size * n_rows),
            squeeze=False,
        )
        for ax in axes.flat[n_panels:]:
            ax.set_axis_off()
        return fig, axes.flat[:n_panels]

    @staticmethod
    def _draw_adjoint_reps(
        axes: abcSequence[Axes],
        reps: np.ndarray,
        labels: abcSequence[str],
    ) -> None:
        vmax = max(float(np.max(np.abs(reps))), 1e-12)
        for ax, rep, label in zip(axes, reps, labels):
            img = ax.imshow(rep, cmap="RdBu_r", vmin=-vmax, vmax=vmax)
            ax.set_title(label)
            ax.set_xlabel("j")
            ax.set_ylabel("i")
        plt.colorbar(img, ax=list(axes), shrink=0.8)

    @staticmethod
    def _draw_coords(
        ax: Axes,
        coords: dict[str, np.ndarray],
    ) -> None:
        width = 0.8 / len(coords)
        for n, (label, vec) in enumerate(coords.items()):
            pos = np.arange(len(vec)) + (n - (len(coords) - 1) / 2) * width
            ax.bar(pos, np.real(vec), width=width, label=label)
        ax.set_xlabel("Basis element")
        ax.set_ylabel("Coordinate")
        ax.legend()

    def _save_and_show(
        self,
        fig_name: Optional[str],
        kwargs_savefig: dict,
        show: bool,
    ) -> None:
        if fig_name is not None:
            plt.savefig(fig_name, **kwargs_savefig)
        if show:
            plt.show()
