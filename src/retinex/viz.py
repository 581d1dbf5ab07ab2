from __future__ import annotations
from typing import Iterable, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np


def _draw_gray(ax: plt.Axes, img: np.ndarray, title: str, autoscale: bool = False) -> None:
    """One grayscale panel; fixed 0..255 limits unless `autoscale`."""
    limits = {} if autoscale else dict(vmin=0, vmax=255)
    ax.imshow(img, cmap="gray", interpolation="nearest", **limits)
    ax.set_title(title)
    ax.axis("off")


class Visualizer:
    """Stage viewer for the CLI's --show. Figures are returned; plt.show() only on request."""

    def __init__(self, panel_size: float = 4.0) -> None:
        self.panel_size = panel_size

    def _finish(self, fig: plt.Figure, show: bool) -> plt.Figure:
        fig.tight_layout()
        if show:
            plt.show()
        return fig

    def show_image(self, img: np.ndarray, title: str = "Image", show: bool = True) -> plt.Figure:
        fig, ax = plt.subplots(figsize=(self.panel_size, self.panel_size))
        _draw_gray(ax, img, title)
        return self._finish(fig, show)

    def show_row(
        self,
        images: Sequence[np.ndarray],
        titles: Optional[Sequence[str]] = None,
        autoscale: bool = False,
        show: bool = True,
    ) -> plt.Figure:
        n = len(images)
        titles = titles or [f"#{i}" for i in range(n)]
        fig, axes = plt.subplots(1, n, figsize=(self.panel_size * n, self.panel_size), squeeze=False)
        for ax, img, title in zip(axes[0], images, titles):
            _draw_gray(ax, img, title, autoscale)
        return self._finish(fig, show)

    def show_steps(self, steps: Iterable[Tuple[object, np.ndarray]], show: bool = True) -> plt.Figure:
        """Plot the (stage, image) pairs yielded by RetinexPipeline.steps().

        Late stages occupy a handful of gray levels (0 and Th after
        normalization), so every panel is autoscaled.
        """
        steps = list(steps)
        titles = [getattr(stage, "name", str(stage)) for stage, _ in steps]
        return self.show_row([img for _, img in steps], titles, autoscale=True, show=show)
