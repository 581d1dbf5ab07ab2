from __future__ import annotations
from typing import Tuple

import numpy as np
from skimage.draw import disk
from skimage.filters import gaussian
from skimage.util import random_noise


def checkerboard(size: int = 16, cell: int = 1, low: int = 0, high: int = 255) -> np.ndarray:
    """Square uint8 checkerboard; cell (0, 0) is `high`."""
    idx = np.arange(size) // cell
    board = (idx[:, None] + idx[None, :]) % 2 == 0
    return np.where(board, high, low).astype(np.uint8)


def uneven_illumination(seed: int = 0, shape: Tuple[int, int] = (128, 128)) -> np.ndarray:
    """Gray 'scene' of bright and dark blobs under a left-to-right lighting ramp."""
    rng = np.random.default_rng(seed)
    H, W = shape
    img = np.full((H, W), 0.5, np.float64)

    # Random blobs
    for _ in range(12):
        y, x = rng.integers(0, H), rng.integers(0, W)
        r = rng.integers(4, max(5, min(H, W) // 6))
        rr, cc = disk((y, x), r, shape=(H, W))
        img[rr, cc] = rng.uniform(0.2, 0.9)

    # Soften, light unevenly, add noise, clip
    img = gaussian(img, sigma=1.0)
    img = img * np.linspace(0.25, 1.0, W)[None, :]
    img = random_noise(img, mode="gaussian", var=0.0005, rng=int(rng.integers(0, 2**31)))
    img = np.clip(img, 0, 1)
    return (img * 255).astype(np.uint8)
