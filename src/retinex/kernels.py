from __future__ import annotations
import math

import numpy as np


def kernel_size(sigma: float) -> int:
    """ceil(6*sigma) + 1, always odd so the kernel has a single center cell."""
    if sigma <= 0:
        raise ValueError("sigma must be > 0")
    size = math.ceil(6.0 * sigma) + 1
    # ceil(6*sigma) can be odd (sigma=0.5 gives 4); keep a single center cell
    return size if size % 2 == 1 else size + 1


def _offsets(size: int) -> tuple[np.ndarray, np.ndarray]:
    half = size // 2
    r = np.arange(size, dtype=np.float64) - half
    y, x = np.meshgrid(r, r, indexing="ij")  # row -> y, column -> x
    return x, y


def gaussian(x, y, sigma: float):
    """G(x, y, sigma) = 1 / (2 pi sigma^2) * exp(-(x^2 + y^2) / (2 sigma^2))."""
    s2 = sigma * sigma
    return np.exp(-(np.square(x) + np.square(y)) / (2.0 * s2)) / (2.0 * math.pi * s2)


def dog(x, y, sigma_ph: float = 0.5, sigma_h: float = 4.0):
    """Difference of a narrow (photoreceptor) and a wide (horizontal cell) Gaussian."""
    r2 = np.square(x) + np.square(y)
    center = np.exp(-r2 / (2.0 * sigma_ph * sigma_ph)) / sigma_ph
    surround = np.exp(-r2 / (2.0 * sigma_h * sigma_h)) / sigma_h
    return (center - surround) / math.sqrt(2.0 * math.pi)


def build_gaussian_kernel(sigma: float) -> np.ndarray:
    x, y = _offsets(kernel_size(sigma))
    return gaussian(x, y, sigma)


def build_dog_kernel(sigma_ph: float = 0.5, sigma_h: float = 4.0, extent: float = 1.0) -> np.ndarray:
    """DoG kernel; its size comes from `extent`, not from the two scales (7x7 by default)."""
    if sigma_ph <= 0 or sigma_h <= 0:
        raise ValueError("DoG sigmas must be > 0")
    x, y = _offsets(kernel_size(extent))
    return dog(x, y, sigma_ph, sigma_h)
