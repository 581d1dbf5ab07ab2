from __future__ import annotations
from dataclasses import dataclass

import cv2
import numpy as np


@dataclass
class FilteredField:
    values: np.ndarray   # float64, same shape as the image
    valid: np.ndarray    # bool, True where the kernel footprint fits in the image


def valid_region(shape: tuple[int, int], ksize: int) -> np.ndarray:
    """Mask of the cells whose ksize x ksize footprint lies inside an image of `shape`."""
    h, w = shape
    half = ksize // 2
    mask = np.zeros((h, w), dtype=bool)
    if h > 2 * half and w > 2 * half:
        mask[half:h - half, half:w - half] = True
    return mask


def filter_image(image: np.ndarray, kernel: np.ndarray) -> FilteredField:
    """
    Weighted sum of `kernel` over every neighbourhood of `image`, without padding.

    Border cells (footprint partly outside the image) are left at 0.0 and flagged
    invalid; callers pick their own fallback there. Inputs are not modified.
    """
    if kernel.ndim != 2 or kernel.shape[0] != kernel.shape[1] or kernel.shape[0] % 2 == 0:
        raise ValueError("kernel must be square with an odd size")

    values = np.zeros(image.shape, dtype=np.float64)
    valid = valid_region(image.shape, kernel.shape[0])
    if not valid.any():
        return FilteredField(values=values, valid=valid)

    # filter2D correlates; both kernel families are symmetric so this is the convolution
    src = image.astype(np.float64)
    out = cv2.filter2D(src, cv2.CV_64F, kernel.astype(np.float64), borderType=cv2.BORDER_CONSTANT)
    values[valid] = out[valid]
    return FilteredField(values=values, valid=valid)
