from __future__ import annotations
import logging

import cv2
import numpy as np

from .convolve import filter_image
from .kernels import build_dog_kernel, build_gaussian_kernel

logger = logging.getLogger(__name__)


# Numeric conversion & statistics

def to_uint8(values: np.ndarray) -> np.ndarray:
    """Round to nearest (ties to even), then saturate to [0, 255]. NaN maps to 0."""
    v = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(np.rint(v), 0, 255).astype(np.uint8)


def image_mean(image: np.ndarray) -> float:
    return float(image.mean()) if image.size else 0.0


def image_range(image: np.ndarray) -> float:
    if not image.size:
        return 0.0
    return abs(float(image.max()) - float(image.min()))


# Stages (all rewrite `image` in place)

def apply_la(image: np.ndarray, sigma: float, verbose: int = 0) -> None:
    """Log-compression driven by a Gaussian local average at scale `sigma`."""
    if not image.size:
        return
    mean = image_mean(image)
    vmax = float(image.max())
    src = image.astype(np.float64)

    field = filter_image(image, build_gaussian_kernel(sigma))
    F = np.where(field.valid, field.values, src) + mean / 2.0

    denom = src + F
    ratio = np.divide(src, denom, out=np.zeros_like(src), where=denom != 0)
    image[...] = to_uint8(ratio * (vmax + F))

    if verbose > 0:
        logger.info(f"LA(sigma={sigma}): mean={mean:.3f} max={vmax:.0f} "
                    f"-> mean={image_mean(image):.3f}")


def apply_dog(image: np.ndarray, sigma_ph: float = 0.5, sigma_h: float = 4.0,
              extent: float = 1.0, verbose: int = 0) -> None:
    """Band-pass with the DoG kernel; border cells keep their unfiltered value."""
    if not image.size:
        return
    field = filter_image(image, build_dog_kernel(sigma_ph, sigma_h, extent))
    filtered = np.where(field.valid, field.values, image.astype(np.float64))
    image[...] = to_uint8(filtered)

    if verbose > 0:
        logger.info(f"DoG(sigma_ph={sigma_ph}, sigma_h={sigma_h}): "
                    f"{int(field.valid.sum())}/{image.size} filtered, mean={image_mean(image):.3f}")


def apply_normalization(image: np.ndarray, threshold: float = 5.0, verbose: int = 0) -> None:
    """
    Center on the mean, scale by the intensity spread and push every value's
    magnitude up to at least `threshold`:

        v = (I - mean) / |max - min|
        v >= 0  ->  max(threshold, v)
        v <  0  -> -max(threshold, -v)

    This is a floor on |v|, not a saturation; the result goes through to_uint8
    like every other stage, so negative values end up at 0.
    A uniform image (zero spread) is left as is.
    """
    if not image.size:
        return
    mean = image_mean(image)
    spread = image_range(image)
    if spread == 0:
        if verbose > 0:
            logger.info(f"Normalization: uniform image (value={mean:.0f}), left unchanged")
        return

    v = (image.astype(np.float64) - mean) / spread
    v = np.where(v >= 0, np.maximum(threshold, v), -np.maximum(threshold, -v))
    image[...] = to_uint8(v)

    if verbose > 0:
        logger.info(f"Normalization: mean={mean:.3f} spread={spread:.0f} threshold={threshold}")


# Optional post-processing, not a pipeline stage

def redistribute_luminance(image: np.ndarray) -> np.ndarray:
    """Min-max stretch to the full [0, 255] range. Returns a new array."""
    if not image.size or image_range(image) == 0:
        return image.copy()
    return cv2.normalize(image, None, 0, 255, cv2.NORM_MINMAX, dtype=cv2.CV_8U)
