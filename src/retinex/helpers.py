from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path

import cv2
import numpy as np
import os


# Config dataclasses (immutable model constants & driver options)

@dataclass(frozen=True)
class RetinexParams:
    sigma_1: float = 1.0      # first log-compression pass
    sigma_2: float = 3.0      # second log-compression pass
    sigma_ph: float = 0.5     # DoG, photoreceptor scale
    sigma_h: float = 4.0      # DoG, horizontal cell scale
    threshold: float = 5.0    # magnitude floor after normalization (Th)
    dog_extent: float = 1.0   # sigma used to size the DoG kernel (7x7)


@dataclass
class PipelineConfig:
    params: RetinexParams = field(default_factory=RetinexParams)
    verbosity: int = 0
    steps_pattern: str = "/tmp/retinex-me-%d.pgm"
    write_steps: bool = False
    stretch: bool = False
    show: bool = False


# Errors raised by the image I/O collaborator

class RetinexIOError(OSError):
    """Base class for image read/write failures."""


class DecodeError(RetinexIOError):
    """The input path is missing or does not hold a readable grayscale image."""


class EncodeError(RetinexIOError):
    """The image could not be written to the requested destination."""


# I/O & filesystem helpers

def ensure_dir(path: str | os.PathLike) -> None:
    """mkdir -p; a path that cannot be created is an EncodeError (it is always an output location)."""
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise EncodeError(f"Could not create directory: {path} ({e})") from e


def load_image_gray(path: str | os.PathLike) -> np.ndarray:
    """Load an image as a 2-D uint8 intensity grid. Raises DecodeError on failure."""
    if not Path(path).is_file():
        raise DecodeError(f"No such image: {path}")
    img = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
    if img is None:
        raise DecodeError(f"Could not decode image: {path}")
    return img


def save_image_gray(path: str | os.PathLike, image: np.ndarray) -> None:
    """Write a uint8 intensity grid; the format follows the file extension."""
    try:
        ok = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise EncodeError(f"Could not write image: {path} ({e})") from e
    if not ok:
        raise EncodeError(f"Could not write image: {path}")


def step_path(pattern: str, step: int) -> str:
    """Expand a printf-style dump pattern (e.g. "/tmp/retinex-me-%d.pgm") for one step."""
    return pattern % int(step)
