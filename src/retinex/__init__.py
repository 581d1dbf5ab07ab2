from .helpers import (RetinexParams, PipelineConfig, RetinexIOError, DecodeError, EncodeError,
                      ensure_dir, load_image_gray, save_image_gray)
from .kernels import kernel_size, gaussian, dog, build_gaussian_kernel, build_dog_kernel
from .convolve import FilteredField, filter_image
from .stages import (apply_la, apply_dog, apply_normalization, redistribute_luminance,
                     to_uint8, image_mean, image_range)
from .pipeline import Stage, RetinexPipeline, as_stage
from .viz import Visualizer

__version__ = "0.1.0"

__all__ = [
    "RetinexParams", "PipelineConfig", "RetinexIOError", "DecodeError", "EncodeError",
    "ensure_dir", "load_image_gray", "save_image_gray",
    "kernel_size", "gaussian", "dog", "build_gaussian_kernel", "build_dog_kernel",
    "FilteredField", "filter_image",
    "apply_la", "apply_dog", "apply_normalization", "redistribute_luminance",
    "to_uint8", "image_mean", "image_range",
    "Stage", "RetinexPipeline", "as_stage",
    "Visualizer",
]
