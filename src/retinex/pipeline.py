from __future__ import annotations
from enum import IntEnum
import logging
from typing import Callable, Iterator, Optional, Tuple, Union

import numpy as np

from .helpers import RetinexParams
from .stages import apply_dog, apply_la, apply_normalization

logger = logging.getLogger(__name__)


class Stage(IntEnum):
    NOTHING = 0
    LA1 = 1
    LA2 = 2
    DOG = 3
    NORMALIZE = 4
    DONE = 4  # alias of NORMALIZE


def as_stage(value: Union[Stage, int]) -> Stage:
    try:
        return Stage(value)
    except ValueError as e:
        raise ValueError(f"Unknown stage: {value!r}") from e


class RetinexPipeline:
    """
    Retina-inspired luminance normalization of one grayscale image.

    The pipeline owns a private copy of the input and moves it forward through
    LA1 -> LA2 -> DOG -> NORMALIZE. Progress is monotonic: asking for a stage
    that was already reached returns the current buffer untouched.
    """

    def __init__(self, image: np.ndarray, verbosity: int = 0,
                 params: Optional[RetinexParams] = None) -> None:
        image = np.asarray(image)
        if image.ndim != 2:
            raise ValueError(f"expected a 2-D grayscale image, got shape {image.shape}")
        if image.dtype != np.uint8:
            raise ValueError(f"expected uint8 samples, got {image.dtype}")
        self.params = params or RetinexParams()
        self.verbosity = int(verbosity)
        self._image = image.copy()
        self._stage = Stage.NOTHING

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def image(self) -> np.ndarray:
        return self._image

    def _schedule(self) -> Tuple[Tuple[Stage, Callable[[], None]], ...]:
        p, v = self.params, self.verbosity
        return (
            (Stage.LA1, lambda: apply_la(self._image, p.sigma_1, verbose=v)),
            (Stage.LA2, lambda: apply_la(self._image, p.sigma_2, verbose=v)),
            (Stage.DOG, lambda: apply_dog(self._image, p.sigma_ph, p.sigma_h, p.dog_extent, verbose=v)),
            (Stage.NORMALIZE, lambda: apply_normalization(self._image, p.threshold, verbose=v)),
        )

    def _advance(self, target: Stage, fn: Callable[[], None]) -> None:
        if self._stage >= target:
            return
        if self.verbosity > 0:
            logger.info(f"Running stage {target.name}")
        fn()
        self._stage = target

    def run(self, stop_after: Union[Stage, int] = Stage.DONE) -> np.ndarray:
        """Run every stage not yet reached, up to and including `stop_after`."""
        stop_after = as_stage(stop_after)
        for target, fn in self._schedule():
            if target > stop_after:
                break
            self._advance(target, fn)
        return self._image

    def steps(self, stop_after: Union[Stage, int] = Stage.DONE) -> Iterator[Tuple[Stage, np.ndarray]]:
        """Yield (stage, snapshot) for the current stage and every later one up to `stop_after`."""
        stop_after = as_stage(stop_after)
        yield self._stage, self._image.copy()
        for target in Stage:
            if self._stage < target <= stop_after:
                self.run(target)
                yield target, self._image.copy()
