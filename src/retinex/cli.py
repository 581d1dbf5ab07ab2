from __future__ import annotations
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .helpers import (PipelineConfig, RetinexIOError, ensure_dir, load_image_gray,
                      save_image_gray, step_path)
from .pipeline import RetinexPipeline, Stage
from .stages import redistribute_luminance
from .viz import Visualizer

logger = logging.getLogger(__name__)

STAGE_NAMES = [s.name for s in Stage] + ["DONE"]


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="retinex-me",
                                description="Retina-inspired luminance normalization of grayscale images")
    g_io = p.add_argument_group("I/O")
    g_io.add_argument("-i", "--input", type=str, required=True, help="Input image")
    g_io.add_argument("-o", "--output", type=str, required=True, help="Output image")
    g_io.add_argument("--show", action="store_true", help="Display every stage")

    g_steps = p.add_argument_group("Steps")
    g_steps.add_argument("-a", "--all", action="store_true",
                         help="Write images for all the steps of the algorithm")
    g_steps.add_argument("--steps_pattern", type=str, default=PipelineConfig.steps_pattern,
                         help="Path pattern for --all, %%d is the step number")
    g_steps.add_argument("--stop_after", type=str.upper, choices=STAGE_NAMES, default="DONE")
    g_steps.add_argument("--stretch", action="store_true",
                         help="Stretch the result to the full 0-255 range before writing")

    p.add_argument("-v", "--verbosity", type=int, default=0, help="Library verbosity")
    return p


def _setup_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=logging.INFO if verbosity > 0 else logging.WARNING,
        format="%(asctime)s - %(name)-18s - %(levelname)-8s - %(message)s",
        datefmt="%H:%M:%S",
    )


def _process_one(input_path: str, output_path: str, cfg: PipelineConfig, stop_after: Stage) -> None:
    image = load_image_gray(input_path)
    pipe = RetinexPipeline(image, verbosity=cfg.verbosity, params=cfg.params)

    if cfg.write_steps:
        ensure_dir(Path(step_path(cfg.steps_pattern, 0)).parent)

    snapshots = []
    for stage, snapshot in pipe.steps(stop_after):
        snapshots.append((stage, snapshot))
        if cfg.write_steps:
            path = step_path(cfg.steps_pattern, stage)
            save_image_gray(path, snapshot)
            logger.info(f"Wrote step {stage.name} to {path}")

    out = pipe.image
    if cfg.stretch:
        out = redistribute_luminance(out)

    save_image_gray(output_path, out)

    if cfg.show:
        Visualizer().show_steps(snapshots)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    _setup_logging(args.verbosity)

    cfg = PipelineConfig(
        verbosity=args.verbosity,
        steps_pattern=args.steps_pattern,
        write_steps=args.all,
        stretch=args.stretch,
        show=args.show,
    )
    try:
        _process_one(args.input, args.output, cfg, Stage[args.stop_after])
    except RetinexIOError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
