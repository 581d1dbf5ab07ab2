import dataclasses

import numpy as np
import pytest

from retinex.helpers import (DecodeError, EncodeError, PipelineConfig, RetinexIOError,
                             RetinexParams, ensure_dir, load_image_gray, save_image_gray,
                             step_path)


def test_params_defaults_are_frozen():
    p = RetinexParams()
    assert (p.sigma_1, p.sigma_2, p.sigma_ph, p.sigma_h, p.threshold) == (1.0, 3.0, 0.5, 4.0, 5.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.sigma_1 = 2.0


def test_pipeline_configs_do_not_share_params():
    a, b = PipelineConfig(), PipelineConfig()
    assert a.params == b.params
    assert a.steps_pattern == "/tmp/retinex-me-%d.pgm"


def test_roundtrip_pgm(tmp_path, scene):
    path = tmp_path / "scene.pgm"
    save_image_gray(path, scene)
    back = load_image_gray(path)
    assert back.dtype == np.uint8
    np.testing.assert_array_equal(back, scene)


def test_missing_file_is_decode_error(tmp_path):
    with pytest.raises(DecodeError):
        load_image_gray(tmp_path / "nope.png")


def test_garbage_file_is_decode_error(tmp_path):
    path = tmp_path / "garbage.png"
    path.write_bytes(b"definitely not a png")
    with pytest.raises(DecodeError):
        load_image_gray(path)


def test_unwritable_destination_is_encode_error(tmp_path, board):
    with pytest.raises(EncodeError):
        save_image_gray(tmp_path / "missing_dir" / "out.png", board)
    with pytest.raises(EncodeError):
        save_image_gray(tmp_path / "out.unknownext", board)


def test_error_hierarchy():
    assert issubclass(DecodeError, RetinexIOError)
    assert issubclass(EncodeError, RetinexIOError)
    assert issubclass(RetinexIOError, OSError)


def test_step_path():
    assert step_path("/tmp/retinex-me-%d.pgm", 3) == "/tmp/retinex-me-3.pgm"


def test_ensure_dir_creates_nested(tmp_path):
    target = tmp_path / "a" / "b"
    ensure_dir(target)
    ensure_dir(target)
    assert target.is_dir()


def test_ensure_dir_under_a_file_is_encode_error(tmp_path):
    blocker = tmp_path / "file.txt"
    blocker.write_text("x")
    with pytest.raises(EncodeError):
        ensure_dir(blocker / "sub")
