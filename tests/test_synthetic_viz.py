import matplotlib.pyplot as plt
import numpy as np

from retinex.pipeline import RetinexPipeline
from retinex.synthetic import checkerboard, uneven_illumination
from retinex.viz import Visualizer


def test_checkerboard():
    board = checkerboard(4)
    assert board.dtype == np.uint8
    assert board.tolist() == [[255, 0, 255, 0], [0, 255, 0, 255]] * 2
    assert (checkerboard(8, cell=2)[:2, :2] == 255).all()


def test_uneven_illumination_is_reproducible():
    a = uneven_illumination(seed=7, shape=(32, 40))
    b = uneven_illumination(seed=7, shape=(32, 40))
    assert a.shape == (32, 40) and a.dtype == np.uint8
    np.testing.assert_array_equal(a, b)
    # lighting ramp: right half brighter on average
    assert a[:, 20:].mean() > a[:, :20].mean()


def test_show_steps_builds_one_panel_per_stage(scene):
    fig = Visualizer().show_steps(RetinexPipeline(scene).steps(), show=False)
    assert len(fig.axes) == 5
    assert [ax.get_title() for ax in fig.axes][-1] == "NORMALIZE"
    plt.close(fig)


def test_show_image(board):
    fig = Visualizer().show_image(board, title="board", show=False)
    assert fig.axes[0].get_title() == "board"
    assert fig.axes[0].images[0].get_clim() == (0, 255)
    plt.close(fig)


def test_show_row_single_panel_and_autoscale(board):
    fig = Visualizer(panel_size=2.0).show_row([board // 51], autoscale=True, show=False)
    assert len(fig.axes) == 1
    assert fig.axes[0].get_title() == "#0"
    assert fig.axes[0].images[0].get_clim() == (0, 5)
    plt.close(fig)
