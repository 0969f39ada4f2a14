import logging

import numpy as np
import pytest
from PIL import Image

import main
from mandel.plot_utils import colorize, save_image


def test_colorize_shape_and_interior():
    counts = np.array([[0, 5], [10, 10]])
    colored = colorize(counts, 10)
    assert colored.shape == (2, 2, 3)
    assert colored.dtype == np.uint8
    assert colored[1, 0].tolist() == [0, 0, 0]
    assert colored[1, 1].tolist() == [0, 0, 0]
    # brighter with more iterations on the gray map
    assert colored[0, 1, 0] > colored[0, 0, 0]


def test_colorize_zero_iterations_is_black():
    colored = colorize(np.zeros((3, 4), dtype=np.int32), 0, colormap="inferno")
    assert not colored.any()


def test_save_image(tmp_path):
    path = tmp_path / "out.png"
    save_image(colorize(np.array([[0, 1], [2, 3]]), 3), path)
    with Image.open(path) as image:
        assert image.size == (2, 2)
        assert image.mode == "RGB"


def test_main_renders_png(tmp_path):
    out = tmp_path / "mandel.png"
    saved = tmp_path / "settings.yaml"
    code = main.main([
        "--width", "16", "--height", "12", "--iterations", "30", "--workers", "2",
        "--zoom", "8", "6", "--out", str(out), "--save", str(saved), "--log-file", "",
    ])
    assert code == 0
    with Image.open(out) as image:
        assert image.size == (16, 12)
    reloaded = main.load_settings(saved)
    assert reloaded.view.width == pytest.approx(3.5 / 2)


def test_main_rejects_empty_raster(tmp_path):
    out = tmp_path / "mandel.png"
    code = main.main(["--width", "0", "--height", "4", "--out", str(out), "--log-file", ""])
    assert code == 1
    assert not out.exists()


def test_apply_zooms_centers_on_pixel():
    settings = main.RenderSettings(width=4, height=4)
    zoomed = main.apply_zooms(settings, [(2, 2)])
    assert zoomed.view.left + zoomed.view.width / 2 == pytest.approx(-0.75)
    assert zoomed.view.top - zoomed.view.height / 2 == pytest.approx(0.0)


def test_main_rejects_zero_workers(tmp_path):
    out = tmp_path / "mandel.png"
    code = main.main(["--width", "4", "--height", "4", "--workers", "0", "--out", str(out), "--log-file", ""])
    assert code == 1
    assert not out.exists()


def test_setup_logging_replaces_its_handlers(tmp_path):
    root = logging.getLogger()
    main.setup_logging("")
    before = len(root.handlers)
    main.setup_logging(str(tmp_path / "first.log"))
    assert len(root.handlers) == before + 1
    main.setup_logging(str(tmp_path / "second.log"))
    assert len(root.handlers) == before + 1
    main.setup_logging("")
    assert len(root.handlers) == before
