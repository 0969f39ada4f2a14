import pytest

from mandel.datatypes import RenderSettings, View
from mandel.parameters import pixel_to_plane, plane_scale, row_origin


def test_view_derived_sizes():
    view = View(left=-2.5, right=1.0, top=1.5, bottom=-1.5)
    assert view.width == 3.5
    assert view.height == 3.0
    assert view.aspect == pytest.approx(3.0 / 3.5)


@pytest.mark.parametrize("bounds", [
    (1.0, 1.0, 1.0, -1.0),
    (1.0, -1.0, 1.0, -1.0),
    (-1.0, 1.0, -1.0, -1.0),
    (-1.0, 1.0, -1.0, 1.0),
])
def test_view_rejects_degenerate_bounds(bounds):
    with pytest.raises(ValueError):
        View(*bounds)


def test_zoom_returns_new_view():
    view = View(left=-2.0, right=2.0, top=1.0, bottom=-1.0)
    zoomed = view.zoom(0.5, -0.25)
    assert view == View(left=-2.0, right=2.0, top=1.0, bottom=-1.0)
    assert zoomed == View(left=-0.5, right=1.5, top=0.25, bottom=-0.75)
    assert zoomed.width == view.width / 2
    assert zoomed.height == view.height / 2


def test_row_origin_moves_down():
    view = View(left=-2.5, right=1.0, top=1.5, bottom=-1.5)
    scalex, scaley = plane_scale(view, 4, 4)
    assert (scalex, scaley) == (0.875, 0.75)
    assert row_origin(view, 0, scaley) == (-2.5, 1.5)
    assert row_origin(view, 3, scaley) == (-2.5, -0.75)


def test_pixel_to_plane():
    view = View(left=-2.5, right=1.0, top=1.5, bottom=-1.5)
    assert pixel_to_plane(view, 0, 0, 4, 4) == (-2.5, 1.5)
    assert pixel_to_plane(view, 2, 2, 4, 4) == (-0.75, 0.0)


def test_render_settings_height_from_aspect():
    assert RenderSettings().raster_height() == 1028
    assert RenderSettings(height=10).raster_height() == 10
    assert RenderSettings(width=1).raster_height() == 1
