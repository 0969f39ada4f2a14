def plane_scale(view, img_width, img_height):
    """
    Distance in the complex plane between neighbouring pixels, per axis.
    """
    return view.width / img_width, view.height / img_height


def row_origin(view, y, scaley):
    """
    Complex-plane coordinate of the leftmost sample in raster row y.
    The imaginary part decreases as y grows downwards.
    """
    return view.left, view.top - y * scaley


def pixel_to_plane(view, x, y, img_width, img_height):
    """
    Map a pixel (x, y) of an img_width x img_height raster onto the view.
    """
    scalex, scaley = plane_scale(view, img_width, img_height)
    cx, cy = row_origin(view, y, scaley)
    return cx + x * scalex, cy
