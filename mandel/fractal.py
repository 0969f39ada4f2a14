import numpy as np
from numba import njit


@njit(nogil=True)
def escape_time(re, im, max_iterations):
    """
    Number of iterations of z = z^2 + c, starting at z = c, before |z| >= 2.
    Points that never escape saturate at max_iterations.
    """
    zr = float(re)
    zi = float(im)
    for i in range(max_iterations):
        zr2 = zr * zr
        zi2 = zi * zi
        if zr2 + zi2 >= 4.0:
            return i
        zi = 2.0 * zr * zi + im
        zr = zr2 - zi2 + re
    return max_iterations


@njit(nogil=True)
def compute_line(img_width, max_iterations, cx0, cy, step):
    """
    Compute one raster row of escape counts, left to right.
    """
    escape = np.zeros(img_width, dtype=np.int32)
    for x in range(img_width):
        escape[x] = escape_time(cx0 + x * step, cy, max_iterations)
    return escape
