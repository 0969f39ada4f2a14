import logging

import numpy as np
from matplotlib import colormaps
from PIL import Image


def colorize(escape_counts, max_iterations, colormap="gray", gamma=0.5):
    """
    Map escape counts to RGB with a matplotlib colormap.
    Interior points (count == max_iterations) are painted black.
    """
    escape_counts = np.asarray(escape_counts)
    if max_iterations > 0:
        normalized = (escape_counts / max_iterations) ** gamma
    else:
        normalized = np.zeros(escape_counts.shape)
    cmap = colormaps[colormap]
    colored = (cmap(normalized)[..., :3] * 255).astype(np.uint8)
    colored[escape_counts >= max_iterations] = 0
    return colored


def save_image(colored, file_path):
    """Save an RGB array to an image file using Pillow."""
    image = Image.fromarray(colored)
    image.save(file_path)
    logging.info(f"Fractal successfully exported to {file_path}.")
    return image
