import sys
import logging
from dataclasses import replace

from mandel.cli import parse_args
from mandel.datatypes import RenderSettings, View
from mandel.generator import FieldGenerator, GenerationError
from mandel.parameters import pixel_to_plane
from mandel.plot_utils import colorize, save_image
from mandel.settings import load_settings, save_settings


_handlers = []


def setup_logging(log_file):
    logger = logging.getLogger()
    while _handlers:
        handler = _handlers.pop()
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.INFO)
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    _handlers.append(console_handler)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        _handlers.append(file_handler)


def build_settings(args):
    """Settings file first, command line flags on top."""
    settings = load_settings(args.load) if args.load else RenderSettings()
    overrides = {
        "width": args.width,
        "height": args.height,
        "max_iterations": args.iterations,
        "workers": args.workers,
        "colormap": args.colormap,
        "gamma": args.gamma,
    }
    settings = replace(settings, **{key: value for key, value in overrides.items() if value is not None})
    if args.view:
        settings = replace(settings, view=View(*args.view))
    return settings


def apply_zooms(settings, clicks):
    """Zoom into each clicked pixel in turn, like clicking in a viewer window."""
    view = settings.view
    width, height = settings.width, settings.raster_height()
    for x, y in clicks:
        cx, cy = pixel_to_plane(view, x, y, width, height)
        view = view.zoom(cx, cy)
        logging.info(f"Zoomed into pixel ({x}, {y}) -> center ({cx}, {cy})")
    return replace(settings, view=view)


def render(settings, out_file, timeout=None):
    width, height = settings.width, settings.raster_height()
    generator = FieldGenerator(worker_count=settings.workers)
    escape_counts = generator.generate(settings.view, width, height, settings.max_iterations, timeout=timeout)
    logging.info("Converting to image...")
    colored = colorize(escape_counts, settings.max_iterations, settings.colormap, settings.gamma)
    save_image(colored, out_file)
    return escape_counts


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_file)

    try:
        settings = apply_zooms(build_settings(args), args.zoom or [])
    except (OSError, ValueError, ZeroDivisionError) as e:
        logging.error(f"Invalid settings: {e}")
        return 2
    logging.info(f"Rendering view {settings.view}")

    if args.save:
        save_settings(settings, args.save)

    try:
        render(settings, args.out, timeout=args.timeout)
    except GenerationError as e:
        logging.error(f"Generation failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
