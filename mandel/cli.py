import argparse


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Render the Mandelbrot set to an image.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--load", type=str, metavar="PATH", help="Path to settings file.")
    parser.add_argument("--save", type=str, metavar="PATH", help="Write the effective settings to this file.")
    parser.add_argument("-o", "--out", type=str, metavar="PATH", default="mandelbrot.png", help="Output image.")
    parser.add_argument("--width", type=int, help="Image width in pixels.")
    parser.add_argument("--height", type=int, help="Image height in pixels (default: from the view aspect).")
    parser.add_argument("--iterations", type=int, help="Maximum number of iterations per pixel.")
    parser.add_argument("--workers", type=int, help="Worker threads (default: available CPUs).")
    parser.add_argument("--colormap", type=str, help="Matplotlib colormap name.")
    parser.add_argument("--gamma", type=float, help="Exponent applied to normalized escape counts.")
    parser.add_argument(
        "--view", type=float, nargs=4, metavar=("LEFT", "RIGHT", "TOP", "BOTTOM"),
        help="Region of the complex plane to render.",
    )
    parser.add_argument(
        "--zoom", type=int, nargs=2, metavar=("X", "Y"), action="append",
        help="Zoom 2x around this pixel before rendering. May be repeated.",
    )
    parser.add_argument("--timeout", type=float, help="Give up after this many seconds.")
    parser.add_argument("--log-file", type=str, default="log.txt", help="Log file path.")
    return parser.parse_args(argv)
