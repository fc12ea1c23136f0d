import argparse

from band_mandelbrot import config as defaults
from band_mandelbrot.config import RenderConfig
from band_mandelbrot.driver import run


def build_parser():
    cli = argparse.ArgumentParser(description="Render the Mandelbrot set serially and in parallel bands")
    cli.add_argument("--step", type=float, default=defaults.STEP, help="Sample spacing in the complex plane")
    cli.add_argument("--max-iter", type=int, default=defaults.MAX_ITER, help="Iteration cap")
    cli.add_argument("--escape-radius", type=float, default=defaults.ESCAPE_RADIUS, help="Escape radius")
    cli.add_argument("--bands", type=int, default=defaults.NUM_BANDS, help="Number of bands in parallel mode")
    cli.add_argument("--backend", choices=defaults.BACKENDS, default=defaults.BACKEND, help="How bands are run")
    cli.add_argument("--mode", choices=("serial", "parallel", "both"), default="both", help="Which images to render")
    cli.add_argument("--serial-output", default=defaults.SERIAL_OUTPUT, help="Serial image file name")
    cli.add_argument("--parallel-output", default=defaults.PARALLEL_OUTPUT, help="Parallel image file name")
    cli.add_argument("--preview", action="store_true", help="Also write a PNG next to each PGM")
    cli.add_argument("--quiet", action="store_true", help="Do not print band completion notices")
    return cli


def main(argv=None):
    cli = build_parser()
    args = cli.parse_args(argv)
    try:
        config = RenderConfig(
            step=args.step,
            max_iter=args.max_iter,
            escape_radius=args.escape_radius,
            bands=args.bands,
            backend=args.backend,
            serial_output=args.serial_output,
            parallel_output=args.parallel_output,
            preview=args.preview,
            verbose=not args.quiet,
        )
    except ValueError as e:
        cli.error(str(e))

    if args.mode in ("serial", "both"):
        run("Serial", False, config)
    if args.mode in ("parallel", "both"):
        run("Parallel", True, config)
    return 0
