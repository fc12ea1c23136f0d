import concurrent.futures
import os
import time
from itertools import repeat

from band_mandelbrot import pgm
from band_mandelbrot.config import RenderConfig
from band_mandelbrot.kernel import compute_band
from band_mandelbrot.region import Region


def partition(config):
    """
    Splits the full rectangle into config.bands equal-height bands, top first.

    The split is done in lattice rows, so the band heights always add up
    to the full image height and every band shares its width.
    """
    _, height = config.grid_size
    n = config.bands
    bands = []
    for t in range(n):
        first_row = t * height // n
        rows = (t + 1) * height // n - first_row
        bands.append(Region.band(config.rect, config.step, first_row, rows, invert=False))
    return bands


def _executor(backend, workers):
    if backend == "process":
        return concurrent.futures.ProcessPoolExecutor(max_workers=workers)
    return concurrent.futures.ThreadPoolExecutor(max_workers=workers)


def dispatch(regions, config):
    """
    Computes every region and waits for all of them (fork-join).

    Each region is handed to exactly one unit of work. Results come back in
    the order given, and an exception in any band is raised here.
    """
    args = (repeat(config.max_iter), repeat(config.escape_radius), repeat(config.verbose))
    if config.backend == "serial" or len(regions) <= 1:
        return list(map(compute_band, regions, *args))

    with _executor(config.backend, len(regions)) as executor:
        return list(executor.map(compute_band, regions, *args))


def render_serial(config):
    region = Region.allocate(config.rect, config.step, invert=True)
    compute_band(region, config.max_iter, config.escape_radius, config.verbose)
    return [region]


def render_parallel(config):
    return dispatch(partition(config), config)


def _emit(regions, config, path):
    width, height = config.grid_size
    try:
        pgm.save(regions, width, height, path)
        if config.preview:
            pgm.save_preview(regions, os.path.splitext(path)[0] + ".png")
    finally:
        for region in regions:
            region.free()
    return path


def serial(config=None):
    """Computes the whole image on the calling thread, inverted."""
    config = config or RenderConfig()
    return _emit(render_serial(config), config, config.serial_output)


def parallel(config=None):
    """Computes config.bands bands concurrently and stacks them."""
    config = config or RenderConfig()
    return _emit(render_parallel(config), config, config.parallel_output)


def run(label, par, config=None):
    """Times one serial or parallel run and returns the elapsed seconds."""
    print(f"{label} Mandelbrot begin")
    start_time = time.time()
    if par:
        parallel(config)
    else:
        serial(config)
    duration = time.time() - start_time
    print(f"{label} Mandelbrot end ({duration:.4f} s)")
    return duration
