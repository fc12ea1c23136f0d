"""Band-parallel Mandelbrot renderer writing plain-text PGM images."""

__version__ = "0.1.0"
