from dataclasses import dataclass

from band_mandelbrot.complex_ops import ComplexPoint
from band_mandelbrot.region import Rect, grid_size

# --- CONFIGURATION ---
STEP = 0.01                 # grid resolution in the complex plane
MAX_ITER = 256              # shared by serial and parallel mode
ESCAPE_RADIUS = 2.0
NUM_BANDS = 4               # horizontal bands in parallel mode
BACKEND = "thread"          # "thread", "process" or "serial"
TOP_LEFT = ComplexPoint(-3.0, +2.0)
BOTTOM_RIGHT = ComplexPoint(+1.0, -2.0)
SERIAL_OUTPUT = "mandelbrot-s.pgm"
PARALLEL_OUTPUT = "mandelbrot-p.pgm"

BACKENDS = ("thread", "process", "serial")


@dataclass(frozen=True)
class RenderConfig:
    step: float = STEP
    max_iter: int = MAX_ITER
    escape_radius: float = ESCAPE_RADIUS
    bands: int = NUM_BANDS
    backend: str = BACKEND
    top_left: ComplexPoint = TOP_LEFT
    bottom_right: ComplexPoint = BOTTOM_RIGHT
    serial_output: str = SERIAL_OUTPUT
    parallel_output: str = PARALLEL_OUTPUT
    preview: bool = False
    verbose: bool = True

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {self.max_iter}")
        if self.escape_radius <= 0:
            raise ValueError(f"escape_radius must be positive, got {self.escape_radius}")
        if self.bands < 1:
            raise ValueError(f"bands must be at least 1, got {self.bands}")
        if self.backend not in BACKENDS:
            raise ValueError(f"backend must be one of {BACKENDS}, got {self.backend!r}")
        # Plain tuples are accepted and stored as points.
        object.__setattr__(self, "top_left", ComplexPoint(*self.top_left))
        object.__setattr__(self, "bottom_right", ComplexPoint(*self.bottom_right))
        self.rect.validate()

    @property
    def rect(self):
        return Rect(self.top_left, self.bottom_right)

    @property
    def grid_size(self):
        """(width, height) of the whole image."""
        return grid_size(self.rect, self.step)
