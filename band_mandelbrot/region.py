from typing import NamedTuple

import numpy as np

from band_mandelbrot.complex_ops import ComplexPoint


class Rect(NamedTuple):
    """Sampling window, scanned from top_left downwards and to the right."""
    top_left: ComplexPoint
    bottom_right: ComplexPoint

    @property
    def span_real(self):
        return abs(self.top_left.real - self.bottom_right.real)

    @property
    def span_imag(self):
        return abs(self.top_left.imag - self.bottom_right.imag)

    def validate(self):
        if self.top_left.imag < self.bottom_right.imag:
            raise ValueError(f"top-left imag {self.top_left.imag} is below bottom-right imag {self.bottom_right.imag}")
        if self.top_left.real > self.bottom_right.real:
            raise ValueError(f"top-left real {self.top_left.real} is right of bottom-right real {self.bottom_right.real}")
        return self


def grid_size(rect, step):
    """(width, height) of the sample grid covering rect, floored."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return int(rect.span_real / step), int(rect.span_imag / step)


class Region:
    """
    Raster buffer for one rectangle (the whole image or a single band).

    Pixels sit on a lattice anchored at `origin`: row q of this buffer is
    lattice row `first_row + q`, so a band samples the very same points
    the whole-image pass would.
    """

    def __init__(self, rect, step, width, height, invert=False, origin=None, first_row=0):
        self.rect = rect
        self.step = step
        self.invert = invert
        self.origin = origin if origin is not None else rect.top_left
        self.first_row = first_row
        self._pixels = np.zeros((height, width), dtype=np.int32)

    @classmethod
    def allocate(cls, rect, step, invert=False):
        rect = Rect(ComplexPoint(*rect.top_left), ComplexPoint(*rect.bottom_right)).validate()
        width, height = grid_size(rect, step)
        return cls(rect, step, width, height, invert=invert)

    @classmethod
    def band(cls, origin_rect, step, first_row, rows, invert=False):
        """Buffer for lattice rows [first_row, first_row + rows) of origin_rect."""
        if first_row < 0 or rows < 0:
            raise ValueError(f"invalid band rows: first_row={first_row}, rows={rows}")
        width, _ = grid_size(origin_rect, step)
        top, left, right = origin_rect.top_left.imag, origin_rect.top_left.real, origin_rect.bottom_right.real
        rect = Rect(
            ComplexPoint(left, top - first_row * step),
            ComplexPoint(right, top - (first_row + rows) * step),
        )
        return cls(rect, step, width, rows, invert=invert, origin=origin_rect.top_left, first_row=first_row)

    @property
    def pixels(self):
        if self._pixels is None:
            raise RuntimeError("region buffer has been freed")
        return self._pixels

    @property
    def shape(self):
        return self.pixels.shape

    @property
    def height(self):
        return self.shape[0]

    @property
    def width(self):
        return self.shape[1]

    @property
    def is_freed(self):
        return self._pixels is None

    def _check(self, index):
        row, col = index
        height, width = self.shape
        if not (0 <= row < height and 0 <= col < width):
            raise IndexError(f"pixel ({row}, {col}) outside {height}x{width} region")
        return row, col

    def __getitem__(self, index):
        return int(self.pixels[self._check(index)])

    def __setitem__(self, index, value):
        self.pixels[self._check(index)] = value

    def rows(self):
        return iter(self.pixels)

    def free(self):
        self._pixels = None

    def __repr__(self):
        state = "freed" if self.is_freed else f"{self.height}x{self.width}"
        return f"Region({self.rect.top_left} ~ {self.rect.bottom_right}, {state}, invert={self.invert})"
