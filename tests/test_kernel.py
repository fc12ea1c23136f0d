import numpy as np

from band_mandelbrot.complex_ops import ComplexPoint
from band_mandelbrot.kernel import compute_band
from band_mandelbrot.region import Rect, Region


def test_stops_at_buffer_edge():
    # 1.0 / 0.3 floors to 3 samples, the step loop alone would take 4.
    region = Region.allocate(Rect(ComplexPoint(0.0, 1.0), ComplexPoint(1.0, 0.0)), 0.3)
    assert compute_band(region, 256, 2.0, verbose=False) is region
    assert region.shape == (3, 3)
    assert ((region.pixels >= 0) & (region.pixels <= 255)).all()


def test_stops_at_rectangle_edge():
    rect = Rect(ComplexPoint(0.0, 0.0), ComplexPoint(0.1, -0.1))
    region = Region(rect, 0.05, width=5, height=5)
    compute_band(region, 256, 2.0, verbose=False)
    # Every sample in the rectangle lies in the main cardioid.
    assert (region.pixels[:3, :3] == 255).all()
    assert not region.pixels[3:, :].any()
    assert not region.pixels[:, 3:].any()


def test_invert_flips_values():
    rect = Rect(ComplexPoint(-2.0, 1.0), ComplexPoint(1.0, -1.0))
    plain = compute_band(Region.allocate(rect, 0.1), 64, 2.0, verbose=False)
    inverted = compute_band(Region.allocate(rect, 0.1, invert=True), 64, 2.0, verbose=False)
    assert np.array_equal(plain.pixels + inverted.pixels, np.full(plain.shape, 255))


def test_prints_completion_notice(capsys):
    rect = Rect(ComplexPoint(0.0, 0.0), ComplexPoint(0.1, -0.1))
    compute_band(Region.allocate(rect, 0.05), 16, 2.0)
    assert "done [+0.000000|+0.000000] ~ [+0.100000|-0.100000]" in capsys.readouterr().out
