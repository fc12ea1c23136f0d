import numpy as np
import pytest

from band_mandelbrot import pgm
from band_mandelbrot.complex_ops import ComplexPoint
from band_mandelbrot.region import Rect, Region

RECT = Rect(ComplexPoint(0.0, 1.0), ComplexPoint(1.0, 0.0))


def make_region(values):
    values = np.array(values)
    region = Region(RECT, 0.1, width=values.shape[1], height=values.shape[0])
    region.pixels[:] = values
    return region


def test_save_writes_plain_pgm(tmp_path):
    path = tmp_path / "out.pgm"
    pgm.save([make_region([[1, 2, 3]]), make_region([[4, 5, 6]])], 3, 2, path)
    assert path.read_text() == "P2\n3 2\n255\n1 2 3\n4 5 6\n"


def test_save_clamps_to_declared_height(tmp_path):
    path = tmp_path / "out.pgm"
    pgm.save([make_region([[1, 2], [3, 4]]), make_region([[5, 6]])], 2, 2, path)
    assert path.read_text() == "P2\n2 2\n255\n1 2\n3 4\n"


def test_save_declares_rows_actually_written(tmp_path):
    path = tmp_path / "out.pgm"
    pgm.save([make_region([[1, 2]])], 2, 5, path)
    assert path.read_text() == "P2\n2 1\n255\n1 2\n"


def test_save_cuts_rows_to_width(tmp_path):
    path = tmp_path / "out.pgm"
    pgm.save([make_region([[1, 2, 3]])], 2, 1, path)
    assert pgm.read(path).tolist() == [[1, 2]]


def test_save_rejects_narrow_region(tmp_path):
    with pytest.raises(ValueError):
        pgm.save([make_region([[1, 2]])], 3, 1, tmp_path / "out.pgm")


def test_save_surfaces_io_errors(tmp_path):
    with pytest.raises(OSError):
        pgm.save([make_region([[1]])], 1, 1, tmp_path / "missing" / "out.pgm")


def test_read_round_trip(tmp_path):
    path = tmp_path / "out.pgm"
    values = [[0, 128, 255], [7, 8, 9]]
    pgm.save([make_region(values)], 3, 2, path)
    image = pgm.read(path)
    assert image.dtype == np.int32
    assert image.tolist() == values


def test_read_rejects_malformed(tmp_path):
    path = tmp_path / "bad.pgm"
    path.write_text("P5\n1 1\n255\n0\n")
    with pytest.raises(ValueError):
        pgm.read(path)
    path.write_text("P2\n2 2\n255\n0 1 2\n")
    with pytest.raises(ValueError):
        pgm.read(path)


def test_save_preview(tmp_path):
    path = tmp_path / "out.png"
    pgm.save_preview([make_region([[0, 255]]), make_region([[255, 0]])], path)
    assert path.exists()
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
