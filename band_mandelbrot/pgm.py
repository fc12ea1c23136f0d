import numpy as np
import matplotlib.pyplot as plt

from band_mandelbrot.escape_time import MAX_INTENSITY

MAGIC = "P2"


def save(regions, width, height, path):
    """
    Writes the regions, top to bottom, as one plain-text PGM image.

    Rows are cut to `width`. If the regions hold fewer rows than `height`
    the header declares only the rows actually written, so the file never
    advertises rows it does not contain.
    """
    total_rows = sum(region.height for region in regions)
    rows_out = min(height, total_rows)
    for region in regions:
        if region.width < width:
            raise ValueError(f"region is {region.width} pixels wide, image needs {width}")

    with open(path, "w") as fp:
        fp.write(f"{MAGIC}\n{width} {rows_out}\n{MAX_INTENSITY}\n")
        written = 0
        for region in regions:
            for row in region.rows():
                if written == rows_out:
                    return path
                fp.write(" ".join(map(str, row[:width].tolist())))
                fp.write("\n")
                written += 1
    return path


def read(path):
    """Parses a plain-text PGM file into a (height, width) int32 array."""
    with open(path) as fp:
        tokens = fp.read().split()
    if len(tokens) < 4 or tokens[0] != MAGIC:
        raise ValueError(f"{path} is not a plain-text PGM file")
    width, height, _max_value = (int(t) for t in tokens[1:4])
    values = tokens[4:]
    if len(values) != width * height:
        raise ValueError(f"{path}: expected {width * height} pixels, found {len(values)}")
    return np.array(values, dtype=np.int32).reshape((height, width))


def stack(regions):
    return np.vstack([region.pixels for region in regions])


def save_preview(regions, path):
    """PNG rendering of the stacked regions, for a quick look."""
    plt.imsave(path, stack(regions), cmap="gray", vmin=0, vmax=MAX_INTENSITY)
    return path
