from numba import njit

from band_mandelbrot.escape_time import gray, iterate


# --- THE KERNEL (COMPILED) ---
# nogil=True lets several bands run at once on a thread pool.
@njit(nogil=True)
def fill_pixels(pixels, origin_real, origin_imag, first_row, step,
                right, bottom, invert, max_iter, escape_radius):
    height, width = pixels.shape
    q = 0
    y = origin_imag - first_row * step
    # Stop at the rectangle edge or the buffer edge, whichever comes first.
    while q < height and y >= bottom:
        p = 0
        x = origin_real
        while p < width and x <= right:
            pixels[q, p] = gray(iterate((x, y), max_iter, escape_radius), invert, max_iter)
            p += 1
            x = origin_real + p * step
        q += 1
        y = origin_imag - (first_row + q) * step
    return q


def compute_band(region, max_iter, escape_radius, verbose=True):
    """
    Fills region in place and hands it back.
    Returning the region lets a worker process send the filled buffer home.
    """
    fill_pixels(
        region.pixels,
        float(region.origin.real), float(region.origin.imag), region.first_row, float(region.step),
        float(region.rect.bottom_right.real), float(region.rect.bottom_right.imag),
        bool(region.invert), int(max_iter), float(escape_radius),
    )
    if verbose:
        tl, br = region.rect
        print(f"  done [{tl.real:+f}|{tl.imag:+f}] ~ [{br.real:+f}|{br.imag:+f}]", flush=True)
    return region
