from numba import njit

from band_mandelbrot.complex_ops import add, modulus, square

MAX_INTENSITY = 255


@njit
def iterate(c, max_iter, escape_radius):
    """
    Iterates z <- z*z + c from z = 0.
    Returns the number of iterations before |z| reaches the escape radius,
    capped at max_iter. NaN fails the comparison and counts as escaped.
    """
    z = (0.0, 0.0)
    i = 0
    while i < max_iter and modulus(z) < escape_radius:
        z = add(square(z), c)
        i += 1
    return i


@njit
def gray(i, invert, max_iter):
    # Integer division, never rounding.
    g = i * MAX_INTENSITY // max_iter
    if invert:
        return MAX_INTENSITY - g
    return g
