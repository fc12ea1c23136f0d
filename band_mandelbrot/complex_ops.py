import math
from typing import NamedTuple

from numba import njit


class ComplexPoint(NamedTuple):
    real: float
    imag: float


# --- PRIMITIVES (COMPILED) ---
# Points are (real, imag) pairs. No fastmath: results must match plain
# complex algebra bit for bit, in Python and in the kernel alike.
@njit
def add(a, b):
    return (a[0] + b[0], a[1] + b[1])


@njit
def sub(a, b):
    return (a[0] - b[0], a[1] - b[1])


@njit
def square(a):
    return (a[0] * a[0] - a[1] * a[1], 2.0 * a[0] * a[1])


@njit
def modulus(a):
    return math.sqrt(a[0] * a[0] + a[1] * a[1])
