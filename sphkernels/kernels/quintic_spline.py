import numpy as np
from numba import njit

from .base_kernel import BaseKernel


class QuinticSplineKernel(BaseKernel):
    """
    An implementation of the Quintic Spline (M6) kernel.

    The classical M6 shape with knots at u = 1/3 and u = 2/3, written as a
    sum of truncated powers.
    """

    default_neighbours = 64

    @staticmethod
    def normalization(ndim: int) -> float:
        return 243 / 40 if (ndim == 1) else \
            15309 / (478 * np.pi) if (ndim == 2) else \
            2187 / (40 * np.pi)

    @staticmethod
    @njit(fastmath=True)
    def w(u, ndim):
        return ((1 - u) ** 5 * (u < 1)
                - 6 * (2 / 3 - u) ** 5 * (u < 2 / 3)
                + 15 * (1 / 3 - u) ** 5 * (u < 1 / 3)) * (0 <= u)

    @staticmethod
    @njit(fastmath=True)
    def dw(u, ndim):
        return (-5 * (1 - u) ** 4 * (u < 1)
                + 30 * (2 / 3 - u) ** 4 * (u < 2 / 3)
                - 75 * (1 / 3 - u) ** 4 * (u < 1 / 3)) * (0 <= u)
