import numpy as np
from numba import njit

from .base_kernel import BaseKernel


class CubicSplineKernel(BaseKernel):
    """
    An implementation of the Cubic Spline (M4) kernel.

    Uses the shape of Monaghan & Lattanzio (1985), rescaled so that the
    kernel support ends at u = 1:

        w(u) = 1 - 6u^2 + 6u^3    for 0 <= u < 1/2
               2 (1 - u)^3        for 1/2 <= u < 1
    """

    default_neighbours = 64

    @staticmethod
    def normalization(ndim: int) -> float:
        return 4 / 3 if (ndim == 1) \
            else 40 / (7 * np.pi) if (ndim == 2) \
            else 8 / np.pi

    @staticmethod
    @njit(fastmath=True)
    def w(u, ndim):
        return ((1 - 6 * u**2 + 6 * u**3) * (0 <= u) * (u < 0.5)
                + 2 * (1 - u)**3 * (0.5 <= u) * (u < 1))

    @staticmethod
    @njit(fastmath=True)
    def dw(u, ndim):
        return ((18 * u**2 - 12 * u) * (0 <= u) * (u < 0.5)
                - 6 * (1 - u)**2 * (0.5 <= u) * (u < 1))
