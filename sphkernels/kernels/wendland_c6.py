import numpy as np
from numba import njit

from .wendland import WendlandKernel


class WendlandC6Kernel(WendlandKernel):
    """
    An implementation of the Wendland C6 kernel.

        1D:     w(u) = (1 - u)^7 (1 + 7u + 19u^2 + 21u^3)
        2D, 3D: w(u) = (1 - u)^8 (1 + 8u + 25u^2 + 32u^3)
    """

    default_neighbours = 295

    eps_100 = 0.0116
    alpha = 2.236

    @staticmethod
    def normalization(ndim: int) -> float:
        return 55 / 32 if (ndim == 1) \
            else 78 / (7 * np.pi) if (ndim == 2) \
            else 1365 / (64 * np.pi)

    @staticmethod
    @njit(fastmath=True)
    def w(u, ndim):
        if ndim == 1:
            return ((1 - u)**7 * (1 + 7 * u + 19 * u**2 + 21 * u**3)
                    * (0 <= u) * (u < 1))
        return ((1 - u)**8 * (1 + 8 * u + 25 * u**2 + 32 * u**3)
                * (0 <= u) * (u < 1))

    @staticmethod
    @njit(fastmath=True)
    def dw(u, ndim):
        if ndim == 1:
            return (-6 * u * (3 + 18 * u + 35 * u**2) * (1 - u)**6
                    * (0 <= u) * (u < 1))
        return (-22 * u * (1 + 7 * u + 16 * u**2) * (1 - u)**7
                * (0 <= u) * (u < 1))
