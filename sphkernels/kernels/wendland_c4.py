import numpy as np
from numba import njit

from .wendland import WendlandKernel


class WendlandC4Kernel(WendlandKernel):
    """
    An implementation of the Wendland C4 kernel.

        1D:     w(u) = (1 - u)^5 (1 + 5u + 8u^2)
        2D, 3D: w(u) = (1 - u)^6 (1 + 6u + 35/3 u^2)
    """

    default_neighbours = 216

    eps_100 = 0.01342
    alpha = 1.579

    @staticmethod
    def normalization(ndim: int) -> float:
        return 3 / 2 if (ndim == 1) \
            else 9 / np.pi if (ndim == 2) \
            else 495 / (32 * np.pi)

    @staticmethod
    @njit(fastmath=True)
    def w(u, ndim):
        if ndim == 1:
            return ((1 - u)**5 * (1 + 5 * u + 8 * u**2)
                    * (0 <= u) * (u < 1))
        return ((1 - u)**6 * (1 + 6 * u + 35 / 3 * u**2)
                * (0 <= u) * (u < 1))

    @staticmethod
    @njit(fastmath=True)
    def dw(u, ndim):
        if ndim == 1:
            return -14 * u * (1 + 4 * u) * (1 - u)**4 * (0 <= u) * (u < 1)
        return (-56 / 3 * u * (1 + 5 * u) * (1 - u)**5
                * (0 <= u) * (u < 1))
