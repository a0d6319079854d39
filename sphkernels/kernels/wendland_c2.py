import numpy as np
from numba import njit

from .wendland import WendlandKernel


class WendlandC2Kernel(WendlandKernel):
    """
    An implementation of the Wendland C2 kernel.

        1D:     w(u) = (1 - u)^3 (1 + 3u)
        2D, 3D: w(u) = (1 - u)^4 (1 + 4u)
    """

    default_neighbours = 100

    eps_100 = 0.0294
    alpha = 0.977

    @staticmethod
    def normalization(ndim: int) -> float:
        return 5 / 4 if (ndim == 1) \
            else 7 / np.pi if (ndim == 2) \
            else 21 / (2 * np.pi)

    @staticmethod
    @njit(fastmath=True)
    def w(u, ndim):
        if ndim == 1:
            return (1 - u)**3 * (1 + 3 * u) * (0 <= u) * (u < 1)
        return (1 - u)**4 * (1 + 4 * u) * (0 <= u) * (u < 1)

    @staticmethod
    @njit(fastmath=True)
    def dw(u, ndim):
        if ndim == 1:
            return -12 * u * (1 - u)**2 * (0 <= u) * (u < 1)
        return -20 * u * (1 - u)**3 * (0 <= u) * (u < 1)
