import numpy as np
from numba import njit

from .wendland import WendlandKernel


class WendlandC8Kernel(WendlandKernel):
    """
    An implementation of the Wendland C8 kernel.

        1D:     w(u) = (1 - u)^9 (1 + 9u + 237/7 u^2 + 453/7 u^3 + 384/7 u^4)
        2D, 3D: w(u) = (1 - u)^10 (1 + 10u + 42u^2 + 90u^3 + 429/5 u^4)

    Dehnen & Aly (2012) stop at C6, so the bias fit below is extrapolated
    from their C2, C4 and C6 values.
    """

    default_neighbours = 395

    eps_100 = 0.0101
    alpha = 2.95

    @staticmethod
    def normalization(ndim: int) -> float:
        return 245 / 128 if (ndim == 1) \
            else 40 / (3 * np.pi) if (ndim == 2) \
            else 1785 / (64 * np.pi)

    @staticmethod
    @njit(fastmath=True)
    def w(u, ndim):
        if ndim == 1:
            return ((1 - u)**9 * (1 + 9 * u + 237 / 7 * u**2
                                  + 453 / 7 * u**3 + 384 / 7 * u**4)
                    * (0 <= u) * (u < 1))
        return ((1 - u)**10 * (1 + 10 * u + 42 * u**2 + 90 * u**3
                               + 429 / 5 * u**4)
                * (0 <= u) * (u < 1))

    @staticmethod
    @njit(fastmath=True)
    def dw(u, ndim):
        if ndim == 1:
            return (-156 / 7 * u * (1 + 8 * u + 25 * u**2 + 32 * u**3)
                    * (1 - u)**8 * (0 <= u) * (u < 1))
        return (-26 * u * (1 + 9 * u + 159 / 5 * u**2 + 231 / 5 * u**3)
                * (1 - u)**9 * (0 <= u) * (u < 1))
