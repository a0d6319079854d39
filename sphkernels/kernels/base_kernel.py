import warnings
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

import numpy as np
from numba import njit, prange


class InvalidDimensionError(ValueError):
    """Raised when a kernel is evaluated outside of 1, 2 or 3 dimensions."""


class UnknownKernelFamilyError(ValueError):
    """Raised when a kernel is requested for a family that does not exist."""


def _check_dimension(ndim: int) -> None:
    """
    Verify that kernel evaluation is requested in a supported dimension.

    Parameters
    ----------
    ndim: {1, 2, 3}
        The number of spatial dimensions.

    Raises
    ------
    InvalidDimensionError
        If `ndim` is not 1, 2 or 3.
    """
    if ndim not in (1, 2, 3):
        raise InvalidDimensionError(f"`ndim` must be 1, 2 or 3, not "
                                    f"{ndim!r}.")


def _resolve_precision(precision) -> type:
    """Convert `precision` into a numpy floating point scalar type."""
    try:
        dtype = np.dtype(precision)
    except TypeError:
        raise ValueError(f"Precision {precision!r} is not a numpy data "
                         f"type.") from None

    if not np.issubdtype(dtype, np.floating):
        raise ValueError(f"Precision must be a floating point type, not "
                         f"{dtype}.")
    if dtype.itemsize < 4:
        msg = (f"Kernel constants stored as {dtype} are only accurate to a "
               f"few significant digits; the kernel will not integrate to "
               f"unity.")
        warnings.warn(msg, UserWarning, stacklevel=4)

    return dtype.type


@dataclass(frozen=True)
class BaseKernel:
    """
    A generic compactly supported SPH kernel.

    Kernels are evaluated at ``u = r / h``, where ``h`` is the compact
    support radius, so every kernel vanishes for ``u >= 1``. A kernel is
    immutable once constructed: the normalization constants are computed
    a single time for the requested precision and may be shared freely
    between threads.

    Parameters
    ----------
    dtype: numpy floating point type, optional
        Precision of the normalization constants and of every value
        returned by this kernel. Defaults to ``np.float64``.
    n_neighbours: int, optional
        Suggested number of neighbours for stable smoothing with this
        kernel. Informational only. Defaults to a per-family value.

    Notes
    -----
    New kernel families are added by subclassing and providing
    `normalization`, `w` and `dw`. Kernels with a known density bias
    additionally override `bias_correction`.

    Evaluation does not validate ``u >= 0`` or ``h_inv > 0``; supplying
    such values is the responsibility of the caller.
    """

    dtype: type = np.float64
    n_neighbours: Optional[int] = None
    norm_1d: float = field(init=False)
    norm_2d: float = field(init=False)
    norm_3d: float = field(init=False)

    default_neighbours = 64

    def __post_init__(self):
        dtype = _resolve_precision(self.dtype)

        n_neighbours = self.default_neighbours if self.n_neighbours is None \
            else int(self.n_neighbours)
        if n_neighbours <= 0:
            raise ValueError("`n_neighbours` must be greater than zero!")

        object.__setattr__(self, "dtype", dtype)
        object.__setattr__(self, "n_neighbours", n_neighbours)
        object.__setattr__(self, "norm_1d", dtype(self.normalization(1)))
        object.__setattr__(self, "norm_2d", dtype(self.normalization(2)))
        object.__setattr__(self, "norm_3d", dtype(self.normalization(3)))

    @staticmethod
    def get_radius() -> float:
        """Get the compact support radius of this kernel, in units of h."""
        return 1

    @staticmethod
    def normalization(ndim: int) -> float:
        """
        Closed-form normalization constant of this kernel.

        Parameters
        ----------
        ndim : {1, 2, 3}
            The number of dimensions to normalize the kernel for.

        Returns
        -------
        float
            The constant which makes the kernel integrate to one over its
            support in `ndim` dimensions.
        """
        raise NotImplementedError

    @staticmethod
    def w(u: float, ndim: int) -> float:
        """
        Unnormalized shape of this kernel.

        Parameters
        ----------
        u : float or ndarray
            Distance to the kernel origin, in units of the compact support.
        ndim : {1, 2, 3}
            The number of dimensions. Only relevant for kernels whose shape
            depends on the dimension.

        Returns
        -------
        float or ndarray
            The kernel shape at `u`, zero for ``u >= 1``.
        """
        raise NotImplementedError

    @staticmethod
    def dw(u: float, ndim: int) -> float:
        """Analytic derivative of `w` with respect to `u`."""
        raise NotImplementedError

    def get_norm(self, ndim: int) -> float:
        """Get the precomputed normalization constant in `ndim` dimensions."""
        _check_dimension(ndim)
        return (self.norm_1d, self.norm_2d, self.norm_3d)[int(ndim) - 1]

    def value(self, u, h_inv, ndim: int):
        """
        Get the normalized weight of this kernel.

        Parameters
        ----------
        u : float or ndarray
            Distance to the kernel origin, in units of the compact support.
        h_inv : float
            Inverse of the compact support radius.
        ndim : {1, 2, 3}
            The number of dimensions to normalize the kernel value for.

        Returns
        -------
        float or ndarray
            The kernel weight at `u`, in the precision of this kernel.

        Raises
        ------
        InvalidDimensionError
            If `ndim` is not 1, 2 or 3.
        """
        norm = self.get_norm(ndim)
        return self.dtype(norm * self.w(u, ndim) * h_inv ** ndim)

    def derivative(self, u, h_inv, ndim: int):
        """
        Get the radial derivative of the normalized kernel.

        Parameters
        ----------
        u : float or ndarray
            Distance to the kernel origin, in units of the compact support.
        h_inv : float
            Inverse of the compact support radius.
        ndim : {1, 2, 3}
            The number of dimensions to normalize the kernel for.

        Returns
        -------
        float or ndarray
            dW/dr at `u`, in the precision of this kernel.

        Raises
        ------
        InvalidDimensionError
            If `ndim` is not 1, 2 or 3.
        """
        norm = self.get_norm(ndim)
        return self.dtype(norm * self.dw(u, ndim) * h_inv ** (ndim + 1))

    def bias_correction(self, density, m, h_inv, ndim: int):
        """
        Correct a density estimate for the bias of this kernel.

        Kernels without a known bias return `density` unchanged, so that
        the correction can be applied regardless of the kernel in use.

        Parameters
        ----------
        density : float or ndarray
            The SPH density estimate.
        m : float or ndarray
            Particle mass.
        h_inv : float or ndarray
            Inverse of the compact support radius.
        ndim : {1, 2, 3}
            The number of dimensions of the density estimate.

        Returns
        -------
        float or ndarray
            The corrected density.
        """
        _check_dimension(ndim)
        return density

    def get_column_kernel(self, samples: int = 1000) -> np.ndarray:
        """
        Generate a 2D column kernel approximation, by integrating the 3D
        kernel over the z-axis.

        Parameters
        ----------
        samples: int
            Number of sample points to calculate when approximating the
            kernel.

        Returns
        -------
            A ndarray of length (samples), containing the kernel
            approximation at ``h = 1``.

        Examples
        --------
        Use np.linspace and np.interp to use this column kernel approximation:
            np.interp(u, np.linspace(0, kernel.get_radius(), samples),
                      column_kernel)
        """
        if samples < 2:
            raise ValueError("`samples` must be at least 2!")
        return _column_table(self, samples)

    def column_value(self, u, h_inv, samples: int = 1000):
        """
        Get the line-of-sight integrated weight of this kernel.

        Parameters
        ----------
        u : float or ndarray
            Projected distance to the kernel origin, in units of the compact
            support.
        h_inv : float
            Inverse of the compact support radius.
        samples: int
            Resolution of the tabulated column kernel.

        Returns
        -------
        float or ndarray
            The column weight at `u`, in the precision of this kernel.
        """
        column_kernel = self.get_column_kernel(samples)
        pts = np.linspace(0, self.get_radius(), samples)
        return self.dtype(np.interp(u, pts, column_kernel) * h_inv ** 2)


@lru_cache(maxsize=None)
def _column_table(kernel: BaseKernel, samples: int) -> np.ndarray:
    c_kernel = _column_integral(samples, kernel.w,
                                float(kernel.get_norm(3)))
    c_kernel.flags.writeable = False
    return c_kernel


# Internal function for performing the integral in get_column_kernel()
@njit(fastmath=True, parallel=True)
def _column_integral(samples, wfunc, norm):
    result = np.zeros(samples)

    for i in prange(samples):
        u_xy = i / (samples - 1)
        bounds = np.sqrt(max(0.0, 1 - u_xy ** 2))
        u_z = np.linspace(0, bounds, samples)
        u = np.sqrt(u_xy ** 2 + u_z ** 2)
        y = wfunc(u, 3)
        # trapezoidal rule along the line of sight
        result[i] = norm * np.sum((y[1:] + y[:-1]) * (u_z[1:] - u_z[:-1]))

    return result
