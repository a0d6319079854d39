"""
Functional interface to the SPH kernels.

Every function takes the kernel as its first argument, so that host code
can evaluate any kernel family through the same calls, e.g.

    kernel = construct_kernel("WendlandC6")
    w = kernel_value(kernel, u=0.5, h_inv=1.0, dim=3)
"""
from typing import List, Optional, Type, Union

import numpy as np

from .kernels import BaseKernel, CubicSplineKernel, QuinticSplineKernel, \
    WendlandC2Kernel, WendlandC4Kernel, WendlandC6Kernel, WendlandC8Kernel, \
    WendlandKernel, UnknownKernelFamilyError
from .kernels.base_kernel import _check_dimension

_KERNEL_FAMILIES = {
    "cubic": CubicSplineKernel,
    "cubicspline": CubicSplineKernel,
    "quintic": QuinticSplineKernel,
    "quinticspline": QuinticSplineKernel,
    "wendlandc2": WendlandC2Kernel,
    "wendlandc4": WendlandC4Kernel,
    "wendlandc6": WendlandC6Kernel,
    "wendlandc8": WendlandC8Kernel,
}


def _family_key(name: str) -> str:
    return name.lower().replace("_", "").replace("-", "").replace(" ", "")


def available_kernels() -> List[str]:
    """Names of the built-in kernel families accepted by construct_kernel."""
    return ["Cubic", "Quintic", "WendlandC2", "WendlandC4", "WendlandC6",
            "WendlandC8"]


def construct_kernel(family: Union[str, Type[BaseKernel]],
                     precision=np.float64,
                     neighbour_hint: Optional[int] = None) -> BaseKernel:
    """
    Set up a kernel of a given family.

    Parameters
    ----------
    family: str or BaseKernel subclass
        Name of a built-in family (case and separators are ignored, so
        "WendlandC6", "wendland_c6" and "wendlandc6" are equivalent), or a
        user-defined subclass of BaseKernel.
    precision: numpy floating point type, optional
        Precision of the kernel constants and return values.
    neighbour_hint: int, optional
        Suggested neighbour number. Defaults to the family's value.

    Returns
    -------
    BaseKernel
        The immutable kernel.

    Raises
    ------
    UnknownKernelFamilyError
        If `family` is neither a known name nor a concrete kernel class.
    ValueError
        If `precision` is not a floating point type, or `neighbour_hint`
        is not positive.
    """
    if isinstance(family, str):
        try:
            kernel_class = _KERNEL_FAMILIES[_family_key(family)]
        except KeyError:
            raise UnknownKernelFamilyError(
                f"Unknown kernel family '{family}'. Available families: "
                f"{', '.join(available_kernels())}.") from None
    elif isinstance(family, type) and issubclass(family, BaseKernel) \
            and family not in (BaseKernel, WendlandKernel):
        kernel_class = family
    else:
        raise UnknownKernelFamilyError(f"{family!r} is not a kernel family.")

    return kernel_class(dtype=precision, n_neighbours=neighbour_hint)


def kernel_value(kernel: BaseKernel, u, h_inv, dim: int):
    """
    Evaluate a kernel at position u = r / h.

    Parameters
    ----------
    kernel: BaseKernel
        The kernel to evaluate.
    u: float or ndarray
        Distance to the kernel origin in units of the compact support.
        Must be non-negative; this is not checked.
    h_inv: float
        Inverse of the compact support. Must be positive; this is not
        checked.
    dim: {1, 2, 3}
        Number of spatial dimensions.

    Returns
    -------
    float or ndarray
        The kernel value, in the kernel's precision.

    Raises
    ------
    InvalidDimensionError
        If `dim` is not 1, 2 or 3.
    """
    _check_dimension(dim)
    return kernel.value(u, h_inv, dim)


def kernel_derivative(kernel: BaseKernel, u, h_inv, dim: int):
    """
    Evaluate the derivative of a kernel at position u = r / h.

    The result is dW/dr, so it scales with ``h_inv ** (dim + 1)``.

    Raises
    ------
    InvalidDimensionError
        If `dim` is not 1, 2 or 3.
    """
    _check_dimension(dim)
    return kernel.derivative(u, h_inv, dim)


def bias_correction(kernel: BaseKernel, density, mass, h_inv, dim: int):
    """
    Correct a density estimate for the kernel bias.

    See Dehnen & Aly (2012), Eq. 18 and 19. The B-splines have no
    correction and return `density` unchanged.

    Parameters
    ----------
    kernel: BaseKernel
        The kernel used for the density estimate.
    density: float or ndarray
        The density estimate.
    mass: float or ndarray
        Particle mass.
    h_inv: float or ndarray
        Inverse of the compact support.
    dim: {1, 2, 3}
        Number of spatial dimensions.

    Returns
    -------
    float or ndarray
        The corrected density.

    Raises
    ------
    InvalidDimensionError
        If `dim` is not 1, 2 or 3.
    """
    _check_dimension(dim)
    return kernel.bias_correction(density, mass, h_inv, dim)


def value_1d(kernel: BaseKernel, u, h_inv):
    """Evaluate a 1D kernel at position u = r / h."""
    return kernel.value(u, h_inv, 1)


def value_2d(kernel: BaseKernel, u, h_inv):
    """Evaluate a 2D kernel at position u = r / h."""
    return kernel.value(u, h_inv, 2)


def value_3d(kernel: BaseKernel, u, h_inv):
    """Evaluate a 3D kernel at position u = r / h."""
    return kernel.value(u, h_inv, 3)


def derivative_1d(kernel: BaseKernel, u, h_inv):
    """Evaluate the 1D kernel derivative at position u = r / h."""
    return kernel.derivative(u, h_inv, 1)


def derivative_2d(kernel: BaseKernel, u, h_inv):
    """Evaluate the 2D kernel derivative at position u = r / h."""
    return kernel.derivative(u, h_inv, 2)


def derivative_3d(kernel: BaseKernel, u, h_inv):
    """Evaluate the 3D kernel derivative at position u = r / h."""
    return kernel.derivative(u, h_inv, 3)


def bias_correction_1d(kernel: BaseKernel, density, mass, h_inv):
    """Correct a 1D density estimate for the kernel bias."""
    return kernel.bias_correction(density, mass, h_inv, 1)


def bias_correction_2d(kernel: BaseKernel, density, mass, h_inv):
    """Correct a 2D density estimate for the kernel bias."""
    return kernel.bias_correction(density, mass, h_inv, 2)


def bias_correction_3d(kernel: BaseKernel, density, mass, h_inv):
    """Correct a 3D density estimate for the kernel bias."""
    return kernel.bias_correction(density, mass, h_inv, 3)
