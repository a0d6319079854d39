"""pytest unit tests for kernel functionality."""
from pytest import approx, mark
from scipy.integrate import quad, dblquad
import numpy as np

from sphkernels.kernels import BaseKernel
from sphkernels.kernels import CubicSplineKernel
from sphkernels.kernels import QuinticSplineKernel
from sphkernels.kernels import WendlandC2Kernel
from sphkernels.kernels import WendlandC4Kernel
from sphkernels.kernels import WendlandC6Kernel
from sphkernels.kernels import WendlandC8Kernel

ALL_KERNELS = [CubicSplineKernel(), QuinticSplineKernel(),
               WendlandC2Kernel(), WendlandC4Kernel(),
               WendlandC6Kernel(), WendlandC8Kernel()]


def single_kernel(x: float, kernel: BaseKernel) -> float:
    return kernel.value(np.abs(x), 1.0, 1)


def double_kernel(y: float, x: float, kernel: BaseKernel) -> float:
    # Utility function for double integrals in test_normalization
    return kernel.value(np.sqrt(x ** 2 + y ** 2), 1.0, 2)


def radial_kernel(u: float, kernel: BaseKernel) -> float:
    # Integrand of the 3D normalization in spherical coordinates
    return 4 * np.pi * u ** 2 * kernel.value(u, 1.0, 3)


def double_column(y: float, x: float, kernel: BaseKernel) -> float:
    return kernel.column_value(np.sqrt(x ** 2 + y ** 2), 1.0)


def test_cubicspline() -> None:
    kernel = CubicSplineKernel()

    # testing kernel values at u = 0
    # which should be equal to the normalization constants
    assert kernel.value(0, 1.0, 1) == 4 / 3
    assert kernel.value(0, 1.0, 2) == 40 / (7 * np.pi)
    assert kernel.value(0, 1.0, 3) == 8 / np.pi

    # testing kernel values at the knot, u = 1/2
    assert kernel.value(0.5, 1.0, 1) == approx(1 / 3)
    assert kernel.value(0.5, 1.0, 2) == approx(10 / (7 * np.pi))
    assert kernel.value(0.5, 1.0, 3) == approx(2 / np.pi)

    # testing kernel values at u = 1
    assert kernel.value(1, 1.0, 2) == 0
    assert kernel.value(10, 1.0, 3) == 0


def test_quinticspline() -> None:
    kernel = QuinticSplineKernel()

    # unlike the cubic spline, these will NOT
    # be equal to the normalization constants.
    # kernel.value(0, 1, d) = norm_d * 22/81
    assert kernel.value(0, 1.0, 1) == approx(33 / 20)
    assert kernel.value(0, 1.0, 2) == approx(2079 / (239 * np.pi))
    assert kernel.value(0, 1.0, 3) == approx(297 / (20 * np.pi))

    # at the outer knot the shape is (1/3)^5
    assert kernel.value(2 / 3, 1.0, 1) == approx(1 / 40)
    assert kernel.value(2 / 3, 1.0, 2) == approx(63 / (478 * np.pi))
    assert kernel.value(2 / 3, 1.0, 3) == approx(9 / (40 * np.pi))

    assert kernel.value(1, 1.0, 2) == 0
    assert kernel.value(10, 1.0, 3) == 0


@mark.parametrize("kernel, norms",
                  [(WendlandC2Kernel(),
                    (5 / 4, 7 / np.pi, 21 / (2 * np.pi))),
                   (WendlandC4Kernel(),
                    (3 / 2, 9 / np.pi, 495 / (32 * np.pi))),
                   (WendlandC6Kernel(),
                    (55 / 32, 78 / (7 * np.pi), 1365 / (64 * np.pi))),
                   (WendlandC8Kernel(),
                    (245 / 128, 40 / (3 * np.pi), 1785 / (64 * np.pi)))])
def test_wendland_central_values(kernel: BaseKernel, norms: tuple) -> None:
    # all Wendland shapes are 1 at the origin
    for ndim, norm in zip((1, 2, 3), norms):
        assert kernel.value(0, 1.0, ndim) == approx(norm)
        assert kernel.get_norm(ndim) == approx(norm)


def test_wendlandc6() -> None:
    kernel = WendlandC6Kernel()

    expected = 1365 / (64 * np.pi) * 0.5 ** 8 * (1 + 4 + 6.25 + 4)
    assert kernel.value(0.5, 1.0, 3) == approx(expected)
    assert kernel.value(0.5, 1.0, 3) > 0

    # scaling with the compact support radius
    assert kernel.value(0.5, 0.5, 3) == approx(expected / 8)

    expected = 55 / 32 * 0.5 ** 7 * (1 + 3.5 + 4.75 + 2.625)
    assert kernel.value(0.5, 1.0, 1) == approx(expected)


@mark.parametrize("kernel", ALL_KERNELS)
def test_normalization(kernel: BaseKernel) -> None:
    norm = quad(single_kernel, -kernel.get_radius(),
                kernel.get_radius(), tuple([kernel]))[0]
    assert norm == approx(1, rel=1e-4)

    norm = dblquad(double_kernel, -kernel.get_radius(),
                   kernel.get_radius(), -kernel.get_radius(),
                   kernel.get_radius(), tuple([kernel]))[0]
    assert norm == approx(1, rel=1e-4)

    norm = quad(radial_kernel, 0, kernel.get_radius(), tuple([kernel]))[0]
    assert norm == approx(1, rel=1e-4)


@mark.parametrize("kernel", ALL_KERNELS)
def test_compact_support(kernel: BaseKernel) -> None:
    u = np.array([1.0, 1.0 + 1e-12, 1.5, 2.0, 10.0])
    for ndim in (1, 2, 3):
        assert np.all(kernel.value(u, 1.0, ndim) == 0)
        assert np.all(kernel.derivative(u, 1.0, ndim) == 0)
        assert kernel.value(1, 0.3, ndim) == 0


@mark.parametrize("kernel", ALL_KERNELS)
def test_non_negative(kernel: BaseKernel) -> None:
    u = np.linspace(0, 1, 2001, endpoint=False)
    for ndim in (1, 2, 3):
        w = kernel.value(u, 1.0, ndim)
        assert np.all(w >= 0)
        assert np.all(w[:-1] > 0)


@mark.parametrize("kernel", ALL_KERNELS)
def test_derivative_consistency(kernel: BaseKernel) -> None:
    # sample points avoid the spline knots at 1/3, 1/2 and 2/3
    eps = 1e-6
    h_inv = 1.7
    for ndim in (1, 2, 3):
        for u in [0.05, 0.2, 0.4, 0.45, 0.6, 0.8, 0.95]:
            fd = (kernel.value(u + eps, h_inv, ndim)
                  - kernel.value(u - eps, h_inv, ndim)) / (2 * eps)
            # u = r * h_inv, so dW/dr = h_inv * dW/du
            assert kernel.derivative(u, h_inv, ndim) == \
                approx(h_inv * fd, rel=1e-5, abs=1e-6)


@mark.parametrize("kernel", ALL_KERNELS)
def test_derivative_at_origin(kernel: BaseKernel) -> None:
    for ndim in (1, 2, 3):
        assert kernel.derivative(0.0, 1.0, ndim) == approx(0, abs=1e-10)
        assert kernel.derivative(0.3, 1.0, ndim) < 0


@mark.parametrize("kernel, knots",
                  [(CubicSplineKernel(), [0.5]),
                   (QuinticSplineKernel(), [1 / 3, 2 / 3])])
def test_continuity_at_knots(kernel: BaseKernel, knots: list) -> None:
    eps = 1e-10
    for ndim in (1, 2, 3):
        for knot in knots:
            assert kernel.value(knot - eps, 1.0, ndim) == \
                approx(kernel.value(knot + eps, 1.0, ndim), abs=1e-6)
            assert kernel.derivative(knot - eps, 1.0, ndim) == \
                approx(kernel.derivative(knot + eps, 1.0, ndim), abs=1e-6)


@mark.parametrize("kernel", ALL_KERNELS)
def test_oob(kernel: BaseKernel) -> None:
    for dimensions in range(1, 4):
        assert kernel.value(-1, 1.0, dimensions) == 0
        assert kernel.value(kernel.get_radius() + 1, 1.0, dimensions) == 0

    assert kernel.column_value(kernel.get_radius() + 1, 1.0) == 0


def test_cubic_column() -> None:
    kernel = CubicSplineKernel()
    # at u = 0, the column integral is norm_3d / norm_1d
    assert kernel.column_value(0, 1.0) == approx(6 / np.pi, rel=1e-4)
    assert kernel.column_value(0, 2.0) == approx(24 / np.pi, rel=1e-4)
    assert kernel.column_value(1, 1.0) == 0


def test_quintic_column() -> None:
    kernel = QuinticSplineKernel()
    assert kernel.column_value(0, 1.0) == approx(9 / np.pi, rel=1e-4)


def test_wendlandc2_column() -> None:
    kernel = WendlandC2Kernel()
    assert kernel.column_value(0, 1.0) == approx(7 / np.pi, rel=1e-4)


@mark.parametrize("kernel", ALL_KERNELS)
def test_normalized_column(kernel: BaseKernel) -> None:
    norm = dblquad(double_column, -kernel.get_radius(), kernel.get_radius(),
                   -kernel.get_radius(), kernel.get_radius(),
                   tuple([kernel]))[0]
    assert norm == approx(1, rel=1e-3)


def test_column_cache() -> None:
    kernel = WendlandC4Kernel()
    assert kernel.get_column_kernel() is kernel.get_column_kernel()
    assert len(kernel.get_column_kernel(500)) == 500
