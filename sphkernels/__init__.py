from .kernels import BaseKernel, CubicSplineKernel, QuinticSplineKernel, \
    WendlandC2Kernel, WendlandC4Kernel, WendlandC6Kernel, \
    WendlandC8Kernel, Cubic, Quintic, WendlandC2, WendlandC4, WendlandC6, \
    WendlandC8, InvalidDimensionError, UnknownKernelFamilyError

from .kernel_functions import available_kernels, construct_kernel, \
    kernel_value, kernel_derivative, bias_correction, value_1d, value_2d, \
    value_3d, derivative_1d, derivative_2d, derivative_3d, \
    bias_correction_1d, bias_correction_2d, bias_correction_3d

from . import kernels

__version__ = "0.1.0"

__all__ = ["BaseKernel", "CubicSplineKernel", "QuinticSplineKernel",
           "WendlandC2Kernel", "WendlandC4Kernel", "WendlandC6Kernel",
           "WendlandC8Kernel", "Cubic", "Quintic", "WendlandC2",
           "WendlandC4", "WendlandC6", "WendlandC8",
           "InvalidDimensionError", "UnknownKernelFamilyError",
           "available_kernels", "construct_kernel", "kernel_value",
           "kernel_derivative", "bias_correction", "value_1d", "value_2d",
           "value_3d", "derivative_1d", "derivative_2d", "derivative_3d",
           "bias_correction_1d", "bias_correction_2d", "bias_correction_3d",
           "kernels"]
