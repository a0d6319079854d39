from .base_kernel import BaseKernel, InvalidDimensionError, \
    UnknownKernelFamilyError
from .cubic_spline import CubicSplineKernel
from .quintic_spline import QuinticSplineKernel
from .wendland import WendlandKernel
from .wendland_c2 import WendlandC2Kernel
from .wendland_c4 import WendlandC4Kernel
from .wendland_c6 import WendlandC6Kernel
from .wendland_c8 import WendlandC8Kernel

# short names for the kernel families
Cubic = CubicSplineKernel
Quintic = QuinticSplineKernel
WendlandC2 = WendlandC2Kernel
WendlandC4 = WendlandC4Kernel
WendlandC6 = WendlandC6Kernel
WendlandC8 = WendlandC8Kernel

__all__ = ["BaseKernel", "WendlandKernel", "CubicSplineKernel",
           "QuinticSplineKernel", "WendlandC2Kernel", "WendlandC4Kernel",
           "WendlandC6Kernel", "WendlandC8Kernel", "Cubic", "Quintic",
           "WendlandC2", "WendlandC4", "WendlandC6", "WendlandC8",
           "InvalidDimensionError", "UnknownKernelFamilyError"]
