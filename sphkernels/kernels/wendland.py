from dataclasses import dataclass, field

from .base_kernel import BaseKernel, _check_dimension


@dataclass(frozen=True)
class WendlandKernel(BaseKernel):
    """
    Common base of the Wendland kernels.

    Wendland functions carry a density bias, since their self-contribution
    at u = 0 is not compensated by the neighbours. The bias is fitted by
    Dehnen & Aly (2012), Eq. 19:

        eps(N) = eps_100 * (N / 100) ** -alpha

    and removed from a density estimate with Eq. 18. The fit is evaluated
    once, at the nominal neighbour number of the kernel family, and
    folded into the per-dimension coefficients `bias_1d`, `bias_2d` and
    `bias_3d`.
    """

    bias_1d: float = field(init=False, repr=False)
    bias_2d: float = field(init=False, repr=False)
    bias_3d: float = field(init=False, repr=False)

    eps_100 = 0.0
    alpha = 0.0

    def __post_init__(self):
        super().__post_init__()

        eps = self.bias_epsilon()
        object.__setattr__(self, "bias_1d", self.dtype(eps * self.norm_1d))
        object.__setattr__(self, "bias_2d", self.dtype(eps * self.norm_2d))
        object.__setattr__(self, "bias_3d", self.dtype(eps * self.norm_3d))

    @classmethod
    def bias_epsilon(cls) -> float:
        """Relative self-contribution bias at the nominal neighbour number."""
        return cls.eps_100 * (cls.default_neighbours / 100) ** -cls.alpha

    def bias_correction(self, density, m, h_inv, ndim: int):
        """
        Correct the density estimate for the kernel bias.

        See Dehnen & Aly (2012), Eq. 18 and 19.

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
            The corrected density, in the precision of this kernel.
        """
        _check_dimension(ndim)
        bias = (self.bias_1d, self.bias_2d, self.bias_3d)[int(ndim) - 1]
        return self.dtype(density - bias * m * h_inv ** ndim)
