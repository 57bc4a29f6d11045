"""Normal distribution helpers."""

from envstats.dist.normal import erf, normal_cdf, normal_quantile

__all__ = ["erf", "normal_cdf", "normal_quantile"]
