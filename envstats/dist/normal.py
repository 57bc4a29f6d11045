"""Standard normal error function, CDF and quantile function."""

from __future__ import annotations

import math

# Abramowitz & Stegun 7.1.26, |error| <= 1.5e-7.
_ERF_A1 = 0.254829592
_ERF_A2 = -0.284496736
_ERF_A3 = 1.421413741
_ERF_A4 = -1.453152027
_ERF_A5 = 1.061405429
_ERF_P = 0.3275911

# Rational approximation tables, highest order first.
_CENTRAL_NUM = (
    2509.0809287301226727,
    33430.575583588128105,
    67265.770927008700853,
    45921.953931549871457,
    13731.693765509461125,
    1971.5909503065514427,
    133.14166789178437745,
    3.387132872796366608,
)
_CENTRAL_DEN = (
    5226.495278852854561,
    28729.085735721942674,
    39307.89580009271061,
    21213.794301586595867,
    5394.1960214247511077,
    687.1870074920579083,
    42.313330701600911252,
    1.0,
)
_INTERMEDIATE_NUM = (
    7.7454501427834140764e-4,
    0.0227238449892691845833,
    0.24178072517745061177,
    1.27045825245236838258,
    3.64784832476320460504,
    5.7694972214606914055,
    4.6303378461565452959,
    1.42343711074968357734,
)
_INTERMEDIATE_DEN = (
    1.05075007164441684324e-9,
    5.475938084995344946e-4,
    0.0151986665636164571966,
    0.14810397642748007459,
    0.68976733498510000455,
    1.6763848301838038494,
    2.05319162663775882187,
    1.0,
)
_TAIL_NUM = (
    2.01033439929228813265e-7,
    2.71155556874348757815e-5,
    0.0012426609473880784386,
    0.026532189526576123093,
    0.29656057182850489123,
    1.7848265399172913358,
    5.4637849111641143699,
    6.6579046435011037772,
)
_TAIL_DEN = (
    2.04426310338993978564e-15,
    1.4215117583164458887e-7,
    1.8463183175100546818e-5,
    7.868691311456132591e-4,
    0.0148753612908506148525,
    0.13692988092273580531,
    0.59983220655588793769,
    1.0,
)


def erf(x: float) -> float:
    """Gauss error function (Abramowitz & Stegun 7.1.26)."""

    if x == 0:
        # The polynomial leaves a 1e-9 residue at the origin; erf is odd.
        return 0.0
    sign = 1.0 if x >= 0 else -1.0
    x = abs(float(x))
    t = 1.0 / (1.0 + _ERF_P * x)
    y = 1.0 - (((((_ERF_A5 * t + _ERF_A4) * t) + _ERF_A3) * t + _ERF_A2) * t + _ERF_A1) * t * math.exp(-x * x)
    return sign * y


def normal_cdf(z: float) -> float:
    """P(Z <= z) for a standard normal variable."""

    return 0.5 * (1.0 + erf(z / math.sqrt(2.0)))


def _horner(coefficients: tuple[float, ...], r: float) -> float:
    value = coefficients[0]
    for coefficient in coefficients[1:]:
        value = value * r + coefficient
    return value


def normal_quantile(p: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Inverse normal CDF (AS 111 family rational approximation).

    Returns -1.0 when ``sigma`` is negative and ``mu`` when ``sigma`` is zero.
    Returns NaN when ``p`` is not strictly inside (0, 1).
    """

    if sigma < 0:
        return -1.0
    if sigma == 0:
        return float(mu)
    if not 0.0 < p < 1.0:
        return math.nan

    q = p - 0.5
    if abs(q) <= 0.425:  # 0.075 <= p <= 0.925
        r = 0.180625 - q * q
        val = q * _horner(_CENTRAL_NUM, r) / _horner(_CENTRAL_DEN, r)
    else:
        r = 1.0 - p if q > 0 else p
        r = math.sqrt(-math.log(r))
        if r <= 5.0:
            r -= 1.6
            val = _horner(_INTERMEDIATE_NUM, r) / _horner(_INTERMEDIATE_DEN, r)
        else:
            r -= 5.0
            val = _horner(_TAIL_NUM, r) / _horner(_TAIL_DEN, r)
        if q < 0.0:
            val = -val
    return float(mu + sigma * val)
