import numpy as np
from typing import Callable, Sequence

## Integrands for the analysis

def sin_integral(a: float, b: float) -> float:
    """
    Closed form of the integral of sin over [a, b]: cos(a) - cos(b).
    """
    return float(np.cos(a) - np.cos(b))


def poly(coefs: Sequence[float]) -> Callable[[float], float]:
    """
    Polynomial p(x) = coefs[0] + coefs[1] x + ... as a scalar function.
    """
    p = np.polynomial.Polynomial(coefs)
    return lambda x: float(p(x))


def poly_integral(coefs: Sequence[float], a: float, b: float) -> float:
    """
    Exact integral of the polynomial over [a, b] via its antiderivative.
    """
    P = np.polynomial.Polynomial(coefs).integ()
    return float(P(b) - P(a))
