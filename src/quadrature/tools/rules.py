"""
Primitive quadrature rules over a single interval [a, b].

Every rule has the signature rule(f, a, b) -> float and integrates
constants exactly. Reversed bounds (a > b) return the negated area.
"""
from typing import Callable

Rule = Callable[[Callable[[float], float], float, float], float]


def midpoint(f: Callable[[float], float], a: float, b: float) -> float:
    """
    Midpoint rule: (b - a) f((a + b) / 2).

    Parameters
    ----------
    f : Callable
        Integrand.
    a : float
        Lower bound.
    b : float
        Upper bound.
    """
    return (b - a) * f((a + b) / 2)


def trapezoid(f: Callable[[float], float], a: float, b: float) -> float:
    """
    Trapezoid rule: (b - a) / 2 (f(a) + f(b)).
    """
    return (b - a) / 2 * (f(a) + f(b))


def simpson(f: Callable[[float], float], a: float, b: float) -> float:
    """
    Simpson's rule, exact for polynomials of degree <= 3:

        (b - a) / 6 (f(a) + 4 f((a + b) / 2) + f(b))
    """
    return (b - a) / 6 * (f(a) + 4 * f((a + b) / 2) + f(b))


def boole(f: Callable[[float], float], a: float, b: float) -> float:
    """
    Boole's rule on 5 equally spaced points, exact for degree <= 5:

        (b - a) / 90 (7 f0 + 32 f1 + 12 f2 + 32 f3 + 7 f4)
    """
    fi = [f(a + i * (b - a) / 4) for i in range(5)]
    return (b - a) / 90 * (7 * fi[0] + 32 * fi[1] + 12 * fi[2] + 32 * fi[3] + 7 * fi[4])
