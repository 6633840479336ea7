from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Sequence
import numpy as np
from .tools.errors import InvalidArgument
from .tools.rules import Rule, midpoint

DTYPE = np.float64


def _check_n(n) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidArgument(f"n must be an integer, got {n!r}")
    if n < 1:
        raise InvalidArgument(f"n must be >= 1, got {n}")
    return int(n)


def integrate_composite(f: Callable[[float], float],
                        a: float,
                        b: float,
                        n: int = 10,
                        rule: Rule = midpoint) -> float:
    """
    Composite quadrature of f over [a, b].

    Splits [a, b] into n equal sub-intervals (n + 1 break points) and sums
    rule(f, x_i, x_{i+1}) over them. With a > b every term carries a negative
    width, so the result is the negated integral over [b, a].

    Parameters
    ----------
    f : Callable
        Integrand, called with floats.
    a, b : float
        Interval endpoints.
    n : int, optional
        Number of sub-intervals. Default: 10
    rule : Callable, optional
        rule(f, lo, hi) -> area. Default: midpoint

    Raises
    ------
    InvalidArgument
        If n is not an integer >= 1. Errors from f or rule are not caught.
    """
    n = _check_n(n)
    points = np.linspace(a, b, n + 1, dtype=DTYPE)
    terms = [rule(f, float(points[i]), float(points[i + 1])) for i in range(n)]
    return float(np.sum(terms))


@dataclass
class ConvergenceStudy:
    """Estimates of one integral over a sequence of partitions."""
    ns: np.ndarray
    widths: np.ndarray
    estimates: np.ndarray
    exact: Optional[float] = None
    errors: Optional[np.ndarray] = None
    observed_order: Optional[float] = None


class CompositeIntegrator:
    """
    Composite integrator bound to one rule.

    Parameters
    ----------
    rule : Callable
        rule(f, lo, hi) -> area, e.g. midpoint or make_newton_cotes_rule(...).
    n : int
        Default number of sub-intervals.
    verbose : bool
        If True, prints each estimate.
    """
    def __init__(self, rule: Rule = midpoint, n: int = 10, verbose: bool = False):
        self.rule = rule
        self.n = _check_n(n)
        self.verbose = verbose

    def integrate(self, f: Callable[[float], float], a: float, b: float,
                  n: Optional[int] = None) -> float:
        """Integrate f over [a, b] with n (or the default) sub-intervals."""
        n = self.n if n is None else n
        res = integrate_composite(f, a, b, n=n, rule=self.rule)
        if self.verbose:
            print(f"composite: n={n} a={a} b={b}  res={res}")
        return res

    # -------------------------------------------------------------------
    @staticmethod
    def _observed_order(widths: np.ndarray, errors: np.ndarray) -> Optional[float]:
        """Least-squares slope of log(error) against log(h)."""
        mask = (errors > 0) & (widths > 0)
        if mask.sum() < 2:
            return None
        slope, _ = np.polyfit(np.log(widths[mask]), np.log(errors[mask]), 1)
        return float(slope)

    def refine(self, f: Callable[[float], float], a: float, b: float,
               ns: Sequence[int] = (1, 2, 4, 8, 16, 32),
               exact: Optional[float] = None) -> ConvergenceStudy:
        """
        Convergence study over the partitions in `ns`.

        When `exact` is given, absolute errors and the observed order of
        convergence are reported too.
        """
        ns = [_check_n(n) for n in ns]
        if len(ns) == 0:
            raise InvalidArgument("ns must not be empty")
        estimates = np.array([self.integrate(f, a, b, n=n) for n in ns], dtype=DTYPE)
        ns_arr = np.asarray(ns)
        widths = np.abs(b - a) / ns_arr
        if exact is None:
            return ConvergenceStudy(ns_arr, widths, estimates)

        errors = np.abs(estimates - exact)
        order = self._observed_order(widths, errors)
        if self.verbose:
            print(f"observed order: {order}")
        return ConvergenceStudy(ns_arr, widths, estimates, exact, errors, order)
