"""
Newton-Cotes rule generator: turns a coefficient descriptor into a rule.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, Sequence, Tuple
import numpy as np
from scipy.integrate import newton_cotes as scipy_newton_cotes
from .errors import InvalidArgument

DTYPE = np.float64


@dataclass(frozen=True)
class NewtonCotesRule:
    """
    Quadrature rule built from fixed Newton-Cotes weights.

    Parameters
    ----------
    coefficients : Tuple[float, ...]
        Weights of the sampled points, in order from a to b.
    open : bool
        If True the rule never samples the interval endpoints.

    Notes
    -----
    With k coefficients a closed rule samples a + i (b - a) / (k - 1),
    i = 0..k-1, and an open rule samples a + i (b - a) / (k + 1),
    i = 1..k. The weighted sum is scaled by (b - a) / sum(coefficients).
    """
    coefficients: Tuple[float, ...]
    open: bool = False
    _weights: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        coefs = tuple(float(c) for c in self.coefficients)
        if len(coefs) == 0:
            raise InvalidArgument("coefficients must not be empty.")
        if not self.open and len(coefs) == 1:
            raise InvalidArgument("a closed rule needs at least 2 coefficients.")
        if abs(sum(coefs)) <= 1e-12 * sum(abs(c) for c in coefs):
            raise InvalidArgument(f"coefficients must not sum to zero, got {coefs}.")
        object.__setattr__(self, "coefficients", coefs)
        object.__setattr__(self, "_weights", np.asarray(coefs, dtype=DTYPE))

    @property
    def points(self) -> int:
        """Number of function evaluations per call."""
        return len(self.coefficients)

    def nodes(self, a: float, b: float) -> np.ndarray:
        """Sample positions of the rule on [a, b]."""
        k = len(self.coefficients)
        if self.open:
            idx = range(1, k + 1)
            n = k + 1
        else:
            idx = range(k)
            n = k - 1
        return np.array([a + i * (b - a) / n for i in idx], dtype=DTYPE)

    def __call__(self, f: Callable[[float], float], a: float, b: float) -> float:
        vals = np.array([f(x) for x in self.nodes(a, b)], dtype=DTYPE)
        return float((b - a) / self._weights.sum() * np.dot(vals, self._weights))


def make_newton_cotes_rule(coefficients: Sequence[float], open: bool = False) -> NewtonCotesRule:
    """
    Build a rule(f, a, b) from Newton-Cotes weights.

    make_newton_cotes_rule([7, 32, 12, 32, 7]) is Boole's rule and
    make_newton_cotes_rule([1], open=True) is the midpoint rule.
    """
    return NewtonCotesRule(tuple(coefficients), bool(open))


def closed_newton_cotes(points: int) -> NewtonCotesRule:
    """
    Closed Newton-Cotes rule on `points` equally spaced nodes.

    Weights come from scipy.integrate.newton_cotes, so any order is
    available without a hand-written table.
    """
    if isinstance(points, bool) or not isinstance(points, (int, np.integer)) or points < 2:
        raise InvalidArgument(f"points must be an integer >= 2, got {points!r}.")
    weights, _ = scipy_newton_cotes(int(points) - 1, equal=1)
    return make_newton_cotes_rule(weights, open=False)


# name -> (coefficients, open)
NEWTON_COTES: Dict[str, Tuple[Tuple[float, ...], bool]] = {
    "midpoint": ((1,), True),
    "trapezoid": ((1, 1), False),
    "simpson": ((1, 4, 1), False),
    "simpson_3_8": ((1, 3, 3, 1), False),
    "boole": ((7, 32, 12, 32, 7), False),
    "milne": ((2, -1, 2), True),
}


def get_rule(name: str) -> NewtonCotesRule:
    """Return the named rule from NEWTON_COTES."""
    try:
        coefficients, is_open = NEWTON_COTES[name]
    except KeyError:
        raise InvalidArgument(
            f"Unknown rule '{name}'. Use one of {sorted(NEWTON_COTES)}") from None
    return make_newton_cotes_rule(coefficients, open=is_open)
