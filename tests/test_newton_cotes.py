import dataclasses
import math

import numpy as np
import pytest

from functions import poly, poly_integral
from quadrature import (NEWTON_COTES, InvalidArgument, NewtonCotesRule, boole,
                        closed_newton_cotes, get_rule, make_newton_cotes_rule,
                        midpoint, simpson, trapezoid)

INTERVALS = [(0.0, 1.0), (-2.0, 3.5), (1.0, 0.25), (0.1, 0.7)]
INTEGRANDS = [math.sin, math.exp, lambda x: 1.0 / (1.0 + x * x)]


class TestMatchesPrimitiveRules:
    @pytest.mark.parametrize("a, b", INTERVALS)
    @pytest.mark.parametrize("f", INTEGRANDS)
    def test_boole(self, f, a, b):
        rule = make_newton_cotes_rule([7, 32, 12, 32, 7], open=False)
        assert rule(f, a, b) == pytest.approx(boole(f, a, b), rel=1e-13, abs=1e-15)

    @pytest.mark.parametrize("a, b", INTERVALS)
    @pytest.mark.parametrize("f", INTEGRANDS)
    def test_midpoint(self, f, a, b):
        rule = make_newton_cotes_rule([1], open=True)
        assert rule(f, a, b) == pytest.approx(midpoint(f, a, b), rel=1e-13, abs=1e-15)

    @pytest.mark.parametrize("a, b", INTERVALS)
    @pytest.mark.parametrize("f", INTEGRANDS)
    def test_trapezoid_and_simpson(self, f, a, b):
        trap = make_newton_cotes_rule([1, 1])
        simp = make_newton_cotes_rule([1, 4, 1])
        assert trap(f, a, b) == pytest.approx(trapezoid(f, a, b), rel=1e-13, abs=1e-15)
        assert simp(f, a, b) == pytest.approx(simpson(f, a, b), rel=1e-13, abs=1e-15)


class TestNodes:
    def test_closed_rule_includes_endpoints(self):
        rule = make_newton_cotes_rule([1, 3, 3, 1])
        np.testing.assert_allclose(rule.nodes(0.0, 3.0), [0.0, 1.0, 2.0, 3.0])

    def test_open_rule_excludes_endpoints(self):
        rule = make_newton_cotes_rule([2, -1, 2], open=True)
        np.testing.assert_allclose(rule.nodes(0.0, 4.0), [1.0, 2.0, 3.0])

    def test_open_rule_never_calls_f_at_boundary(self):
        """1/x is singular at 0; an open rule must not evaluate there"""
        rule = make_newton_cotes_rule([2, -1, 2], open=True)
        assert math.isfinite(rule(lambda x: 1.0 / x, 0.0, 1.0))

    def test_points(self):
        assert make_newton_cotes_rule([7, 32, 12, 32, 7]).points == 5


class TestInvalidDescriptors:
    def test_empty(self):
        with pytest.raises(InvalidArgument):
            make_newton_cotes_rule([])

    def test_zero_sum(self):
        with pytest.raises(InvalidArgument):
            make_newton_cotes_rule([1, -2, 1])

    def test_single_closed_coefficient(self):
        with pytest.raises(InvalidArgument):
            make_newton_cotes_rule([1], open=False)

    def test_sum_zero_up_to_rounding(self):
        """0.1 + 0.2 - 0.3 is 5.55e-17 in floating point"""
        with pytest.raises(InvalidArgument):
            make_newton_cotes_rule([0.1, 0.2, -0.3], open=True)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            make_newton_cotes_rule([0, 0], open=True)


class TestValueSemantics:
    def test_coefficients_are_captured(self):
        coefs = [1, 4, 1]
        rule = make_newton_cotes_rule(coefs)
        coefs[1] = 100
        assert rule(lambda x: x ** 2, 0.0, 3.0) == pytest.approx(9.0)
        assert rule.coefficients == (1.0, 4.0, 1.0)

    def test_frozen(self):
        rule = make_newton_cotes_rule([1, 1])
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.open = True

    def test_equality_and_hash(self):
        r1 = make_newton_cotes_rule([1, 4, 1])
        r2 = NewtonCotesRule((1.0, 4.0, 1.0), False)
        assert r1 == r2
        assert hash(r1) == hash(r2)
        assert r1 != make_newton_cotes_rule([1, 4, 1], open=True)

    def test_reusable_across_calls(self):
        rule = make_newton_cotes_rule([1, 4, 1])
        first = rule(math.cos, 0.0, 1.0)
        rule(math.exp, -1.0, 2.0)
        assert rule(math.cos, 0.0, 1.0) == first


class TestCatalogue:
    @pytest.mark.parametrize("name", sorted(NEWTON_COTES))
    def test_constants_exact(self, name):
        rule = get_rule(name)
        assert rule(lambda x: 2.5, -1.0, 3.0) == pytest.approx(10.0, rel=1e-14)

    @pytest.mark.parametrize("name", ["simpson_3_8", "milne"])
    def test_cubic_exact(self, name):
        coefs = [0.5, -1.0, 2.0, 3.0]
        expected = poly_integral(coefs, -1.0, 2.0)
        assert get_rule(name)(poly(coefs), -1.0, 2.0) == pytest.approx(expected, rel=1e-12)

    def test_unknown_name(self):
        with pytest.raises(InvalidArgument, match="Unknown rule"):
            get_rule("gauss")


class TestClosedNewtonCotes:
    def test_five_points_is_boole(self):
        rule = closed_newton_cotes(5)
        assert rule(math.exp, 0.0, 2.0) == pytest.approx(boole(math.exp, 0.0, 2.0), rel=1e-12)

    def test_two_points_is_trapezoid(self):
        rule = closed_newton_cotes(2)
        assert rule(math.sin, 0.2, 1.1) == pytest.approx(trapezoid(math.sin, 0.2, 1.1), rel=1e-12)

    def test_seven_points_exact_to_degree_seven(self):
        coefs = np.arange(1.0, 9.0)
        expected = poly_integral(coefs, -1.0, 1.0)
        assert closed_newton_cotes(7)(poly(coefs), -1.0, 1.0) == pytest.approx(expected, rel=1e-10)

    @pytest.mark.parametrize("points", [0, 1, 2.0, True])
    def test_invalid_points(self, points):
        with pytest.raises(InvalidArgument):
            closed_newton_cotes(points)
