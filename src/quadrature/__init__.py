from .composite import integrate_composite, CompositeIntegrator, ConvergenceStudy
from .tools.errors import InvalidArgument
from .tools.gauss_legendre import GaussLegendreRule
from .tools.newton_cotes import (NewtonCotesRule, make_newton_cotes_rule,
                                 closed_newton_cotes, get_rule, NEWTON_COTES)
from .tools.rules import Rule, midpoint, trapezoid, simpson, boole

__all__ = ['integrate_composite', 'CompositeIntegrator', 'ConvergenceStudy',
           'InvalidArgument', 'GaussLegendreRule', 'NewtonCotesRule',
           'make_newton_cotes_rule', 'closed_newton_cotes', 'get_rule',
           'NEWTON_COTES', 'Rule', 'midpoint', 'trapezoid', 'simpson', 'boole']
