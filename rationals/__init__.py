from rationals.rational import (InvalidDenominator, ParseError, Rational, RationalRange,
                                closed_range, compare, div_by, parse)
from rationals.info import __doc__

__all__ = ['InvalidDenominator', 'ParseError', 'Rational', 'RationalRange',
           'closed_range', 'compare', 'div_by', 'parse']
