'''
Exact rational arithmetic
=========================

``Rational`` is an immutable rational number stored as a pair of Python
integers in lowest terms with a positive denominator, so values of any
magnitude are exact:

>>> from rationals import Rational, parse, div_by
>>> div_by(2000000000, 4000000000) == Rational(1, 2)
True
>>> str(parse('117/1098'))
'13/122'
>>> str(Rational(1, 2) - Rational(1, 3))
'1/6'

A zero denominator, whether given directly, parsed from ``"n/0"`` or
reached by dividing by zero, raises ``InvalidDenominator``.  Malformed
text raises ``ParseError``.

Binary operators only combine ``Rational`` values; there is no implicit
conversion from ``int`` or ``float``.

``rationals.util`` holds helpers for numpy object arrays of rationals.
'''
