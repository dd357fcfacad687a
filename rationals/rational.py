'''Exact rational numbers over Python's arbitrary precision integers'''

import logging
import re
from math import gcd
from operator import index

from gmpy2 import mpz

logger = logging.getLogger(__name__)


class InvalidDenominator(ZeroDivisionError):
    pass

class ParseError(ValueError):
    pass


def _lcm(a, b):
    return a*b//gcd(a,b)

def _normalize(n, d):
    if d<0:
        n,d = -n,-d
    # gcd(0,d) == d, so zero comes out as 0/1
    g = gcd(n,d)
    return n//g,d//g


class Rational(object):
    '''An immutable rational number n/d in lowest terms with d > 0.

    Rational(n=0,d=1) accepts anything usable as an integer index (int, numpy
    integer scalars).  A zero denominator raises InvalidDenominator.'''

    __slots__ = ('_n','_d')

    def __init__(self, n=0, d=1):
        n,d = index(n),index(d)
        if not d:
            logger.debug('rejecting zero denominator')
            raise InvalidDenominator('denominator can\'t be zero')
        self._n,self._d = _normalize(n,d)

    @classmethod
    def parse(cls, text):
        return parse(text)

    @property
    def numerator(self):
        return self._n

    @property
    def denominator(self):
        return self._d

    n = numerator
    d = denominator

    def _invert(self):
        return Rational(self._d,self._n)

    def __neg__(self):
        return Rational(-self._n,self._d)

    def __pos__(self):
        return self

    def __abs__(self):
        return self if self._n>=0 else -self

    def __add__(self, other):
        if not isinstance(other,Rational):
            return NotImplemented
        if self._d==other._d:
            return Rational(self._n+other._n,self._d)
        l = _lcm(self._d,other._d)
        return Rational(self._n*(l//self._d)+other._n*(l//other._d),l)

    def __sub__(self, other):
        if not isinstance(other,Rational):
            return NotImplemented
        return self+(-other)

    def __mul__(self, other):
        if not isinstance(other,Rational):
            return NotImplemented
        return Rational(self._n*other._n,self._d*other._d)

    def __truediv__(self, other):
        if not isinstance(other,Rational):
            return NotImplemented
        return self*other._invert()

    def __floordiv__(self, other):
        '''Floor of self/other, as an int'''
        if not isinstance(other,Rational):
            return NotImplemented
        q = self/other
        return q._n//q._d

    def __mod__(self, other):
        if not isinstance(other,Rational):
            return NotImplemented
        return self-Rational(self//other)*other

    def compare(self, other):
        '''Return -1, 0 or 1 as self is less than, equal to or greater than other'''
        n = (self-other)._n
        return (n>0)-(n<0)

    def __lt__(self, other):
        if not isinstance(other,Rational):
            return NotImplemented
        return self.compare(other)<0

    def __le__(self, other):
        if not isinstance(other,Rational):
            return NotImplemented
        return self.compare(other)<=0

    def __gt__(self, other):
        if not isinstance(other,Rational):
            return NotImplemented
        return self.compare(other)>0

    def __ge__(self, other):
        if not isinstance(other,Rational):
            return NotImplemented
        return self.compare(other)>=0

    def __eq__(self, other):
        if not isinstance(other,Rational):
            return NotImplemented
        return self._n==other._n and self._d==other._d

    def __hash__(self):
        return hash((self._n,self._d))

    def __bool__(self):
        return self._n!=0

    def __int__(self):
        # Truncate toward zero
        n = abs(self._n)//self._d
        return n if self._n>=0 else -n

    def is_integer(self):
        return self._d==1

    def between(self, low, high):
        '''True if low <= self <= high'''
        return low<=self<=high

    def __str__(self):
        if self._d==1:
            return _dec(self._n)
        return '%s/%s'%(_dec(self._n),_dec(self._d))

    def __repr__(self):
        if self._d==1:
            return 'Rational(%s)'%_dec(self._n)
        return 'Rational(%s, %s)'%(_dec(self._n),_dec(self._d))

    def __reduce__(self):
        return Rational,(self._n,self._d)


def compare(a, b):
    '''Return the sign of a-b'''
    if not (isinstance(a,Rational) and isinstance(b,Rational)):
        raise TypeError('compare expects two Rationals, got %s and %s'%(type(a).__name__,type(b).__name__))
    return a.compare(b)

_INTEGER = re.compile(r'[+-]?[0-9]+')

def _dec(n):
    # int <-> str is capped by sys.int_max_str_digits, mpz is not
    return str(mpz(n))

def _parse_int(text):
    if not _INTEGER.fullmatch(text):
        logger.debug('rejecting integer literal %r',text)
        raise ParseError('invalid integer literal %r'%text)
    return int(mpz(text.lstrip('+'),10))

def parse(text):
    '''Parse "n" or "n/d" into a Rational.  Anything other than exactly one '/' is
    parsed as a single integer, so "1/2/3" fails with ParseError.'''
    if not isinstance(text,str):
        raise TypeError('expected str, got %s'%type(text).__name__)
    parts = text.split('/')
    if len(parts)==2:
        return Rational(_parse_int(parts[0]),_parse_int(parts[1]))
    return Rational(_parse_int(text))

def div_by(n, d):
    '''Rational n/d from two integers'''
    return Rational(index(n),index(d))


class RationalRange(object):
    '''The closed interval [low,high] of rationals, supporting "x in r"'''

    __slots__ = ('_low','_high')

    def __init__(self, low, high):
        for x in low,high:
            if not isinstance(x,Rational):
                raise TypeError('range endpoints must be Rationals, got %s'%type(x).__name__)
        self._low,self._high = low,high

    @property
    def low(self):
        return self._low

    @property
    def high(self):
        return self._high

    def is_empty(self):
        return self._low>self._high

    def __contains__(self, x):
        if not isinstance(x,Rational):
            return False
        return x.between(self._low,self._high)

    def __eq__(self, other):
        if not isinstance(other,RationalRange):
            return NotImplemented
        return (self._low,self._high)==(other._low,other._high)

    def __hash__(self):
        return hash((self._low,self._high))

    def __str__(self):
        return '[%s, %s]'%(self._low,self._high)

    def __repr__(self):
        return 'closed_range(%r, %r)'%(self._low,self._high)

def closed_range(low, high):
    return RationalRange(low,high)
