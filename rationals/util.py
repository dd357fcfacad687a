'''Helpers for numpy object arrays of Rationals'''

import logging

import numpy as np

from rationals.rational import Rational, parse

logger = logging.getLogger(__name__)

def amap(f,x):
    '''Apply f elementwise, returning an object array of the same shape'''
    x = np.asanyarray(x,dtype=object)
    r = np.empty(x.size,dtype=object)
    for i,v in enumerate(x.ravel()):
        r[i] = f(v)
    return r.reshape(x.shape)

def _as_rational(v):
    if isinstance(v,Rational):
        return v
    if isinstance(v,str):
        return parse(v)
    return Rational(v)

def rationals(x):
    '''Convert an array-like of ints, strings or Rationals to an object array of Rationals'''
    x = np.asarray(x,dtype=object)
    logger.debug('converting array of shape %s to rationals',x.shape)
    return amap(_as_rational,x)

def numerator(x):
    '''Numerators of a Rational or an array of them'''
    if isinstance(x,Rational):
        return x.numerator
    return amap(lambda r: r.numerator,x)

def denominator(x):
    '''Denominators of a Rational or an array of them'''
    if isinstance(x,Rational):
        return x.denominator
    return amap(lambda r: r.denominator,x)
