#!/usr/bin/env python

import numpy as np
from numpy.testing import assert_, assert_equal, assert_raises

from rationals import InvalidDenominator, ParseError, Rational
from rationals.util import amap, denominator, numerator, rationals

R = Rational

def test_rationals():
    x = rationals([[1,'1/2'],['-6/4',R(2,3)]])
    assert_equal(x.dtype,np.dtype(object))
    assert_equal(x.shape,(2,2))
    assert_(all(type(v) is Rational for v in x.ravel()))
    assert_(np.all(x==np.array([[R(1),R(1,2)],[R(-3,2),R(2,3)]],dtype=object)))
    assert_equal(rationals([]).shape,(0,))
    assert_equal(rationals(np.arange(3)).tolist(),[R(0),R(1),R(2)])
    assert_raises(InvalidDenominator,rationals,['1/0'])
    assert_raises(ParseError,rationals,['one'])
    assert_raises(TypeError,rationals,[1.5])

def test_fields():
    x = rationals(['1/3','2/4','-6/3'])
    assert_equal(numerator(x).tolist(),[1,1,-2])
    assert_equal(denominator(x).tolist(),[3,2,1])
    assert_equal(numerator(R(-2,4)),-1)
    assert_equal(denominator(R(-2,4)),2)
    big = rationals(['912016490186296920119201192141970416029/1824032980372593840238402384283940832058'])
    assert_equal(numerator(big).tolist(),[1])
    assert_equal(denominator(big).tolist(),[2])

def test_amap():
    x = rationals([[1,2,3],[4,5,6]])
    y = amap(lambda r: r*R(1,2),x)
    assert_equal(y.shape,(2,3))
    assert_equal(y[1,2],R(3))
    assert_equal(denominator(y).tolist(),[[2,1,2],[1,2,1]])

def test_linear_algebra():
    A = rationals([['1/2','1/3'],['1/4','1/5']])
    v = rationals([6,12])
    assert_equal(np.dot(A,v).tolist(),[R(7),R(39,10)])
    i = rationals(['1/3','2/3','1','4/3'])
    assert_equal(np.add.reduce(i),R(10,3))
    assert_(np.all(i[1:]-i[:-1]==R(1,3)))
    assert_equal(i.min(),R(1,3))
    assert_equal(i.max(),R(4,3))
    assert_equal(np.argmax(i),3)

if __name__=='__main__':
    test_rationals()
    test_linear_algebra()
