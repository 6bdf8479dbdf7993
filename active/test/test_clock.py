"""
# Check the exact rational points and measures.
"""
import decimal
import fractions

import pytest

from .. import abstract
from .. import clock as module

def test_Time_arithmetic():
	t = module.to_time(3)
	d = module.to_duration(2)

	assert t + d == 5
	assert isinstance(t + d, module.Time)
	assert isinstance(d + t, module.Time)
	assert isinstance(t - d, module.Time)
	assert (t - d) == 1

	m = module.to_time(7) - t
	assert isinstance(m, module.Duration)
	assert m == 4

def test_Time_invalid_arithmetic():
	t = module.to_time(3)
	with pytest.raises(TypeError):
		t + t
	with pytest.raises(TypeError):
		module.to_duration(1) - t

def test_Duration_group():
	d = module.to_duration('1/3')
	e = module.to_duration(2)

	assert isinstance(d + e, module.Duration)
	assert isinstance(-d, module.Duration)
	assert isinstance(d * 3, module.Duration)
	assert isinstance(3 * d, module.Duration)
	assert d * 3 == 1
	assert (d + e) - e == d
	assert -(-d) == d
	assert abs(-d) == d

	# Ratio of measures is a scalar.
	r = e / d
	assert not isinstance(r, module.Duration)
	assert r == 6
	assert isinstance(e / 2, module.Duration)

def test_number_and_Duration():
	d = module.to_duration(2)

	# A plain number on the left of a measure is a point.
	assert isinstance(3 + d, module.Time)
	assert 3 + d == 5
	assert isinstance(3 - d, module.Time)
	assert 3 - d == 1
	assert isinstance(fractions.Fraction(1, 2) + d, module.Time)
	assert isinstance(0.5 + d, module.Time)
	assert 0.5 + d == fractions.Fraction(5, 2)
	assert isinstance(7.5 - d, module.Time)

	# Measures combined with measures remain measures.
	assert isinstance(module.to_duration(1) + d, module.Duration)
	assert isinstance(module.to_duration(1) - d, module.Duration)
	assert isinstance(d + 3, module.Duration)
	assert isinstance(d - 3, module.Duration)

def test_conversions():
	t = module.to_time('1/2')
	assert module.from_time(t) == 0.5
	assert module.from_time(t, fractions.Fraction) == fractions.Fraction(1, 2)
	assert module.from_time(t, decimal.Decimal) == decimal.Decimal('0.5')

	d = module.to_duration(0.25)
	assert module.from_duration(d) == 0.25
	assert module.to_duration(decimal.Decimal('1.5')) == fractions.Fraction(3, 2)

def test_ordering():
	a = module.to_time(1)
	b = module.to_time(2)
	assert module.first_time(a, b) is a
	assert module.last_time(a, b) is b
	assert a.leads(b) == True
	assert a.follows(b) == False

def test_repr():
	assert repr(module.to_time('3/2')) == "(active.time@'3/2')"
	assert repr(module.to_duration(2)) == "(active.duration@'2')"

def test_protocols():
	assert isinstance(module.to_time(1), abstract.Point)
	assert isinstance(module.to_duration(1), abstract.Measure)
	assert isinstance(1, abstract.Point)

def test_registration():
	assert issubclass(module.Time, abstract.Point)
	assert issubclass(module.Duration, abstract.Measure)
	assert issubclass(module.Rational, abstract.Clock)
	assert isinstance(module.clock, abstract.Clock)
	assert isinstance(module.Rational(int, int), abstract.Clock)
