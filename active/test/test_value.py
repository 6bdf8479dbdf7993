"""
# Check active construction and composition.
"""
import fractions
import operator

import pytest

from .. import core
from .. import clock
from .. import era as libera
from .. import value as module
from ..endpoint import Endpoint, EndpointKind as Kind

C = Endpoint.closed
O = Endpoint.open
I = Endpoint.infinite()

Active = module.Active
floating = libera.EraType.floating

def identity(pit):
	return pit

def tagged(tag):
	return (lambda pit: (tag, pit))

def test_Active_properties():
	a = Active((libera.between(0, 5), identity))
	assert a.era == libera.between(0, 5)
	assert a.sample is identity
	assert a.type is libera.EraType.fixed
	assert a(3) == 3

	m = a.map(lambda x: x * 2)
	assert m.era == a.era
	assert m(3) == 6

def test_pure_active():
	p = module.pure_active('x')
	assert p.era == libera.all_time()
	assert p(-1000) == 'x'
	assert p(1000) == 'x'

	assert module.pure_active('x', floating).era == libera.all_time(floating)

def test_apply():
	f = Active((libera.between(0, 10), (lambda pit: (lambda x: x + pit))))
	v = Active((libera.between(5, 15), (lambda pit: pit * 100)))

	r = module.apply(f, v)
	assert r.era == libera.between(5, 10)
	assert r(6) == 606

	with pytest.raises(core.InvalidEraShape):
		module.apply(module.float_active(f), v)

def test_apply_pure():
	v = Active((libera.between(5, 15), identity))
	r = module.apply(module.pure_active(str), v)
	assert r.era == v.era
	assert r(7) == '7'

def test_parallel():
	a = Active((libera.between(0, 10), (lambda pit: [pit])))
	b = Active((libera.between(5, 15), (lambda pit: [-pit])))

	r = module.parallel(a, b)
	assert r.era == libera.between(5, 10)
	assert r(5) == [5, -5]

	r = module.parallel(a, b, combine=max)
	assert r(5) == [5]

def test_parallel_associative():
	a = Active((libera.between(0, 10), tagged('a')))
	b = Active((libera.make_fixed(C(3), I), tagged('b')))
	c = Active((libera.make_fixed(I, C(8)), tagged('c')))

	ab_c = module.parallel(module.parallel(a, b), c)
	a_bc = module.parallel(a, module.parallel(b, c))
	assert ab_c.era == a_bc.era == libera.between(3, 8)
	for x in range(3, 9):
		assert ab_c(x) == a_bc(x)

def test_parallel_identity():
	a = Active((libera.between(0, 10), (lambda pit: pit * 2)))
	r = module.parallel(module.pure_active(0), a)
	assert r.era == a.era
	for x in range(0, 11):
		assert r(x) == a(x)

def test_parallel_empty():
	a = Active((libera.between(0, 1), identity))
	b = Active((libera.between(2, 3), identity))
	assert module.parallel(a, b).era == libera.empty()

def test_sequential_join():
	a = Active((libera.make_floating(C(0), C(5)), tagged('a')))
	b = Active((libera.make_floating(O(0), C(3)), tagged('b')))

	r = module.sequential(a, b)
	assert r.era == libera.make_floating(C(0), C(8))

	# a's closed endpoint owns the join.
	assert r(0) == ('a', 0)
	assert r(5) == ('a', 5)
	assert r(fractions.Fraction(11, 2)) == ('b', fractions.Fraction(1, 2))
	assert r(8) == ('b', 3)

def test_sequential_open_first():
	a = Active((libera.make_floating(C(0), O(5)), tagged('a')))
	b = Active((libera.make_floating(C(10), C(13)), tagged('b')))

	r = module.sequential(a, b)
	assert r.era == libera.make_floating(C(0), C(8))
	assert r(fractions.Fraction(49, 10)) == ('a', fractions.Fraction(49, 10))
	assert r(5) == ('b', 10)
	assert r(8) == ('b', 13)

def test_sequential_errors():
	a = Active((libera.make_floating(C(0), C(5)), identity))

	with pytest.raises(core.IncompatibleBoundaryKind):
		module.sequential(a, a)
	with pytest.raises(core.NonFiniteJoin):
		module.sequential(a, Active((libera.all_time(floating), identity)))
	with pytest.raises(core.InvalidEraShape):
		module.sequential(a, Active((libera.between(0, 1), identity)))

def test_sequential_empty():
	x = Active((libera.make_floating(C(0), O(3)), tagged('x')))
	z = Active((libera.empty(floating), tagged('z')))

	assert module.sequential(z, x) is x
	assert module.sequential(x, z) is x

	zz = module.sequential(z, z)
	assert zz.era == libera.empty(floating)

def test_sequential_associative():
	a = Active((libera.make_floating(C(0), O(2)), tagged('a')))
	b = Active((libera.make_floating(C(0), C(3)), tagged('b')))
	c = Active((libera.make_floating(O(10), C(11)), tagged('c')))

	ab_c = module.sequential(module.sequential(a, b), c)
	a_bc = module.sequential(a, module.sequential(b, c))
	assert ab_c.era == a_bc.era == libera.make_floating(C(0), C(6))

	for x in [0, 1, 2, 3, 4, 5, fractions.Fraction(11, 2), 6]:
		assert ab_c(x) == a_bc(x)

	assert ab_c(2) == ('b', 0)
	assert ab_c(5) == ('b', 3)
	assert ab_c(6) == ('c', 11)

def test_shift():
	a = Active((libera.between(0, 5), identity))

	s = module.shift(0, a)
	assert s.era == a.era
	assert s(3) == a(3)

	s = module.shift(10, a)
	assert s.era == libera.between(10, 15)
	assert s(13) == a(3)

	s1 = module.shift(2, module.shift(3, a))
	s2 = module.shift(5, a)
	assert s1.era == s2.era
	for x in range(5, 11):
		assert s1(x) == s2(x)

def test_shift_clock():
	a = Active((libera.between(clock.to_time(0), clock.to_time(1)), identity))
	s = module.shift(clock.to_duration('1/4'), a)

	t = clock.to_time('1/2')
	assert t in s.era
	assert s(t) == clock.to_time('1/4')
	assert isinstance(s(t), clock.Time)

def test_sequential_clock_sampled_with_numbers():
	t = clock.to_time
	a = Active((libera.make_floating(C(t(0)), C(t(5))), identity))
	b = Active((libera.make_floating(O(t(0)), C(t(3))), identity))
	s = module.sequential(a, b)
	assert s.era == libera.make_floating(C(t(0)), C(t(8)))

	# Plain numbers translated by a duration are points.
	assert s(6) == 1
	assert isinstance(s(6), clock.Time)
	assert s(6.5) == fractions.Fraction(3, 2)
	assert isinstance(s(6.5), clock.Time)
	assert s(5) == 5

	d = module.shift(clock.to_duration(2), Active((libera.between(0, 5), identity)))
	assert d(3) == 1
	assert isinstance(d(3), clock.Time)

def test_float_active():
	a = Active((libera.between(0, 5), identity))
	f = module.float_active(a)
	assert f.era == libera.make_floating(C(0), C(5))
	assert f.sample is a.sample

	assert module.float_active(Active((libera.empty(), identity))).era == libera.empty(floating)

def test_open():
	f = module.float_active(Active((libera.between(0, 5), identity)))
	assert module.open_upper(f).era == libera.make_floating(C(0), O(5))
	assert module.open_lower(f).era == libera.make_floating(O(0), C(5))

	with pytest.raises(core.InvalidEraShape):
		module.open_upper(Active((libera.empty(floating), identity)))

def test_close_upper():
	x = module.open_upper(module.float_active(Active((libera.between(0, 3), (lambda pit: 'x')))))
	r = module.close_upper(x, 'z')

	assert r.era == libera.make_floating(C(0), C(3))
	assert r(1) == 'x'
	assert r(3) == 'z'

	with pytest.raises(core.InvalidEraShape):
		module.close_upper(r, 'z')

def test_close_lower():
	x = module.open_lower(module.float_active(Active((libera.between(0, 3), (lambda pit: 'x')))))
	r = module.close_lower(x, 'z')

	assert r.era == libera.make_floating(C(0), C(3))
	assert r(0) == 'z'
	assert r(2) == 'x'

	with pytest.raises(core.InvalidEraShape):
		module.close_lower(r, 'z')

def test_close_empty():
	z = Active((libera.empty(floating), (lambda pit: 'never')))
	r = module.close_upper(z, 'point')
	assert r.era == libera.make_floating(C(0), C(0))
	assert r(0) == 'point'

	# Shaped (open, closed); the lower endpoint is the open one.
	z = Active((libera.empty(floating, (Kind.open, Kind.closed)), (lambda pit: 'never')))
	r = module.close_lower(z, 'point', reference=4)
	assert r.era == libera.make_floating(C(4), C(4))
	assert r(4) == 'point'

def test_scenario():
	x = module.open_upper(module.float_active(Active((libera.between(0, 3), (lambda pit: 'x')))))
	y = module.float_active(Active((libera.between(0, 2), (lambda pit: 'y'))))

	xy = module.sequential(x, y)
	assert xy.era == libera.make_floating(C(0), C(5))
	assert xy(2.9) == 'x'
	assert xy(3.0) == 'y'
	assert xy(4.9) == 'y'
