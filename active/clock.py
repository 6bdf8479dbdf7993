"""
# Exact rational points and measures of time.

# &Time and &Duration are &fractions.Fraction subclasses whose arithmetic
# maintains the distinction between points and measures:

#!python
	t = clock.to_time(3)
	d = clock.to_duration('1/2')

	assert isinstance(t + d, clock.Time)
	assert isinstance(t - t, clock.Duration)
	assert isinstance(d * 4, clock.Duration)

# A plain number on the left of a &Duration is treated as a point, so
# `3 + d` and `3 - d` are &Time instances, while `d + 3` remains a &Duration.

# Any real number is accepted by the constructors; floats are converted exactly,
# so `to_time(0.1)` is the binary value nearest one tenth rather than `1/10`.
# Use strings or &fractions.Fraction for decimal instants.

# [ Elements ]

# /Rational/
	# The &.abstract.Clock implementation for &Time and &Duration.
# /to_time/
	# Convert a real number to a &Time.
# /from_time/
	# Convert a &Time to a requested fractional type.
# /to_duration/
	# Convert a real number to a &Duration.
# /from_duration/
	# Convert a &Duration to a requested fractional type.
"""
import fractions

from . import abstract

class Duration(fractions.Fraction):
	"""
	# An exact measure of time; the difference between two &Time instances.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, value):
		return Class(value)

	def __repr__(self):
		return f"(active.duration@'{self}')"

	def __add__(self, operand, Fraction=fractions.Fraction):
		if isinstance(operand, Time):
			return operand.__add__(self)

		r = Fraction.__add__(self, operand)
		if r is NotImplemented:
			return r
		return self.__class__(r)

	def __radd__(self, operand, Fraction=fractions.Fraction):
		if isinstance(operand, Time):
			return operand.__add__(self)

		r = Fraction.__radd__(self, operand)
		if r is NotImplemented:
			return r

		if isinstance(operand, Duration):
			return self.__class__(r)
		# A plain number on the left is interpreted as a point.
		return Time(r)

	def __sub__(self, operand, Fraction=fractions.Fraction):
		if isinstance(operand, Time):
			# Measures cannot be reduced by points.
			return NotImplemented

		r = Fraction.__sub__(self, operand)
		if r is NotImplemented:
			return r
		return self.__class__(r)

	def __rsub__(self, operand, Fraction=fractions.Fraction):
		r = Fraction.__rsub__(self, operand)
		if r is NotImplemented:
			return r

		if isinstance(operand, Duration):
			return self.__class__(r)
		return Time(r)

	def __neg__(self, Fraction=fractions.Fraction):
		return self.__class__(Fraction.__neg__(self))

	def __abs__(self, Fraction=fractions.Fraction):
		return self.__class__(Fraction.__abs__(self))

	def __mul__(self, scalar, Fraction=fractions.Fraction):
		if isinstance(scalar, (Time, Duration)):
			return NotImplemented

		r = Fraction.__mul__(self, scalar)
		if r is NotImplemented:
			return r
		return self.__class__(r)
	__rmul__ = __mul__

	def __truediv__(self, operand, Fraction=fractions.Fraction):
		r = Fraction.__truediv__(self, operand)
		if r is NotImplemented or isinstance(operand, Duration):
			# Ratio of measures is a plain scalar.
			return r
		return self.__class__(r)

class Time(fractions.Fraction):
	"""
	# An exact point in time.

	# Points can be moved by measures and measured against other points,
	# but they cannot be added together.
	"""
	__slots__ = ()

	Measure = Duration

	@classmethod
	def of(Class, value):
		return Class(value)

	def __repr__(self):
		return f"(active.time@'{self}')"

	def __add__(self, measure, Fraction=fractions.Fraction):
		if isinstance(measure, Time):
			return NotImplemented

		r = Fraction.__add__(self, measure)
		if r is NotImplemented:
			return r
		return self.__class__(r)
	__radd__ = __add__

	def __sub__(self, operand, Fraction=fractions.Fraction):
		r = Fraction.__sub__(self, operand)
		if r is NotImplemented:
			return r

		if isinstance(operand, Time):
			return self.Measure(r)
		else:
			return self.__class__(r)

	def __rsub__(self, operand, Fraction=fractions.Fraction):
		if isinstance(operand, Duration):
			return NotImplemented

		# A plain number on the left is interpreted as a point.
		r = Fraction.__rsub__(self, operand)
		if r is NotImplemented:
			return r
		return self.Measure(r)

	def leads(self, pit):
		"""
		# Whether &self comes *before* &pit.
		"""
		return self < pit

	def follows(self, pit):
		"""
		# Whether &self comes *after* &pit.
		"""
		return self > pit

class Rational(object):
	"""
	# &.abstract.Clock implementation converting numbers to and from exact
	# &Point and &Measure instances.
	"""
	__slots__ = ('Point', 'Measure')

	def __init__(self, Point=Time, Measure=Duration):
		self.Point = Point
		self.Measure = Measure

	def to_time(self, value):
		return self.Point(value)

	def from_time(self, pit, Type=float):
		"""
		# Convert &pit to &Type by dividing its numerator by its denominator
		# in the target type's arithmetic.
		"""
		return Type(pit.numerator) / Type(pit.denominator)

	def to_duration(self, value):
		return self.Measure(value)

	def from_duration(self, measure, Type=float):
		return Type(measure.numerator) / Type(measure.denominator)

	def first_time(self, a, b):
		return min(a, b)

	def last_time(self, a, b):
		return max(a, b)

clock = Rational()
to_time = clock.to_time
from_time = clock.from_time
to_duration = clock.to_duration
from_duration = clock.from_duration
first_time = clock.first_time
last_time = clock.last_time

abstract.Measure.register(Duration)
abstract.Point.register(Time)
abstract.Clock.register(Rational)
