"""
# Protocols for the time values consumed by eras and actives.

# Primarily, this module exists to document the interfaces to &Point, &Measure,
# and &Clock. Any pair of types satisfying them can be used to bound an era;
# the built-in numeric types and &.clock.Time and &.clock.Duration qualify.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Measure(typing.Protocol):
	"""
	# A quantity of time; the difference between two &Point instances.

	# Measures form an additive group that can be scaled:

	#!python
		assert (d1 + d2) - d2 == d1
		assert -(-d) == d
		assert (d * 2) == (d + d)
	"""

	@abstractmethod
	def __add__(self, measure):
		"""
		# Sum of the two measures.
		"""

	@abstractmethod
	def __sub__(self, measure):
		"""
		# Difference of the two measures.
		"""

	@abstractmethod
	def __neg__(self):
		"""
		# The additive inverse.
		"""

	@abstractmethod
	def __mul__(self, scalar):
		"""
		# The measure scaled by &scalar.
		"""

	@abstractmethod
	def __lt__(self, measure):
		"""
		# Whether the measure is smaller than the given &measure.
		"""

	@abstractmethod
	def __le__(self, measure):
		"""
		# Whether the measure is smaller than or equal to the given &measure.
		"""

@typing.runtime_checkable
class Point(typing.Protocol):
	"""
	# A point in time on a totally ordered line.

	# [ Invariants ]
	#!python
		assert (b - a) + a == b
		assert (a + d) - d == a
	"""

	@abstractmethod
	def __add__(self, measure):
		"""
		# The point &measure after &self.
		"""

	@abstractmethod
	def __sub__(self, operand):
		"""
		# When &operand is a &Point, the &Measure between the two points.
		# When &operand is a &Measure, the point &operand before &self.
		"""

	@abstractmethod
	def __lt__(self, pit):
		"""
		# Whether &self comes before &pit.
		"""

	@abstractmethod
	def __le__(self, pit):
		"""
		# Whether &self comes before or is equal to &pit.
		"""

@typing.runtime_checkable
class Clock(typing.Protocol):
	"""
	# Conversions between a &Point and &Measure pair and arbitrary numeric values.
	"""

	@abstractmethod
	def to_time(self, value) -> Point:
		"""
		# Convert any real &value to a &Point.
		"""

	@abstractmethod
	def from_time(self, pit:Point, Type=float):
		"""
		# Convert &pit to an instance of &Type.
		"""

	@abstractmethod
	def to_duration(self, value) -> Measure:
		"""
		# Convert any real &value to a &Measure.
		"""

	@abstractmethod
	def from_duration(self, measure:Measure, Type=float):
		"""
		# Convert &measure to an instance of &Type.
		"""

	@abstractmethod
	def first_time(self, a:Point, b:Point) -> Point:
		"""
		# The earlier of the two points.
		"""

	@abstractmethod
	def last_time(self, a:Point, b:Point) -> Point:
		"""
		# The later of the two points.
		"""
