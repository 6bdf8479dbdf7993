"""
# Era boundaries and their combinators.

# An &Endpoint is a `(kind, time)` pair. The &EndpointKind determines whether
# the boundary instant belongs to the era; the direction of an infinite endpoint
# is implied by its position as the lower or upper bound of an era.

# [ Elements ]

# /max_lower/
	# The tighter of two lower bounds.
# /min_upper/
	# The tighter of two upper bounds.
# /compatible/
	# Whether two endpoints can be fused by sequential composition.
# /choose/
	# Select the side of a join that owns a given instant.
"""
import enum
import typing

from . import core

class EndpointKind(enum.Enum):
	"""
	# Classification of a boundary with respect to its instant.

	# [ Elements ]
	# /closed/
		# The boundary instant belongs to the era.
	# /open/
		# The boundary instant does not belong to the era.
	# /infinite/
		# The era is unbounded in the endpoint's direction.
	"""

	closed = +1
	open = 0
	infinite = -1

class Endpoint(tuple):
	"""
	# A boundary of an era.

	# Endpoints without a time and with a finite kind are placeholders;
	# empty eras use them to retain the shape of their absent boundaries.
	"""
	__slots__ = ()

	@property
	def kind(self) -> EndpointKind:
		return self[0]

	@property
	def time(self):
		"""
		# The boundary instant; &None for infinite endpoints and placeholders.
		"""
		return self[1]

	@property
	def finite(self) -> bool:
		return self[0] is not EndpointKind.infinite and self[1] is not None

	@property
	def placeholder(self) -> bool:
		return self[0] is not EndpointKind.infinite and self[1] is None

	@classmethod
	def closed(Class, time):
		if time is None:
			raise ValueError("closed endpoints require a time")
		return Class((EndpointKind.closed, time))

	@classmethod
	def open(Class, time):
		if time is None:
			raise ValueError("open endpoints require a time")
		return Class((EndpointKind.open, time))

	@classmethod
	def infinite(Class):
		return Class((EndpointKind.infinite, None))

	@classmethod
	def shape(Class, kind:EndpointKind):
		"""
		# Construct a placeholder retaining only the &kind.
		"""
		return Class((kind, None))

	def __repr__(self):
		kind, time = self
		if kind is EndpointKind.infinite:
			return "Endpoint.infinite()"
		return f"Endpoint.{kind.name}({time!r})"

	def shift(self, measure):
		"""
		# Translate the endpoint by &measure; infinite endpoints and
		# placeholders are returned as-is.
		"""
		if not self.finite:
			return self
		return self.__class__((self[0], self[1] + measure))

	def admits_above(self, pit) -> bool:
		"""
		# Whether &pit is inside an era having &self as its lower bound.
		"""
		kind, time = self
		if kind is EndpointKind.infinite:
			return True
		elif kind is EndpointKind.closed:
			return pit >= time
		else:
			return pit > time

	def admits_below(self, pit) -> bool:
		"""
		# Whether &pit is inside an era having &self as its upper bound.
		"""
		kind, time = self
		if kind is EndpointKind.infinite:
			return True
		elif kind is EndpointKind.closed:
			return pit <= time
		else:
			return pit < time

def max_lower(a:Endpoint, b:Endpoint, infinite=EndpointKind.infinite, open=EndpointKind.open) -> Endpoint:
	"""
	# The later of the two lower bounds.

	# When the instants are equal, an open endpoint is preferred as
	# the instant is excluded by at least one of the eras.
	"""
	if a[0] is infinite:
		return b
	if b[0] is infinite:
		return a

	if a[1] > b[1]:
		return a
	elif b[1] > a[1]:
		return b
	else:
		return a if a[0] is open else b

def min_upper(a:Endpoint, b:Endpoint, infinite=EndpointKind.infinite, open=EndpointKind.open) -> Endpoint:
	"""
	# The earlier of the two upper bounds.

	# Ties resolve to the open endpoint like &max_lower.
	"""
	if a[0] is infinite:
		return b
	if b[0] is infinite:
		return a

	if a[1] < b[1]:
		return a
	elif b[1] < a[1]:
		return b
	else:
		return a if a[0] is open else b

_compatible_kinds = {
	(EndpointKind.closed, EndpointKind.open),
	(EndpointKind.open, EndpointKind.closed),
}

def compatible(right:Endpoint, left:Endpoint) -> bool:
	"""
	# Whether the upper bound of one era, &right, can be fused with the
	# lower bound of the following era, &left.

	# Only a closed and open pair assigns the shared instant to exactly
	# one of the eras. Infinite endpoints are never compatible.
	"""
	return (right[0], left[0]) in _compatible_kinds

def to_open(endpoint:Endpoint) -> Endpoint:
	"""
	# Exclude the boundary instant; infinite endpoints are unaffected.
	"""
	if endpoint[0] is EndpointKind.infinite:
		return endpoint
	return Endpoint((EndpointKind.open, endpoint[1]))

def to_close(endpoint:Endpoint) -> Endpoint:
	"""
	# Include the boundary instant; infinite endpoints are unaffected.

	# The caller is responsible for defining the value at the newly included
	# instant. See &.value.close_upper and &.value.close_lower.
	"""
	if endpoint[0] is EndpointKind.infinite:
		return endpoint
	return Endpoint((EndpointKind.closed, endpoint[1]))

def choose(deadline, now, kinds:typing.Tuple[EndpointKind, EndpointKind], before, after):
	"""
	# Select &before or &after depending on which side of a join owns &now.

	# [ Parameters ]
	# /deadline/
		# The instant where the two sides are joined.
	# /now/
		# The instant being sampled.
	# /kinds/
		# The kinds of the first side's upper bound and the second side's lower bound.
	# /before/
		# The object to return when &now belongs to the first side.
	# /after/
		# The object to return when &now belongs to the second side.

	# [ Exceptions ]
	# /&core.IncompatibleBoundaryKind/
		# The &kinds are not a closed and open pair.
	"""
	kinds = tuple(kinds)
	if kinds not in _compatible_kinds:
		raise core.IncompatibleBoundaryKind(*kinds)

	if kinds[0] is EndpointKind.closed:
		# Deadline belongs to the first side.
		return before if now <= deadline else after
	else:
		return before if now < deadline else after
