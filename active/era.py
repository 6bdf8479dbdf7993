"""
# Spans of time bounded by &.endpoint.Endpoint pairs.

# Eras are either fixed or floating. Fixed eras denote concretely placed spans and
# only carry closed or infinite endpoints. Floating eras are templates awaiting
# &sequence and may carry open endpoints marking where a neighbor will be fused.

# Every era type has a distinguished empty era. Empty eras have no extent, but
# retain the kinds of their absent endpoints, their *shape*. Fixed empty eras are
# always shaped `(closed, closed)`. Floating empty eras have one closed and one
# open endpoint so that sequencing them with a neighbor is well defined.

# [ Elements ]

# /all_time/
	# The bi-infinite era; the identity of &intersect.
# /empty/
	# The empty era; the annihilator of &intersect.
# /intersect/
	# The largest fixed era contained by both operands.
# /sequence/
	# Concatenate two floating eras.
# /shift/
	# Translate an era by a measure.
"""
import enum
import typing

from . import core
from .endpoint import Endpoint, EndpointKind
from .endpoint import max_lower, min_upper, compatible, to_open, to_close

class EraType(enum.Enum):
	"""
	# Whether an era is placed.

	# [ Elements ]
	# /fixed/
		# The era is placed; endpoints are closed or infinite.
	# /floating/
		# The era is a relocatable template; endpoints may be open.
	"""

	fixed = 1
	floating = 2

class Era(tuple):
	"""
	# A `(type, lower, upper)` triple.

	# Eras should be constructed with &make_fixed, &make_floating, &all_time,
	# or &empty in order to maintain the invariant that the lower bound does
	# not follow the upper bound.
	"""
	__slots__ = ()

	@property
	def type(self) -> EraType:
		return self[0]

	@property
	def lower(self) -> Endpoint:
		return self[1]

	@property
	def upper(self) -> Endpoint:
		return self[2]

	@property
	def empty(self) -> bool:
		"""
		# Whether the era is the distinguished empty era.

		# An era whose endpoints coincide is *not* empty even though
		# it has zero duration.
		"""
		return self[1].placeholder

	@property
	def shape(self) -> typing.Tuple[EndpointKind, EndpointKind]:
		"""
		# The kinds of the lower and upper endpoints.
		"""
		return (self[1][0], self[2][0])

	@property
	def start(self) -> typing.Optional[Endpoint]:
		"""
		# The lower endpoint or &None if the era is empty.
		"""
		if self.empty:
			return None
		return self[1]

	@property
	def end(self) -> typing.Optional[Endpoint]:
		"""
		# The upper endpoint or &None if the era is empty.
		"""
		if self.empty:
			return None
		return self[2]

	@property
	def duration(self):
		"""
		# The measure between the endpoints; &None for empty and unbounded eras.
		"""
		if self[1].finite and self[2].finite:
			return self[2][1] - self[1][1]
		return None

	def __contains__(self, pit):
		if self.empty:
			return False
		return self[1].admits_above(pit) and self[2].admits_below(pit)

	def __str__(self):
		lower, upper = self[1], self[2]
		lb = '[' if lower[0] is EndpointKind.closed else '('
		ub = ']' if upper[0] is EndpointKind.closed else ')'

		if self.empty:
			return 'empty' + lb + ub

		ls = '-inf' if lower[0] is EndpointKind.infinite else str(lower[1])
		us = '+inf' if upper[0] is EndpointKind.infinite else str(upper[1])
		return f"{lb}{ls}, {us}{ub}"

	def __repr__(self):
		return f"(era.{self[0].name}@'{self}')"

def require(era:Era, type:EraType):
	"""
	# Raise &core.InvalidEraShape if &era is not of the given &type.
	"""
	if era[0] is not type:
		raise core.InvalidEraShape(f"{type.name} era required", era)

def all_time(type:EraType=EraType.fixed) -> Era:
	"""
	# The era covering all time.
	"""
	inf = Endpoint.infinite()
	return Era((type, inf, inf))

def empty(type:EraType=EraType.fixed, shape=None) -> Era:
	"""
	# Construct the empty era of the given &type.

	# [ Parameters ]
	# /type/
		# Fixed or floating.
	# /shape/
		# The kinds of the absent endpoints. Fixed eras only permit
		# `(closed, closed)`; floating eras require exactly one closed
		# and one open endpoint and default to `(closed, open)`.
	"""
	closed, open = EndpointKind.closed, EndpointKind.open

	if type is EraType.fixed:
		if shape is not None and tuple(shape) != (closed, closed):
			raise core.InvalidEraShape("empty fixed eras are closed", shape)
		shape = (closed, closed)
	else:
		if shape is None:
			shape = (closed, open)
		elif tuple(shape) not in {(closed, open), (open, closed)}:
			raise core.InvalidEraShape("empty floating eras must be half open", shape)

	l, r = shape
	return Era((type, Endpoint.shape(l), Endpoint.shape(r)))

def _canonical(type, lower, upper):
	# Maintain lower <= upper by substituting the empty era.
	if lower.finite and upper.finite and lower[1] > upper[1]:
		return empty(type, (lower[0], upper[0]) if type is EraType.floating else None)
	return Era((type, lower, upper))

def make_fixed(lower:Endpoint, upper:Endpoint) -> Era:
	"""
	# Create a fixed era from potentially infinite endpoints.

	# The empty era is returned when &lower follows &upper.

	# [ Exceptions ]
	# /&core.InvalidEraShape/
		# Either endpoint is open.
	"""
	if EndpointKind.open in (lower[0], upper[0]):
		raise core.InvalidEraShape("fixed eras cannot have open endpoints", lower, upper)
	return _canonical(EraType.fixed, lower, upper)

def make_floating(lower:Endpoint, upper:Endpoint) -> Era:
	"""
	# Create a floating era from arbitrary endpoints.

	# The empty era with the endpoints' shape is returned when &lower
	# follows &upper, but only when the shape is half open. Reversed
	# endpoints of any other shape raise &core.InvalidEraShape rather than
	# canonicalizing to the empty era, as no empty floating era has a
	# closed or open shape on both ends.

	# [ Exceptions ]
	# /&core.InvalidEraShape/
		# The endpoints are reversed and not half open, or both are open
		# at the same instant.
	"""
	if lower.finite and upper.finite:
		if lower[1] == upper[1] and lower[0] is upper[0] is EndpointKind.open:
			raise core.InvalidEraShape("zero width eras cannot be open on both ends", lower, upper)
	return _canonical(EraType.floating, lower, upper)

def between(start, stop) -> Era:
	"""
	# Create a finite fixed era including both &start and &stop.
	"""
	return make_fixed(Endpoint.closed(start), Endpoint.closed(stop))

def intersect(e1:Era, e2:Era) -> Era:
	"""
	# The largest fixed era contained by both &e1 and &e2.

	# The empty era annihilates and &all_time is the identity.
	"""
	require(e1, EraType.fixed)
	require(e2, EraType.fixed)

	if e1.empty or e2.empty:
		return empty(EraType.fixed)

	return _canonical(EraType.fixed, max_lower(e1[1], e2[1]), min_upper(e1[2], e2[2]))

def join(e1:Era, e2:Era) -> typing.Tuple[Endpoint, Endpoint]:
	"""
	# Validate the join of two floating eras and return the endpoints being fused.

	# [ Exceptions ]
	# /&core.InvalidEraShape/
		# Either era is fixed.
	# /&core.NonFiniteJoin/
		# Either of the fused endpoints is infinite.
	# /&core.IncompatibleBoundaryKind/
		# The fused endpoints are not one closed and one open.
	"""
	require(e1, EraType.floating)
	require(e2, EraType.floating)

	right, left = e1[2], e2[1]
	if EndpointKind.infinite in (right[0], left[0]):
		raise core.NonFiniteJoin(right, left)
	if not compatible(right, left):
		raise core.IncompatibleBoundaryKind(right[0], left[0])

	return right, left

def sequence(e1:Era, e2:Era) -> Era:
	"""
	# Concatenate the floating eras &e1 and &e2.

	# &e2 is translated so that its lower bound coincides with the upper
	# bound of &e1 and the two are fused at that instant. When either era
	# is empty, the other is returned.
	"""
	right, left = join(e1, e2)

	if e1.empty:
		if e2.empty:
			return empty(EraType.floating, (e1[1][0], e2[2][0]))
		# Compatibility at both of e1's ends implies e2's lower kind is e1's.
		return e2
	elif e2.empty:
		return e1

	return Era((EraType.floating, e1[1], e2[2].shift(right[1] - left[1])))

def shift(measure, era:Era) -> Era:
	"""
	# Translate the finite endpoints of &era by &measure.
	"""
	if era.empty:
		return era
	return Era((era[0], era[1].shift(measure), era[2].shift(measure)))

def open_upper(era:Era) -> Era:
	"""
	# Exclude the upper boundary instant of a floating era.

	# [ Exceptions ]
	# /&core.InvalidEraShape/
		# The era is empty or fixed, or the result would be a zero width
		# era with two open endpoints.
	"""
	require(era, EraType.floating)
	if era.empty:
		raise core.InvalidEraShape("empty eras cannot be opened", era)
	return make_floating(era[1], to_open(era[2]))

def open_lower(era:Era) -> Era:
	"""
	# Exclude the lower boundary instant of a floating era.
	"""
	require(era, EraType.floating)
	if era.empty:
		raise core.InvalidEraShape("empty eras cannot be opened", era)
	return make_floating(to_open(era[1]), era[2])

def close_upper(era:Era, reference=0) -> Era:
	"""
	# Include the upper boundary instant of a floating era.

	# An empty era becomes a zero width era at &reference; as the era
	# is floating, the chosen instant only matters to the fill value.
	"""
	require(era, EraType.floating)
	if era.empty:
		return Era((EraType.floating, Endpoint((era[1][0], reference)), Endpoint.closed(reference)))
	return Era((EraType.floating, era[1], to_close(era[2])))

def close_lower(era:Era, reference=0) -> Era:
	"""
	# Include the lower boundary instant of a floating era.
	"""
	require(era, EraType.floating)
	if era.empty:
		return Era((EraType.floating, Endpoint.closed(reference), Endpoint((era[2][0], reference))))
	return Era((EraType.floating, to_close(era[1]), era[2]))

def float_era(era:Era) -> Era:
	"""
	# Convert a fixed era into a floating era with the same endpoints.

	# The empty fixed era becomes the empty floating era shaped `(closed, open)`.
	"""
	require(era, EraType.fixed)
	if era.empty:
		return empty(EraType.floating)
	return Era((EraType.floating, era[1], era[2]))
