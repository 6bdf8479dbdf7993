"""
# Time-varying values restricted to an &.era.Era.

# An &Active is an `(era, sample)` pair. The sampling function is total, but its
# results are only meaningful for instants inside the era; callers must not
# depend on values sampled outside of it.

# [ Elements ]

# /pure_active/
	# Construct a bi-infinite constant.
# /apply/
	# Pointwise application of a fixed active function to a fixed active value.
# /parallel/
	# Pointwise combination of two fixed actives.
# /sequential/
	# Concatenation of two floating actives.
# /shift/
	# Translate an active in time.
"""
import operator
import typing

from . import core
from . import era as libera
from .era import Era, EraType
from .endpoint import EndpointKind, choose

class Active(tuple):
	"""
	# A sampling function paired with the era where its values are defined.
	"""
	__slots__ = ()

	@property
	def era(self) -> Era:
		return self[0]

	@property
	def sample(self) -> typing.Callable:
		return self[1]

	@property
	def type(self) -> EraType:
		return self[0][0]

	def __call__(self, pit):
		return self[1](pit)

	def __repr__(self):
		return f"Active({self[0]!r}, {self[1]!r})"

	def map(self, transform:typing.Callable) -> 'Active':
		"""
		# Apply &transform to the sampled value at all times.
		"""
		sample = self[1]
		return self.__class__((self[0], (lambda pit: transform(sample(pit)))))

def pure_active(value, type:EraType=EraType.fixed) -> Active:
	"""
	# Create a bi-infinite active constantly producing &value.
	"""
	return Active((libera.all_time(type), (lambda pit: value)))

def apply(functions:Active, values:Active) -> Active:
	"""
	# Apply a fixed active function to a fixed active value pointwise in time.

	# The result is defined on the intersection of the eras.
	"""
	f = functions[1]
	v = values[1]
	era = libera.intersect(functions[0], values[0])
	return Active((era, (lambda pit: f(pit)(v(pit)))))

def parallel(a:Active, b:Active, combine=operator.add) -> Active:
	"""
	# Combine two fixed actives pointwise with &combine.

	# The result is defined on the intersection of the eras. Parallel
	# composition is associative when &combine is.
	"""
	fa = a[1]
	fb = b[1]
	era = libera.intersect(a[0], b[0])
	return Active((era, (lambda pit: combine(fa(pit), fb(pit)))))

def _translate(sample, measure):
	return (lambda pit: sample(pit - measure))

def sequential(a:Active, b:Active) -> Active:
	"""
	# Concatenate the floating actives &a and &b.

	# &b is translated to begin where &a ends. At the shared instant, the
	# side with the closed endpoint provides the value.

	# [ Exceptions ]
	# /&core.InvalidEraShape/
		# Either active is fixed.
	# /&core.NonFiniteJoin/
		# &a has no upper bound or &b has no lower bound.
	# /&core.IncompatibleBoundaryKind/
		# The joined endpoints are not one closed and one open.
	"""
	era = libera.sequence(a[0], b[0])

	if a[0].empty:
		if b[0].empty:
			return Active((era, a[1]))
		return b
	elif b[0].empty:
		return a

	right, left = a[0][2], b[0][1]
	deadline = right[1]
	kinds = (right[0], left[0])
	first = a[1]
	second = _translate(b[1], deadline - left[1])

	def sample(pit):
		return choose(deadline, pit, kinds, first, second)(pit)

	return Active((era, sample))

def shift(measure, active:Active) -> Active:
	"""
	# Translate &active by &measure.

	# The value observed at `t + measure` after shifting is the value
	# observed at `t` before shifting.
	"""
	return Active((libera.shift(measure, active[0]), _translate(active[1], measure)))

def float_active(active:Active) -> Active:
	"""
	# Convert a fixed active into a floating active.
	"""
	return Active((libera.float_era(active[0]), active[1]))

def open_upper(active:Active) -> Active:
	"""
	# Exclude the upper boundary instant of a floating active.
	"""
	return Active((libera.open_upper(active[0]), active[1]))

def open_lower(active:Active) -> Active:
	"""
	# Exclude the lower boundary instant of a floating active.
	"""
	return Active((libera.open_lower(active[0]), active[1]))

def _fill(sample, instant, value):
	return (lambda pit: value if pit == instant else sample(pit))

def close_upper(active:Active, value, reference=0) -> Active:
	"""
	# Include the open upper boundary instant of a floating active
	# sampling &value at that instant.

	# [ Parameters ]
	# /active/
		# A floating active with an open upper endpoint.
	# /value/
		# The value of the newly included instant.
	# /reference/
		# The instant used when &active is empty.

	# [ Exceptions ]
	# /&core.InvalidEraShape/
		# The upper endpoint is not open.
	"""
	era = active[0]
	libera.require(era, EraType.floating)
	if era[2][0] is not EndpointKind.open:
		raise core.InvalidEraShape("upper endpoint is not open", era)

	closed = libera.close_upper(era, reference)
	return Active((closed, _fill(active[1], closed[2][1], value)))

def close_lower(active:Active, value, reference=0) -> Active:
	"""
	# Include the open lower boundary instant of a floating active
	# sampling &value at that instant.
	"""
	era = active[0]
	libera.require(era, EraType.floating)
	if era[1][0] is not EndpointKind.open:
		raise core.InvalidEraShape("lower endpoint is not open", era)

	closed = libera.close_lower(era, reference)
	return Active((closed, _fill(active[1], closed[1][1], value)))
