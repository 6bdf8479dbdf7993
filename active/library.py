"""
# Primary public module.

# Provides access to the endpoint, era, and active combinators along with
# &Activity, the wrapper that hides the endpoint kinds of an active so that
# actives of any shape can be combined with a single operator.

#!/pl/python
	from active import library as libactive

	fade = libactive.Active((libactive.between(0, 10), (lambda t: t / 10)))
	color = libactive.constant(255, 5, 15)

	dimmed = libactive.apply(fade.map(lambda x: (lambda c: c * x)), color)
	assert dimmed.era == libactive.between(5, 10)

# [ Elements ]

# /Activity/
	# Existential &Active exposing only its &EraType.
# /constant/
	# A fixed active producing a value on a finite closed era.
# /float_upper/
	# Float a fixed active and open its upper endpoint.
# /float_lower/
	# Float a fixed active and open its lower endpoint.
# /shift/
	# Translate endpoints, eras, actives, and containers of them in time.
"""
import collections.abc
import functools
import operator
import typing

from .core import Error, IncompatibleBoundaryKind, NonFiniteJoin, InvalidEraShape
from .clock import Time, Duration, to_time, from_time, to_duration, from_duration
from .endpoint import Endpoint, EndpointKind
from .endpoint import max_lower, min_upper, compatible, to_open, to_close, choose
from .era import Era, EraType
from .era import all_time, empty, make_fixed, make_floating, between
from .era import intersect, sequence, float_era
from .value import Active
from .value import pure_active, apply, parallel, sequential, float_active
from .value import open_upper, open_lower, close_upper, close_lower

from . import era as libera
from . import value as libvalue

fixed = EraType.fixed
floating = EraType.floating

def constant(value, start, stop) -> Active:
	"""
	# Create a fixed active producing &value from &start to &stop inclusive.
	"""
	return Active((between(start, stop), (lambda pit: value)))

def float_upper(active:Active) -> Active:
	"""
	# Float &active and exclude its upper boundary instant so that it can
	# be followed by an active with a closed lower endpoint.
	"""
	return open_upper(float_active(active))

def float_lower(active:Active) -> Active:
	"""
	# Float &active and exclude its lower boundary instant so that it can
	# follow an active with a closed upper endpoint.
	"""
	return open_lower(float_active(active))

class Activity(object):
	"""
	# An &Active whose endpoint kinds are not exposed.

	# Only the &EraType is consulted when activities are combined: fixed
	# activities are composed with &parallel and floating activities with
	# &sequential. Endpoint compatibility is checked when the combination
	# is performed.

	#!/pl/python
		x = Activity(float_upper(constant('x', 0, 3)))
		y = Activity(float_active(constant('y', 0, 2)))
		xy = x + y
	"""
	__slots__ = ('_active',)

	def __init__(self, active:Active):
		self._active = active

	@classmethod
	def pure(Class, value, type:EraType=EraType.fixed):
		"""
		# A bi-infinite activity constantly producing &value.
		"""
		return Class(pure_active(value, type))

	@classmethod
	def identity(Class, value, type:EraType=EraType.fixed, shape=None):
		"""
		# The identity of &combine.

		# For fixed activities, this is the bi-infinite constant &value, where
		# &value should be the identity of the combining operator. For floating
		# activities, this is the empty era of the given &shape whose sample
		# produces &value; it is an identity for activities with the same shape.

		# [ Exceptions ]
		# /&InvalidEraShape/
			# A &shape was given for a fixed identity, or a floating &shape
			# is not half open.
		"""
		if type is EraType.fixed:
			if shape is not None:
				raise InvalidEraShape("fixed identities have no shape", shape)
			return Class.pure(value, type)
		return Class(Active((empty(type, shape), (lambda pit: value))))

	@property
	def type(self) -> EraType:
		return self._active[0][0]

	def __call__(self, pit):
		return self._active[1](pit)

	def __repr__(self):
		return f"Activity.{self.type.name}({self._active[0]})"

	def with_active(self, continuation:typing.Callable):
		"""
		# Call &continuation with the wrapped &Active.
		"""
		return continuation(self._active)

	def on_active(self, transform:typing.Callable) -> 'Activity':
		"""
		# Replace the wrapped &Active with the result of &transform.
		"""
		return self.__class__(transform(self._active))

	def combine(self, operand:'Activity', combine=operator.add) -> 'Activity':
		"""
		# Compose with &operand in parallel when fixed, or sequentially when floating.

		# [ Parameters ]
		# /operand/
			# The activity of the same &EraType to combine with.
		# /combine/
			# The operator used to combine values of fixed activities.

		# [ Exceptions ]
		# /&InvalidEraShape/
			# The &EraType of &operand differs.
		"""
		if self.type is not operand.type:
			raise InvalidEraShape("activities of different era types", self.type, operand.type)

		if self.type is EraType.fixed:
			return self.__class__(parallel(self._active, operand._active, combine))
		else:
			return self.__class__(sequential(self._active, operand._active))

	def __add__(self, operand):
		if not isinstance(operand, Activity):
			return NotImplemented
		return self.combine(operand)

	def apply(self, operand:'Activity') -> 'Activity':
		"""
		# Apply the fixed activity's functions to the values of &operand pointwise.
		"""
		return self.__class__(apply(self._active, operand._active))

	def map(self, transform:typing.Callable) -> 'Activity':
		return self.__class__(self._active.map(transform))

	def shift(self, measure) -> 'Activity':
		return self.__class__(libvalue.shift(measure, self._active))

	def float(self) -> 'Activity':
		"""
		# Convert a fixed activity into a floating one.
		"""
		return self.__class__(float_active(self._active))

	@classmethod
	def concatenate(Class, activities:typing.Iterable['Activity'], identity=None) -> 'Activity':
		"""
		# Combine the &activities from left to right.

		# [ Parameters ]
		# /activities/
			# The activities to combine; all must have the same &EraType.
		# /identity/
			# The activity to start with, usually one produced by &identity.
			# When &None, &activities must not be empty.

		# [ Exceptions ]
		# /&TypeError/
			# &activities is empty and no &identity was given.
		"""
		if identity is None:
			return functools.reduce(Class.combine, activities)
		return functools.reduce(Class.combine, activities, identity)

@functools.singledispatch
def _shift(subject, measure):
	# Points in time.
	return subject + measure

@_shift.register
def _(subject:type(None), measure):
	return None

@_shift.register
def _(subject:Endpoint, measure):
	return subject.shift(measure)

@_shift.register
def _(subject:Era, measure):
	return libera.shift(measure, subject)

@_shift.register
def _(subject:Active, measure):
	return libvalue.shift(measure, subject)

@_shift.register
def _(subject:Activity, measure):
	return subject.shift(measure)

@_shift.register
def _(subject:collections.abc.Callable, measure):
	return (lambda pit: subject(pit - measure))

@_shift.register
def _(subject:tuple, measure):
	return tuple(_shift(x, measure) for x in subject)

@_shift.register
def _(subject:dict, measure):
	return {k: _shift(v, measure) for k, v in subject.items()}

def shift(measure, subject):
	"""
	# Translate &subject by &measure.

	# Points are moved forward, and endpoints, eras, and actives are
	# translated. Functions of time are composed with the inverse
	# translation. Tuples and dictionary values are shifted elementwise;
	# &None is returned as-is.
	"""
	return _shift(subject, measure)
