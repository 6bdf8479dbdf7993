"""
# Exceptions raised when constructing or combining eras and actives.

# All errors are detected eagerly by the combinators; sampling an active never
# raises on behalf of this package.
"""

class Error(Exception):
	"""
	# Base class for era and active construction errors.
	"""

class IncompatibleBoundaryKind(Error):
	"""
	# A sequential join was attempted with endpoints that are not exactly
	# one closed and one open.

	# Arguments are the kinds of the first era's upper endpoint and the
	# second era's lower endpoint.
	"""

class NonFiniteJoin(Error):
	"""
	# A sequential join was attempted at an infinite endpoint.
	"""

class InvalidEraShape(Error):
	"""
	# The endpoints or type of an era are not permitted by the operation.

	# Raised for open endpoints in fixed eras, fixed eras given to floating
	# operations and vice versa, and zero width eras with two open endpoints.
	"""
