"""
# Active values: functions of time restricted to an era of validity.

# [ About ]

# An &.value.Active pairs a total sampling function with an &.era.Era describing
# where the function's values are meaningful. Eras are bounded by
# &.endpoint.Endpoint instances that are either closed, open, or infinite.

# Actives combine in two ways:

# /Parallel/
	# Pointwise combination of two fixed actives over the intersection of their eras.
# /Sequential/
	# Concatenation of two floating actives; the second is translated to begin where
	# the first ends and the shared instant is assigned to exactly one side.

# The surface functionality is provided by &.library:

#!/pl/python
	from active import library as libactive

	x = libactive.float_upper(libactive.constant('x', 0, 3))
	y = libactive.float_active(libactive.constant('y', 0, 2))
	xy = libactive.sequential(x, y)

	assert xy(2.9) == 'x'
	assert xy(3) == 'y'

# [ Boundaries ]

# Fixed eras never carry open endpoints; whether a finite boundary instant belongs
# to a placed value is always decided. Floating eras are templates awaiting
# sequential composition and use open endpoints to mark where a neighbor's closed
# endpoint will be fused.
"""
