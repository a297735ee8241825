"""
# Socket support utilities.

# [ Projects ]

# /&.context/
	# Supplemental string operations used by protocol and configuration code.
# /&.internet/
	# Numeric address literal parsing for socket applications.
# /&.test/
	# Contention primitives used by the test modules of the projects.
"""
__factor_type__ = 'context'
__canonical__ = 'sockutil' # canonical package name
