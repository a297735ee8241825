"""
# internet provides the parsing of numeric internet address literals into
# family tagged values usable by socket code. It does not perform name
# resolution or any communication; it merely validates the text and packages
# the resolver's answer.

# [ Executables ]

# /&.bin.parse/
	# Parse the address literals given as arguments and print their family,
	# canonical form, and octets.
"""
__factor_type__ = 'project'
