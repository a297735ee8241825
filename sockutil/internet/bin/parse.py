"""
# Parse the numeric address literals given as arguments.

# Each accepted literal is printed on its own line as its family, canonical
# form, and octets in hexadecimal. Rejected literals are reported to standard
# error and the remaining arguments are still processed.
"""
import os
import sys

from .. import address

def main(*literals, file=None, error=None) -> int:
	"""
	# [ Parameters ]

	# /literals/
		# The IPv4 or IPv6 literals to parse.

	# [ Returns ]
	# `os.EX_USAGE` when no literals were given, `os.EX_DATAERR` when any
	# literal was rejected, and zero otherwise.
	"""
	if error is None:
		error = sys.stderr

	if not literals:
		error.write("usage: parse address [address ...]\n")
		return os.EX_USAGE

	status = 0
	for x in literals:
		try:
			a = address.parse(x)
		except address.InvalidAddress as err:
			error.write("[!# ERROR: %s]\n" %(err,))
			status = os.EX_DATAERR
			continue

		print(a.family, str(a), a.octets.hex(), file=file)

	return status

if __name__ == '__main__':
	sys.exit(main(*sys.argv[1:]))
