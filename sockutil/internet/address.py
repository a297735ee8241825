"""
# Numeric address literal parsing for Internet Protocol version 4 and 6.

# &parse validates a literal with the system resolver in numeric host mode and
# packages the first candidate into an &IP4 or &IP6 instance. Name lookups are
# never performed; host names are rejected like any other malformed literal.

# [ Types ]

# &NormalizedAddress is the common base of the two concrete address types.
# The class of an instance identifies the layout of its fields:

# /&IP4/
	# Four octets and a `(host, port)` socket address.
# /&IP6/
	# Sixteen octets and a `(host, port, flowinfo, scope_id)` socket address.
"""
import ipaddress
import logging
import socket

log = logging.getLogger(__name__)

class AddressError(ValueError):
	"""
	# Base class for address parsing errors.
	"""

class InvalidAddress(AddressError):
	"""
	# The text given to &parse was not a numeric IPv4 or IPv6 literal.

	# [ Properties ]
	# /address/
		# The rejected text.
	"""

	def __init__(self, address):
		self.address = address
		super().__init__(address)

	def __str__(self):
		return "could not parse the provided address: %r" %(self.address,)

class NormalizedAddress(tuple):
	"""
	# Family tagged binary address.

	# Instances are pairs consisting of the raw octets and the socket address
	# reported by the resolver. Subclasses define the family specific layout.
	"""
	__slots__ = ()

	family = None
	pf_code = None
	size = 0

	@property
	def octets(self) -> bytes:
		"The address in network byte order."
		return self[0]

	@property
	def sockaddr(self) -> tuple:
		"The socket address tuple provided by the resolver."
		return self[1]

	@property
	def interface(self, construct=ipaddress.ip_address):
		"The &ipaddress typed address."
		return construct(self.octets)

	def __str__(self):
		return str(self.interface)

	def __repr__(self):
		return "%s.%s((%r, %r))" %(__name__, self.__class__.__name__, self.octets, self.sockaddr)

class IP4(NormalizedAddress):
	"""
	# Internet Protocol version 4 address.
	"""
	__slots__ = ()

	family = 'ip4'
	pf_code = socket.AF_INET
	size = 4

class IP6(NormalizedAddress):
	"""
	# Internet Protocol version 6 address.
	"""
	__slots__ = ()

	family = 'ip6'
	pf_code = socket.AF_INET6
	size = 16

	@property
	def flowinfo(self) -> int:
		return self.sockaddr[2]

	@property
	def scope_id(self) -> int:
		return self.sockaddr[3]

# Protocol family codes to the supported address types.
families = {
	socket.AF_INET: IP4,
	socket.AF_INET6: IP6,
}

def _candidate(string, resolve):
	# Numeric host only; the resolver must not consult DNS.
	try:
		candidates = resolve(string, None, socket.AF_UNSPEC, 0, 0, socket.AI_NUMERICHOST)
	except (OSError, ValueError) as err:
		raise InvalidAddress(string) from err

	if not candidates:
		raise InvalidAddress(string)

	# First candidate is authoritative.
	return candidates[0]

def parse(string:str, *, resolve=socket.getaddrinfo, families=families) -> NormalizedAddress:
	"""
	# Parse the numeric address literal in &string.

	# [ Parameters ]
	# /string/
		# An IPv4 or IPv6 literal; `'127.0.0.1'` or `'::1'`.
	# /resolve/
		# The resolver to consult. Called with the signature of
		# &socket.getaddrinfo and given the `AI_NUMERICHOST` flag.

	# [ Exceptions ]
	# /&InvalidAddress/
		# The &string was empty, not numeric, malformed, or
		# resolved to an unsupported protocol family.
	"""
	try:
		# The resolver binding truncates at NUL.
		if not string or '\x00' in string:
			raise InvalidAddress(string)

		family, socktype, proto, canonname, sockaddr = _candidate(string, resolve)
		try:
			Type = families[family]
		except KeyError:
			raise InvalidAddress(string) from None

		host = sockaddr[0].partition('%')[0]
		try:
			octets = socket.inet_pton(Type.pf_code, host)
		except (OSError, ValueError) as err:
			raise InvalidAddress(string) from err
	except InvalidAddress:
		log.debug("rejected address literal %r", string)
		raise

	return Type((octets, tuple(sockaddr)))
