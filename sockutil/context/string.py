"""
# Supplemental string operations.

# The functions are total over their documented domain and never mutate their
# arguments; the trim variants return new strings as &str instances are immutable.
# Degenerate parameters, an empty delimiter given to &split or a negative count
# given to &repeat, raise &ValueError rather than producing an arbitrary result.
"""

def graphic(character:str) -> bool:
	"""
	# Whether the &character is visible; printable and not whitespace.
	"""
	return character.isprintable() and not character.isspace()

# Locale independent; only the ASCII range is mapped.
_ascii_lowercase = str.maketrans({x: x + 32 for x in range(ord('A'), ord('Z') + 1)})

def split(string:str, delimiter:str) -> list[str]:
	"""
	# Cut &string at every non-overlapping occurrence of &delimiter.

	# When the &delimiter does not occur, the result is a single element
	# list containing &string; an empty &string produces `['']`.
	"""
	if not delimiter:
		raise ValueError("empty delimiter cannot split a string")

	return string.split(delimiter)

def join(parts, delimiter:str) -> str:
	"""
	# Concatenate &parts with &delimiter placed strictly between consecutive elements.
	"""
	return delimiter.join(parts)

def ltrim(string:str, graphic=graphic) -> str:
	"""
	# Remove the leading characters that are not &graphic.
	"""
	for i, c in enumerate(string):
		if graphic(c):
			return string[i:]

	return ''

def rtrim(string:str, graphic=graphic) -> str:
	"""
	# Remove the trailing characters that are not &graphic.
	"""
	i = len(string)
	while i:
		if graphic(string[i-1]):
			return string[:i]
		i -= 1

	return ''

def trim(string:str) -> str:
	"""
	# Remove the characters that are not &graphic from both ends of &string.
	"""
	return ltrim(rtrim(string))

def repeat(string:str, count:int) -> str:
	"""
	# Concatenate &string with itself &count times.
	"""
	if count < 0:
		raise ValueError("repeat count must not be negative: %r" %(count,))

	return string * count

def replace(search:str, replacement:str, subject:str) -> str:
	"""
	# Replace every occurrence of &search in &subject with &replacement.

	# The &subject is scanned from left to right and the inserted replacements
	# are not scanned again. An empty &search leaves the &subject unchanged.
	"""
	if not search:
		return subject

	return subject.replace(search, replacement)

def lower(string:str, table=_ascii_lowercase) -> str:
	"""
	# Map the ASCII uppercase letters of &string to lowercase.
	# Characters outside of the ASCII range are not changed.
	"""
	return string.translate(table)
