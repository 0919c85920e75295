"""
# Function and iterator tools used by local projects.
"""
import functools
import itertools

cachedcalls = functools.lru_cache

def consistency(*iterables,
		takewhile=itertools.takewhile,
		zip=zip, sum=sum, len=len, set=set
	) -> int:
	"""
	# Return the level of consistency among the elements produced by the given &iterables.
	# The counting stops when an element is not equal to the others at the same index.

	# More commonly, the common prefix depth or length of all the given iterables.
	# Elements must be hashable; equality is indirectly performed by forming a set.
	"""
	return sum(
		takewhile(
			(1).__eq__,
			(len(set(x)) for x in zip(*iterables))
		)
	)

def prefixed(prefix, sequence) -> bool:
	"""
	# Whether &sequence starts with every element of &prefix.

	# Used to identify containment of segment sequences without
	# the string level ambiguity of `/var/www` and `/var/www2`.
	"""
	n = len(prefix)
	if n > len(sequence):
		return False
	return consistency(prefix, sequence) == n
