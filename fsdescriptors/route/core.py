"""
# String level path algebra used by &..system.files.Path.

# Input strings are partitioned into a root marker and a sequence of
# segments, and the relative accessors, `.` and `..`, are resolved. Nothing here
# consults the filesystem; the working directory and configured root are
# incorporated by the caller before &parse is applied.

# [ Elements ]
# /separators/
	# The characters accepted as separators in input strings.
	# Runs of any mixture are treated as a single separator.
"""
import re
from collections.abc import Iterable, Sequence

from ..context.tools import cachedcalls

separators = '/\\'

_separator_runs = re.compile(r'[/\\]+')
_absolute = re.compile(r'^(?:[/\\]|[A-Za-z]+:(?:[/\\]|$))')
_drive = re.compile(r'^[A-Za-z]+:$')

class PathError(ValueError):
	"""
	# Exception raised when a string cannot be interpreted as a path.

	# [ Properties ]
	# /p_string/
		# The string that could not be interpreted.
	# /p_violation/
		# The kind of violation that occurred.
		# /`'printable'`/
			# The string contained non-printable characters.
		# /`'root'`/
			# Resolution against the configured root was requested,
			# but no root was configured.
		# /`'overflow'`/
			# The parent references ascended beyond the root.
	"""
	p_violation = None
	p_default = "string could not be interpreted as a path"

	def __init__(self, string, description=None):
		super().__init__(string, description)
		self.p_string = string
		self.p_description = description or self.p_default

	def __str__(self):
		return f"{self.p_description}\nSTRING: {self.p_string!r}"

class InvalidPath(PathError):
	p_violation = 'printable'
	p_default = "path cannot contain non-printable characters"

class MissingConfiguredRoot(PathError):
	p_violation = 'root'
	p_default = "root resolution requested, but no root is configured"

class TooManyParentJumps(PathError):
	p_violation = 'overflow'
	p_default = "path has too many parent jumps"

def printable(string:str) -> bool:
	return string.isprintable()

def is_absolute(string:str) -> bool:
	"""
	# Whether &string starts with a separator or a drive prefix
	# followed by a separator.
	"""
	return _absolute.match(string) is not None

def is_drive(segment:str) -> bool:
	return _drive.match(segment) is not None

def valid_name(name:str) -> bool:
	"""
	# Whether &name can identify an entry inside a directory.

	# Empty strings, the relative accessors, and strings containing
	# separators or non-printable characters are rejected.
	"""
	if not name or name in ('.', '..'):
		return False
	if not name.isprintable():
		return False
	for x in separators:
		if x in name:
			return False
	return True

def relative_resolution(points:Iterable[str], string:str='') -> list[str]:
	"""
	# Resolve the relative accessors within &points.

	# Empty and `.` points are dropped and `..` removes the last retained point.

	# [ Exceptions ]
	# /&TooManyParentJumps/
		# Raised when a `..` point is found and nothing remains to be removed.
		# The resolution does not clamp at the root.
	"""
	r = []
	add = r.append

	for x in points:
		if x == '' or x == '.':
			continue
		elif x == '..':
			if not r:
				raise TooManyParentJumps(string)
			del r[-1]
		else:
			add(x)

	return r

def partition(string:str) -> tuple[str, list[str]]:
	"""
	# Split an absolute path string into its root marker and remaining segments.

	# The root marker is the empty string for paths starting with a separator,
	# or the drive prefix, `'C:'`, for drive qualified paths.
	"""
	parts = _separator_runs.split(string)
	if parts and is_drive(parts[0]):
		return parts[0], parts[1:]
	elif parts and parts[0] == '':
		return '', parts[1:]

	# Not absolute; caller is expected to resolve first.
	raise PathError(string, "path is not absolute")

@cachedcalls(64)
def parse(string:str) -> tuple[str, tuple[str, ...]]:
	"""
	# Partition and resolve the absolute path &string.

	# [ Returns ]
	# Pair consisting of the root marker and the tuple of retained segments.
	"""
	root, points = partition(string)
	return root, tuple(relative_resolution(points, string))

def join(root:str, points:Sequence[str], separator:str='/') -> str:
	"""
	# Reassemble a root marker and segments into a path string.

	# Only a bare root carries a trailing separator.
	"""
	if not points:
		return root + separator
	return separator.join((root, *points))
