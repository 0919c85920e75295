"""
# Filesystem path value type.

# &Path instances are immutable, absolute, and normalized. They are constructed from
# strings that are resolved relative to the current working directory or relative to
# the configured root, and the resolved string is normalized by &..route.core.parse.

# Current working directory related interfaces are provided in &.process.

# [ Elements ]
# /resolutions/
	# The accepted resolution modes.
	# /`'cwd'`/
		# Relative strings are resolved against the current working directory.
	# /`'root'`/
		# All strings, including those with a leading separator, are resolved against the
		# configured root identified by &.adapter.Filesystem.configured_root.
"""
from collections.abc import Sequence
from typing import Optional, Literal
import os
import os.path
import ntpath
import shutil
import tempfile
import contextlib
import functools

from ..route import core
from ..route.core import PathError, InvalidPath, MissingConfiguredRoot, TooManyParentJumps
from ..context.tools import consistency, prefixed
from .adapter import local

Resolution = Literal['cwd', 'root']
resolutions = ('cwd', 'root')

@functools.total_ordering
class Path(object):
	"""
	# Absolute, normalized filesystem path.

	# Equality, ordering, and hashing are performed against the root marker and the
	# segments; comparisons are case sensitive regardless of the host's filesystem.

	# [ Properties ]
	# /drive/
		# The root marker. The empty string for paths starting with a separator,
		# or a drive prefix such as `'C:'`.
	# /points/
		# The tuple of segments following the root marker.
	"""
	__slots__ = ('drive', 'points',)

	_path_separator = os.path.sep

	def __init__(self, drive:str, points:Sequence[str]):
		self.drive = drive
		self.points = tuple(points)

	@classmethod
	def from_path(Class, path:str='.', resolution:Resolution='cwd', *,
			getcwd=local.getcwd, getroot=local.configured_root,
		):
		"""
		# Construct a &Path instance from the given absolute or relative &path.

		# [ Parameters ]
		# /path/
			# The string to resolve. The empty string is equivalent to `'.'`.
		# /resolution/
			# The resolution mode; one of &resolutions.

		# [ Exceptions ]
		# /&InvalidPath/
			# The string contained non-printable characters.
		# /&MissingConfiguredRoot/
			# &resolution was `'root'` and no root was configured.
		# /&TooManyParentJumps/
			# The parent references ascended beyond the root.
		"""
		s = Class._path_separator

		if path == '':
			path = '.'
		elif not core.printable(path):
			raise InvalidPath(path)

		if resolution == 'root':
			root = getroot()
			if root is None:
				raise MissingConfiguredRoot(path)

			context = Class.from_path(root, getcwd=getcwd)
			string = context.fullpath + s + path
		elif resolution == 'cwd':
			if core.is_absolute(path):
				string = path
			else:
				string = getcwd() + s + path
		else:
			raise ValueError(f"unknown resolution mode {resolution!r}; expecting one of {resolutions!r}")

		return Class.from_absolute(string, getcwd=getcwd)

	@classmethod
	def from_absolute(Class, path:str, *, getcwd=local.getcwd):
		"""
		# Construct a &Path from an absolute path string.

		# Systems using backslash separators take the drive of the
		# working directory when &path does not have one.
		"""
		drive, points = core.parse(path)

		if not drive and Class._path_separator == '\\':
			drive = ntpath.splitdrive(getcwd())[0]

		return Class(drive, points)

	@classmethod
	def from_relative(Class, context, path:str):
		"""
		# Construct a &Path identifying &path relative to the &context &Path.

		# If &path is absolute, &context is ignored.
		"""
		if not core.printable(path):
			raise InvalidPath(path)

		if core.is_absolute(path):
			return Class.from_absolute(path)

		string = context.fullpath + Class._path_separator + path
		return Class.from_absolute(string)

	@classmethod
	def from_listing(Class, context, string:str):
		"""
		# Construct a &Path from &string, a path relative to &context that was produced
		# by the system, such as a &glob match.

		# Only the system's separator divides segments. Other characters, including
		# backslashes on POSIX systems, remain in the names.

		# [ Exceptions ]
		# /&TooManyParentJumps/
			# The parent references in &string ascended beyond the root.
		"""
		points = context.points + tuple(string.split(Class._path_separator))
		return Class(context.drive, core.relative_resolution(points, string))

	@classmethod
	@contextlib.contextmanager
	def fs_tmpdir(Class, *, TemporaryDirectory=tempfile.mkdtemp):
		"""
		# Create a temporary directory at a new path using a context manager.

		# A &Path to the temporary directory is returned on entrance,
		# and the directory and its contents are destroyed on exit.
		"""
		d = os.path.realpath(TemporaryDirectory())
		try:
			yield Class.from_absolute(d)
		finally:
			shutil.rmtree(d)

	def __repr__(self):
		return "(file@%r)" %(self.fullpath,)

	def __str__(self):
		return self.fullpath

	def __fspath__(self) -> str:
		return self.fullpath

	def __hash__(self):
		return hash((self.drive, self.points))

	def __eq__(self, operand):
		if isinstance(operand, Path):
			return self.drive == operand.drive and self.points == operand.points
		return NotImplemented

	def __lt__(self, operand):
		if isinstance(operand, Path):
			return (self.drive, self.points) < (operand.drive, operand.points)
		return NotImplemented

	def __truediv__(self, name:str):
		"""
		# Construct a new &Path identifying the entry &name inside &self.
		"""
		if not core.valid_name(name):
			raise PathError(name, "not a valid entry name")

		return self.__class__(self.drive, self.points + (name,))

	def entry(self, name:str):
		"""
		# Construct the &Path of a directory entry whose &name was listed by the system.

		# Unlike &__truediv__, the name is not validated; POSIX systems permit
		# backslashes in names and such entries must remain addressable.
		"""
		return self.__class__(self.drive, self.points + (name,))

	def __contains__(self, operand) -> bool:
		return self.contains(operand)

	@property
	def fullpath(self) -> str:
		"""
		# The absolute normalized path string.
		"""
		return core.join(self.drive, self.points, self._path_separator)

	@property
	def identifier(self) -> str:
		"""
		# The final segment of the path; the empty string for roots.
		"""
		if self.points:
			return self.points[-1]
		return ''
	filename = identifier

	@property
	def container(self):
		"""
		# The &Path of the directory containing &self.
		# Roots are their own container.
		"""
		if not self.points:
			return self
		return self.__class__(self.drive, self.points[:-1])

	def is_root(self) -> bool:
		"""
		# Whether the path is equal to its own &container.
		"""
		return not self.points

	def contains(self, path) -> bool:
		"""
		# Whether &path is &self or is inside the directory identified by &self.
		# Containment is determined by comparing segments, not string prefixes.
		"""
		return self.drive == path.drive and prefixed(self.points, path.points)

	def correlate(self, target) -> tuple[int, Sequence[str]]:
		"""
		# The number of ascents from &self and the segments to append
		# in order to arrive at &target.
		"""
		if self.drive != target.drive:
			raise ValueError("paths on distinct drives cannot be correlated")

		cl = consistency(self.points, target.points)
		return (len(self.points) - cl, target.points[cl:])

	def _segment(self, context) -> Optional[Sequence[str]]:
		if not context.contains(self):
			return None
		return self.points[len(context.points):]

	def root_relative(self, *, getcwd=local.getcwd, getroot=local.configured_root) -> Optional[str]:
		"""
		# The path relative to the configured root using forward slashes and a leading slash.

		# &None is returned if no root is configured or &self is not inside it.
		"""
		root = getroot()
		if root is None:
			return None

		rest = self._segment(self.from_path(root, getcwd=getcwd))
		if rest is None:
			return None
		return '/' + '/'.join(rest)

	def relative(self, *, getcwd=local.getcwd) -> Optional[str]:
		"""
		# The path relative to the current working directory, or &None
		# if &self is not inside the working directory.
		"""
		rest = self._segment(self.from_absolute(getcwd(), getcwd=getcwd))
		if rest is None:
			return None
		return self._path_separator.join(rest)

root = Path('', ())
