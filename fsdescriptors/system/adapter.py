"""
# Operating system filesystem adapter.

# &Filesystem is the narrow interface that &.descriptors and &.files use to reach the
# operating system. The methods are thin wrappers over &os, &shutil, and &glob;
# &OSError instances are propagated unchanged so that callers can convert them into
# descriptor exceptions carrying the affected path.

# [ Elements ]
# /local/
	# The &Filesystem instance used by default.
# /timestamp_fields/
	# Mapping of timestamp kinds to the &Status properties that provide them.
"""
from typing import Optional
import os
import os.path
import stat
import shutil
import glob as globbing

timestamp_fields = {
	'modified': 'last_modified',
	'accessed': 'last_accessed',
	'changed': 'meta_last_modified',
}

class Status(tuple):
	"""
	# File status interface providing symbolic names for the data packed in
	# the system's status record, &system.
	"""
	__slots__ = ()

	_fs_type_map = {
		stat.S_IFIFO: 'pipe',
		stat.S_IFLNK: 'link',
		stat.S_IFREG: 'data',
		stat.S_IFDIR: 'directory',
		stat.S_IFSOCK: 'socket',
		stat.S_IFBLK: 'device',
		stat.S_IFCHR: 'device',
	}

	@property
	def system(self):
		"""
		# The status record produced by the system (&os.stat).
		"""
		return self[0]

	@property
	def size(self) -> int:
		"""
		# Number of bytes contained by the file.
		"""
		return self.system.st_size

	@property
	def type(self, ifmt=stat.S_IFMT) -> str:
		"""
		# /`'directory'`/
			# A file containing other files.
		# /`'data'`/
			# A regular file containing bytes.
		# /`'link'`/
			# Status record of a link to a file.
		# /`'pipe'`/, /`'socket'`/, /`'device'`/
			# Special files.
		"""
		return self._fs_type_map.get(ifmt(self.system.st_mode), 'unknown')

	@property
	def last_modified(self) -> int:
		"""
		# Time of last modification; seconds since the epoch.
		"""
		return int(self.system.st_mtime)

	@property
	def last_accessed(self) -> int:
		"""
		# Time of last access; seconds since the epoch.
		"""
		return int(self.system.st_atime)

	@property
	def meta_last_modified(self) -> int:
		"""
		# Time of last status change; seconds since the epoch.
		"""
		return int(self.system.st_ctime)

	def timestamp(self, kind:str) -> int:
		"""
		# Select the timestamp identified by &kind, a key of &timestamp_fields.
		"""
		return getattr(self, timestamp_fields[kind])

class Filesystem(object):
	"""
	# Access to the filesystem primitives needed by descriptors.

	# [ Properties ]
	# /separator/
		# The canonical separator used when forming path strings.
	# /root_variable/
		# The environment variable holding the configured root.
	"""

	separator = os.path.sep
	root_variable = 'DOCUMENT_ROOT'

	def __init__(self, environ=os.environ):
		self.environ = environ

	# Queries

	def fs_type(self, path, *, follow=True) -> str:
		"""
		# The type of file identified by &path.

		# `'void'` is returned when nothing is present; with &follow,
		# broken links are also `'void'`.
		"""
		try:
			return self.status(path, follow=follow).type
		except (FileNotFoundError, NotADirectoryError):
			return 'void'

	def exists(self, path) -> bool:
		return os.path.exists(path)

	def lexists(self, path) -> bool:
		return os.path.lexists(path)

	def is_link(self, path) -> bool:
		return os.path.islink(path)

	def list_directory(self, path) -> list[str]:
		"""
		# The names of the entries held by the directory at &path in system order.
		"""
		return os.listdir(path)

	def size(self, path, *, follow=True) -> int:
		return self.status(path, follow=follow).size

	def status(self, path, *, follow=True) -> Status:
		return Status((os.stat(path, follow_symlinks=follow),))

	def read_link(self, path) -> str:
		return os.readlink(path)

	def glob(self, directory, pattern:str, *, recursive=False, hidden=False) -> list[str]:
		"""
		# Expand &pattern within &directory.

		# [ Returns ]
		# The matching paths relative to &directory.
		"""
		if hidden:
			return globbing.glob(pattern, root_dir=directory, recursive=recursive, include_hidden=True)
		return globbing.glob(pattern, root_dir=directory, recursive=recursive)

	# Mutations

	def make_directory(self, path):
		"""
		# Create the directory at &path and any missing leading directories.
		"""
		os.makedirs(path)

	def make_file(self, path):
		"""
		# Create an empty data file at &path; fails if anything is present.
		"""
		with open(path, 'xb'):
			pass

	def remove_file(self, path):
		os.unlink(path)

	def remove_directory(self, path):
		os.rmdir(path)

	def rename(self, source, destination):
		os.rename(source, destination)

	def copy_file(self, source, destination):
		shutil.copy(source, destination)

	def make_link(self, target:str, path):
		os.symlink(target, path)

	def make_hard_link(self, source, destination):
		os.link(source, destination, follow_symlinks=False)

	# Process state

	def getcwd(self) -> str:
		return os.getcwd()

	def chdir(self, path):
		os.chdir(path)

	def configured_root(self) -> Optional[str]:
		"""
		# The configured root, or &None when the variable is unset or empty.
		"""
		return self.environ.get(self.root_variable) or None

local = Filesystem()
