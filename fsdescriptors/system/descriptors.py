"""
# Typed descriptors for files, directories, and symbolic links.

# A descriptor binds a &.files.Path to the kind of resource expected at that location
# and provides the operations to create, delete, copy, move, and rename it. Descriptors
# exist independently of the resources they identify; constructing one does not touch
# the filesystem beyond checking that an existing entry is of the expected type.

# Operations consult the &.adapter.Filesystem for existence and type before mutating.
# These checks are not atomic with respect to the mutation that follows; other processes
# manipulating the same paths can cause the mutation to fail after the checks pass.
# Descriptor instances are not synchronized and must not be shared across threads
# without external serialization.

# [ Elements ]
# /kind_names/
	# Display names for descriptor types used in exception messages.
# /orders/
	# The orderings accepted by &Directory.list_entries.
"""
from abc import ABCMeta, abstractmethod
from collections.abc import Iterator
from typing import Optional
import logging

from ..route import core
from .files import Path
from .adapter import local, timestamp_fields

logger = logging.getLogger(__name__)

kind_names = {
	'data': 'File',
	'directory': 'Directory',
	'link': 'Symbolic link',
	None: 'Descriptor',
}

orders = ('ascending', 'descending', 'none')

class DescriptorError(Exception):
	"""
	# Exception raised when an operation on a descriptor could not be performed.

	# The exception holds the path and type of the descriptor at the time of the failure
	# rather than the descriptor itself. Operating system errors are available
	# as the `__cause__`.

	# [ Properties ]
	# /fs_path/
		# The &Path of the subject descriptor.
	# /fs_type/
		# The type code of the subject descriptor; `'data'`, `'directory'`, or `'link'`.
	# /d_violation/
		# The kind of failure.
		# /`'failure'`/
			# The operating system could not perform the operation.
		# /`'void'`/
			# The resource did not exist.
		# /`'exists'`/
			# The destination of the operation was already occupied.
		# /`'argument'`/
			# A name or relocation target was not acceptable.
		# /`'type'`/
			# An existing entry did not match the descriptor's type.
		# /`'root'`/
			# The operation cannot be applied to a root.
	# /d_message/
		# Description of the failure.
	"""
	d_violation = 'failure'

	def __init__(self, descriptor, message:Optional[str]=None):
		self.fs_path = descriptor.fs_path
		self.fs_type = descriptor.fs_type
		self.d_message = message or self.d_default()
		super().__init__(self.d_message)

	@property
	def d_kind(self) -> str:
		return kind_names.get(self.fs_type, kind_names[None])

	def d_default(self) -> str:
		return f"{self.d_kind} '{self.fs_path}' cannot be operated on"

	def __str__(self):
		return f"{self.d_message}\nPATH[{self.fs_type}]: {self.fs_path!s}"

class NotFound(DescriptorError):
	d_violation = 'void'

	def d_default(self):
		return f"{self.d_kind} '{self.fs_path}' does not exist"

class AlreadyExists(DescriptorError):
	d_violation = 'exists'

	def d_default(self):
		return f"{self.d_kind} '{self.fs_path}' already exists"

class InvalidArgument(DescriptorError, ValueError):
	d_violation = 'argument'

	def d_default(self):
		return f"invalid argument given to {self.d_kind.lower()} '{self.fs_path}'"

class EntryTypeMismatch(InvalidArgument):
	d_violation = 'type'

	def d_default(self):
		return f"'{self.fs_path}' is not a {self.d_kind.lower()}"

class RootRenameForbidden(DescriptorError):
	d_violation = 'root'

	def d_default(self):
		return f"cannot rename root '{self.fs_path}'"

def invalid_name(descriptor, name) -> InvalidArgument:
	return InvalidArgument(descriptor,
		f"invalid name {name!r}; names cannot be empty, relative accessors, "
		"or contain separators or non-printable characters"
	)

class Descriptor(metaclass=ABCMeta):
	"""
	# Base class of the descriptor types providing the operations common to all of them.

	# [ Properties ]
	# /fs_path/
		# The current location of the resource. Replaced, never modified,
		# after a successful rename or move.
	# /fs_type/
		# The type code identifying the kind of descriptor.
	# /adapter/
		# The &.adapter.Filesystem used to perform queries and mutations.
	"""
	__slots__ = ('fs_path',)

	fs_type:Optional[str] = None
	adapter = local

	# Whether metadata queries follow symbolic links.
	_fs_follow = True

	def __init__(self, path, resolution='cwd'):
		"""
		# Create a descriptor identifying &path.

		# [ Parameters ]
		# /path/
			# A &Path instance or a string resolved using &resolution.
		# /resolution/
			# The resolution mode used when &path is a string; see &.files.resolutions.

		# [ Exceptions ]
		# /&EntryTypeMismatch/
			# An entry of a different type is present at the path.
		"""
		if isinstance(path, Path):
			self.fs_path = path
		else:
			fs = self.adapter
			self.fs_path = Path.from_path(path, resolution, getcwd=fs.getcwd, getroot=fs.configured_root)

		conflict = self._fs_conflict()
		if conflict is not None:
			raise EntryTypeMismatch(self,
				f"cannot instantiate {self.__class__.__name__}: '{self.fs_path}' is a {conflict} file"
			)

	def __str__(self):
		return self.fs_path.fullpath

	def __fspath__(self) -> str:
		return self.fs_path.fullpath

	def __repr__(self):
		return "%s(%r)" %(self.__class__.__name__, self.fs_path.fullpath)

	def __eq__(self, operand):
		if isinstance(operand, Descriptor):
			return self.__class__ is operand.__class__ and self.fs_path == operand.fs_path
		return NotImplemented

	# Mutable path; not hashable.
	__hash__ = None

	@abstractmethod
	def _fs_conflict(self) -> Optional[str]:
		"""
		# The type of the entry at &fs_path if it conflicts with the descriptor's type.
		"""
		raise NotImplementedError

	@abstractmethod
	def exists(self) -> bool:
		"""
		# Whether an entry of the expected type is present at &fs_path.
		"""
		raise NotImplementedError

	@abstractmethod
	def create(self) -> None:
		raise NotImplementedError

	@abstractmethod
	def delete(self) -> None:
		raise NotImplementedError

	@abstractmethod
	def copy(self, directory:'Directory', name:Optional[str]=None) -> 'Descriptor':
		raise NotImplementedError

	@abstractmethod
	def move(self, directory:'Directory', name:Optional[str]=None) -> None:
		raise NotImplementedError

	@abstractmethod
	def get_size(self) -> int:
		raise NotImplementedError

	def get_name(self) -> str:
		"""
		# The final segment of &fs_path.
		"""
		return self.fs_path.identifier

	def get_path(self) -> Path:
		return self.fs_path

	def get_parent(self) -> Optional['Directory']:
		"""
		# The &Directory containing the resource, or &None if &fs_path is a root.
		"""
		if self.fs_path.is_root():
			return None
		return Directory(self.fs_path.container)

	def rename(self, name:str) -> Optional[str]:
		"""
		# Change the name of the resource within its directory.

		# If the resource does not exist, only &fs_path is updated.

		# [ Returns ]
		# The previous name, or &None if &name is the current name.

		# [ Exceptions ]
		# /&InvalidArgument/
			# &name is not a valid entry name.
		# /&RootRenameForbidden/
			# The descriptor identifies a root.
		# /&AlreadyExists/
			# An entry named &name already exists in the directory.
		"""
		previous = self.get_name()
		if name == previous:
			logger.debug("skipped rename of '%s'; name is unchanged", self)
			return None

		if not core.valid_name(name):
			raise invalid_name(self, name)

		if self.fs_path.is_root():
			raise RootRenameForbidden(self)

		destination = self.fs_path.container / name
		if self.adapter.lexists(destination):
			raise AlreadyExists(self,
				f"cannot rename '{self}' to {name!r}; an entry with this name already exists"
			)

		if self.exists():
			try:
				self.adapter.rename(self.fs_path, destination)
			except OSError as err:
				raise DescriptorError(self, f"cannot rename '{self}' to {name!r}") from err

		logger.debug("renamed '%s' to %r", self, name)
		self.fs_path = destination
		return previous

	def get_timestamp(self, kind:str='modified') -> int:
		"""
		# Retrieve a timestamp of the resource in seconds since the epoch.

		# [ Parameters ]
		# /kind/
			# One of `'modified'`, `'accessed'`, or `'changed'`.
		"""
		if kind not in timestamp_fields:
			raise InvalidArgument(self, f"unknown timestamp kind {kind!r}")

		if not self.exists():
			raise NotFound(self)

		try:
			st = self.adapter.status(self.fs_path, follow=self._fs_follow)
		except OSError as err:
			raise DescriptorError(self, f"cannot get {kind} time of '{self}'") from err

		return st.timestamp(kind)

	def get_last_modified(self) -> int:
		return self.get_timestamp('modified')

	def get_last_accessed(self) -> int:
		return self.get_timestamp('accessed')

	def _fs_relocation_check(self, destination:Path) -> None:
		"""
		# Additional constraints on the destination of a copy or move.
		"""
		pass

	def _fs_preflight(self, directory:'Directory', name:Optional[str]) -> Optional[Path]:
		"""
		# Validate a copy or move of &self into &directory.

		# [ Returns ]
		# The destination &Path, or &None if the destination is the current location.
		"""
		if not directory.exists():
			raise NotFound(directory)

		if not self.exists():
			raise NotFound(self)

		if name is None:
			name = self.get_name()
		if not core.valid_name(name):
			raise invalid_name(self, name)

		destination = directory.fs_path / name
		if destination == self.fs_path:
			return None

		self._fs_relocation_check(destination)

		if self.adapter.lexists(destination):
			raise AlreadyExists(self,
				f"cannot relocate '{self}' to '{destination}'; an entry with this name already exists"
			)

		return destination

	def _fs_move(self, directory, name) -> None:
		destination = self._fs_preflight(directory, name)
		if destination is None:
			logger.debug("skipped move of '%s'; destination is the current location", self)
			return

		try:
			self.adapter.rename(self.fs_path, destination)
		except OSError as err:
			raise DescriptorError(self, f"cannot move '{self}' to '{destination}'") from err

		logger.debug("moved '%s' to '%s'", self, destination)
		self.fs_path = destination

def typed(path:Path, *, adapter=local) -> Descriptor:
	"""
	# Construct the descriptor matching the type of the entry at &path.

	# Links are not followed; absent entries are represented by &File.
	"""
	t = adapter.fs_type(path, follow=False)
	if t == 'link':
		return Link(path)
	elif t == 'directory':
		return Directory(path)
	else:
		return File(path)

class File(Descriptor):
	"""
	# Descriptor for regular data files.

	# Special files, pipes, sockets, and devices, are also accepted;
	# only directories conflict with a &File.
	"""
	__slots__ = ()
	fs_type = 'data'

	def _fs_conflict(self):
		t = self.adapter.fs_type(self.fs_path)
		return t if t == 'directory' else None

	def exists(self) -> bool:
		return self.adapter.fs_type(self.fs_path) not in ('void', 'directory')

	def create(self) -> None:
		"""
		# Create an empty file if nothing is present.
		# Leading directories are not created.
		"""
		if self.exists():
			logger.debug("skipped creation of '%s'; file exists", self)
			return

		try:
			self.adapter.make_file(self.fs_path)
		except OSError as err:
			raise DescriptorError(self, f"cannot create file '{self}'") from err

		logger.debug("created file '%s'", self)

	def delete(self) -> None:
		if not self.exists():
			raise NotFound(self)

		try:
			self.adapter.remove_file(self.fs_path)
		except OSError as err:
			raise DescriptorError(self, f"cannot delete file '{self}'") from err

		logger.debug("deleted file '%s'", self)

	def get_size(self) -> int:
		if not self.exists():
			raise NotFound(self)

		try:
			return self.adapter.size(self.fs_path)
		except OSError as err:
			raise DescriptorError(self, f"cannot retrieve size of '{self}'") from err

	def copy(self, directory:'Directory', name:Optional[str]=None) -> 'File':
		"""
		# Copy the file's content into &directory.

		# [ Returns ]
		# The &File at the destination; &self if the destination is the current location.
		"""
		destination = self._fs_preflight(directory, name)
		if destination is None:
			return self

		try:
			self.adapter.copy_file(self.fs_path, destination)
		except OSError as err:
			raise DescriptorError(self, f"cannot copy '{self}' to '{destination}'") from err

		logger.debug("copied file '%s' to '%s'", self, destination)
		return self.__class__(destination)

	def move(self, directory:'Directory', name:Optional[str]=None) -> None:
		"""
		# Rename the file into &directory and update &fs_path.
		"""
		self._fs_move(directory, name)

	def hard_link(self, name:str) -> 'File':
		"""
		# Create a hard link to the file named &name in the same directory.

		# [ Returns ]
		# The &File identifying the new link.
		"""
		if not core.valid_name(name):
			raise invalid_name(self, name)

		if not self.exists():
			raise NotFound(self)

		if self.fs_path.is_root():
			raise RootRenameForbidden(self, f"cannot link root '{self}'")

		destination = self.fs_path.container / name
		if self.adapter.lexists(destination):
			raise AlreadyExists(self,
				f"cannot link '{self}' as {name!r}; an entry with this name already exists"
			)

		try:
			self.adapter.make_hard_link(self.fs_path, destination)
		except OSError as err:
			raise DescriptorError(self, f"cannot link '{self}' as {name!r}") from err

		logger.debug("linked '%s' as %r", self, name)
		return self.__class__(destination)

class Directory(Descriptor):
	"""
	# Descriptor for directories providing the recursive tree operations.

	# Symbolic links to directories are not directories; they are
	# represented by &Link and instantiating a &Directory over one fails.

	# The tree operations observe the directories as a sequence of independent
	# listings; entries added or removed concurrently may or may not be seen.

	# [ Properties ]
	# /default_order/
		# The ordering used by &list_entries when none is given.
	"""
	__slots__ = ()
	fs_type = 'directory'
	default_order = 'ascending'

	def _fs_conflict(self):
		# Links are not followed.
		t = self.adapter.fs_type(self.fs_path, follow=False)
		return t if t not in ('void', 'directory') else None

	def exists(self) -> bool:
		return self.adapter.fs_type(self.fs_path, follow=False) == 'directory'

	def __iter__(self) -> Iterator[Descriptor]:
		"""
		# Produce a typed descriptor for each entry in the directory.

		# The directory is listed each time iteration begins.
		"""
		path = self.fs_path
		for name in self.list_entries():
			yield typed(path.entry(name), adapter=self.adapter)

	@classmethod
	def cwd(Class) -> 'Directory':
		"""
		# The current working directory of the process.
		"""
		from . import process
		return process.fs_pwd()

	@classmethod
	def chdir(Class, directory:'Directory') -> 'Directory':
		"""
		# Change the working directory of the process to &directory.

		# [ Returns ]
		# The previous working directory.
		"""
		from . import process
		return process.fs_chdir(directory)

	def create(self) -> None:
		"""
		# Create the directory and any missing leading directories.
		"""
		if self.exists():
			logger.debug("skipped creation of '%s'; directory exists", self)
			return

		try:
			self.adapter.make_directory(self.fs_path)
		except OSError as err:
			raise DescriptorError(self, f"cannot create directory '{self}'") from err

		logger.debug("created directory '%s'", self)

	def list_entries(self, order:Optional[str]=None) -> list[str]:
		"""
		# The names of the entries in the directory.

		# [ Parameters ]
		# /order/
			# `'ascending'`, `'descending'`, or `'none'` for the order produced by
			# the system. Defaults to &default_order.
		"""
		order = order or self.default_order
		if order not in orders:
			raise InvalidArgument(self, f"unknown order {order!r}; expecting one of {orders!r}")

		if not self.exists():
			raise NotFound(self)

		try:
			names = [x for x in self.adapter.list_directory(self.fs_path) if x not in ('.', '..')]
		except OSError as err:
			raise DescriptorError(self, f"cannot list directory '{self}'") from err

		if order == 'ascending':
			names.sort()
		elif order == 'descending':
			names.sort(reverse=True)

		return names

	def is_empty(self) -> bool:
		return not self.list_entries('none')

	def clear(self) -> None:
		"""
		# Delete all the entries in the directory.

		# Links are removed without being followed. The operation stops at the first
		# entry that cannot be deleted and entries removed before it remain removed.
		"""
		path = self.fs_path
		for name in self.list_entries():
			entry = typed(path.entry(name), adapter=self.adapter)
			try:
				entry.delete()
			except DescriptorError as err:
				raise DescriptorError(self, f"cannot clear directory '{self}'; cause: '{entry}'") from err

		logger.debug("cleared directory '%s'", self)

	def delete(self) -> None:
		"""
		# Delete the directory and its contents.
		"""
		self.clear()

		try:
			self.adapter.remove_directory(self.fs_path)
		except OSError as err:
			raise DescriptorError(self, f"cannot delete directory '{self}'") from err

		logger.debug("deleted directory '%s'", self)

	def _fs_relocation_check(self, destination):
		if self.fs_path.contains(destination):
			raise InvalidArgument(self, f"cannot relocate '{self}' inside itself: '{destination}'")

	def copy(self, directory:'Directory', name:Optional[str]=None) -> 'Directory':
		"""
		# Replicate the directory tree inside &directory.

		# Subdirectories, including empty ones, are recreated, data files are copied,
		# and links are recreated with the same target. All checks are performed before
		# the first entry is created.

		# [ Returns ]
		# The &Directory at the destination; &self if the destination is the current location.

		# [ Exceptions ]
		# /&InvalidArgument/
			# The destination is inside the directory.
		# /&DescriptorError/
			# An entry could not be replicated. The message identifies the entry.
		"""
		destination = self._fs_preflight(directory, name)
		if destination is None:
			return self

		fs = self.adapter
		try:
			fs.make_directory(destination)
		except OSError as err:
			raise DescriptorError(self, f"cannot create directory '{destination}'") from err

		stack = [(self.fs_path, destination)]
		while stack:
			src, dst = stack.pop()
			try:
				names = fs.list_directory(src)
			except OSError as err:
				raise DescriptorError(self, f"cannot list directory '{src}'") from err

			for name in names:
				s = src.entry(name)
				d = dst.entry(name)
				t = fs.fs_type(s, follow=False)
				try:
					if t == 'directory':
						fs.make_directory(d)
						stack.append((s, d))
					elif t == 'link':
						fs.make_link(fs.read_link(s), d)
					else:
						fs.copy_file(s, d)
				except OSError as err:
					raise DescriptorError(self, f"cannot copy entry '{s}' to '{d}'") from err

		logger.debug("copied directory '%s' to '%s'", self, destination)
		return self.__class__(destination)

	def move(self, directory:'Directory', name:Optional[str]=None) -> None:
		"""
		# Rename the directory into &directory and update &fs_path.

		# [ Exceptions ]
		# /&InvalidArgument/
			# The destination is inside the directory.
		"""
		self._fs_move(directory, name)

	def _fs_walk(self) -> Iterator[tuple[Path, list[Path], list[Path]]]:
		"""
		# Produce triples of directories, their subdirectories, and their other entries.

		# Directories are visited depth first in ascending order.
		"""
		if not self.exists():
			raise NotFound(self)

		fs = self.adapter
		stack = [self.fs_path]
		while stack:
			current = stack.pop()
			try:
				names = sorted(fs.list_directory(current))
			except OSError as err:
				raise DescriptorError(self, f"cannot list directory '{current}'") from err

			dirs = []
			leaves = []
			for name in names:
				p = current.entry(name)
				if fs.fs_type(p, follow=False) == 'directory':
					dirs.append(p)
				else:
					leaves.append(p)

			yield current, dirs, leaves
			stack.extend(reversed(dirs))

	def get_all_files(self, include_empty_directories:bool=False) -> list[Path]:
		"""
		# Collect the paths of all the non-directory entries in the tree.
		# Links are included, but not followed.

		# [ Parameters ]
		# /include_empty_directories/
			# Also collect the subdirectories that have no entries.
		"""
		results = []
		for current, dirs, leaves in self._fs_walk():
			if include_empty_directories and not dirs and not leaves and current != self.fs_path:
				results.append(current)
			results.extend(leaves)

		return results

	def get_size(self) -> int:
		"""
		# The sum of the sizes of all the files in the tree.
		# Links are not counted.
		"""
		fs = self.adapter
		total = 0
		for current, dirs, leaves in self._fs_walk():
			for p in leaves:
				try:
					if fs.fs_type(p, follow=False) == 'link':
						continue
					total += fs.size(p, follow=False)
				except OSError as err:
					raise DescriptorError(self, f"cannot retrieve size of '{p}'") from err

		return total

	def glob(self, pattern:str, *, recursive:bool=False, hidden:bool=False) -> list[Descriptor]:
		"""
		# Expand &pattern within the directory.

		# [ Parameters ]
		# /pattern/
			# The &glob pattern relative to the directory.
		# /recursive/
			# Whether `**` matches any number of subdirectories.
		# /hidden/
			# Whether wildcards match names starting with a period.

		# [ Returns ]
		# Typed descriptors for the matches inside the directory in ascending order.
		# The directory itself and its parent are never included.
		"""
		if not self.exists():
			raise NotFound(self)

		path = self.fs_path
		try:
			matches = self.adapter.glob(path, pattern, recursive=recursive, hidden=hidden)
		except OSError as err:
			raise DescriptorError(self, f"cannot expand {pattern!r} in '{self}'") from err

		selected = set()
		for m in matches:
			try:
				p = Path.from_listing(path, m)
			except core.PathError:
				# Above the root.
				continue

			if p == path or not path.contains(p):
				# Self, parent, or outside.
				continue
			selected.add(p)

		return [typed(p, adapter=self.adapter) for p in sorted(selected)]

class Link(Descriptor):
	"""
	# Descriptor for symbolic links.

	# The target of the link is not stored; &read queries the system each time.
	# Links are created with &link rather than &create.
	"""
	__slots__ = ()
	fs_type = 'link'
	_fs_follow = False

	def _fs_conflict(self):
		t = self.adapter.fs_type(self.fs_path, follow=False)
		return t if t not in ('void', 'link') else None

	def exists(self) -> bool:
		"""
		# Whether the link is present; dangling links exist.
		"""
		p = self.fs_path
		return self.adapter.exists(p) or self.adapter.is_link(p)

	def create(self) -> None:
		raise DescriptorError(self, f"cannot create empty link '{self}'; use Link.link(target)")

	def delete(self) -> None:
		"""
		# Remove the link if present.

		# Directory removal is attempted when unlinking fails as some systems
		# represent directory links as directories.
		"""
		if not self.exists():
			logger.debug("skipped deletion of '%s'; link does not exist", self)
			return

		p = self.fs_path
		try:
			self.adapter.remove_file(p)
		except OSError:
			try:
				self.adapter.remove_directory(p)
			except OSError as err:
				raise DescriptorError(self, f"cannot delete link '{self}'") from err

		logger.debug("deleted link '%s'", self)

	def link(self, target:Descriptor, *, relative:bool=False) -> Optional[Descriptor]:
		"""
		# Replace any entry at &fs_path with a symbolic link to &target.

		# [ Parameters ]
		# /target/
			# The descriptor identifying the resource to link to.
		# /relative/
			# Store the target relative to the link's directory.

		# [ Returns ]
		# The descriptor previously resolved by the link, or &None if
		# no link was present or it was dangling.
		"""
		fs = self.adapter
		p = self.fs_path

		previous = self.read() if fs.is_link(p) else None
		self.delete()

		if relative:
			ascent, segment = p.container.correlate(target.fs_path)
			string = '/'.join(['..'] * ascent + list(segment)) or '.'
		else:
			string = target.fs_path.fullpath

		try:
			fs.make_link(string, p)
		except OSError as err:
			raise DescriptorError(self, f"cannot link '{self}' to '{target}'") from err

		logger.debug("linked '%s' to %r", self, string)
		return previous

	def read(self) -> Optional[Descriptor]:
		"""
		# Resolve one level of indirection.

		# [ Returns ]
		# A &File, &Directory, or &Link for the link's target, or
		# &None if the target does not exist.
		"""
		fs = self.adapter
		try:
			string = fs.read_link(self.fs_path)
		except OSError as err:
			raise DescriptorError(self, f"cannot read link '{self}'") from err

		try:
			target = Path.from_relative(self.fs_path.container, string)
		except core.PathError as err:
			raise DescriptorError(self, f"cannot resolve target {string!r} of link '{self}'") from err

		if not fs.exists(target):
			return None

		return typed(target, adapter=fs)

	def get_size(self) -> int:
		"""
		# The size of the link's target.
		"""
		if not self.exists():
			raise NotFound(self)

		try:
			return self.adapter.size(self.fs_path)
		except OSError as err:
			raise DescriptorError(self, f"cannot retrieve size for link '{self}'") from err

	def copy(self, directory:'Directory', name:Optional[str]=None) -> 'Link':
		"""
		# Recreate the link, not its target, inside &directory.
		"""
		destination = self._fs_preflight(directory, name)
		if destination is None:
			return self

		fs = self.adapter
		try:
			fs.make_link(fs.read_link(self.fs_path), destination)
		except OSError as err:
			raise DescriptorError(self, f"cannot copy link '{self}' to '{destination}'") from err

		logger.debug("copied link '%s' to '%s'", self, destination)
		return self.__class__(destination)

	def move(self, directory:'Directory', name:Optional[str]=None) -> None:
		self._fs_move(directory, name)
