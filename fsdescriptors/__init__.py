"""
# Typed file, directory, and link descriptors over normalized filesystem paths.

# [ Elements ]
# /&.system.files.Path/
	# The absolute, normalized path value type.
# /&.system.descriptors/
	# &File, &Directory, and &Link along with the exceptions raised by their operations.
# /&.system.process/
	# Working directory access.
"""
from .system.files import Path, PathError, InvalidPath, MissingConfiguredRoot, TooManyParentJumps
from .system.descriptors import (
	Descriptor, File, Directory, Link,
	DescriptorError, NotFound, AlreadyExists, InvalidArgument,
	EntryTypeMismatch, RootRenameForbidden,
)
