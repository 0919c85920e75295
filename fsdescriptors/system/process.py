"""
# Process-wide working directory access.

# The working directory is process state shared by all threads. &fs_chdir changes it
# for the entire process and the caller is responsible for restoring it;
# &fs_working_directory performs the restoration when the context exits.
"""
import os
import contextlib
import logging

from .files import Path
from .descriptors import Directory, NotFound, DescriptorError

logger = logging.getLogger(__name__)

def fs_pwd() -> Directory:
	"""
	# Construct a &Directory instance referring to the current working directory.

	# The returned descriptor is not cached so repeat calls will create a new instance.
	"""
	fs = Directory.adapter
	return Directory(Path.from_absolute(fs.getcwd(), getcwd=fs.getcwd))

def fs_chdir(directory:Directory, *, environ=os.environ) -> Directory:
	"""
	# Update the current working directory and (system/environ)`PWD`.

	# The current working directory is set prior to the environment being updated.
	# Exceptions should not require (system/environ)`PWD` to be reset by the caller.

	# [ Returns ]
	# The working directory prior to the change.

	# [ Exceptions ]
	# /&NotFound/
		# &directory does not exist.
	"""
	previous = fs_pwd()
	if not directory.exists():
		raise NotFound(directory)

	path = str(directory)
	try:
		directory.adapter.chdir(path)
	except OSError as err:
		raise DescriptorError(directory, f"cannot change working directory to '{path}'") from err

	environ['PWD'] = path
	logger.debug("changed working directory from '%s' to '%s'", previous, path)
	return previous

@contextlib.contextmanager
def fs_working_directory(directory:Directory, *, environ=os.environ):
	"""
	# Change the working directory for the duration of the context.

	# The previous working directory is produced on entrance and restored on exit.
	"""
	previous = fs_chdir(directory, environ=environ)
	try:
		yield previous
	finally:
		fs_chdir(previous, environ=environ)
