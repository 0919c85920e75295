"""
# Check the system adapter used by descriptors.
"""
import os
from .. import adapter as lib
from ..files import Path

def tmp(test):
	return test.exits.enter_context(Path.fs_tmpdir())

def test_Filesystem_fs_type(test):
	t = tmp(test)
	fs = lib.local
	os.mkdir(str(t / 'd'))
	with open(str(t / 'f'), 'wb'):
		pass
	os.symlink(str(t / 'void'), str(t / 'dangling'))
	os.symlink(str(t / 'f'), str(t / 'l'))

	test/fs.fs_type(t / 'd') == 'directory'
	test/fs.fs_type(t / 'f') == 'data'
	test/fs.fs_type(t / 'void') == 'void'
	test/fs.fs_type(t / 'f' / 'x') == 'void'
	test/fs.fs_type(t / 'dangling') == 'void'
	test/fs.fs_type(t / 'dangling', follow=False) == 'link'
	test/fs.fs_type(t / 'l') == 'data'
	test/fs.fs_type(t / 'l', follow=False) == 'link'

def test_Filesystem_builtin_names(test):
	"""
	# Annotations in the class body are evaluated against the class namespace;
	# methods must not take the names of the builtins those annotations use.
	"""
	for name in ('list', 'str', 'int', 'bool', 'tuple'):
		test/hasattr(lib.Filesystem, name) == False
	test/lib.Filesystem.glob.__annotations__['return'] == list[str]
	test/lib.Filesystem.list_directory.__annotations__['return'] == list[str]

def test_Filesystem_list_directory(test):
	t = tmp(test)
	os.mkdir(str(t / 'd'))
	with open(str(t / 'f'), 'wb'):
		pass
	test/sorted(lib.local.list_directory(t)) == ['d', 'f']
	test/FileNotFoundError ^ (lambda: lib.local.list_directory(t / 'void'))

def test_Filesystem_configured_root(test):
	fs = lib.Filesystem({})
	test/fs.configured_root() == None
	fs = lib.Filesystem({'DOCUMENT_ROOT': ''})
	test/fs.configured_root() == None
	fs = lib.Filesystem({'DOCUMENT_ROOT': '/srv/www'})
	test/fs.configured_root() == '/srv/www'

def test_Filesystem_make_file(test):
	t = tmp(test)
	fs = lib.local
	fs.make_file(t / 'f')
	test/FileExistsError ^ (lambda: fs.make_file(t / 'f'))
	test/fs.size(t / 'f') == 0

def test_Status(test):
	t = tmp(test)
	with open(str(t / 'f'), 'wb') as f:
		f.write(b'data')
	os.utime(str(t / 'f'), (1000000000, 1200000000))

	st = lib.local.status(t / 'f')
	test/st.size == 4
	test/st.type == 'data'
	test/st.last_accessed == 1000000000
	test/st.timestamp('modified') == 1200000000
	test/st.timestamp('changed') == st.meta_last_modified
