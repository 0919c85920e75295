"""
# Check working directory access of &.process.
"""
import os
from .. import process as lib
from ..descriptors import Directory, NotFound
from ..files import Path

def tmp(test):
	t = test.exits.enter_context(Path.fs_tmpdir())
	# Restore the working directory before the temporary is removed.
	test.exits.callback(os.chdir, os.getcwd())
	return t

def test_fs_pwd(test):
	t = tmp(test)
	os.chdir(str(t))
	d = lib.fs_pwd()
	test.isinstance(d, Directory)
	test/d.fs_path == t
	test/(lib.fs_pwd() is d) == False

def test_fs_chdir(test):
	t = tmp(test)
	os.chdir(str(t))
	d = Directory(t / 'sub')
	d.create()

	environ = {}
	previous = lib.fs_chdir(d, environ=environ)
	test/previous == Directory(t)
	test/lib.fs_pwd() == d
	test/environ['PWD'] == d.fs_path.fullpath

def test_fs_chdir_absent(test):
	t = tmp(test)
	os.chdir(str(t))
	environ = {}
	test/NotFound ^ (lambda: lib.fs_chdir(Directory(t / 'void'), environ=environ))
	test/environ == {}
	test/lib.fs_pwd() == Directory(t)

def test_fs_working_directory(test):
	t = tmp(test)
	os.chdir(str(t))
	d = Directory(t / 'sub')
	d.create()

	environ = {}
	with lib.fs_working_directory(d, environ=environ) as previous:
		test/previous == Directory(t)
		test/lib.fs_pwd() == d
		test/Path.from_path('file') == d.fs_path / 'file'

	test/lib.fs_pwd() == Directory(t)
	test/environ['PWD'] == t.fullpath

def test_Directory_cwd(test, monkeypatch):
	t = tmp(test)
	os.chdir(str(t))
	d = Directory(t / 'sub')
	d.create()

	test/Directory.cwd() == Directory(t)
	monkeypatch.setenv('PWD', t.fullpath)
	test/Directory.chdir(d) == Directory(t)
	test/Directory.cwd() == d
	test/os.environ['PWD'] == d.fs_path.fullpath
