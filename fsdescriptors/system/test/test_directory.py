"""
# Check the tree operations of &.descriptors.Directory.
"""
import os
from .. import descriptors as lib
from ..files import Path

def tmp(test):
	return test.exits.enter_context(Path.fs_tmpdir())

def write(path, data):
	with open(str(path), 'wb') as f:
		f.write(data)

def read(path):
	with open(str(path), 'rb') as f:
		return f.read()

def tree(root:Path):
	"""
	# Construct a depth three tree with an empty directory, a link, and 35 bytes of data.
	"""
	os.makedirs(str(root / 'a' / 'b' / 'c'))
	os.makedirs(str(root / 'empty'))
	write(root / 'top.txt', b'0123456789')
	write(root / 'a' / 'one.txt', b'01234')
	write(root / 'a' / 'b' / 'two.txt', b'0123456789')
	write(root / 'a' / 'b' / 'c' / 'three.txt', b'0123456789')
	os.symlink('top.txt', str(root / 'link'))
	return lib.Directory(root)

def test_Directory_create(test):
	t = tmp(test)
	d = lib.Directory(t / 'x' / 'y' / 'z')
	test/d.exists() == False
	d.create()
	test/d.exists() == True
	test/os.path.isdir(str(t / 'x' / 'y' / 'z')) == True

	# Existing directory.
	d.create()
	test/d.is_empty() == True

def test_Directory_list_entries(test):
	t = tmp(test)
	d = lib.Directory(t)
	for x in ['b', 'c', 'a']:
		write(t / x, b'')

	test/d.list_entries() == ['a', 'b', 'c']
	test/d.list_entries('ascending') == ['a', 'b', 'c']
	test/d.list_entries('descending') == ['c', 'b', 'a']
	test/sorted(d.list_entries('none')) == ['a', 'b', 'c']
	test/lib.InvalidArgument ^ (lambda: d.list_entries('random'))
	test/lib.NotFound ^ (lambda: lib.Directory(t / 'void').list_entries())

def test_Directory_iteration(test):
	t = tmp(test)
	d = tree(t / 'tree')
	entries = list(d)
	test/[x.get_name() for x in entries] == ['a', 'empty', 'link', 'top.txt']
	test/[x.__class__ for x in entries] == [lib.Directory, lib.Directory, lib.Link, lib.File]

	# Listed again for each iteration.
	write(t / 'tree' / 'new', b'')
	test/len(list(d)) == 5

def test_Directory_is_empty(test):
	t = tmp(test)
	d = lib.Directory(t)
	test/d.is_empty() == True
	write(t / 'f', b'')
	test/d.is_empty() == False

def test_Directory_clear(test):
	t = tmp(test)
	outside = t / 'outside'
	write(outside, b'preserved')

	d = tree(t / 'tree')
	os.symlink(str(outside), str(t / 'tree' / 'out'))
	d.clear()
	test/d.exists() == True
	test/d.is_empty() == True

	# Links are removed without following.
	test/read(outside) == b'preserved'

def test_Directory_delete(test):
	t = tmp(test)
	d = tree(t / 'tree')
	d.delete()
	test/d.exists() == False
	test/os.path.lexists(str(t / 'tree')) == False
	test/lib.NotFound ^ d.delete

def test_Directory_get_size(test):
	t = tmp(test)
	d = tree(t / 'tree')
	test/d.get_size() == 35
	test/lib.Directory(t / 'tree' / 'empty').get_size() == 0
	test/lib.NotFound ^ lib.Directory(t / 'void').get_size

def test_Directory_get_all_files(test):
	t = tmp(test)
	d = tree(t / 'tree')
	r = t / 'tree'

	files = d.get_all_files()
	test/files == [
		r / 'link',
		r / 'top.txt',
		r / 'a' / 'one.txt',
		r / 'a' / 'b' / 'two.txt',
		r / 'a' / 'b' / 'c' / 'three.txt',
	]

	with_empty = d.get_all_files(include_empty_directories=True)
	test/(r / 'empty' in with_empty) == True
	test/(r in with_empty) == False
	test/len(with_empty) == 6

	# The directory itself is not reported when empty.
	test/lib.Directory(r / 'empty').get_all_files(True) == []

def test_Directory_copy(test):
	t = tmp(test)
	d = tree(t / 'src')
	dst = lib.Directory(t / 'dst')
	dst.create()

	c = d.copy(dst)
	test.isinstance(c, lib.Directory)
	test/c.fs_path == t / 'dst' / 'src'

	copied = t / 'dst' / 'src'
	test/read(copied / 'a' / 'b' / 'c' / 'three.txt') == b'0123456789'
	test/read(copied / 'a' / 'one.txt') == b'01234'
	test/os.path.isdir(str(copied / 'empty')) == True
	test/os.path.islink(str(copied / 'link')) == True
	test/os.readlink(str(copied / 'link')) == 'top.txt'
	test/c.get_size() == 35

	# Source is unchanged.
	test/d.get_all_files() == [x for x in tree_files(t / 'src')]

	test/lib.AlreadyExists ^ (lambda: d.copy(dst))
	test/d.copy(dst, 'renamed').get_name() == 'renamed'
	test/d.copy(lib.Directory(t)) is d

def tree_files(r):
	return [
		r / 'link',
		r / 'top.txt',
		r / 'a' / 'one.txt',
		r / 'a' / 'b' / 'two.txt',
		r / 'a' / 'b' / 'c' / 'three.txt',
	]

def test_Directory_copy_sibling(test):
	t = tmp(test)
	x = lib.Directory(t / 'x')
	y = lib.Directory(t / 'y')
	lib.Directory(t / 'x' / 'sub').create()
	y.create()
	write(t / 'x' / 'f.txt', b'data')

	c = x.copy(y)
	test/c.fs_path == t / 'y' / 'x'
	test/read(t / 'y' / 'x' / 'f.txt') == b'data'
	test/lib.Directory(t / 'y' / 'x' / 'sub').is_empty() == True
	test/x.exists() == True

	s = x.copy(lib.Directory(t), 'z')
	test/s.fs_path == t / 'z'
	test/read(t / 'z' / 'f.txt') == b'data'

def test_Directory_get_size_flat(test):
	t = tmp(test)
	for name, size in [('a', 10), ('b', 20), ('c', 5)]:
		write(t / name, b'x' * size)
	test/lib.Directory(t).get_size() == 35

def test_Directory_copy_into_itself(test):
	t = tmp(test)
	d = tree(t / 'src')
	inner = lib.Directory(t / 'src' / 'a')

	e = test/lib.InvalidArgument ^ (lambda: d.copy(inner))
	test/e.fs_path == d.fs_path
	test/os.path.exists(str(t / 'src' / 'a' / 'src')) == False

def test_Directory_move(test):
	t = tmp(test)
	d = tree(t / 'src')
	dst = lib.Directory(t / 'dst')
	dst.create()

	d.move(dst)
	test/d.fs_path == t / 'dst' / 'src'
	test/d.get_size() == 35
	test/os.path.exists(str(t / 'src')) == False

	d.move(dst, 'renamed')
	test/d.get_name() == 'renamed'

def test_Directory_move_into_descendant(test):
	t = tmp(test)
	d = tree(t / 'src')
	inner = lib.Directory(t / 'src' / 'a' / 'b')

	test/lib.InvalidArgument ^ (lambda: d.move(inner))
	test/d.fs_path == t / 'src'
	test/d.exists() == True

	# Same location is not a nesting violation.
	d.move(lib.Directory(t))
	test/d.fs_path == t / 'src'

def test_Directory_glob(test):
	t = tmp(test)
	d = tree(t / 'tree')
	write(t / 'tree' / '.hidden.txt', b'')
	r = t / 'tree'

	test/[x.fs_path for x in d.glob('*.txt')] == [r / 'top.txt']
	test/[x.fs_path for x in d.glob('*.txt', hidden=True)] == [r / '.hidden.txt', r / 'top.txt']
	test/[x.fs_path for x in d.glob('**/*.txt', recursive=True)] == [
		r / 'a' / 'b' / 'c' / 'three.txt',
		r / 'a' / 'b' / 'two.txt',
		r / 'a' / 'one.txt',
		r / 'top.txt',
	]

	# Self, parent, and outside matches are excluded.
	test/d.glob('.') == []
	test/d.glob('..') == []
	test/d.glob('../*') == []

	types = [x.__class__ for x in d.glob('*')]
	test/types == [lib.Directory, lib.Directory, lib.Link, lib.File]
	test/lib.NotFound ^ (lambda: lib.Directory(t / 'void').glob('*'))

def test_Directory_link_entry(test):
	"""
	# Links to directories are not directories; the target's entries must survive.
	"""
	t = tmp(test)
	target = lib.Directory(t / 'target')
	target.create()
	write(t / 'target' / 'keep.txt', b'data')
	os.symlink(str(t / 'target'), str(t / 'ln'))

	e = test/lib.EntryTypeMismatch ^ (lambda: lib.Directory(t / 'ln'))
	test/e.fs_path == t / 'ln'
	test/target.list_entries() == ['keep.txt']

	l = lib.Link(t / 'ln')
	l.delete()
	test/os.path.lexists(str(t / 'ln')) == False
	test/target.list_entries() == ['keep.txt']

def test_Directory_link_entry_replaced(test):
	"""
	# A directory descriptor whose entry is replaced by a link no longer exists.
	"""
	t = tmp(test)
	target = lib.Directory(t / 'target')
	target.create()
	write(t / 'target' / 'keep.txt', b'data')

	d = lib.Directory(t / 'd')
	os.symlink(str(t / 'target'), str(t / 'd'))
	test/d.exists() == False
	test/lib.NotFound ^ d.delete
	test/target.list_entries() == ['keep.txt']

def test_Directory_glob_backslash_names(test):
	t = tmp(test)
	test.skip(os.sep != '/')
	d = lib.Directory(t)
	write(t.entry('a\\b.txt'), b'data')

	matches = d.glob('*.txt')
	test/[x.fs_path for x in matches] == [t.entry('a\\b.txt')]
	test/[x.exists() for x in matches] == [True]

	os.mkdir(str(t.entry('x\\y')))
	write(t.entry('x\\y').entry('z'), b'')
	test/[x.fs_path for x in d.glob('*/z')] == [t.entry('x\\y').entry('z')]

def test_Directory_glob_above_root(test):
	t = tmp(test)
	d = lib.Directory(t)
	up = '/'.join(['..'] * (len(t.points) + 4))
	test/d.glob(up) == []
	test/d.glob(up + '/*') == []

def test_Directory_parent_and_root(test):
	t = tmp(test)
	d = lib.Directory(t / 'x')
	test/d.get_parent() == lib.Directory(t)
	test/lib.Directory(Path.from_path('/')).get_parent() == None
