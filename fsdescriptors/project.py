#: Project name.
name = 'fsdescriptors'
abstract = 'typed file, directory, and link descriptors over normalized filesystem paths'
icon = '🗂'

#: Version tuple: (major, minor, patch)
version_info = (0, 1, 0)

#: The version string.
version = '.'.join(map(str, version_info))
