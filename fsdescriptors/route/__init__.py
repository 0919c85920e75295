"""
# Path string algebra.

# &.core provides the parsing and resolution functions that &..system.files.Path
# is built upon. The functions operate on strings and segment sequences only.
"""
