"""
# Filesystem access: the &.files.Path value type, the &.descriptors types operating on
# the resources that paths identify, and the &.adapter used to reach the system.
"""
