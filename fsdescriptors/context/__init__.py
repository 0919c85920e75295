"""
# Function tools shared by the &.route and &.system packages.
"""
