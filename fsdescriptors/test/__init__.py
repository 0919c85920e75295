"""
# Contention based test harness used by the test modules of the package.
"""
