"""
# Civil date and time computation.

# &.time provides the value types and their arithmetic, &.context shared function
# tools, and &.test the test primitives.
"""
__pkg_bottom__ = True
