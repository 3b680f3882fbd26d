"""
# Test primitives used by the project's test modules.
"""
