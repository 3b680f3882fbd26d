"""
# Context package of the project's shared function tools.
"""
