"""
# Function tools used by local projects.
"""
import functools
import dataclasses

cachedcalls = functools.lru_cache
partial = functools.partial

def reflect(obj):
	"""
	# Callable that returns the single argument that it was given.
	"""
	return obj

# Create the dataclass constructor commonly used by chronicle projects.
try:
	reflect(dataclasses.dataclass(slots=True))
except TypeError:
	# Pre-3.10
	record = partial(dataclasses.dataclass, eq=True, frozen=True)
else:
	record = partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)
