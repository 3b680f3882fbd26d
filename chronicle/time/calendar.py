"""
# Arbitrary calendar address resolution.

# Used internally by &.gregorian in order to work with the gregorian calendar pattern.
# A calendar cycle is described as a tree of `(title, repeat, content)` triples where
# the leaves' content is the sequence of month lengths. &aggregate annotates the tree
# with month and day totals so that &resolve can map an address in one unit to the
# other without iterating over every month in the cycle.
"""
import collections
import itertools

#: Aggregated cycle node. &fragment is the (months, days) of a single repetition and
#: &total is the (months, days) of all of the repetitions.
Node = collections.namedtuple('Node', ('title', 'repeat', 'inner', 'fragment', 'total'))

#: Month and day accumulations of a leaf node. Indexed by month of the leaf.
Leaf = collections.namedtuple('Leaf', ('months', 'days'))

def aggregate(node,
		chain=itertools.chain,
		accumulate=itertools.accumulate,
		isinstance=isinstance, int=int,
		tuple=tuple, range=range,
		len=len, sum=sum,
	):
	"""
	# Recursively aggregate the month and day totals of the cycle &node.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		days = tuple(accumulate(chain((0,), sub)))
		inner = Leaf(tuple(range(len(sub) + 1)), days)
		fragment = (len(sub), days[-1])
	else:
		inner = tuple([aggregate(x) for x in sub])
		fragment = (
			sum([x.total[0] for x in inner]),
			sum([x.total[1] for x in inner]),
		)

	return Node(title, repeat, inner, fragment, (repeat * fragment[0], repeat * fragment[1]))

def resolve(source, target, address, cycle, divmod=divmod, isinstance=isinstance, range=range):
	"""
	# Search the aggregated &cycle for the &address measured in the &source unit.

	# [ Parameters ]
	# /source/
		# Index of the unit of &address; `0` for months, `1` for days.
	# /target/
		# Index of the unit to resolve to.
	# /address/
		# The quantity to resolve. Negative addresses are aligned on the prior cycle.
	# /cycle/
		# The &Node produced by &aggregate.

	# [ Returns ]
	# A tuple of four integers: the number of complete cycles, the resolved address
	# in the &target unit, the remainder of &address not consumed (day of month when
	# resolving days), and the length of the final leaf element (days in month).
	"""
	oaddress = 0

	# Align on a cycle.
	cycles, iaddress = divmod(address, cycle.total[source])

	current = cycle
	# Consume aggregates until a leaf.
	while not isinstance(current.inner, Leaf):
		for sub in current.inner:
			itotal = sub.total[source]
			if iaddress >= itotal:
				# Completely consumed; continue to next node.
				iaddress -= itotal
				oaddress += sub.total[target]
			else:
				# Partial consumption; enter the node.
				parts, iaddress = divmod(iaddress, sub.fragment[source])
				oaddress += parts * sub.fragment[target]
				current = sub
				break
		else:
			raise RuntimeError("address out of cycle bounds")

	iparts = current.inner[source]
	oparts = current.inner[target]
	for i in range(len(iparts) - 1):
		if iparts[i+1] > iaddress:
			break

	return (cycles, oaddress + oparts[i], iaddress - iparts[i], oparts[i+1] - oparts[i])
