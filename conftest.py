"""
Run the package's test modules under pytest.

Test functions take a `test` parameter; the fixture provides a harness &Test whose
skips are reported to pytest and whose exit stack is closed after the test.
"""

import pytest

from chronicle.test import library as libtest


class Test(libtest.Test):
    __slots__ = ()

    def skip(self, condition):
        if condition:
            pytest.skip(str(condition))


@pytest.fixture()
def test(request):
    t = Test(request.node.nodeid, request.function)
    with t.exits:
        yield t
