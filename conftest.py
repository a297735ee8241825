"""
# Bridge the contention based test modules to pytest.

# Test functions take a single `test` parameter; the fixture provides the
# &sockutil.test.types.Test instance and the hook maps explicit conclusions
# to pytest's skip and fail outcomes.
"""
import pytest

from sockutil.test import types

@pytest.fixture
def test(request):
	return types.Test(request.node.nodeid, request.function)

@pytest.hookimpl(wrapper=True)
def pytest_pyfunc_call(pyfuncitem):
	try:
		return (yield)
	except types.Conclude as c:
		if c.conclusion is types.TestConclusion.skipped:
			pytest.skip(c.message)
		pytest.fail(c.message or "test concluded failure", pytrace=False)
