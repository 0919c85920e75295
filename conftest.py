"""
# Provide the contention harness of &fsdescriptors.test.core to pytest.
"""
import pytest

from fsdescriptors.test import core

@pytest.fixture
def test(request):
	t = core.Test(request.node.name)
	with t.exits:
		yield t
