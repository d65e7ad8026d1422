"""Shared fixtures for the connectivity tests."""

import pytest

from connectivity import QuickFind, QuickUnion, QuickUnionW

VARIANTS = (QuickFind, QuickUnion, QuickUnionW)


@pytest.fixture(params=VARIANTS, ids=lambda cls: cls.__name__)
def variant(request):
    """Each union-find class in turn."""
    return request.param
