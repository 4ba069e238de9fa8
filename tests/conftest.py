"""Fixtures partagées : générateurs d'ids déterministes."""
import itertools

import pytest


def _counter(prefix: str):
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.fixture
def make_ids():
    """make_ids("n") → n1, n2, n3…"""
    return _counter


@pytest.fixture
def ids():
    """b1, b2, b3…"""
    return _counter("b")
