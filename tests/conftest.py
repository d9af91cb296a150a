"""Shared fixtures: seeded random integer matrices and HTTP request builders."""

import json

import numpy as np
import pytest
import azure.functions as func


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_matrix(rng):
    """random_matrix(rows, cols, max_value=100) -> int32 ndarray in [-max_value, max_value]."""
    def _make(rows, cols, max_value=100):
        return rng.integers(-max_value, max_value + 1, size=(rows, cols), dtype=np.int32)
    return _make


@pytest.fixture
def make_request():
    """make_request(body, method="POST", url=...) -> func.HttpRequest"""
    def _make(body, method="POST", url="/api/MultiUnitMultiplication"):
        data = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        return func.HttpRequest(method=method, url=url, headers={}, params={}, body=data)
    return _make
