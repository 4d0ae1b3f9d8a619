"""
Shared test fixtures — test client, dimension-map builders.
"""

import pytest
from fastapi.testclient import TestClient

from metalcalc.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def plate_dims():
    """1 m × 500 mm × 10 mm mild steel plate (length defaults to metres)."""
    return {"h": "1", "tf": "500", "tw": "10", "density": "7.85"}


@pytest.fixture
def grating_weight_dims():
    """2 m × 1 m grating panel at a stated 30 kg/m²."""
    return {"calcMode": "weight", "h": "2", "tf": "1", "tw": "30", "density": "7.85"}
