"""
Catalog section stock tests — kg/m pricing and plate-by-dimensions.

Tests:
1-3.  Catalog mode (kg/m × length × pieces)
4-7.  Dims mode (plate volume, effective width, units, density text)
8-9.  Clamping of bad price / pieces / length
10.   POST /api/calculations/stock
"""

import math

import pytest

from metalcalc.calculators.stock import SectionStockCalculator
from metalcalc.schemas import StockDimensions
from metalcalc.units import length_to_meters


def _stock(**kwargs):
    return SectionStockCalculator().calculate(**kwargs)


# ============================================================
# Catalog mode
# ============================================================

def test_catalog_section_totals():
    """10 kg/m section cut at 6 m, 3 pieces at 2.0 per kg."""
    result = _stock(weight_per_meter=10.0, length_m=6.0, price_per_kg=2.0, required=3)
    assert result.is_dims_mode is False
    assert result.linear_meter_weight_kg_per_m == 10.0
    assert result.weight_of_piece_kg == pytest.approx(60.0)
    assert result.price_of_piece == pytest.approx(120.0)
    assert result.total_weight_kg == pytest.approx(180.0)
    assert result.total_price == pytest.approx(360.0)


def test_catalog_without_weight_is_zero():
    result = _stock(weight_per_meter=None, length_m=6.0, price_per_kg=2.0, required=3)
    assert result.weight_of_piece_kg == 0
    assert result.total_price == 0


def test_empty_dims_fall_back_to_catalog_mode():
    """A dims object with no h / w / th set does not switch to dims mode."""
    result = _stock(dims=StockDimensions(unit="mm"), weight_per_meter=5.0, length_m=2.0, required=1)
    assert result.is_dims_mode is False
    assert result.weight_of_piece_kg == pytest.approx(10.0)


# ============================================================
# Dims mode
# ============================================================

def test_plate_by_dimensions():
    dims = StockDimensions(h=1000, w=500, th=10, unit="mm", density="7.85")
    result = _stock(dims=dims, weight_per_meter=99.0, length_m=6.0, price_per_kg=1.0, required=2)
    assert result.is_dims_mode is True
    assert result.linear_meter_weight_kg_per_m == 0
    assert result.weight_of_piece_kg == pytest.approx(39.25)
    assert result.total_weight_kg == pytest.approx(78.5)
    assert result.total_price == pytest.approx(78.5)


def test_thickness_widens_the_plate():
    """Effective width is w + t when t is positive."""
    dims = StockDimensions(h=1000, w=500, th=10, t=10, unit="mm", density="7.85")
    assert _stock(dims=dims, required=1).weight_of_piece_kg == pytest.approx(1 * 0.01 * 0.51 * 7850)
    dims = StockDimensions(h=1000, w=500, th=10, t=-10, unit="mm", density="7.85")
    assert _stock(dims=dims, required=1).weight_of_piece_kg == pytest.approx(39.25)


def test_dims_unit_defaults_to_metres():
    dims = StockDimensions(h=1, w=0.5, th=0.01, density="7.85")
    assert _stock(dims=dims).weight_of_piece_kg == pytest.approx(39.25)
    assert length_to_meters(2.5, None) == 2.5
    assert length_to_meters(2.5, "yd") == 2.5
    assert length_to_meters(2500, "mm") == pytest.approx(2.5)
    assert length_to_meters(10, "ft") == pytest.approx(3.048)
    assert length_to_meters(None, "mm") == 0
    assert length_to_meters(math.inf, "m") == 0


def test_unparseable_density_weighs_nothing():
    dims = StockDimensions(h=1, w=0.5, th=0.01, density="abc")
    result = _stock(dims=dims, price_per_kg=3.0, required=2)
    assert result.is_dims_mode is True
    assert result.weight_of_piece_kg == 0
    assert result.total_price == 0


# ============================================================
# Clamping
# ============================================================

def test_negative_or_non_finite_price_and_pieces_clamp_to_zero():
    for bad in (-2.0, math.nan, math.inf, None):
        priced = _stock(weight_per_meter=10.0, length_m=1.0, price_per_kg=bad, required=2)
        assert priced.price_of_piece == 0, bad
        assert priced.total_price == 0, bad
        assert priced.total_weight_kg == pytest.approx(20.0), bad

        counted = _stock(weight_per_meter=10.0, length_m=1.0, price_per_kg=2.0, required=bad)
        assert counted.total_weight_kg == 0, bad
        assert counted.total_price == 0, bad
        assert counted.price_of_piece == pytest.approx(20.0), bad


def test_negative_weight_or_length_clamp_to_zero():
    assert _stock(weight_per_meter=-10.0, length_m=2.0, required=1).weight_of_piece_kg == 0
    assert _stock(weight_per_meter=10.0, length_m=-2.0, required=1).weight_of_piece_kg == 0


# ============================================================
# HTTP
# ============================================================

def test_stock_endpoint(client):
    resp = client.post("/api/calculations/stock", json={
        "weight_per_meter": 10.0,
        "length_m": 6.0,
        "price_per_kg": 2.0,
        "required": 3,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["is_dims_mode"] is False
    assert data["total_weight_kg"] == pytest.approx(180.0)
    assert data["total_price"] == pytest.approx(360.0)

    resp = client.post("/api/calculations/stock", json={
        "dims": {"h": 1000, "w": 500, "th": 10, "unit": "mm", "density": "7.85"},
        "required": 1,
    })
    data = resp.json()
    assert data["is_dims_mode"] is True
    assert data["weight_of_piece_kg"] == pytest.approx(39.25)
