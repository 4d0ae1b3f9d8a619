"""
Reactive controller tests — gating, debounce, teardown.

Tests:
1-4.   Completeness gating (IDLE until every required field is present)
5-7.   Debounce (PENDING → SETTLED, latest input wins)
8-11.  Profile change, quantity, mode switches
12-14. Teardown + programming errors
15-16. No event loop (settles on the spot)

Debounce tests drive their own event loop with asyncio.run().
"""

import asyncio

import pytest

from metalcalc.controller import CalculationController, ControllerState, has_all_required_inputs

DEBOUNCE = 0.01
SETTLE = 0.05


def _controller(published):
    return CalculationController(on_result=published.append, debounce_seconds=DEBOUNCE)


def _fill_plate(ctrl):
    ctrl.set_dimension("h", "1")
    ctrl.set_dimension("tf", "500")
    ctrl.set_dimension("tw", "10")


# ============================================================
# Completeness gating
# ============================================================

def test_has_all_required_inputs():
    assert not has_all_required_inputs("plate", {"h": "1", "tf": "500"})
    assert not has_all_required_inputs("plate", {"h": "1", "tf": "500", "tw": ""})
    assert not has_all_required_inputs("plate", {"h": "1", "tf": "500", "tw": "-"})
    assert has_all_required_inputs("plate", {"h": "1", "tf": "500", "tw": "0"})
    assert has_all_required_inputs("mystery", {"h": "1", "tf": "2", "tw": "3"})


def test_stays_idle_until_inputs_complete():
    published = []

    async def scenario():
        ctrl = _controller(published)
        ctrl.select_profile("plate")
        ctrl.set_dimension("h", "1")
        ctrl.set_dimension("tf", "500")
        assert ctrl.state == ControllerState.IDLE
        await asyncio.sleep(SETTLE)
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.state == ControllerState.IDLE
    assert ctrl.result is None
    assert all(r is None for r in published)


def test_no_profile_means_idle():
    published = []

    async def scenario():
        ctrl = _controller(published)
        ctrl.set_dimension("h", "1")
        ctrl.set_quantity(4)
        await asyncio.sleep(SETTLE)
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.state == ControllerState.IDLE
    assert ctrl.fields() == []
    assert not ctrl.has_all_required_inputs()
    assert published == [None, None]


def test_zero_value_still_counts_as_present():
    """"0" is an entered value — the controller computes (a zero result)."""

    async def scenario():
        ctrl = _controller([])
        ctrl.select_profile("plate")
        ctrl.set_dimension("h", "1")
        ctrl.set_dimension("tf", "500")
        ctrl.set_dimension("tw", "0")
        assert ctrl.state == ControllerState.PENDING
        await asyncio.sleep(SETTLE)
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.state == ControllerState.SETTLED
    assert ctrl.result.piece_weight == "0.000"


# ============================================================
# Debounce
# ============================================================

def test_settles_after_quiet_period():
    published = []

    async def scenario():
        ctrl = _controller(published)
        ctrl.select_profile("plate")
        _fill_plate(ctrl)
        assert ctrl.state == ControllerState.PENDING
        assert ctrl.result is None
        await asyncio.sleep(SETTLE)
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.state == ControllerState.SETTLED
    assert ctrl.result.piece_weight == "39.250"
    assert published[-1] is ctrl.result


def test_latest_input_wins():
    """A burst of edits produces exactly one computation, from the last value."""
    published = []

    async def scenario():
        ctrl = _controller(published)
        ctrl.select_profile("plate")
        _fill_plate(ctrl)
        ctrl.set_dimension("tw", "15")
        ctrl.set_dimension("tw", "20")
        ctrl.set_quantity(2)
        await asyncio.sleep(SETTLE)
        return ctrl

    ctrl = asyncio.run(scenario())
    results = [r for r in published if r is not None]
    assert len(results) == 1
    assert results[0].piece_weight == "78.500"
    assert results[0].total_weight == "157.000"


def test_locale_text_is_normalized_on_entry():

    async def scenario():
        ctrl = _controller([])
        ctrl.select_profile("plate")
        ctrl.set_dimension("h", "١")
        ctrl.set_dimension("tf", "500")
        ctrl.set_dimension("tw", "10,0")
        ctrl.set_price(2)
        await asyncio.sleep(SETTLE)
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.dims["h"] == "1"
    assert ctrl.dims["tw"] == "10.0"
    assert ctrl.result.total_price == "78.50"


# ============================================================
# Profile change, quantity, modes
# ============================================================

def test_profile_change_resets_everything():

    async def scenario():
        ctrl = _controller([])
        ctrl.select_profile("plate")
        _fill_plate(ctrl)
        ctrl.set_quantity(5)
        ctrl.set_price(3.0)
        await asyncio.sleep(SETTLE)
        assert ctrl.state == ControllerState.SETTLED
        ctrl.select_profile("i_beam")
        await asyncio.sleep(SETTLE)
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.state == ControllerState.IDLE
    assert ctrl.result is None
    assert ctrl.dims == {"includeRadius": False}
    assert ctrl.quantity == 1
    assert ctrl.price is None


def test_profile_change_cancels_pending_timer():
    """A recompute armed for the old profile never fires."""
    published = []

    async def scenario():
        ctrl = _controller(published)
        ctrl.select_profile("plate")
        _fill_plate(ctrl)
        assert ctrl.state == ControllerState.PENDING
        ctrl.select_profile("round_bar")
        await asyncio.sleep(SETTLE)
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.result is None
    assert all(r is None for r in published)


def test_non_positive_quantity_goes_idle():

    async def scenario():
        ctrl = _controller([])
        ctrl.select_profile("plate")
        _fill_plate(ctrl)
        await asyncio.sleep(SETTLE)
        assert ctrl.state == ControllerState.SETTLED
        ctrl.set_quantity(0)
        assert ctrl.state == ControllerState.IDLE
        assert ctrl.result is None
        ctrl.set_quantity(2)
        assert ctrl.state == ControllerState.PENDING
        await asyncio.sleep(SETTLE)
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.result.total_weight == "78.500"


def test_mode_switch_changes_required_fields():
    """Grating complete in weight mode is incomplete in geometry mode."""

    async def scenario():
        ctrl = _controller([])
        ctrl.select_profile("steel_grating")
        assert ctrl.dims == {"calcMode": "weight"}
        ctrl.set_dimension("h", "2")
        ctrl.set_dimension("tf", "1")
        ctrl.set_dimension("tw", "30")
        await asyncio.sleep(SETTLE)
        assert ctrl.result.piece_weight == "60.000"
        ctrl.set_mode("geometry")
        assert ctrl.state == ControllerState.IDLE
        assert [f.key for f in ctrl.fields()] == ["h", "tf", "tw", "t", "r", "s", "u"]
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.result is None


def test_units_and_density_feed_the_engine():

    async def scenario():
        ctrl = _controller([])
        ctrl.select_profile("plate")
        _fill_plate(ctrl)
        ctrl.set_unit("h", "mm")
        ctrl.set_dimension("h", "1000")
        ctrl.set_density(2700)
        await asyncio.sleep(SETTLE)
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.unit_for_key("h") == "mm"
    assert ctrl.dims["density"] == "2.7"
    assert ctrl.result.piece_weight == "13.500"


def test_include_radius_adds_field():

    async def scenario():
        ctrl = _controller([])
        ctrl.select_profile("i_beam")
        assert "s" not in [f.key for f in ctrl.fields()]
        ctrl.set_include_radius(True)
        return ctrl

    ctrl = asyncio.run(scenario())
    assert "s" in [f.key for f in ctrl.fields()]


# ============================================================
# Teardown
# ============================================================

def test_close_cancels_pending_recompute():
    published = []

    async def scenario():
        ctrl = _controller(published)
        ctrl.select_profile("plate")
        _fill_plate(ctrl)
        assert ctrl.state == ControllerState.PENDING
        ctrl.close()
        count = len(published)
        await asyncio.sleep(SETTLE)
        ctrl.set_dimension("tw", "12")
        await asyncio.sleep(SETTLE)
        return ctrl, count

    ctrl, count = asyncio.run(scenario())
    assert ctrl.result is None
    assert len(published) == count


def test_unknown_unit_rejected():
    ctrl = CalculationController()
    with pytest.raises(ValueError):
        ctrl.set_unit("h", "cubit")


def test_close_returns_to_idle():
    """Teardown leaves no armed timer and no PENDING state behind."""

    async def scenario():
        ctrl = _controller([])
        ctrl.select_profile("plate")
        _fill_plate(ctrl)
        assert ctrl.state == ControllerState.PENDING
        ctrl.close()
        return ctrl

    ctrl = asyncio.run(scenario())
    assert ctrl.state == ControllerState.IDLE
    assert ctrl._handle is None


# ============================================================
# No event loop
# ============================================================

def test_settles_immediately_without_event_loop():
    """Outside any event loop a complete input set is computed on the spot."""
    published = []
    ctrl = CalculationController(on_result=published.append)
    ctrl.select_profile("plate")
    ctrl.set_dimension("h", "1")
    ctrl.set_dimension("tf", "500")
    assert ctrl.state == ControllerState.IDLE
    ctrl.set_dimension("tw", "10")
    assert ctrl.state == ControllerState.SETTLED
    assert ctrl.result.piece_weight == "39.250"
    assert published[-1] is ctrl.result

    ctrl.set_quantity(2)
    assert ctrl.result.total_weight == "78.500"
    ctrl.set_dimension("tw", "")
    assert ctrl.state == ControllerState.IDLE
    assert ctrl.result is None


def test_no_callbacks_after_close_without_event_loop():
    published = []
    ctrl = CalculationController(on_result=published.append)
    ctrl.select_profile("plate")
    ctrl.close()
    count = len(published)
    _fill_plate(ctrl)
    assert len(published) == count
    assert ctrl.result is None
    assert ctrl.state == ControllerState.IDLE
