"""
Reactive calculation controller.

Owns the inputs of one calculator screen (profile, dimension map, quantity,
price) and recomputes the result after every change, debounced on the
running asyncio event loop:

    IDLE     no profile, quantity <= 0 or a required field missing; result None
    PENDING  inputs complete, debounce timer armed
    SETTLED  engine result published

Every change cancels the pending timer before anything else, so the most
recent input always wins. close() cancels unconditionally.

Without an event loop (none injected, none running) there is nothing to
debounce on, and a complete input set settles immediately.
"""

import asyncio
import enum
import logging

from .config import settings
from .engine import calculate_results
from .field_config import default_modes, get_field_config, get_unit_for_key
from .materials import density_g_cm3
from .numeric import is_present, normalize_numeric_input
from .units import is_length_unit

logger = logging.getLogger(__name__)


class ControllerState(str, enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    SETTLED = "settled"


def has_all_required_inputs(formula: str, dims: dict) -> bool:
    """Every field the formula needs (under its current modes) is filled in."""
    fields = get_field_config(formula, dims)
    return len(fields) > 0 and all(is_present((dims or {}).get(f.key)) for f in fields)


class CalculationController:

    def __init__(self, on_result=None, debounce_seconds: float = None, loop=None):
        self.on_result = on_result
        self.debounce_seconds = (
            settings.DEBOUNCE_SECONDS if debounce_seconds is None else debounce_seconds
        )
        self._loop = loop
        self._handle = None
        self._closed = False

        self.formula = None
        self.dims = {}
        self.quantity = 1
        self.price = None
        self.result = None
        self.state = ControllerState.IDLE

    # --- Inputs ---

    def select_profile(self, formula: str):
        """Switch profile. Nothing carries over from the previous one."""
        self._cancel_pending()
        self.formula = formula
        self.dims = dict(default_modes(formula)) if formula else {}
        self.quantity = 1
        self.price = None
        self._go_idle()
        logger.debug("Profile selected: %s", formula)

    def set_dimension(self, key: str, text):
        self.dims[key] = normalize_numeric_input(text)
        self._inputs_changed()

    def set_unit(self, key: str, unit: str):
        if not is_length_unit(unit):
            raise ValueError("Unknown length unit: %r" % (unit,))
        self.dims["%s_unit" % key] = unit
        self._inputs_changed()

    def set_mode(self, calc_mode: str):
        self.dims["calcMode"] = calc_mode
        self._inputs_changed()

    def set_include_radius(self, include: bool):
        self.dims["includeRadius"] = bool(include)
        self._inputs_changed()

    def set_density(self, density_kg_m3: float):
        """Seed the density input from a catalog value in kg/m³."""
        self.dims["density"] = density_g_cm3(density_kg_m3)
        self._inputs_changed()

    def set_quantity(self, quantity: int):
        self.quantity = quantity
        self._inputs_changed()

    def set_price(self, price_per_kg):
        self.price = price_per_kg
        self._inputs_changed()

    # --- Queries ---

    def fields(self) -> list:
        if not self.formula:
            return []
        return get_field_config(self.formula, self.dims)

    def unit_for_key(self, key: str) -> str:
        return get_unit_for_key(self.formula, self.dims, key)

    def has_all_required_inputs(self) -> bool:
        if not self.formula:
            return False
        return has_all_required_inputs(self.formula, self.dims)

    # --- Lifecycle ---

    def close(self):
        """Tear down: cancel any pending recompute. No callbacks fire afterwards."""
        self._cancel_pending()
        self._closed = True
        self.state = ControllerState.IDLE

    # --- Internals ---

    def _inputs_changed(self):
        self._cancel_pending()
        if self._closed:
            return
        if not self.formula or self.quantity <= 0 or not self.has_all_required_inputs():
            self._go_idle()
            return
        loop = self._event_loop()
        if loop is None:
            self._settle()
            return
        self._handle = loop.call_later(self.debounce_seconds, self._settle)
        self.state = ControllerState.PENDING
        logger.debug("Recompute armed for %s in %.3fs", self.formula, self.debounce_seconds)

    def _event_loop(self):
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def _settle(self):
        self._handle = None
        if self._closed:
            return
        result = calculate_results(
            self.formula,
            self.dims,
            self.quantity,
            self.price,
            get_unit_for_key=self.unit_for_key,
        )
        self.state = ControllerState.SETTLED
        self._publish(result)

    def _go_idle(self):
        self.state = ControllerState.IDLE
        self._publish(None)

    def _publish(self, result):
        self.result = result
        if self.on_result is not None and not self._closed:
            self.on_result(result)

    def _cancel_pending(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Pending recompute cancelled")
