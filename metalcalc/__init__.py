"""
Structural-metal weight and cost calculator.

numeric      — locale-aware number parsing
units        — length / density conversion
field_config — which inputs each profile needs
engine       — profile geometry -> weight and price
controller   — debounced recompute on input change
"""
