"""Temperature-dependent critical humidity curve used for mold-risk scoring."""

from __future__ import annotations

CURVE_MIN_TEMP_C = 0.0
CURVE_MAX_TEMP_C = 30.0

# Coefficients of the critical humidity polynomial, highest degree first.
_COEFFICIENTS = (5.0e-5, -0.0045, 0.1652, -2.9381, 97.0)


def critical_humidity(temp_c: float) -> float:
    """Return the relative humidity (%) above which mold growth is a risk.

    The curve is only defined for 0-30 °C, so the temperature is clamped to
    that range before evaluation and the result is clamped to 0-100 %.
    """
    x = max(CURVE_MIN_TEMP_C, min(CURVE_MAX_TEMP_C, temp_c))
    y = 0.0
    for coefficient in _COEFFICIENTS:
        y = y * x + coefficient
    return max(0.0, min(100.0, y))


def in_risk_zone(temp_c: float, humidity_pct: float) -> bool:
    return humidity_pct >= critical_humidity(temp_c)
