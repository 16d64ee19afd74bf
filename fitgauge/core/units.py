"""Unit conversion for displayed measurements."""

from __future__ import annotations

CM_PER_INCH = 2.54


def cm_to_inch(value_cm: float) -> float:
    return value_cm / CM_PER_INCH
