"""
Tests for unit conversion.
"""

import pytest

from fitgauge.core.units import cm_to_inch


class TestUnits:

    def test_cm_to_inch(self):
        assert cm_to_inch(2.54) == pytest.approx(1.0)
        assert cm_to_inch(95.2) == pytest.approx(37.48, abs=0.01)
