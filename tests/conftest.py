"""
Shared test fixtures.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fitgauge.core.size_guides import SizeGuideIndex, load_default_index
from fitgauge.models.schemas import (
    BodyComposition,
    Category,
    Gender,
    GuideGender,
    RangeMeasurement,
    SizeEntry,
    SizeGuide,
    UserMeasurements,
)


def make_entry(label: str, **ranges: tuple[float, float]) -> SizeEntry:
    return SizeEntry(
        label=label,
        measurements={k: RangeMeasurement(min=lo, max=hi) for k, (lo, hi) in ranges.items()},
    )


@pytest.fixture(scope="session")
def bundled_index() -> SizeGuideIndex:
    """Index built from the packaged reference tables."""
    return load_default_index()


@pytest.fixture
def average_man() -> UserMeasurements:
    """175 cm / 70 kg: chest ≈ 95.2, waist ≈ 75.6 from the male formulas."""
    return UserMeasurements(height=175, weight=70, gender=Gender.male, body_composition=BodyComposition.average)


@pytest.fixture
def small_man() -> UserMeasurements:
    """150 cm / 40 kg: chest ≈ 66.4, waist ≈ 51.2."""
    return UserMeasurements(height=150, weight=40, gender=Gender.male)


@pytest.fixture
def large_man() -> UserMeasurements:
    """195 cm / 140 kg: chest ≈ 153.2, waist ≈ 126.4."""
    return UserMeasurements(height=195, weight=140, gender=Gender.male)


@pytest.fixture
def sml_guide() -> SizeGuide:
    """S / M / L with chest and waist ranges; the average man sits inside M."""
    return SizeGuide(
        brand="Test",
        category=Category.tops,
        gender=GuideGender.men,
        cm=[
            make_entry("S", chest=(84, 92), waist=(66, 72)),
            make_entry("M", chest=(92, 100), waist=(72, 80)),
            make_entry("L", chest=(100, 108), waist=(80, 88)),
        ],
    )
