"""
Pydantic models for API request/response and internal data transfer.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ──────────────────────────────────────────────────────────────

class Gender(str, Enum):
    male = "male"
    female = "female"
    unknown = "unknown"


class BodyComposition(str, Enum):
    lean = "lean"
    average = "average"
    soft = "soft"


class Confidence(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class Method(str, Enum):
    size_guide = "size_guide"
    estimation = "estimation"


class EdgeCase(str, Enum):
    normal = "normal"
    too_small = "too_small"
    too_large = "too_large"


class Category(str, Enum):
    tops = "tops"
    bottoms = "bottoms"
    sweater = "sweater"


class GuideGender(str, Enum):
    men = "men"
    women = "women"
    unisex = "unisex"


class Unit(str, Enum):
    cm = "cm"
    inch = "inch"


class FitType(str, Enum):
    tight = "tight"
    regular = "regular"
    comfortable = "comfortable"


class FitResult(str, Enum):
    smaller = "smaller"
    in_range = "in_range"
    larger = "larger"


class MeasurementKey(str, Enum):
    chest = "chest"
    waist = "waist"
    hips = "hips"
    length = "length"
    shoulders = "shoulders"
    inseam = "inseam"
    thigh = "thigh"


# ── Size guide primitives ──────────────────────────────────────────────

class PointMeasurement(BaseModel):
    """A single target value for one body dimension."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["point"] = "point"
    value: float


class RangeMeasurement(BaseModel):
    """An inclusive target range for one body dimension."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["range"] = "range"
    min: float
    max: float


Measurement = Annotated[
    Union[PointMeasurement, RangeMeasurement],
    Field(discriminator="kind"),
]


class SizeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str  # e.g. "M", "2XL"
    measurements: dict[str, Measurement]  # raw guide key → target


class SizeGuide(BaseModel):
    """One brand's table for a (category, gender) pair, in both units."""
    model_config = ConfigDict(frozen=True)

    brand: str
    category: Category
    gender: GuideGender
    cm: list[SizeEntry] = Field(default_factory=list)
    inch: list[SizeEntry] = Field(default_factory=list)


class Combo(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: Category
    gender: GuideGender


# ── Shopper and item ───────────────────────────────────────────────────

class UserMeasurements(BaseModel):
    height: float = Field(..., gt=0, description="Height in cm")
    weight: float = Field(..., gt=0, description="Weight in kg")
    gender: Gender = Gender.unknown
    body_composition: BodyComposition = BodyComposition.average


class Item(BaseModel):
    """Catalog metadata for one garment."""
    brand: str
    type: str = ""
    gender: str = ""
    name: str = ""
    available_sizes: list[str] = Field(default_factory=list)


# ── Results ────────────────────────────────────────────────────────────

class SizeRecommendation(BaseModel):
    regular: str
    comfortable: str
    tight: str
    confidence: Confidence
    method: Method
    notes: str = ""


class EstimatedMeasurement(BaseModel):
    key: MeasurementKey
    name: str
    value: float
    unit: Unit = Unit.cm


# ── API request / response ─────────────────────────────────────────────

class SizingRequest(BaseModel):
    user: UserMeasurements
    item: Item


class SizingResponse(BaseModel):
    recommendation: SizeRecommendation
    size_guide: SizeGuide | None = None
    measurements: list[EstimatedMeasurement] = Field(default_factory=list)


class MeasurementRequest(BaseModel):
    user: UserMeasurements
    keys: list[str] = Field(default_factory=lambda: [k.value for k in MeasurementKey])
    unit: Unit = Unit.cm


class MeasurementResponse(BaseModel):
    measurements: list[EstimatedMeasurement]


class GuideCombosResponse(BaseModel):
    brand: str
    combos: list[Combo]


class HealthResponse(BaseModel):
    status: str
    version: str


class ErrorResponse(BaseModel):
    detail: str
