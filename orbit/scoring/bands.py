"""
Dimension Display Metadata and Banding
orbit/scoring/bands.py

Display name, pole labels, colour and score range per dimension, plus the
Low/Medium/High band boundaries shared with the profile tables.

Raw opposed-dimension bands, LOW and HIGH open-ended:
    LOW     ≤ 13
    MEDIUM  14 - 18
    HIGH    ≥ 19

Coachability bands use the 10-50 display scale:
    Low ≤ 30 < Medium ≤ 40 < High
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Tuple

from orbit.models.enumerations import Section

DIMENSION_MIN = -28
DIMENSION_MAX = 28
DIMENSION_SPAN = DIMENSION_MAX - DIMENSION_MIN  # 56

COACHABILITY_MIN = 10
COACHABILITY_MAX = 50
COACHABILITY_SPAN = COACHABILITY_MAX - COACHABILITY_MIN  # 40

DISPLAY_SCALE = 5

# Inclusive raw ranges, reused by the profile tables
LOW: Tuple[float, float] = (-math.inf, 13)
MEDIUM: Tuple[float, float] = (14, 18)
HIGH: Tuple[float, float] = (19, math.inf)
ANY: Tuple[float, float] = (-math.inf, math.inf)


@dataclass(frozen=True)
class DimensionInfo:
    """Static display metadata for one dimension."""
    name: str
    low_label: str
    high_label: str
    color: str
    min: int
    max: int
    band_labels: Tuple[str, str, str]  # (low, medium, high)


DIMENSIONS: Dict[Section, DimensionInfo] = {
    Section.ESTEEM: DimensionInfo(
        "Esteem", "low", "prideful", "#4169E1",
        DIMENSION_MIN, DIMENSION_MAX, ("Low", "Medium", "High"),
    ),
    Section.TRUST: DimensionInfo(
        "Trust", "low", "high", "#20B2AA",
        DIMENSION_MIN, DIMENSION_MAX, ("Low", "Medium", "High"),
    ),
    Section.DRIVER: DimensionInfo(
        "Business Drive", "low", "high", "#9370DB",
        DIMENSION_MIN, DIMENSION_MAX, ("Low", "Medium", "High"),
    ),
    Section.ADAPTABILITY: DimensionInfo(
        "Adaptability", "flexibility", "precision", "#3CB371",
        DIMENSION_MIN, DIMENSION_MAX, ("Flexible", "Balanced", "Precise"),
    ),
    Section.PROBLEM_RESOLUTION: DimensionInfo(
        "Problem Resolution", "avoid", "engage", "#FF7F50",
        DIMENSION_MIN, DIMENSION_MAX, ("Avoidant", "Balanced", "Direct"),
    ),
    Section.COACHABILITY: DimensionInfo(
        "Coachability", "resistant", "receptive", "#22c55e",
        COACHABILITY_MIN, COACHABILITY_MAX, ("Low", "Medium", "High"),
    ),
}


def normalize_dimension(raw: Decimal) -> Decimal:
    """
    Map a raw opposed-dimension score onto the 0-5 display scale.

    Formula: (raw − (−28)) / (28 − (−28)) × 5
    No clamping: scores outside [−28, 28] map outside [0, 5].
    """
    return (raw - Decimal(DIMENSION_MIN)) / Decimal(DIMENSION_SPAN) * Decimal(DISPLAY_SCALE)


def coachability_display(raw_total: Decimal, question_count: int) -> Decimal:
    """Rescale a raw Coachability sum onto 10-50 (×10 per question)."""
    if question_count <= 0:
        return Decimal("0")
    return raw_total * Decimal(10) / Decimal(question_count)


def categorize(section: Section, score: float) -> str:
    """Band label for a dimension score (Coachability expects the 10-50 scale)."""
    low, medium, high = DIMENSIONS[section].band_labels
    if section == Section.COACHABILITY:
        if score <= 30:
            return low
        if score <= 40:
            return medium
        return high

    if score <= LOW[1]:
        return low
    if score <= MEDIUM[1]:
        return medium
    return high
