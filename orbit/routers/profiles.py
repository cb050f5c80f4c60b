"""
Profiles Router - Orbit Leadership Assessment
orbit/routers/profiles.py

Exposes the profile tables and archetype descriptions.
"""

import math
from typing import List, Optional, Tuple

from fastapi import APIRouter
from pydantic import BaseModel

from orbit.models.enumerations import ProfileTable
from orbit.models.results import ProfileDescription
from orbit.scoring.profile_classifier import PROFILE_DESCRIPTIONS, describe_profile, get_classifier

router = APIRouter(prefix="/profiles", tags=["Profiles"])


class ProfileRuleView(BaseModel):
    name: str
    ranges: List[Tuple[Optional[int], Optional[int]]]  # None = open-ended


class ProfileTableView(BaseModel):
    table: ProfileTable
    fallback: str
    rules: List[ProfileRuleView]


def _bound(value: float) -> Optional[int]:
    return None if math.isinf(value) else int(value)


@router.get("", response_model=List[ProfileDescription], summary="Archetype descriptions")
async def list_profiles() -> List[ProfileDescription]:
    return list(PROFILE_DESCRIPTIONS.values())


@router.get("/{table}", response_model=ProfileTableView, summary="Rules of one classification table")
async def get_profile_table(table: ProfileTable) -> ProfileTableView:
    classifier = get_classifier(table)
    return ProfileTableView(
        table=table,
        fallback=classifier.fallback,
        rules=[
            ProfileRuleView(name=r.name, ranges=[(_bound(lo), _bound(hi)) for lo, hi in r.ranges])
            for r in classifier.rules
        ],
    )


@router.get(
    "/descriptions/{name}",
    response_model=ProfileDescription,
    summary="Description for one profile label",
)
async def get_profile_description(name: str) -> ProfileDescription:
    return describe_profile(name)
