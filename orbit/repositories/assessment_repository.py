"""
Assessment Repository - Orbit Leadership Assessment
orbit/repositories/assessment_repository.py

In-process store for Assessment records, keyed by id with a code index.
Stands in for the hosted backend; callers always receive copies.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import UUID

from orbit.core.exceptions import DuplicateEntityException, EntityNotFoundException
from orbit.models.assessment import Assessment


class AssessmentRepository:
    """Repository for Assessment CRUD operations."""

    def __init__(self):
        self._items: Dict[UUID, Assessment] = {}
        self._codes: Dict[str, UUID] = {}

    def create(self, assessment: Assessment) -> Assessment:
        """
        Store a new assessment.

        Raises:
            DuplicateEntityException: id or code already stored.
        """
        code = assessment.code.upper()
        if assessment.id in self._items:
            raise DuplicateEntityException(f"Assessment {assessment.id} already exists")
        if code in self._codes:
            raise DuplicateEntityException(f"Assessment code {code} already in use")

        self._items[assessment.id] = assessment.model_copy(deep=True)
        self._codes[code] = assessment.id
        return assessment.model_copy(deep=True)

    def get_by_id(self, assessment_id: UUID) -> Optional[Assessment]:
        stored = self._items.get(assessment_id)
        return stored.model_copy(deep=True) if stored else None

    def get_by_code(self, code: str) -> Optional[Assessment]:
        assessment_id = self._codes.get(code.strip().upper())
        if assessment_id is None:
            return None
        return self.get_by_id(assessment_id)

    def code_exists(self, code: str) -> bool:
        return code.strip().upper() in self._codes

    def update(self, assessment: Assessment) -> Assessment:
        """
        Replace a stored assessment and bump updated_at.

        Raises:
            EntityNotFoundException: assessment was never created.
        """
        if assessment.id not in self._items:
            raise EntityNotFoundException("Assessment", str(assessment.id))

        stored = assessment.model_copy(
            deep=True,
            update={"updated_at": datetime.now(timezone.utc)},
        )
        self._items[assessment.id] = stored
        return stored.model_copy(deep=True)

    def list_all(self) -> List[Assessment]:
        """All assessments, newest first."""
        items = sorted(self._items.values(), key=lambda a: a.created_at, reverse=True)
        return [a.model_copy(deep=True) for a in items]

    def count(self) -> int:
        return len(self._items)
