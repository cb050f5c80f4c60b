"""
Repositories Package - Orbit Leadership Assessment
orbit/repositories/__init__.py

Data access layer for assessments.
"""

from orbit.repositories.assessment_repository import AssessmentRepository

__all__ = [
    "AssessmentRepository",
]
